"""
Kernel layer.

- `clamm/kernels/dex/` contains the kernel spec (.yaml) and the golden-vector
  corpus (.jsonl) cross-checked against an independent bigint implementation.
- `clamm/kernels/python/` contains the production Python kernels that implement
  the same semantics and are parity-tested against the corpus.
"""
