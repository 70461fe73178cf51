"""
Production Python kernels.

These modules are designed to be:
- deterministic (integer-only, explicit fixed-width domains),
- easy to audit (one function per on-chain library routine),
- small surface-area (pure functions, typed results),
- parity-testable against the golden-vector corpus.
"""
