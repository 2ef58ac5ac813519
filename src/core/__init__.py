"""
Core domain models, integer primitives, and invariants.

This module contains the bounded 128-bit unsigned integer type, its checked
arithmetic and its canonical text and binary encodings, independent of any
system that consumes them (networking, storage, ledgers).
"""
