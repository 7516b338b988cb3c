"""
Core value types, digit-group primitives, and invariants.

This module contains the foundational building blocks of exact arithmetic
that are independent of any I/O (no files, no network, no global state).
"""
