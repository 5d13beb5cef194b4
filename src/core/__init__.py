"""
Core digit string arithmetic, domain models, and contracts.

This module contains the pure building blocks that are independent
of console I/O and the self-test harness.
"""
