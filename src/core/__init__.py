"""
Core domain models, pure transforms, and JSON contracts.

This module contains self-contained building blocks with no shared state
and no I/O beyond loading contract schemas.
"""
