"""
Core domain models, mathematical primitives, and data contracts.

This module contains the foundational building blocks of the Hill cipher
engine. Everything here is pure and stateless.
"""
