"""
Core domain models, mathematical primitives, and contracts.

This module contains the building blocks that are independent of
external locale data sources.
"""
