"""
numsym — locale-sensitive number symbols and rounding helpers.

Contains the immutable symbol set consulted by number formatting/parsing
engines, its canonical text and JSON contracts, a Babel-backed platform
symbol table, and float rounding policies.
"""

__version__ = "0.1.0"
