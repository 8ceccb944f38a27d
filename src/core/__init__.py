"""
Core numeral notations, integer primitives, and record contracts.

This module contains the conversion engines and has no dependencies on
outer layers (the converter facade).
"""
