"""
Core numeral tables, codec and domain models.

Everything here is pure and independent of I/O.
"""
