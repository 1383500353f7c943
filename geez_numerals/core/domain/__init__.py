"""
Domain models and value objects.
"""

from geez_numerals.core.domain.format_options import FormatOptions

__all__ = [
    "FormatOptions",
]
