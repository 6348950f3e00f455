"""Calendar engine and preference helpers exposed by the Shamsi calendar package."""

from . import converter, preferences

__all__ = [
    "converter",
    "preferences",
]
