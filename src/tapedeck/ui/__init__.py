"""UI layer for tapedeck.

Contains:
- blessed: full-screen terminal transport UI
"""

__all__ = []
