"""
Errors raised by the grid and the Life engine.

Both are ValueError subclasses, so callers that already catch ValueError
(unknown presets, malformed rule strings) catch these too.
"""


class InvalidSize(ValueError):
    """Requested grid size, shape or dimensionality is not allowed."""


class ShapeMismatch(ValueError):
    """Injected cell values do not exactly match the grid's shape."""
