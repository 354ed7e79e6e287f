# __init__.py
"""Snake on a fixed 25x25 grid, played in a pygame window."""

__version__ = "0.1.0"
