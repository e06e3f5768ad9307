"""Floor-plan editing engine: walls, openings, and the tools that draw them."""

__version__ = "0.1.0"
