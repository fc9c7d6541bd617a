"""Sequence helpers, a do-op calculator, ASCII rectangles and a 4x4 skyscraper solver."""

__version__ = "0.1.0"

__all__ = ["arrays", "calculator", "rectangle", "skyscraper"]