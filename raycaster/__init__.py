"""Grid raycasting engine with textured walls and floor, played with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]