"""Grid-based Snake on a pygame/OpenGL 2D scene."""

__version__ = "0.1.0"
