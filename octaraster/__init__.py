"""Software rasterizer: vectors, matrices, a camera, prism shapes, a frame timer, a renderer and a render loop."""

__version__ = "0.1.0"

__all__ = ["__version__"]