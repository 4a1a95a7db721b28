"""Build boot animation and boot splash images from animated GIFs or still images."""

__version__ = "0.1.0"
__all__ = ["cli", "container", "convert"]