"""preloadgen - preload link generation for web build outputs."""

__version__ = "0.1.0"
