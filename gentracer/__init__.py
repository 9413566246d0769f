"""A small path tracer that renders sphere scenes to PNG and PPM images."""

__version__ = "0.1.0"