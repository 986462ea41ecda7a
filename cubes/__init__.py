"""Building blocks of a block-diagram configuration editor: log messages, base64, zip helpers, planar layout, diagram items and string properties."""

__version__ = "0.1.0"