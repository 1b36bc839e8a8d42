"""Building blocks for generating code from Protocol Buffers descriptors."""

__version__ = "0.13.5"