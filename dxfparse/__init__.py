"""Read ASCII DXF files: typed tags, header information and entities."""

__version__ = "0.1.0"