"""Disk-image library for the XFS file system and core parts of the XSM machine."""

__version__ = "0.1.0"