"""Import, check and export two-dimensional polygonal meshes as UCD files."""

__version__ = "1.0.0"
__all__ = ["checks", "cli", "mesh", "ucd"]