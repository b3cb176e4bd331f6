"""History graph lanes, glyphs, ref labels, row filtering, drag-and-drop and git command helpers."""

__version__ = "0.1.0"