"""A box-pushing puzzle game: a text console game and a stage renderer for an in-memory frame buffer."""

__version__ = "0.1.0"
__all__ = ["console", "grid", "image", "stage", "video"]