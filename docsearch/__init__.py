"""In-memory TF-IDF document search server with query helpers."""

__version__ = "0.1.0"