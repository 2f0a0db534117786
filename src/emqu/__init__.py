"""emqu - chunk, embed and query text files."""

__version__ = "0.1.0"
