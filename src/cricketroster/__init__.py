"""In-memory cricket roster manager with a thin REST surface."""

__version__ = "0.1.0"
