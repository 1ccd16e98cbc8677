"""Console rock-paper-scissors variants (classic, elemental, modular) played to four wins."""

__version__ = "1.0.0"
__all__ = ["__version__"]