"""wordbatch - batch conversion of word-processing documents through Word automation."""

__version__ = "0.1.0"
