"""An in-memory table of named columns; see the ``saga.table`` module."""

__version__ = "0.1.0"
__all__ = ["table"]