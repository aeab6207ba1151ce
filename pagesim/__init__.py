"""Simulator of paged memory management: frames, processes, page tables and a menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]