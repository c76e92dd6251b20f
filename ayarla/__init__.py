"""Manage dotfiles by linking them from a settings directory into your home."""

__version__ = "0.1.0"
__all__ = ["__version__"]