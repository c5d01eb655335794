"""Concrete adapters for the interfaces in ``wpfetch.interfaces``."""
