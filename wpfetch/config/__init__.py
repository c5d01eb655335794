"""Configuration module — exports Settings and load_targets."""

from wpfetch.config.loader import load_targets
from wpfetch.config.settings import Settings

__all__ = ["Settings", "load_targets"]
