"""wpfetch — crawls paginated blog listings into per-site JSON article files."""

__version__ = "0.1.0"
