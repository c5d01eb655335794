"""Command-line tools for wpfetch.

- ``python -m wpfetch.cli run`` -- crawl all configured targets.
- ``python -m wpfetch.cli pages URL`` -- detect a listing's page count.
- ``python -m wpfetch.cli targets`` -- list the configured targets.
"""
