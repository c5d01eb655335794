"""Allow ``python -m wpfetch.cli`` execution."""

from wpfetch.cli.crawl import main

main()
