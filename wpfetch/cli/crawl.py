"""CLI for crawling the configured blog listings.

Usage::

    # Crawl every target in config/targets.yaml into dist/data/
    python -m wpfetch.cli run

    # Full crawl regardless of APP_ENV, only one target
    python -m wpfetch.cli run --no-dev --target alberthsieh

    # How many listing pages does a blog have?
    python -m wpfetch.cli pages http://www.alberthsieh.com

    # Show the configured targets
    python -m wpfetch.cli targets
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from wpfetch.config.loader import load_targets
from wpfetch.config.settings import Settings
from wpfetch.models.crawl import SiteOutcome, SiteStatus
from wpfetch.providers.http.httpx_provider import HttpxPageProvider
from wpfetch.providers.storage.local_storage_provider import LocalStorageProvider
from wpfetch.services.page_count_detector import detect_max_page
from wpfetch.services.run_coordinator import RunCoordinator
from wpfetch.services.site_pipeline import SitePipeline
from wpfetch.utils.errors import ConfigurationError, WPFetchError
from wpfetch.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_page_provider(app_settings: Settings) -> HttpxPageProvider:
    return HttpxPageProvider(
        timeout=app_settings.request_timeout,
        user_agent=app_settings.user_agent,
    )


def _print_outcome(outcome: SiteOutcome) -> None:
    if outcome.status is SiteStatus.FAILED:
        print(f"  FAILED  {outcome.target_name}: {outcome.error}")
    elif outcome.status is SiteStatus.EMPTY:
        print(f"  EMPTY   {outcome.target_name}: no articles found ({outcome.pages_fetched} pages)")
    else:
        print(
            f"  OK      {outcome.target_name}: {outcome.record_count:,} articles "
            f"from {outcome.pages_fetched} pages -> {outcome.output_path}"
        )


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_run(args: argparse.Namespace, app_settings: Settings) -> int:
    """Crawl every configured (or selected) target."""
    targets = load_targets(args.targets or app_settings.targets_file)
    if args.target:
        wanted = set(args.target)
        unknown = wanted - {t.name for t in targets}
        if unknown:
            print(f"Error: Unknown target(s): {', '.join(sorted(unknown))}", file=sys.stderr)
            return 1
        targets = [t for t in targets if t.name in wanted]

    options = app_settings.crawl_options(
        dev_mode=args.dev,
        page_delay=args.delay,
        output_dir=args.output_dir,
        reuse_first_page=True if args.reuse_first_page else None,
    )

    print(f"Crawling {len(targets)} target(s) into {options.output_dir}/")
    if options.dev_mode:
        print(f"Development mode: at most {options.dev_page_cap} pages per target")
    print()

    storage = LocalStorageProvider()
    async with _make_page_provider(app_settings) as provider:
        pipeline = SitePipeline(provider=provider, storage=storage, options=options)
        coordinator = RunCoordinator(pipeline=pipeline, storage=storage)
        outcomes = await coordinator.run_all(targets, on_outcome=_print_outcome)

    failed = [o for o in outcomes if not o.ok]
    print()
    print(f"Completed: {len(outcomes) - len(failed)} ok, {len(failed)} failed")

    if args.strict and failed:
        return 1
    return 0


async def _handle_pages(args: argparse.Namespace, app_settings: Settings) -> int:
    """Fetch one listing page and report its detected page count."""
    async with _make_page_provider(app_settings) as provider:
        html = await provider.get(args.url)

    max_page = detect_max_page(html)
    if max_page is None:
        print(f"{args.url}: no pagination found (1 page)")
    else:
        print(f"{args.url}: {max_page} pages")
    return 0


def _handle_targets(args: argparse.Namespace, app_settings: Settings) -> int:
    """List the configured targets. Synchronous: reads local config only."""
    targets = load_targets(args.targets or app_settings.targets_file)
    for target in targets:
        print(f"  {target.name:<24} {target.url}")
    print(f"{len(targets)} target(s)")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wpfetch",
        description="Crawl paginated blog listings into per-site JSON article files.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines instead of console output",
    )
    subparsers = parser.add_subparsers(dest="command", help="wpfetch commands")

    # -- run --
    run_parser = subparsers.add_parser("run", help="Crawl all configured targets")
    run_parser.add_argument(
        "--targets",
        default=None,
        help="Path to the targets YAML file (default: TARGETS_FILE setting)",
    )
    run_parser.add_argument(
        "--target",
        action="append",
        default=None,
        help="Only crawl the named target (repeatable)",
    )
    dev_group = run_parser.add_mutually_exclusive_group()
    dev_group.add_argument(
        "--dev",
        dest="dev",
        action="store_true",
        default=None,
        help="Cap every target at DEV_PAGE_CAP pages",
    )
    dev_group.add_argument(
        "--no-dev",
        dest="dev",
        action="store_false",
        help="Crawl every detected page even if APP_ENV is a dev environment",
    )
    run_parser.set_defaults(dev=None)
    run_parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between page requests (default: PAGE_DELAY setting)",
    )
    run_parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory, cleared before the run (default: OUTPUT_DIR setting)",
    )
    run_parser.add_argument(
        "--reuse-first-page",
        action="store_true",
        help="Reuse the page-count probe instead of fetching page 1 twice",
    )
    run_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any target failed",
    )

    # -- pages --
    pages_parser = subparsers.add_parser("pages", help="Detect the page count of a listing")
    pages_parser.add_argument("url", help="Base listing URL")

    # -- targets --
    targets_parser = subparsers.add_parser("targets", help="List configured targets")
    targets_parser.add_argument("--targets", default=None, help="Path to the targets YAML file")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; dispatches to the subcommand handler."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        app_settings = Settings()
    except ValidationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(
        app_settings.log_level,
        json_output=args.json_logs or app_settings.json_logs,
    )

    try:
        if args.command == "targets":
            exit_code = _handle_targets(args, app_settings)
        elif args.command == "run":
            exit_code = asyncio.run(_handle_run(args, app_settings))
        elif args.command == "pages":
            exit_code = asyncio.run(_handle_pages(args, app_settings))
        else:
            parser.print_help()
            exit_code = 1
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        exit_code = 2
    except WPFetchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
