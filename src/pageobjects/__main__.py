"""Entry point: ``python -m pageobjects``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from pageobjects.browser.playwright_session import launch_session
from pageobjects.definitions import load_pages
from pageobjects.exceptions import ConfigurationError, PageDefinitionError, SessionError
from pageobjects.inspector import inspect_pages
from pageobjects.reporting.console import print_banner, print_page_report, print_summary
from pageobjects.settings import PageObjectSettings


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pageobjects",
        description="Visit declared pages and check that every element resolves.",
    )
    parser.add_argument("pages", nargs="*", help="page names to inspect (default: all)")
    parser.add_argument("-c", "--config", help="settings YAML (default: ./pageobjects.yaml)")
    parser.add_argument("-p", "--pages-file", help="page definitions YAML")
    parser.add_argument("--base-url", help="base URL for relative page URLs")
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _load_settings(args: argparse.Namespace) -> PageObjectSettings:
    settings = PageObjectSettings.from_yaml(args.config)
    overrides: dict[str, Any] = {}
    if args.pages_file:
        overrides["pages_file"] = args.pages_file
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.headed:
        overrides["headless"] = False
    return settings.model_copy(update=overrides)


async def _async_main(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    page_classes = load_pages(settings.pages_file)

    unknown = [name for name in args.pages if name not in page_classes]
    if unknown:
        raise ConfigurationError(
            f"Unknown page(s): {', '.join(unknown)}; defined: {', '.join(sorted(page_classes))}."
        )
    if args.pages:
        page_classes = {name: page_classes[name] for name in args.pages}

    print_banner()
    async with launch_session(settings) as session:
        reports = await inspect_pages(session, page_classes, settings)

    for report in reports:
        print_page_report(report)
    print_summary(reports)
    return 0 if all(r.ok for r in reports) else 1


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    try:
        code = asyncio.run(_async_main(args))
    except (ConfigurationError, PageDefinitionError, SessionError) as exc:
        logging.error("%s", exc)
        sys.exit(2)
    except KeyboardInterrupt:
        logging.info("Interrupted by user.")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
