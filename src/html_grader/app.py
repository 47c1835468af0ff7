from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from checker.controllers.grade_controller import GradeController
from checker.managers.checks_manager import load_checks
from checker.model import FetchError
from checker.services.check_service import render_report
from fetcher.utils.url_utils import UrlUtils
from html_grader.core.managers.config_manager import config_manager
from html_grader.core.utils.configure_logging import configure_logger
from html_grader.core.utils.path_utils import PathUtils
from html_grader.model import GraderSettings

logger = logging.getLogger(__name__)


def build_parser(settings: GraderSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-grader",
        description="Check an HTML file or URL for the presence of CSS selectors.",
    )
    parser.add_argument("-c", "--checks", metavar="CHECK_FILE", default=settings.checks_file,
                        help=f"Path to the JSON list of selectors (default: {settings.checks_file}).")
    parser.add_argument("-f", "--file", metavar="HTML_FILE", default=None,
                        help="Path to a local HTML file. Takes precedence over --url.")
    parser.add_argument("-u", "--url", metavar="URL", default=None,
                        help="URL of the HTML page to fetch.")
    parser.add_argument("--log-level", default=None,
                        help="Override debug.level from settings.json (e.g. DEBUG).")
    return parser


def _exit_with(message: str) -> int:
    print(message)
    return 1


def run(
        settings: GraderSettings,
        checks_file: str,
        html_file: Optional[str] = None,
        url: Optional[str] = None,
) -> int:
    """
    Validates the inputs, grades the document and prints the report.
    Returns the process exit code.
    """
    # --- Eager validation, nothing is parsed before this passes ---
    if not PathUtils.input_exists(checks_file):
        return _exit_with(f"{checks_file} does not exist. Exiting.")
    if html_file is not None and not PathUtils.input_exists(html_file):
        return _exit_with(f"{html_file} does not exist. Exiting.")
    if html_file is None and not url:
        return _exit_with("No input source given. Use --file or --url. Exiting.")

    try:
        checks = load_checks(PathUtils.resolve_input(checks_file))
    except ValueError as e:
        return _exit_with(f"{checks_file} is not a valid checks file: {e}. Exiting.")

    controller = GradeController(settings)

    if html_file is not None:
        report = controller.grade_file(PathUtils.resolve_input(html_file), checks)
    else:
        if not UrlUtils.is_http_url(url):
            logger.info("Rejected non-http(s) URL: %s", url)
            return _exit_with(f"{url} does not work. Exiting.")
        try:
            report = asyncio.run(controller.grade_url(url, checks))
        except FetchError as e:
            logger.debug("Fetch failed: %s", e)
            return _exit_with(f"{e.url} does not work. Exiting.")

    print(render_report(report))
    return 0


def main(argv: List[str] | None = None) -> int:
    """Entrypoint for running the grader from the command line."""
    settings = GraderSettings.from_config(config_manager)
    parser = build_parser(settings)

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits on --help (0) and on usage errors (2)
        return e.code if isinstance(e.code, int) else 1

    if args.log_level:
        config_manager.set_nested("debug.level", args.log_level.upper())
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        silenced_loggers=config_manager.get_nested("silenced_loggers", {}),
    )
    logger.debug("Effective settings: %s", settings.model_dump())

    try:
        return run(settings, args.checks, html_file=args.file, url=args.url)
    except OSError as e:
        logger.error("I/O failure: %s", e, exc_info=True)
        return _exit_with(f"Error: {e}. Exiting.")
    except Exception as e:
        logger.error("Grading failed: %s", e, exc_info=True)
        return _exit_with(f"Error: {e}. Exiting.")


if __name__ == "__main__":
    sys.exit(main())
