"""Command-line interface for the blog_loader application."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pprint
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, parse_app_config
from .runner import RunConfig, execute

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Render blog articles from a JSON document into an HTML page."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the configuration XML file.",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Path or URL of the articles JSON document. Overrides config.",
    )
    parser.add_argument(
        "--page-url",
        default=None,
        help="Location the page is viewed from; relative sources resolve against it.",
    )
    parser.add_argument(
        "--output",
        metavar="PATH",
        default=None,
        help="Write the rendered page to PATH instead of stdout.",
    )
    parser.add_argument(
        "--search",
        metavar="TERM",
        default=None,
        help="Apply the search filter with TERM before writing the page.",
    )
    parser.add_argument(
        "--open",
        metavar="INDEX",
        type=int,
        default=None,
        help="Open the detail view of the article at INDEX.",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides config.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides config.",
    )

    return parser


def configure_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Initialise logging according to options."""
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        if log_path.parent and not log_path.parent.exists():
            log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.debug(
            "Logger initialised with level %s and file output to %s",
            level_name.upper(),
            log_path,
        )
    else:
        logger.debug(
            "Logger initialised with console output at level %s", level_name.upper()
        )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = parse_app_config(args.config) if args.config else AppConfig()

        # CLI overrides config
        log_level = args.log_level or app_config.logging.level
        log_file = args.log_file or app_config.logging.file

        configure_logging(log_level, log_file)

        config = RunConfig(
            source=args.source or app_config.source,
            page_url=args.page_url or app_config.page_url,
            output=args.output or app_config.output,
            title=app_config.title,
            container_id=app_config.container_id,
            search_input_id=app_config.search_input_id,
            timeout=app_config.timeout,
            search=args.search,
            open_index=args.open,
        )

        logger.info(
            "Active Configuration:\n%s", pprint.pformat(dataclasses.asdict(config))
        )

        result = execute(config)
    except ValueError as exc:
        parser.error(str(exc))
    except (RuntimeError, FileNotFoundError, LookupError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error during execution.")
        return 1

    if result.output_path is None:
        print(result.html)
    return 0
