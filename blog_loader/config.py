"""Configuration loading for the blog page builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from xml.etree import ElementTree as ET

from .source import DEFAULT_SOURCE

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppConfig:
    source: str = DEFAULT_SOURCE
    page_url: Optional[str] = None
    output: Optional[str] = None
    title: str = "Blog"
    container_id: str = "blogList"
    search_input_id: str = "searchInput"
    timeout: Optional[float] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def _resolve_source(base_path: Path, source: str) -> str:
    """Return URLs unchanged and local paths as absolute ``file:`` URIs."""
    if urlparse(source).scheme:
        return source
    return Path(_resolve_path(base_path, source)).as_uri()


def parse_app_config(path: str) -> AppConfig:
    """Parse the main application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    tree = ET.parse(config_path)
    root = tree.getroot()

    config = AppConfig()

    source = root.findtext("source")
    if source and source.strip():
        config.source = _resolve_source(config_path, source.strip())

    page_url = root.findtext("page-url")
    if page_url and page_url.strip():
        config.page_url = page_url.strip()

    output = root.findtext("output")
    if output and output.strip():
        config.output = _resolve_path(config_path, output.strip())

    config.title = root.findtext("title", config.title).strip() or config.title
    config.container_id = root.findtext("container-id", config.container_id).strip()
    config.search_input_id = root.findtext(
        "search-input-id", config.search_input_id
    ).strip()

    timeout_text = root.findtext("timeout")
    if timeout_text and timeout_text.strip():
        try:
            config.timeout = float(timeout_text)
        except ValueError:
            raise ValueError(f"Invalid <timeout> value: {timeout_text!r}")
        if config.timeout <= 0:
            raise ValueError("<timeout> must be positive.")

    if not config.container_id:
        raise ValueError("Config <container-id> must not be empty.")

    # Logging
    log_node = root.find("logging")
    if log_node is not None:
        config.logging.level = log_node.findtext("level", "INFO")
        log_file = log_node.findtext("file")
        if log_file:
            config.logging.file = _resolve_path(config_path, log_file)

    return config
