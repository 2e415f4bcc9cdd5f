from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .file_helper import FileHelper
from .html_items import HtmlItems
from .index_renderer import HtmlIndexFileRenderer
from .json_helper import JsonHelper
from .renderer import HtmlRenderer

DEFAULT_OUTPUT_DIR = "target/doctests"


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    raw_norm = raw.strip().lower()
    if raw_norm in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if raw_norm in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


@dataclass(frozen=True, slots=True)
class RendererConfig:
    output_dir: Path
    publish_minio: bool = False
    log_level: str = "INFO"


def load_config_from_env(*, output_dir: str | Path | None = None) -> RendererConfig:
    """Read renderer settings from ``DOCTEST_*`` variables.

    An explicit ``output_dir`` wins over ``DOCTEST_OUTPUT_DIR``.
    """

    resolved_dir = output_dir or _env("DOCTEST_OUTPUT_DIR", default=DEFAULT_OUTPUT_DIR)
    log_level = str(_env("DOCTEST_LOG_LEVEL", default="INFO")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Unknown DOCTEST_LOG_LEVEL: {log_level}")

    return RendererConfig(
        output_dir=Path(str(resolved_dir)),
        publish_minio=_env_bool("DOCTEST_PUBLISH_MINIO", default=False),
        log_level=log_level,
    )


def build_renderer(config: RendererConfig) -> HtmlRenderer:
    if config.publish_minio:
        from .minio_store import MinioFileHelper, load_minio_config_from_env

        helper: FileHelper = MinioFileHelper(
            config.output_dir, minio_config=load_minio_config_from_env()
        )
    else:
        helper = FileHelper(config.output_dir)

    html_items = HtmlItems(JsonHelper())
    index_renderer = HtmlIndexFileRenderer(html_items, helper)
    return HtmlRenderer(index_renderer, html_items, helper, JsonHelper())
