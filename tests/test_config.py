from __future__ import annotations

from pathlib import Path

import pytest

from doctest_report.config import DEFAULT_OUTPUT_DIR, build_renderer, load_config_from_env
from doctest_report.file_helper import FileHelper
from doctest_report.minio_store import MinioFileHelper


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("DOCTEST_OUTPUT_DIR", "DOCTEST_PUBLISH_MINIO", "DOCTEST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = load_config_from_env()
    assert config.output_dir == Path(DEFAULT_OUTPUT_DIR)
    assert config.publish_minio is False
    assert config.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DOCTEST_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("DOCTEST_PUBLISH_MINIO", " Yes ")
    monkeypatch.setenv("DOCTEST_LOG_LEVEL", "debug")

    config = load_config_from_env()

    assert config.output_dir == tmp_path
    assert config.publish_minio is True
    assert config.log_level == "DEBUG"


def test_explicit_output_dir_wins(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DOCTEST_OUTPUT_DIR", "/elsewhere")
    assert load_config_from_env(output_dir=tmp_path).output_dir == tmp_path


def test_unrecognised_bool_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("DOCTEST_PUBLISH_MINIO", "maybe")
    assert load_config_from_env().publish_minio is False


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("DOCTEST_LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match="DOCTEST_LOG_LEVEL"):
        load_config_from_env()


def test_build_renderer_wires_local_file_helper(tmp_path: Path) -> None:
    renderer = build_renderer(load_config_from_env(output_dir=tmp_path))

    assert type(renderer.file_helper) is FileHelper
    assert renderer.index_file_generator.file_helper is renderer.file_helper


def test_build_renderer_with_minio(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DOCTEST_PUBLISH_MINIO", "1")
    monkeypatch.setenv("MINIO_ENDPOINT", "localhost:9000")
    monkeypatch.setenv("MINIO_ACCESS_KEY", "a")
    monkeypatch.setenv("MINIO_SECRET_KEY", "s")

    renderer = build_renderer(load_config_from_env(output_dir=tmp_path))

    assert isinstance(renderer.file_helper, MinioFileHelper)
