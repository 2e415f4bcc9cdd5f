from __future__ import annotations

import os
from pathlib import Path

import pytest


def _env(name: str) -> str | None:
    v = os.getenv(name)
    return v if v not in (None, "") else None


@pytest.mark.skipif(
    _env("DOCTEST_RUN_MINIO_TESTS") != "1",
    reason="Set DOCTEST_RUN_MINIO_TESTS=1 to run MinIO integration test.",
)
def test_minio_upload_smoke_and_cleanup(tmp_path: Path) -> None:
    # Delay imports so unit test runs without a MinIO server.
    try:
        from minio import Minio  # type: ignore[import-not-found]
    except Exception as exc:
        pytest.skip(f"minio library not installed: {exc}")

    from doctest_report.minio_store import MinioFileHelper, load_minio_config_from_env

    try:
        config = load_minio_config_from_env()
    except RuntimeError as exc:
        pytest.skip(str(exc))

    helper = MinioFileHelper(tmp_path, minio_config=config)
    helper.write_file(helper.get_complete_file_name("ci_smoke_test", ".html"), "<p>smoke</p>")

    client = Minio(
        config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        secure=config.secure,
    )
    client.stat_object(config.bucket, "ci_smoke_test.html")

    try:
        client.remove_object(config.bucket, "ci_smoke_test.html")
    except Exception:
        # If deletion isn't available (permissions), leave the smoke object behind.
        pass
