"""Mirror written report files into an S3-compatible bucket (MinIO).

Secrets are read from environment variables only.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from .config import _env, _env_bool
from .file_helper import FileHelper

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = "doctest-reports"


@dataclass(frozen=True, slots=True)
class MinioConfig:
    endpoint: str
    access_key: str
    secret_key: str
    secure: bool
    bucket: str


def load_minio_config_from_env() -> MinioConfig:
    endpoint = _env("MINIO_ENDPOINT")
    access_key = _env("MINIO_ACCESS_KEY")
    secret_key = _env("MINIO_SECRET_KEY")
    secure = _env_bool("MINIO_SECURE", default=False)
    bucket = _env("DOCTEST_REPORTS_BUCKET", default=DEFAULT_BUCKET)

    missing: list[str] = []
    if not endpoint:
        missing.append("MINIO_ENDPOINT")
    if not access_key:
        missing.append("MINIO_ACCESS_KEY")
    if not secret_key:
        missing.append("MINIO_SECRET_KEY")

    if missing:
        raise RuntimeError(
            "Missing required MinIO environment variables: " + ", ".join(missing)
        )

    return MinioConfig(
        endpoint=str(endpoint),
        access_key=str(access_key),
        secret_key=str(secret_key),
        secure=bool(secure),
        bucket=str(bucket),
    )


def _get_minio_client(config: MinioConfig):
    try:
        from minio import Minio  # type: ignore[import-not-found]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "minio library is required. Install with: pip install minio"
        ) from exc

    return Minio(
        endpoint=config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        secure=config.secure,
    )


def object_key_for_file(path: str | Path, output_dir: str | Path) -> str:
    """Deterministic object key: the file path relative to the output directory."""

    p = Path(path)
    try:
        return p.relative_to(Path(output_dir)).as_posix()
    except ValueError:
        return p.name


class MinioFileHelper(FileHelper):
    """FileHelper that uploads each written file after writing it locally."""

    def __init__(self, output_dir: str | Path, *, minio_config: MinioConfig, client=None) -> None:
        super().__init__(output_dir)
        self.minio_config = minio_config
        self._client = client
        self._bucket_checked = False

    def _ensure_client(self):
        if self._client is None:
            self._client = _get_minio_client(self.minio_config)
        if not self._bucket_checked:
            # Idempotent. If permissions disallow, fail loudly.
            if not self._client.bucket_exists(self.minio_config.bucket):
                self._client.make_bucket(self.minio_config.bucket)
            self._bucket_checked = True
        return self._client

    def write_file(self, path: str | Path, content: str) -> None:
        super().write_file(path, content)

        client = self._ensure_client()
        key = object_key_for_file(path, self.output_dir)
        data = Path(path).read_bytes()
        client.put_object(
            self.minio_config.bucket,
            key,
            data=io.BytesIO(data),
            length=len(data),
            content_type="text/html; charset=utf-8",
        )
        logger.info("Uploaded %s to bucket %s", key, self.minio_config.bucket)
