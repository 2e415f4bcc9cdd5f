from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

INDEX_NAME = "index"


class FileHelper:
    """Resolve report file names inside one output directory and write them."""

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)

    def get_complete_file_name(self, name: str, extension: str) -> str:
        safe_name = name.replace("/", "_").replace("\\", "_")
        return (self.output_dir / f"{safe_name}{extension}").as_posix()

    def write_file(self, path: str | Path, content: str) -> None:
        """Write text deterministically (UTF-8, LF newlines, trailing newline)."""

        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        if not content.endswith("\n"):
            content += "\n"
        with p.open("w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        logger.debug("Wrote %s (%d chars)", p, len(content))

    def list_report_files(self, extension: str = ".html") -> list[str]:
        if not self.output_dir.exists():
            return []
        stems = []
        for p in self.output_dir.iterdir():
            if not p.is_file() or p.suffix != extension:
                continue
            if p.stem == INDEX_NAME:
                continue
            stems.append(p.stem)
        return sorted(stems)
