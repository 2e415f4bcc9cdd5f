from __future__ import annotations

import logging
from urllib.parse import quote

from .file_helper import FileHelper
from .html_items import HtmlItems
from .items import IndexFileDocItem, LinkDocItem

logger = logging.getLogger(__name__)


class HtmlIndexFileRenderer:
    """Write the index page linking every report in the output directory."""

    def __init__(self, html_items: HtmlItems, file_helper: FileHelper) -> None:
        self.html_items = html_items
        self.file_helper = file_helper

    def render(
        self,
        files: list[LinkDocItem] | None,
        name: str,
        introduction: str | None = None,
    ) -> str:
        if files is None:
            files = [
                LinkDocItem(quote(f"{stem}.html"), stem)
                for stem in self.file_helper.list_report_files()
            ]

        index = IndexFileDocItem(name=name, introduction=introduction, files=files)
        path = self.file_helper.get_complete_file_name(name, ".html")
        self.file_helper.write_file(path, self.html_items.get_index_template(index))
        logger.info("Index %s lists %d report(s)", path, len(index.files))
        return path
