"""Assemble one HTML report from an ordered list of doc items.

Single left-to-right pass: sections get positional anchors (``section1``,
``section2``, ...) and a menu entry each, multiple-text items are split into
JSON or highlighted-text fragments, everything else goes straight to the
template lookup. Fragments are concatenated with no separators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .file_helper import INDEX_NAME, FileHelper
from .html_items import HtmlItems
from .index_renderer import HtmlIndexFileRenderer
from .items import (
    DocItem,
    HighlightedTextDocItem,
    JsonDocItem,
    LinkDocItem,
    MenuDocItem,
    MultipleTextDocItem,
    ReportFileDocItem,
    SectionDocItem,
)
from .json_helper import JsonHelper

logger = logging.getLogger(__name__)

HTML_EXTENSION = ".html"
SECTION_ANCHOR_PREFIX = "section"


@dataclass(frozen=True)
class RenderedSection:
    fragment: str
    href: str
    title: str


@dataclass(frozen=True)
class RenderResult:
    path: str
    report: ReportFileDocItem
    menu: MenuDocItem | None = None
    anchors: tuple[tuple[str, str], ...] = field(default_factory=tuple)


class HtmlRenderer:
    def __init__(
        self,
        index_file_generator: HtmlIndexFileRenderer,
        html_items: HtmlItems,
        file_helper: FileHelper,
        json_helper: JsonHelper,
    ) -> None:
        self.index_file_generator = index_file_generator
        self.html_items = html_items
        self.file_helper = file_helper
        self.json_helper = json_helper

    def render(
        self,
        items: Sequence[DocItem] | None,
        name: str,
        introduction: str | None = None,
    ) -> RenderResult | None:
        """Render ``items`` into ``<name>.html`` and refresh the index page.

        Returns None (and writes nothing) when there are no items. The menu
        template is called whenever a section exists, even if it renders empty.
        ``name`` may not be the index page name. Collaborator failures
        propagate unchanged.
        """

        if not items:
            logger.debug("No doc items for %s; skipping report", name)
            return None

        if name == INDEX_NAME:
            raise ValueError(f"report name {name!r} is reserved for the index page")

        body = ""
        links: list[LinkDocItem] = []
        anchors: list[tuple[str, str]] = []

        for item in items:
            if isinstance(item, SectionDocItem):
                rendered = self._render_section(item, len(links) + 1)
                links.append(LinkDocItem(href="#" + rendered.href, name=rendered.title))
                anchors.append((rendered.href, rendered.title))
                body += rendered.fragment
            elif isinstance(item, MultipleTextDocItem):
                body += self._render_multiple_text(item)
            else:
                logger.debug("Rendering %s", type(item).__name__)
                body += self.html_items.get_template_for_item(item)

        menu = None
        if links:
            menu = MenuDocItem(files=links)
            body = self.html_items.get_list_files_template(menu) + body

        report = ReportFileDocItem(name=name, introduction=introduction, items=body)
        path = self.file_helper.get_complete_file_name(name, HTML_EXTENSION)
        self.file_helper.write_file(path, self.html_items.get_report_file_template(report))
        logger.info("Wrote report %s (%d items, %d sections)", path, len(items), len(links))

        self.index_file_generator.render(None, INDEX_NAME, introduction)

        return RenderResult(path=path, report=report, menu=menu, anchors=tuple(anchors))

    def _render_section(self, section: SectionDocItem, ordinal: int) -> RenderedSection:
        href = f"{SECTION_ANCHOR_PREFIX}{ordinal}"
        anchored = section.with_href(href)
        return RenderedSection(
            fragment=self.html_items.get_template_for_item(anchored),
            href=href,
            title=section.title,
        )

    def _render_multiple_text(self, item: MultipleTextDocItem) -> str:
        parts = [self.html_items.get_template_for_item(item)]
        for text in item.texts:
            if self.json_helper.is_json_valid(text):
                fragment: DocItem = JsonDocItem(text)
            else:
                fragment = HighlightedTextDocItem(text)
            parts.append(self.html_items.get_template_for_item(fragment))
        return "".join(parts)
