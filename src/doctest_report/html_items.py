"""HTML fragments and pages for rendered doc items.

Output is deterministic: no timestamps, fixed structure, escaped user text.
"""

from __future__ import annotations

import html
from typing import Callable

from .items import (
    AssertDocItem,
    DocItem,
    HighlightedTextDocItem,
    IndexFileDocItem,
    JsonDocItem,
    LinkDocItem,
    MenuDocItem,
    MultipleTextDocItem,
    ReportFileDocItem,
    RequestDocItem,
    ResponseDocItem,
    SectionDocItem,
    TextDocItem,
)
from .json_helper import JsonHelper


class UnknownDocItemError(LookupError):
    """No template is registered for the doc item's type."""


_STYLE_LINES: tuple[str, ...] = (
    "      :root { --fg:#111; --bg:#fff; --muted:#666; --card:#f6f7f9; --link:#0b5fff; }",
    (
        "      body { font-family: ui-sans-serif, system-ui, -apple-system, "
        "Segoe UI, Roboto, Helvetica, Arial, sans-serif;"
    ),
    "             color: var(--fg); background: var(--bg); margin: 0; }",
    (
        "      header { border-bottom: 1px solid #e7e7e7; background: #fff; "
        "position: sticky; top: 0; }"
    ),
    "      .wrap { max-width: 980px; margin: 0 auto; padding: 16px 20px; }",
    (
        "      nav a { margin-right: 14px; text-decoration: none; color: var(--link); "
        "font-weight: 600; }"
    ),
    "      main { padding: 18px 20px 40px; }",
    "      h1 { margin: 0 0 6px; font-size: 22px; }",
    "      h2 { margin-top: 24px; font-size: 18px; }",
    "      p { line-height: 1.5; }",
    "      .muted { color: var(--muted); }",
    (
        "      .card { background: var(--card); border: 1px solid #e8eaee; "
        "border-radius: 12px; padding: 14px 14px; margin: 10px 0; }"
    ),
    "      .request { border-left: 4px solid #0b5fff; }",
    "      .response { border-left: 4px solid #1a7f37; }",
    "      .assert { border-left: 4px solid #9a6700; }",
    "      pre { background: #f1f1f1; padding: 8px 10px; border-radius: 6px; overflow-x: auto; }",
    "      pre.json { color: #0a3069; }",
    "      ul.menu { padding-left: 18px; }",
    "      code { background: #f1f1f1; padding: 1px 4px; border-radius: 6px; }",
)


def _esc(value: object) -> str:
    return html.escape(str(value))


def _html_page(*, title: str, nav_html: str, body_html: str) -> str:
    return "\n".join(
        [
            "<!doctype html>",
            '<html lang="en">',
            "  <head>",
            "    <meta charset=\"utf-8\" />",
            "    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />",
            f"    <title>{_esc(title)}</title>",
            "    <style>",
            *_STYLE_LINES,
            "    </style>",
            "  </head>",
            "  <body>",
            "    <header>",
            "      <div class=\"wrap\">",
            "        <nav>",
            nav_html,
            "        </nav>",
            "      </div>",
            "    </header>",
            "    <main>",
            "      <div class=\"wrap\">",
            body_html,
            "      </div>",
            "    </main>",
            "  </body>",
            "</html>",
        ]
    )


def _definition_list(title: str, values: dict[str, str]) -> str:
    if not values:
        return ""
    rows = "".join(
        f"<dt>{_esc(k)}</dt><dd><code>{_esc(v)}</code></dd>" for k, v in sorted(values.items())
    )
    return f'<p class="muted">{_esc(title)}</p><dl>{rows}</dl>'


class HtmlItems:
    """Template lookup: maps each doc item type to its HTML rendering."""

    def __init__(self, json_helper: JsonHelper | None = None) -> None:
        self.json_helper = json_helper or JsonHelper()
        self._templates: dict[type, Callable[[DocItem], str]] = {
            SectionDocItem: self._section,
            RequestDocItem: self._request,
            ResponseDocItem: self._response,
            AssertDocItem: self._assert,
            TextDocItem: self._text,
            MultipleTextDocItem: self._multiple_text,
            JsonDocItem: self._json,
            HighlightedTextDocItem: self._highlighted_text,
            LinkDocItem: self._link,
        }

    def get_template_for_item(self, item: DocItem) -> str:
        template = self._templates.get(type(item))
        if template is None:
            raise UnknownDocItemError(f"no template for doc item type {type(item).__name__}")
        return template(item)

    def get_list_files_template(self, menu: MenuDocItem) -> str:
        if not menu.files:
            return ""
        entries = "\n".join(f"  <li>{self._link(link)}</li>" for link in menu.files)
        return f'<ul class="menu">\n{entries}\n</ul>'

    def get_report_file_template(self, report: ReportFileDocItem) -> str:
        body_parts = [f"<h1>{_esc(report.name)}</h1>"]
        if report.introduction:
            body_parts.append(f'<p class="muted">{_esc(report.introduction)}</p>')
        body_parts.append(report.items)
        return _html_page(
            title=report.name,
            nav_html='          <a href="index.html">Index</a>',
            body_html="\n".join(body_parts),
        )

    def get_index_template(self, index: IndexFileDocItem) -> str:
        if index.files:
            entries = "\n".join(f"    <li>{self._link(link)}</li>" for link in index.files)
        else:
            entries = '    <li class="muted">(no reports found)</li>'

        body_parts = ["<h1>Reports</h1>"]
        if index.introduction:
            body_parts.append(f'<p class="muted">{_esc(index.introduction)}</p>')
        body_parts.extend(['<div class="card">', "  <ul>", entries, "  </ul>", "</div>"])
        return _html_page(
            title=index.name,
            nav_html='          <a href="index.html">Index</a>',
            body_html="\n".join(body_parts),
        )

    def _section(self, item: SectionDocItem) -> str:
        id_attr = f' id="{_esc(item.href)}"' if item.href else ""
        return f"<h2{id_attr}>{_esc(item.title)}</h2>"

    def _request(self, item: RequestDocItem) -> str:
        parts = [
            '<div class="card request">',
            f"<p><strong>{_esc(item.method.upper())}</strong> <code>{_esc(item.uri)}</code></p>",
            _definition_list("Headers", item.headers),
            _definition_list("Cookies", item.cookies),
        ]
        if item.payload:
            parts.append(self._payload(item.payload))
        parts.append("</div>")
        return "".join(parts)

    def _response(self, item: ResponseDocItem) -> str:
        parts = [
            '<div class="card response">',
            f"<p>Response status <strong>{_esc(item.http_status)}</strong></p>",
            _definition_list("Headers", item.headers),
            _definition_list("Cookies", item.cookies),
        ]
        if item.payload:
            parts.append(self._payload(item.payload))
        parts.append("</div>")
        return "".join(parts)

    def _assert(self, item: AssertDocItem) -> str:
        result = ""
        if item.result is not None:
            result = f" <span class=\"muted\">got</span> <code>{_esc(item.result)}</code>"
        return (
            '<div class="card assert">'
            f"<p>Expected <code>{_esc(item.expected)}</code>{result}</p>"
            "</div>"
        )

    def _text(self, item: TextDocItem) -> str:
        return f"<p>{_esc(item.text)}</p>"

    def _multiple_text(self, item: MultipleTextDocItem) -> str:
        return f"<p><strong>{_esc(item.label)}</strong></p>" if item.label else ""

    def _json(self, item: JsonDocItem) -> str:
        return f'<pre class="json">{_esc(self.json_helper.pretty_print(item.payload))}</pre>'

    def _highlighted_text(self, item: HighlightedTextDocItem) -> str:
        return f'<pre class="text">{_esc(item.text)}</pre>'

    def _link(self, item: LinkDocItem) -> str:
        return f'<a href="{_esc(item.href)}">{_esc(item.name)}</a>'

    def _payload(self, payload: str) -> str:
        if self.json_helper.is_json_valid(payload):
            return self._json(JsonDocItem(payload))
        return self._highlighted_text(HighlightedTextDocItem(payload))
