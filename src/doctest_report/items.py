from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any


class DocItemError(ValueError):
    """Raised when an items document cannot be turned into doc items."""


@dataclass(frozen=True)
class DocItem:
    """Base marker for anything the HTML templates know how to render."""


@dataclass(frozen=True)
class SectionDocItem(DocItem):
    title: str
    href: str | None = None

    def with_href(self, href: str) -> SectionDocItem:
        return replace(self, href=href)


@dataclass(frozen=True)
class RequestDocItem(DocItem):
    method: str
    uri: str
    payload: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseDocItem(DocItem):
    http_status: int
    payload: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AssertDocItem(DocItem):
    expected: str
    result: str | None = None


@dataclass(frozen=True)
class TextDocItem(DocItem):
    text: str


@dataclass(frozen=True)
class MultipleTextDocItem(DocItem):
    label: str
    texts: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Callers commonly pass lists; keep the item hashable and read-only.
        object.__setattr__(self, "texts", tuple(self.texts))


@dataclass(frozen=True)
class JsonDocItem(DocItem):
    payload: str


@dataclass(frozen=True)
class HighlightedTextDocItem(DocItem):
    text: str


@dataclass(frozen=True)
class LinkDocItem(DocItem):
    href: str
    name: str


@dataclass(frozen=True)
class MenuDocItem(DocItem):
    files: tuple[LinkDocItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(self.files))


@dataclass(frozen=True)
class ReportFileDocItem(DocItem):
    name: str
    introduction: str | None
    items: str


@dataclass(frozen=True)
class IndexFileDocItem(DocItem):
    name: str
    introduction: str | None
    files: tuple[LinkDocItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(self.files))


def _str_map(raw: Any, *, key: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DocItemError(f"'{key}' must be an object, got {type(raw).__name__}")
    return {str(k): str(v) for k, v in raw.items()}


def _payload(raw: Any) -> str | None:
    if raw is None or isinstance(raw, str):
        return raw
    # Structured payloads are stored as their JSON text.
    return json.dumps(raw, sort_keys=True, ensure_ascii=False)


def doc_item_from_dict(data: dict[str, Any]) -> DocItem:
    """Build one doc item from its JSON form (``{"type": "section", ...}``)."""

    if not isinstance(data, dict):
        raise DocItemError(f"doc item must be an object, got {type(data).__name__}")

    kind = data.get("type")
    try:
        if kind == "section":
            return SectionDocItem(title=str(data["title"]))
        if kind == "request":
            return RequestDocItem(
                method=str(data["method"]),
                uri=str(data["uri"]),
                payload=_payload(data.get("payload")),
                headers=_str_map(data.get("headers"), key="headers"),
                cookies=_str_map(data.get("cookies"), key="cookies"),
            )
        if kind == "response":
            return ResponseDocItem(
                http_status=int(data["http_status"]),
                payload=_payload(data.get("payload")),
                headers=_str_map(data.get("headers"), key="headers"),
                cookies=_str_map(data.get("cookies"), key="cookies"),
            )
        if kind == "assert":
            result = data.get("result")
            return AssertDocItem(
                expected=str(data["expected"]),
                result=None if result is None else str(result),
            )
        if kind == "text":
            return TextDocItem(text=str(data["text"]))
        if kind == "multiple_text":
            texts = data.get("texts") or []
            if not isinstance(texts, list):
                raise DocItemError("'texts' must be a list")
            return MultipleTextDocItem(
                label=str(data.get("label", "")),
                texts=tuple(str(t) for t in texts),
            )
        if kind == "json":
            return JsonDocItem(payload=_payload(data["payload"]) or "")
        if kind == "highlighted_text":
            return HighlightedTextDocItem(text=str(data["text"]))
    except DocItemError:
        raise
    except KeyError as exc:
        raise DocItemError(f"doc item of type {kind!r} is missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise DocItemError(f"invalid doc item of type {kind!r}: {exc}") from exc

    raise DocItemError(f"unknown doc item type: {kind!r}")


def doc_items_from_json(path: str | Path) -> list[DocItem]:
    """Read an ordered doc item list from ``{"items": [...]}`` on disk."""

    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise DocItemError(f"{p}: not UTF-8 text ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise DocItemError(f"{p}: not valid JSON ({exc})") from exc

    raw_items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(raw_items, list):
        raise DocItemError(f"{p}: expected an object with an 'items' list")
    return [doc_item_from_dict(entry) for entry in raw_items]
