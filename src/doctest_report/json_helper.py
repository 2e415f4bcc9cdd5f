from __future__ import annotations

import json


class JsonHelper:
    """Decide whether free text is a JSON document and format it for display."""

    def is_json_valid(self, text: str | None) -> bool:
        if not isinstance(text, str):
            return False
        try:
            value = json.loads(text)
        except (ValueError, RecursionError):
            return False
        # Bare scalars ("1", "true", "\"x\"") read better as plain text.
        return isinstance(value, (dict, list))

    def pretty_print(self, text: str) -> str:
        try:
            value = json.loads(text)
        except (ValueError, RecursionError):
            return text
        return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
