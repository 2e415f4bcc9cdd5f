from __future__ import annotations

import pytest

from doctest_report.json_helper import JsonHelper


@pytest.mark.parametrize(
    "text",
    ['{"abc": "a"}', "[1, 2, 3]", ' {"nested": {"x": null}} ', "[]"],
)
def test_objects_and_arrays_are_json(text: str) -> None:
    assert JsonHelper().is_json_valid(text) is True


@pytest.mark.parametrize(
    "text",
    ["text", "", "{'abc':'a'}", "{", "1", "true", '"quoted"', None],
)
def test_everything_else_is_plain_text(text) -> None:
    assert JsonHelper().is_json_valid(text) is False


def test_deeply_nested_text_is_not_json() -> None:
    text = "[" * 100000

    helper = JsonHelper()

    assert helper.is_json_valid(text) is False
    assert helper.pretty_print(text) == text


def test_pretty_print_is_stable() -> None:
    helper = JsonHelper()
    assert helper.pretty_print('{"b":1,"a":"ü"}') == '{\n  "a": "ü",\n  "b": 1\n}'


def test_pretty_print_returns_unparseable_text_unchanged() -> None:
    assert JsonHelper().pretty_print("not json") == "not json"
