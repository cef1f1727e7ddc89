from __future__ import annotations

import pytest

from configstore.domain.list_codec import (
    decode_string_list,
    encode_string_list,
    escape_item,
)


def test_encode_empty_list_is_empty_string_and_decodes_back_to_empty_list() -> None:
    assert encode_string_list([]) == ""
    assert decode_string_list("") == []


def test_encode_escapes_delimiter_and_escape_character() -> None:
    assert escape_item("a,b") == "a\\,b"
    assert escape_item("c:\\tmp") == "c:\\\\tmp"
    assert encode_string_list(["a,b,c", "d"]) == "a\\,b\\,c,d"


def test_plain_comma_text_splits_naively() -> None:
    assert decode_string_list("a,b,c") == ["a", "b", "c"]


def test_decode_keeps_empty_items_between_delimiters() -> None:
    assert decode_string_list("a,,b,") == ["a", "", "b", ""]


def test_decode_keeps_trailing_lone_escape() -> None:
    assert decode_string_list("a\\") == ["a\\"]


@pytest.mark.parametrize(
    "items",
    [
        ["fred"],
        ["a,b,c", "d"],
        ["back\\slash", "trailing\\", ",leading"],
        ["\\,", ",\\", ""],
        ["空格 与 中文", "x"],
    ],
)
def test_encoded_lists_decode_to_the_same_items(items: list[str]) -> None:
    assert decode_string_list(encode_string_list(items)) == items


def test_encode_rejects_non_string_items() -> None:
    with pytest.raises(TypeError):
        encode_string_list(["a", 1])  # type: ignore[list-item]


def test_single_empty_item_collapses_to_empty_list() -> None:
    assert decode_string_list(encode_string_list([""])) == []
