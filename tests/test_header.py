"""Tests for the config block parser."""

import itertools

import pytest

from Semantics.document import parse_document
from Semantics.header import parse_header
from Syntax.errors import InternalError, ValidationError
from Syntax.parse import parse_notation

LINES = {"title": "title: Logic exercises", "author": "author:   A. Student  ", "date": "date:2024-03-01"}


def header_node(*lines: str, label: str = "config"):
    source = f"[{label}]\n" + "".join(line + "\n" for line in lines)
    return parse_notation(source).children[0]


class TestParseHeader:
    """Tests for parse_header."""

    @pytest.mark.parametrize("order", list(itertools.permutations(["title", "author", "date"])))
    def test_any_order(self, order) -> None:
        document = parse_header(header_node(*(LINES[key] for key in order)))

        assert document.title == "Logic exercises"
        assert document.author == "A. Student"
        assert document.date == "2024-03-01"
        assert document.sections == []

    @pytest.mark.parametrize("label", ["settings", "Config", "config2", "config-v2", "my config", "konfigürasyon"])
    def test_wrong_label(self, label: str) -> None:
        node = header_node(*LINES.values(), label=label)

        with pytest.raises(ValidationError) as exc:
            parse_header(node)

        assert exc.value.message == f"Expected 'config', got '{label}' instead."
        assert exc.value.span.line == 1
        assert exc.value.span.column == 2

    def test_unknown_key(self) -> None:
        node = header_node(*LINES.values(), "subject: logic")

        with pytest.raises(ValidationError, match="Invalid configuration key 'subject'") as exc:
            parse_header(node)

        assert exc.value.span.line == 5

    @pytest.mark.parametrize("key", ["title", "author", "date"])
    def test_duplicate_key(self, key: str) -> None:
        node = header_node(*LINES.values(), f"{key}: again")

        with pytest.raises(ValidationError, match=f"Configuration value for '{key}' has already been provided"):
            parse_header(node)

    @pytest.mark.parametrize("key", ["title", "author", "date"])
    def test_missing_key(self, key: str) -> None:
        node = header_node(*(line for name, line in LINES.items() if name != key))

        with pytest.raises(ValidationError, match=f"Missing configuration value for '{key}'"):
            parse_header(node)

    def test_value_keeps_inner_spacing_and_colons(self) -> None:
        document = parse_header(header_node("title: Logic:  part  two ", LINES["author"], LINES["date"]))

        assert document.title == "Logic:  part  two"

    def test_rejects_other_rules(self) -> None:
        root = parse_notation("[config]\n" + "".join(line + "\n" for line in LINES.values()))

        with pytest.raises(InternalError):
            parse_header(root)

    def test_label_is_trimmed(self) -> None:
        document = parse_header(header_node(*LINES.values(), label="  config  "))

        assert document.title == "Logic exercises"

    def test_wrong_label_in_whole_sheet(self) -> None:
        source = "[config v2]\n" + "".join(line + "\n" for line in LINES.values()) + "1: P\n|- P\n"

        with pytest.raises(ValidationError, match="got 'config v2' instead"):
            parse_document(source)
