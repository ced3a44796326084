"""Tests for card HTML cleanup and JSON output."""

import json

import pytest

from anki_review_mcp.formatting import clean_card_html, to_json
from anki_review_mcp.models import Card


class TestCleanCardHtml:
    """Tests for clean_card_html."""

    def test_empty_string(self) -> None:
        assert clean_card_html("") == ""

    def test_plain_text(self) -> None:
        assert clean_card_html("Hello world") == "Hello world"

    def test_style_block_removed(self) -> None:
        """Style blocks disappear together with their CSS."""
        assert clean_card_html("<style>.a{color:red}</style>Hi") == "Hi"

    def test_style_block_case_and_newlines(self) -> None:
        html = '<STYLE type="text/css">\n.card {\n  font-size: 20px;\n}\n</STYLE>Front'
        assert clean_card_html(html) == "Front"

    def test_div_becomes_line_break(self) -> None:
        assert clean_card_html("A<div>B</div>") == "A\nB"

    def test_div_with_attributes(self) -> None:
        assert clean_card_html('Line 1<div class="x">Line 2</div><div>Line 3</div>') == (
            "Line 1\nLine 2\nLine 3"
        )

    def test_tags_replaced_with_space(self) -> None:
        """Words on either side of a tag stay apart."""
        assert clean_card_html("one<br>two") == "one two"
        assert clean_card_html("<b>bold</b>") == "bold"

    def test_inner_spacing_kept(self) -> None:
        assert clean_card_html("Capital of <b>France</b>?") == "Capital of  France ?"

    def test_play_directive_removed(self) -> None:
        assert clean_card_html("Listen [anki:play:q:0] now") == "Listen  now"
        assert clean_card_html("<div>[anki:play:a:1]</div>") == ""

    @pytest.mark.parametrize(
        ("html", "expected"),
        [
            ("a&nbsp;b", "a b"),
            ("salt &amp; pepper", "salt & pepper"),
            ("1 &lt; 2", "1 < 2"),
            ("3 &gt; 2", "3 > 2"),
            ("say &quot;hi&quot;", 'say "hi"'),
        ],
    )
    def test_entities(self, html: str, expected: str) -> None:
        assert clean_card_html(html) == expected

    def test_other_entities_untouched(self) -> None:
        assert clean_card_html("caf&eacute;") == "caf&eacute;"

    def test_blank_lines_dropped_and_lines_trimmed(self) -> None:
        assert clean_card_html("  first  \n\n   \n second \n") == "first\nsecond"

    def test_rendered_answer(self) -> None:
        """A typical rendered back side of a Basic card."""
        html = (
            "<style>.card { font-family: arial; }</style>"
            "What is H<sub>2</sub>O?\n\n<hr id=answer>\n\nWater"
            "<div>[anki:play:a:0]</div>"
        )
        assert clean_card_html(html) == "What is H 2 O?\nWater"

    @pytest.mark.parametrize(
        "html",
        [
            "",
            "plain",
            "<style>.a{}</style>Hi",
            "A<div>B</div><div>C</div>",
            "Q<br>more<hr id=answer>A &amp; B",
            "  padded  \n\n lines ",
            "[anki:play:q:0]<div> sound </div>",
        ],
    )
    def test_idempotent(self, html: str) -> None:
        once = clean_card_html(html)
        assert clean_card_html(once) == once


class TestToJson:
    """Tests for to_json."""

    def test_compact_by_default(self) -> None:
        assert to_json(["Default", "Spanish"]) == '["Default","Spanish"]'
        assert to_json({"Default": 1}) == '{"Default":1}'

    def test_indent(self) -> None:
        assert to_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_cards_use_aliases(self) -> None:
        cards = [Card(card_id=1, question="Q", answer="A", due=3)]
        assert json.loads(to_json(cards)) == [
            {"cardId": 1, "question": "Q", "answer": "A", "due": 3}
        ]

    def test_non_ascii_kept(self) -> None:
        assert to_json(["Español"]) == '["Español"]'
