"""Tests for the pure escape/unescape pipelines (core/escaping.py).

Every test is a pure function call — no I/O, no mocking, no side
effects.  These tests exercise:

* Each individual sub-transform
* Pipeline order in both directions
* The "first isolated URL only" rule
* Empty / ``None`` input
* Round-trips over representative code snippets
"""

from __future__ import annotations

import pytest

from code_escape import escape as top_level_escape
from code_escape import unescape as top_level_unescape
from code_escape.core.escaping import (
    ESCAPE_STEPS,
    UNESCAPE_STEPS,
    escape,
    escape_ampersands,
    escape_opening_square_brackets,
    escape_protocol_in_isolated_urls,
    escape_tag_delimiters,
    run_pipeline,
    unescape,
    unescape_ampersands,
    unescape_opening_square_brackets,
    unescape_protocol_in_isolated_urls,
    unescape_tag_delimiters,
)


# ---------------------------------------------------------------------------
# Sub-transforms
# ---------------------------------------------------------------------------

class TestAmpersands:
    def test_escapes_every_ampersand(self) -> None:
        assert escape_ampersands("a && b & c") == "a &amp;&amp; b &amp; c"

    def test_escapes_entity_looking_text(self) -> None:
        assert escape_ampersands("&amp;") == "&amp;amp;"

    def test_unescape(self) -> None:
        assert unescape_ampersands("a &amp;&amp; b") == "a && b"

    def test_unescape_leaves_bare_ampersand(self) -> None:
        assert unescape_ampersands("a & b") == "a & b"


class TestTagDelimiters:
    def test_escapes_both_delimiters(self) -> None:
        assert escape_tag_delimiters("<a><b>") == "&lt;a&gt;&lt;b&gt;"

    def test_unescape(self) -> None:
        assert unescape_tag_delimiters("&lt;div&gt;") == "<div>"

    def test_no_delimiters_unchanged(self) -> None:
        assert escape_tag_delimiters("plain text") == "plain text"


class TestOpeningSquareBrackets:
    def test_only_opening_bracket_is_escaped(self) -> None:
        assert escape_opening_square_brackets("[embed]") == "&#91;embed]"

    def test_escapes_all_opening_brackets(self) -> None:
        assert escape_opening_square_brackets("a[0][1]") == "a&#91;0]&#91;1]"

    def test_unescape(self) -> None:
        assert unescape_opening_square_brackets("&#91;embed]") == "[embed]"


class TestProtocolInIsolatedUrls:
    def test_escapes_isolated_url(self) -> None:
        assert (
            escape_protocol_in_isolated_urls("https://youtube.com/watch?x")
            == "https:&#47;&#47;youtube.com/watch?x"
        )

    def test_escapes_http(self) -> None:
        assert (
            escape_protocol_in_isolated_urls("http://example.com")
            == "http:&#47;&#47;example.com"
        )

    def test_surrounding_whitespace_is_kept(self) -> None:
        assert (
            escape_protocol_in_isolated_urls("  https://example.com  ")
            == "  https:&#47;&#47;example.com  "
        )

    def test_only_first_two_slashes_are_escaped(self) -> None:
        assert (
            escape_protocol_in_isolated_urls("https://example.com/a/b")
            == "https:&#47;&#47;example.com/a/b"
        )

    def test_isolated_url_inside_multiline_content(self) -> None:
        content = "first line\nhttps://example.com\nlast line"
        assert (
            escape_protocol_in_isolated_urls(content)
            == "first line\nhttps:&#47;&#47;example.com\nlast line"
        )

    def test_only_first_isolated_url_is_escaped(self) -> None:
        content = "https://a.example\nhttps://b.example"
        assert (
            escape_protocol_in_isolated_urls(content)
            == "https:&#47;&#47;a.example\nhttps://b.example"
        )

    def test_carriage_return_is_a_line_break(self) -> None:
        assert (
            escape_protocol_in_isolated_urls("a\rhttps://x.com\rb")
            == "a\rhttps:&#47;&#47;x.com\rb"
        )

    @pytest.mark.parametrize("separator", ["\u2028", "\u2029"])
    def test_unicode_line_separators_are_line_breaks(self, separator: str) -> None:
        content = f"intro{separator}https://x.com{separator}outro"
        assert escape_protocol_in_isolated_urls(content) == (
            f"intro{separator}https:&#47;&#47;x.com{separator}outro"
        )

    def test_unescape_honours_carriage_return(self) -> None:
        assert (
            unescape_protocol_in_isolated_urls("a\rhttps:&#47;&#47;x.com\rb")
            == "a\rhttps://x.com\rb"
        )

    def test_text_after_carriage_return_still_blocks_match(self) -> None:
        content = "see\rhttps://x.com here"
        assert escape_protocol_in_isolated_urls(content) == content

    def test_url_with_leading_text_is_ignored(self) -> None:
        content = "see https://example.com/x"
        assert escape_protocol_in_isolated_urls(content) == content

    def test_url_with_trailing_text_is_ignored(self) -> None:
        content = "https://example.com/x here"
        assert escape_protocol_in_isolated_urls(content) == content

    def test_other_schemes_are_ignored(self) -> None:
        content = "ftp://example.com"
        assert escape_protocol_in_isolated_urls(content) == content

    def test_url_with_quote_is_ignored(self) -> None:
        content = 'https://example.com/"x"'
        assert escape_protocol_in_isolated_urls(content) == content

    def test_unescape_restores_protocol(self) -> None:
        assert (
            unescape_protocol_in_isolated_urls("https:&#47;&#47;example.com/x")
            == "https://example.com/x"
        )

    def test_unescape_only_first_isolated_url(self) -> None:
        content = "http:&#47;&#47;a.example\nhttp:&#47;&#47;b.example"
        assert (
            unescape_protocol_in_isolated_urls(content)
            == "http://a.example\nhttp:&#47;&#47;b.example"
        )

    def test_unescape_ignores_non_isolated(self) -> None:
        content = "see https:&#47;&#47;example.com"
        assert unescape_protocol_in_isolated_urls(content) == content


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------

class TestPipelineOrder:
    def test_escape_steps_order(self) -> None:
        assert ESCAPE_STEPS == (
            escape_ampersands,
            escape_tag_delimiters,
            escape_opening_square_brackets,
            escape_protocol_in_isolated_urls,
        )

    def test_unescape_steps_order(self) -> None:
        assert UNESCAPE_STEPS == (
            unescape_protocol_in_isolated_urls,
            unescape_opening_square_brackets,
            unescape_tag_delimiters,
            unescape_ampersands,
        )

    def test_run_pipeline_applies_in_order(self) -> None:
        steps = (lambda s: s + "a", lambda s: s + "b")
        assert run_pipeline(steps, "x") == "xab"

    def test_run_pipeline_treats_none_as_empty(self) -> None:
        assert run_pipeline((lambda s: s + "!",), None) == "!"

    def test_tag_entities_are_not_double_escaped(self) -> None:
        assert escape("<") == "&lt;"


class TestEscape:
    def test_empty_string(self) -> None:
        assert escape("") == ""

    def test_none(self) -> None:
        assert escape(None) == ""

    def test_ampersand(self) -> None:
        assert escape("A & B") == "A &amp; B"

    def test_tag(self) -> None:
        assert escape("<tag>") == "&lt;tag&gt;"

    def test_shortcode(self) -> None:
        assert escape("[shortcode]") == "&#91;shortcode]"

    def test_isolated_url(self) -> None:
        assert escape("https://example.com/x") == "https:&#47;&#47;example.com/x"

    def test_embedded_url_untouched(self) -> None:
        content = "see https://example.com/x here"
        assert escape(content) == content

    def test_entity_text_is_escaped_again(self) -> None:
        assert escape("&amp;") == "&amp;amp;"

    def test_second_isolated_url_untouched(self) -> None:
        content = "https://a.example/1\ntext\nhttps://b.example/2"
        assert escape(content) == (
            "https:&#47;&#47;a.example/1\ntext\nhttps://b.example/2"
        )

    def test_url_query_ampersand_is_escaped(self) -> None:
        assert (
            escape("https://example.com/?a=1&b=2")
            == "https:&#47;&#47;example.com/?a=1&amp;b=2"
        )

    def test_top_level_reexport(self) -> None:
        assert top_level_escape is escape


class TestUnescape:
    def test_empty_string(self) -> None:
        assert unescape("") == ""

    def test_none(self) -> None:
        assert unescape(None) == ""

    def test_all_sequences(self) -> None:
        assert unescape("&#91;b]&lt;i&gt; &amp; more") == "[b]<i> & more"

    def test_second_escaped_url_untouched(self) -> None:
        content = "https:&#47;&#47;a.example\nhttps:&#47;&#47;b.example"
        assert unescape(content) == "https://a.example\nhttps:&#47;&#47;b.example"

    def test_plain_text_unchanged(self) -> None:
        assert unescape("nothing to do") == "nothing to do"

    def test_top_level_reexport(self) -> None:
        assert top_level_unescape is unescape


# ---------------------------------------------------------------------------
# Round-trips
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "content",
    [
        "",
        "plain",
        "if (a && b) { return x < y ? [1] : [2]; }",
        "<?php echo $items[0]; ?>",
        "[gallery ids=\"1,2\"]\n[/gallery]",
        "https://example.com/watch?v=1&t=2",
        "  https://example.com  \n",
        "https://a.example\nhttps://b.example\n",
        "line one\r\nhttps://example.com\r\nline three",
        "old mac\rhttps://example.com\rending",
        "para\u2029https://example.com\u2028",
        "see https://example.com/x here",
    ],
)
def test_unescape_reverses_escape(content: str) -> None:
    assert unescape(escape(content)) == content
