"""Unit tests for core/extract/inline.py"""

import pytest

from manuscript.core.extract.inline import plain_text, tokenize_inline
from manuscript.core.models import BoldToken, LinkToken, TextToken, TooltipToken


def test_plain_text_only():
    assert tokenize_inline("ただの文章") == [TextToken(value="ただの文章")]


def test_empty_span():
    assert tokenize_inline("") == []
    assert tokenize_inline(None) == []


def test_tooltip_ascii_pipe():
    """A tooltip followed by text yields a Tooltip then a Text token."""
    assert tokenize_inline("{{ABS|アンチロック・ブレーキ・システム}}とは") == [
        TooltipToken(term="ABS", tip="アンチロック・ブレーキ・システム"),
        TextToken(value="とは"),
    ]


def test_tooltip_fullwidth_pipe_and_trim():
    assert tokenize_inline("{{ 車検 ｜ 定期的な検査 }}") == [TooltipToken(term="車検", tip="定期的な検査")]


@pytest.mark.parametrize("span,expected", [
    ("{{ABS}}",        "{{ABS}}"),
    ("{{|tip}}",       "{{|tip}}"),
    ("{{term|}}",      "{{term|}}"),
    ("{{ | }}",        "{{ | }}"),
    ("{{term|tip",     "{{term|tip"),
])
def test_invalid_tooltip_is_literal(span, expected):
    """Malformed tooltips degrade to literal text."""
    assert plain_text(tokenize_inline(span)) == expected


def test_unterminated_bold():
    """An unterminated bold marker is dropped with no exception."""
    assert tokenize_inline("**注意") == [TextToken(value="注意")]


def test_bold_then_text():
    assert tokenize_inline("**重要**です") == [
        BoldToken(value="重要", children=[TextToken(value="重要")]),
        TextToken(value="です"),
    ]


def test_link_inside_bold():
    """Bold content is tokenized recursively, so links can nest."""
    tokens = tokenize_inline("**[公式](https://example.jp)を確認**")
    assert len(tokens) == 1
    bold = tokens[0]
    assert isinstance(bold, BoldToken)
    assert bold.value == "[公式](https://example.jp)を確認"
    assert bold.children == [
        LinkToken(label="公式", href="https://example.jp"),
        TextToken(value="を確認"),
    ]


def test_link_trimmed():
    assert tokenize_inline("[ 公式 ]( https://example.jp )") == [
        LinkToken(label="公式", href="https://example.jp"),
    ]


def test_malformed_link_keeps_bracket():
    """A '[' that does not open a link is literal text."""
    assert tokenize_inline("[注] 参照") == [TextToken(value="[注] 参照")]


def test_literal_asterisks_stripped():
    """Stray '*' and '＊' never reach the output."""
    assert tokenize_inline("a*b＊c") == [TextToken(value="abc")]


def test_adjacent_text_merged():
    """Literal fallbacks merge into neighbouring text."""
    assert tokenize_inline("x [y {{z") == [TextToken(value="x [y {{z")]


def test_markers_taken_in_position_order():
    """The earliest marker is always handled first."""
    tokens = tokenize_inline("{{A|a}}[L](https://l.example)**B**")
    assert [t.type for t in tokens] == ["tooltip", "link", "bold"]


def test_internal_link_flag():
    assert LinkToken(label="x", href="/guide/x").is_internal
    assert not LinkToken(label="x", href="https://example.com").is_internal


@pytest.mark.parametrize("span,expected", [
    ("見る: 在庫一覧 と **注意点**。",                              "見る: 在庫一覧 と 注意点。"),
    ("*a**b**c* 1)x ＊y＊",                                        "abc 1)x y"),
    ("**unterminated [link(x) {{bad",                              "unterminated [link(x) {{bad"),
    ("[ok](https://example.com)と**太字[内](https://in.example)**", "okと太字内"),
    ("{{用語|説明}}です",                                           "用語です"),
])
def test_visible_text_reconstructs_input(span, expected):
    """Visible text keeps every character except asterisks and link/tooltip syntax."""
    assert plain_text(tokenize_inline(span)) == expected


def test_non_string_fails_fast():
    with pytest.raises(TypeError):
        tokenize_inline(["not", "a", "string"])
