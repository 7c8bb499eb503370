# pyright: reportAny=false

import pytest

from mcpxml.parsing.decode import try_parse_mcp_tool_call_xml
from mcpxml.parsing.stream import XmlStreamParser
from mcpxml.shared.types.segments import TextSegment


def test_decodes_json_body() -> None:
    call = try_parse_mcp_tool_call_xml(
        '<mcp__git__log>{"limit": 5, "paths": ["src"]}</mcp__git__log>',
        "mcp__git__log",
    )

    assert call is not None
    assert call.name == "mcp__git__log"
    assert call.input == {"limit": 5, "paths": ["src"]}
    assert call.id.startswith("mcp__git__log-")


def test_surrounding_whitespace_is_allowed() -> None:
    call = try_parse_mcp_tool_call_xml('  \n<t>\n {"a": 1} \n</t >\n', "t")

    assert call is not None
    assert call.input == {"a": 1}


def test_attributes_on_opening_tag_are_ignored() -> None:
    call = try_parse_mcp_tool_call_xml('<t\tid="7">{"a": 1}</t>', "t")

    assert call is not None
    assert call.input == {"a": 1}


@pytest.mark.parametrize("body", ["", "   ", "\n\t\r\n"])
def test_blank_body_is_empty_input(body: str) -> None:
    call = try_parse_mcp_tool_call_xml(f"<t>{body}</t>", "t")

    assert call is not None
    assert call.input == {}
    assert call.id


@pytest.mark.parametrize(
    "xml_text",
    [
        "<t>{not json}</t>",
        "<t>[1, 2]</t>",
        '<t>"just a string"</t>',
        "<t>null</t>",
        "<t>{}</t> trailing text",
        "leading <t>{}</t>",
        "<tt>{}</tt>",
        "<t>{}</tt>",
        "<t/>",
        "<t </t>",
        "<t\u00a0x>{}</t>",
        "<t>{}</t\u3000>",
        "\u00a0<t>{}</t>",
    ],
)
def test_rejects_non_matching_spans(xml_text: str) -> None:
    assert try_parse_mcp_tool_call_xml(xml_text, "t") is None


def test_rejects_empty_arguments() -> None:
    assert try_parse_mcp_tool_call_xml("", "t") is None
    assert try_parse_mcp_tool_call_xml("<t>{}</t>", "") is None


def test_tool_name_is_matched_literally() -> None:
    assert try_parse_mcp_tool_call_xml("<a.b>{}</a.b>", "a.b") is not None
    assert try_parse_mcp_tool_call_xml("<axb>{}</axb>", "a.b") is None


def test_each_decode_mints_a_new_id() -> None:
    first = try_parse_mcp_tool_call_xml("<t>{}</t>", "t")
    second = try_parse_mcp_tool_call_xml("<t>{}</t>", "t")

    assert first is not None and second is not None
    assert first.id != second.id


@pytest.mark.parametrize("xml_text", ["<t\u00a0x>{}</t>", "<t>{}</t\u3000>"])
def test_unicode_whitespace_is_not_a_tag_boundary(xml_text: str) -> None:
    parser = XmlStreamParser(["t"])

    assert try_parse_mcp_tool_call_xml(xml_text, "t") is None
    assert parser.push(xml_text) + parser.flush() == [TextSegment(text=xml_text)]


def test_ascii_whitespace_inside_tags() -> None:
    call = try_parse_mcp_tool_call_xml('<t\tkind="x">{}</t\r\n>', "t")

    assert call is not None
    assert call.input == {}
