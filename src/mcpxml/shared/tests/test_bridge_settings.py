import pytest
from pydantic import ValidationError

from mcpxml.shared.constants import MCP_TOOL_PREFIX, MCP_TOOL_PREFIX_ENV, MCP_XML_ENV
from mcpxml.shared.settings import BridgeSettings, is_mcp_xml_enabled, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MCP_XML_ENV, raising=False)
    monkeypatch.delenv(MCP_TOOL_PREFIX_ENV, raising=False)


def test_enabled_by_default() -> None:
    assert is_mcp_xml_enabled()


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_value_means_enabled(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(MCP_XML_ENV, value)
    assert is_mcp_xml_enabled()


@pytest.mark.parametrize("value", ["0", "false", "FALSE", "No", " off ", "Off"])
def test_disabling_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(MCP_XML_ENV, value)
    assert not is_mcp_xml_enabled()


@pytest.mark.parametrize("value", ["1", "true", "yes", "on", "disabled"])
def test_other_values_keep_it_enabled(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(MCP_XML_ENV, value)
    assert is_mcp_xml_enabled()


def test_load_settings_defaults() -> None:
    settings = load_settings()

    assert settings.enabled
    assert settings.tool_prefix == MCP_TOOL_PREFIX


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MCP_XML_ENV, "off")
    monkeypatch.setenv(MCP_TOOL_PREFIX_ENV, "ext__")

    settings = load_settings()

    assert not settings.enabled
    assert settings.tool_prefix == "ext__"


def test_invalid_prefix_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MCP_TOOL_PREFIX_ENV, "")

    assert load_settings().tool_prefix == MCP_TOOL_PREFIX


def test_settings_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        BridgeSettings(result_tag="other")  # pyright: ignore[reportCallIssue]
