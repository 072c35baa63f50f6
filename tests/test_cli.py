"""Tests for the ``verse-filter`` command and its in-memory helper.

The command function is called directly with file paths and a patched stdin
so no subprocess or pandoc binary is needed.
"""

from __future__ import annotations

import io
import typing as typ
from types import SimpleNamespace

import msgspec.json as msgspec_json
import pytest

from verse_filter import cli
from verse_filter.config import FilterConfig, FilterConfigError
from verse_filter.document import DocumentDecodeError
from verse_filter.targets import OutputTarget

if typ.TYPE_CHECKING:
    from pathlib import Path


def _document() -> dict[str, typ.Any]:
    return {
        "pandoc-api-version": [1, 23, 1],
        "meta": {},
        "blocks": [
            {
                "t": "Div",
                "c": [
                    ["", ["verse"], [["title", "Ode"]]],
                    [
                        {
                            "t": "Para",
                            "c": [
                                {"t": "Str", "c": "Line"},
                                {"t": "Space"},
                                {"t": "Str", "c": "A"},
                            ],
                        }
                    ],
                ],
            },
            {"t": "Para", "c": [{"t": "Str", "c": "prose"}]},
        ],
    }


def _block_formats_of(blocks: list[dict[str, typ.Any]]) -> list[str]:
    return [block["c"][0] if block["t"] == "RawBlock" else block["t"] for block in blocks]


def _block_formats(payload: bytes) -> list[str]:
    return _block_formats_of(msgspec_json.decode(payload)["blocks"])


def test_filter_json_uses_format() -> None:
    """The pandoc format argument selects the renderer."""
    data = msgspec_json.encode(_document())
    html = _block_formats(cli.filter_json(data, "html5"))
    latex = _block_formats(cli.filter_json(data, "latex"))
    other = _block_formats(cli.filter_json(data, "docx"))

    assert html == ["html"] * 6 + ["Para"], f"unexpected html blocks {html!r}"
    assert latex == ["latex", "Para"], f"unexpected latex blocks {latex!r}"
    assert other == ["Para", "BlockQuote", "Para"], f"unexpected fallback blocks {other!r}"


def test_explicit_target_beats_config_and_format() -> None:
    """Target precedence is argument, then config, then format."""
    data = msgspec_json.encode(_document())
    config = FilterConfig(target=OutputTarget.OTHER)

    from_config = _block_formats(cli.filter_json(data, "html", config=config))
    from_argument = _block_formats(
        cli.filter_json(data, "html", config=config, target=OutputTarget.PRINT)
    )
    assert from_config[0] == "Para", "config target should override the format"
    assert from_argument[0] == "latex", "explicit target should override the config"


def test_run_with_files_and_config(tmp_path: Path) -> None:
    """The command reads and writes files and applies config defaults."""
    source = tmp_path / "in.json"
    source.write_bytes(msgspec_json.encode(_document()))
    destination = tmp_path / "out.json"
    config_path = tmp_path / "verse.yaml"
    config_path.write_text("defaults:\n  linenumbers: 2\n", encoding="utf-8")

    cli.run("html", input_path=source, output_path=destination, config=config_path)

    blocks = msgspec_json.decode(destination.read_bytes())["blocks"]
    opening = blocks[0]["c"][1]
    assert "line-numbered" in opening, f"config defaults should apply: {opening!r}"


def test_run_streams_stdin_to_stdout(
    monkeypatch: pytest.MonkeyPatch, capsysbinary: pytest.CaptureFixture[bytes]
) -> None:
    """Without paths the command speaks the pandoc stdin/stdout protocol."""
    payload = msgspec_json.encode(_document())
    monkeypatch.setattr(cli.sys, "stdin", SimpleNamespace(buffer=io.BytesIO(payload)))

    cli.run("latex")

    out = capsysbinary.readouterr().out
    assert _block_formats(out) == ["latex", "Para"], "expected filtered JSON on stdout"


def test_run_rejects_invalid_json(tmp_path: Path) -> None:
    """Malformed input propagates as DocumentDecodeError."""
    source = tmp_path / "in.json"
    source.write_bytes(b"{}")
    with pytest.raises(DocumentDecodeError):
        cli.run("html", input_path=source, output_path=tmp_path / "out.json")


def test_run_rejects_unknown_log_level(tmp_path: Path) -> None:
    """A bad --log-level value is reported as a configuration error."""
    source = tmp_path / "in.json"
    source.write_bytes(msgspec_json.encode(_document()))
    destination = tmp_path / "out.json"

    with pytest.raises(FilterConfigError, match="Unknown log level"):
        cli.run("html", input_path=source, output_path=destination, log_level="loud")
    assert not destination.exists(), "nothing should be written after a config error"


def test_filter_json_renders_verse_in_definition_list() -> None:
    """Verse divs inside definition lists are rendered like top-level ones."""
    verse = _document()["blocks"][0]
    document = {
        "pandoc-api-version": [1, 23, 1],
        "meta": {},
        "blocks": [
            {
                "t": "DefinitionList",
                "c": [[[{"t": "Str", "c": "term"}], [[verse]]]],
            }
        ],
    }

    result = msgspec_json.decode(cli.filter_json(msgspec_json.encode(document), "html"))

    body = result["blocks"][0]["c"][0][1][0]
    assert _block_formats_of(body) == ["html"] * 6, f"unexpected definition body {body!r}"
