"""Cyclopts CLI entrypoint for the pandoc verse filter.

The ``verse-filter`` console script speaks pandoc's JSON filter protocol: it
reads a JSON AST on stdin, renders every ``.verse`` div for the output format
pandoc passes as the first argument, and writes the transformed AST to stdout.
Typical usage is ``pandoc poems.md --filter verse-filter -o poems.pdf``.

Examples
--------
Filter a JSON AST produced by ``pandoc -t json`` for HTML output:

>>> from verse_filter.cli import app
>>> app(["html", "--input", "poems.json", "--output", "out.json"])  # doctest: +SKIP

Force the print renderer with default attributes from a config file:

>>> app(["docx", "--target", "print", "--config", "verse.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import FilterConfig, load_filter_config
from .config.loader import _parse_log_level
from .dispatcher import VerseFilter
from .document import decode_document, encode_document
from .log_config import configure_logging
from .targets import OutputTarget, target_for_format

logger = logging.getLogger(__name__)

app = App(
    name="verse-filter",
    help="Render .verse divs in a pandoc JSON AST for the target format.",
    config=cyclopts.config.Env("VERSE_FILTER_", command=False),  # type: ignore[unknown-argument]
)


def filter_json(
    data: bytes | str,
    output_format: str | None,
    *,
    config: FilterConfig | None = None,
    target: OutputTarget | None = None,
) -> bytes:
    """Transform a pandoc JSON document and return the encoded result.

    Parameters
    ----------
    data : bytes or str
        Pandoc JSON AST.
    output_format : str or None
        Pandoc writer name (``"html5"``, ``"latex"``, ...).
    config : FilterConfig, optional
        Default attributes and an optional forced target.
    target : OutputTarget, optional
        Explicit target; wins over ``config.target`` and ``output_format``.

    Returns
    -------
    bytes
        Encoded JSON AST with verse divs replaced.

    Raises
    ------
    DocumentDecodeError
        If ``data`` is not a pandoc JSON document.
    """
    settings = config or FilterConfig()
    resolved = target or settings.target or target_for_format(output_format)
    logger.debug("Output format %r resolved to target %s", output_format, resolved.value)
    document = decode_document(data)
    transformed = VerseFilter(resolved, settings.defaults).apply(document)
    return encode_document(transformed)


@app.default
def run(
    output_format: typ.Annotated[
        str | None,
        Parameter(help="Pandoc output format (passed by pandoc as the first argument)"),
    ] = None,
    *,
    input_path: typ.Annotated[
        Path | None,
        Parameter(name="--input", help="Read the JSON AST from a file instead of stdin"),
    ] = None,
    output_path: typ.Annotated[
        Path | None,
        Parameter(name="--output", help="Write the JSON AST to a file instead of stdout"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a verse filter YAML config", env_var="VERSE_FILTER_CONFIG"),
    ] = None,
    target: typ.Annotated[
        OutputTarget | None,
        Parameter(help="Force a rendering target (screen, print, other)"),
    ] = None,
    log_level: typ.Annotated[
        str | None,
        Parameter(help="Logging level for diagnostics on stderr"),
    ] = None,
) -> None:
    """Filter one pandoc JSON document.

    Parameters
    ----------
    output_format : str or None, optional
        Pandoc writer name; unknown or missing formats use the fallback
        renderer unless ``target`` or the config forces one.
    input_path : Path or None, optional
        Source JSON file; defaults to stdin.
    output_path : Path or None, optional
        Destination JSON file; defaults to stdout.
    config : Path or None, optional
        YAML configuration file (overridable via ``VERSE_FILTER_CONFIG``).
    target : OutputTarget or None, optional
        Rendering target overriding both config and format detection.
    log_level : str or None, optional
        Overrides the configured log level.

    Returns
    -------
    None
        Writes the transformed document as a side effect.

    Raises
    ------
    FilterConfigError
        If the config file or ``log_level`` holds an invalid value.
    DocumentDecodeError
        If the input is not a pandoc JSON document.
    """
    settings = load_filter_config(config) if config else FilterConfig()
    configure_logging(_parse_log_level(log_level) if log_level else settings.log_level)

    if input_path:
        data = input_path.read_bytes()
    else:
        data = sys.stdin.buffer.read()

    result = filter_json(data, output_format, config=settings, target=target)

    if output_path:
        output_path.write_bytes(result)
    else:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()


def main() -> None:
    """Invoke the Cyclopts application behind the ``verse-filter`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
