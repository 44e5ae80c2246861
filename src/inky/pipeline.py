from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .converters.markdown import Renderer, get_renderer
from .discovery import discover
from .errors import AlreadyExists, ModeMismatch, PathNotFound, ReadError, WriteError
from .models import Configuration, ConversionResult, MarkdownFile
from .output import output_path


def check_destination(destination: Path | None) -> None:
    if destination is None:
        return
    if not destination.exists():
        raise PathNotFound("destination directory does not exist", path=destination)
    if not destination.is_dir():
        raise ModeMismatch("destination is not a directory", path=destination)


def convert_file(md_file: MarkdownFile, config: Configuration,
                 render: Renderer | None = None) -> ConversionResult:
    """
    Convert one Markdown file and write the HTML.

    The overwrite check happens before the source is read, so an existing
    output is never touched when ``config.overwrite`` is off.
    """
    render = render or get_renderer(config)
    out = output_path(md_file, config.destination)
    if not config.overwrite and out.exists():
        raise AlreadyExists("output exists (use --overwrite to replace it)", path=out)

    source = md_file.source
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"cannot read: {getattr(e, 'strerror', None) or e}", path=source) from e

    data = render(text).encode("utf-8")
    try:
        out.write_bytes(data)
    except OSError as e:
        raise WriteError(f"cannot write: {e.strerror or e}", path=out) from e
    return ConversionResult(source=source, output=out, size_bytes=len(data))


def iter_conversions(config: Configuration,
                     render: Renderer | None = None) -> Iterator[ConversionResult]:
    """Validate, discover, then convert each file in turn. The first error stops the run."""
    check_destination(config.destination)
    render = render or get_renderer(config)
    files = discover(config.paths, config.directory_mode, config.recursive)
    for md_file in files:
        yield convert_file(md_file, config, render)


def convert_all(config: Configuration, render: Renderer | None = None) -> list[ConversionResult]:
    return list(iter_conversions(config, render))
