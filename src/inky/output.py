from __future__ import annotations

from pathlib import Path

from .errors import WriteError
from .models import MarkdownFile


def html_name(relative: Path) -> Path:
    """Swap only the final extension for ``.html`` (``a.b.md`` → ``a.b.html``)."""
    return relative.with_suffix(".html")


def output_path(md_file: MarkdownFile, destination: str | Path | None = None) -> Path:
    """
    Where the HTML for ``md_file`` goes.

    Beside the source when ``destination`` is None; otherwise under
    ``destination``, mirroring the relative path. Intermediate directories under
    the destination are created.
    """
    relative = html_name(md_file.relative)
    if destination is None:
        return md_file.base / relative

    out = Path(destination) / relative
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"cannot create directory: {e.strerror or e}", path=out.parent) from e
    return out
