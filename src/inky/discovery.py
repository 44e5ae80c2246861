from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .errors import EnumerationError, ModeMismatch, NotMarkdown, PathNotFound
from .models import MARKDOWN_EXTENSIONS, MarkdownFile, is_markdown


def iter_markdown_files(root: Path, recursive: bool = True) -> Iterator[MarkdownFile]:
    """
    Lazily yield every Markdown file under ``root``.

    Without ``recursive`` only the top level of ``root`` is scanned. Entries are
    sorted per directory so repeated runs visit files in the same order.
    """
    root = Path(root)

    def _fail(exc: OSError):
        raise EnumerationError(exc.strerror or str(exc), path=exc.filename or root) from exc

    for dirpath, dirnames, filenames in os.walk(root, onerror=_fail):
        if recursive:
            dirnames.sort()
        else:
            dirnames[:] = []
        for name in sorted(filenames):
            if not is_markdown(name):
                continue
            full = Path(dirpath) / name
            yield MarkdownFile(base=root, relative=full.relative_to(root))


def _check_path(path: Path, directory_mode: bool) -> None:
    if not path.exists():
        raise PathNotFound("no such file or directory", path=path)
    if directory_mode and not path.is_dir():
        raise ModeMismatch("not a directory (--directory expects directories)", path=path)
    if not directory_mode and path.is_dir():
        raise ModeMismatch("is a directory (pass --directory to convert directories)", path=path)


def discover(paths: Iterable[str | Path], directory_mode: bool = False,
             recursive: bool = False) -> list[MarkdownFile]:
    """Validate every input path, then expand them into a flat list of MarkdownFiles."""
    checked = [Path(p) for p in paths]
    for path in checked:
        _check_path(path, directory_mode)

    found: list[MarkdownFile] = []
    for path in checked:
        if directory_mode:
            found.extend(iter_markdown_files(path, recursive=recursive))
            continue
        if not is_markdown(path):
            expected = ", ".join(f".{ext}" for ext in sorted(MARKDOWN_EXTENSIONS))
            raise NotMarkdown(f"not a Markdown file (expected one of {expected})", path=path)
        found.append(MarkdownFile(base=path.parent, relative=Path(path.name)))
    return found
