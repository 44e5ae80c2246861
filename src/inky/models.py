from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

MARKDOWN_EXTENSIONS = frozenset(
    {"markdown", "mdown", "mkdn", "md", "mkd", "mdwn", "mdtxt", "mdtext"}
)

DEFAULT_MARKDOWN_EXTENSIONS = ("fenced_code", "tables")

ENGINES = ("markdown", "pandoc")


def is_markdown(path: str | Path) -> bool:
    """True when the final extension is in the allow-list (case-insensitive)."""
    suffix = Path(path).suffix
    return bool(suffix) and suffix[1:].lower() in MARKDOWN_EXTENSIONS


@dataclass(frozen=True, slots=True)
class Configuration:
    paths: tuple[Path, ...]
    destination: Path | None = None
    directory_mode: bool = False
    overwrite: bool = False
    recursive: bool = False
    verbose: bool = False
    quiet: bool = False
    engine: str = "markdown"
    markdown_extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    pandoc_args: str = ""


@dataclass(frozen=True, slots=True)
class MarkdownFile:
    """A discovered input: ``relative`` is expressed against ``base``."""

    base: Path
    relative: Path

    @property
    def source(self) -> Path:
        return self.base / self.relative


@dataclass(frozen=True, slots=True)
class ConversionResult:
    source: Path
    output: Path
    size_bytes: int = field(default=0, compare=False)
