from __future__ import annotations

import shlex
import shutil
import subprocess
from typing import Callable, Sequence

import markdown

from ..errors import ConfigError, ConversionError, PandocNotFound
from ..models import DEFAULT_MARKDOWN_EXTENSIONS, Configuration

Renderer = Callable[[str], str]


def render_markdown(text: str, extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS) -> str:
    """Render Markdown text to an HTML fragment with Python-Markdown."""
    return markdown.markdown(text, extensions=list(extensions), output_format="html")


def _ensure_pandoc():
    if not shutil.which("pandoc"):
        raise PandocNotFound("pandoc not found on PATH. Install pandoc and retry.")


def render_pandoc(text: str, pandoc_args: str = "") -> str:
    """Render GitHub-flavoured Markdown to HTML by piping it through pandoc."""
    _ensure_pandoc()
    args = ["pandoc", "-f", "gfm", "-t", "html"]
    if pandoc_args:
        args.extend(shlex.split(pandoc_args))
    try:
        proc = subprocess.run(args, input=text, capture_output=True, text=True,
                              encoding="utf-8", check=True)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise ConversionError(f"pandoc failed: {detail}") from e
    return proc.stdout


def _markdown_renderer(extensions: Sequence[str]) -> Renderer:
    try:
        md = markdown.Markdown(extensions=list(extensions), output_format="html")
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        raise ConfigError(f"bad markdown_extensions: {e}") from e

    def render(text: str) -> str:
        return md.reset().convert(text)
    return render


def get_renderer(config: Configuration) -> Renderer:
    """Build the text -> HTML callable for the configured engine, failing early on bad settings."""
    if config.engine == "markdown":
        return _markdown_renderer(config.markdown_extensions)
    if config.engine == "pandoc":
        _ensure_pandoc()
        pandoc_args = config.pandoc_args
        return lambda text: render_pandoc(text, pandoc_args)
    raise ConversionError(f"unknown engine: {config.engine!r}")
