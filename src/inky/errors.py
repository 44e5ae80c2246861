from __future__ import annotations

from pathlib import Path

import click

from .utils.log import error


class InkyError(click.ClickException):
    """Base exception for every failure that stops a conversion run."""

    exit_code = 1

    def __init__(self, message: str, *, path: str | Path | None = None,
                 show_usage: bool = False, ctx: click.Context | None = None):
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.show_usage = show_usage
        self.ctx = ctx

    def show(self, file=None) -> None:
        ctx = self.ctx or click.get_current_context(silent=True)
        if self.show_usage and ctx is not None:
            click.echo(ctx.get_usage(), file=file)
            click.echo(file=file)
        error(ctx, f"Error: {self.format_message()}")


class UsageError(InkyError):
    """Missing arguments or unparseable flags."""

    def __init__(self, message: str, ctx: click.Context | None = None):
        super().__init__(message, show_usage=True, ctx=ctx)


class PathNotFound(InkyError):
    """An input or destination path does not exist."""


class ModeMismatch(InkyError):
    """A file was given in directory mode, or a directory in file mode."""


class NotMarkdown(InkyError):
    """A file given in file mode lacks a Markdown extension."""


class AlreadyExists(InkyError):
    """The output file exists and overwriting is disabled."""


class ReadError(InkyError):
    """The Markdown source could not be read."""


class WriteError(InkyError):
    """The HTML output could not be written."""


class EnumerationError(InkyError):
    """Walking a directory failed."""


class ConfigError(InkyError):
    """The TOML config file could not be parsed."""


class ConversionError(InkyError):
    """The rendering engine failed."""


class PandocNotFound(ConversionError):
    """pandoc was selected but is not on PATH."""
