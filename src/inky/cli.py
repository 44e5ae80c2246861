# src/inky/cli.py
from __future__ import annotations

from pathlib import Path

import click

from .errors import ConfigError, UsageError
from .models import DEFAULT_MARKDOWN_EXTENSIONS, ENGINES, Configuration
from .pipeline import iter_conversions
from .utils.config import load_config, resolve_option
from .utils.log import info, success, warn


class InkyCommand(click.Command):
    """Report click's own parse failures like every other error: exit 1, stdout."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise UsageError(e.format_message(), ctx=ctx) from e


def _as_bool(key: str, value, config_path) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}", path=config_path)
    return value


def build_configuration(ctx: click.Context, cfg: dict, *, paths, destination, directory,
                        overwrite, recursive, verbose, quiet, engine, pandoc_args,
                        config_path=None) -> Configuration:
    """Merge command-line values over the config profile into a Configuration."""
    destination = resolve_option(ctx, "destination", destination, cfg)
    engine = resolve_option(ctx, "engine", engine, cfg)
    if engine not in ENGINES:
        raise ConfigError(f"engine must be one of {', '.join(ENGINES)}, got {engine!r}",
                          path=config_path)

    extensions = cfg.get("markdown_extensions", list(DEFAULT_MARKDOWN_EXTENSIONS))
    if not isinstance(extensions, list) or not all(isinstance(x, str) for x in extensions):
        raise ConfigError("markdown_extensions must be a list of strings", path=config_path)

    flags = {
        key: _as_bool(key, resolve_option(ctx, key, value, cfg), config_path)
        for key, value in (
            ("overwrite", overwrite),
            ("recursive", recursive),
            ("verbose", verbose),
            ("quiet", quiet),
        )
    }

    return Configuration(
        paths=tuple(Path(p) for p in paths),
        destination=Path(str(destination)) if destination else None,
        directory_mode=directory,
        engine=engine,
        markdown_extensions=tuple(extensions),
        pandoc_args=str(resolve_option(ctx, "pandoc_args", pandoc_args, cfg) or ""),
        **flags,
    )


@click.command(
    name="inky",
    cls=InkyCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--destination", "-d", type=click.Path(path_type=str),
              help="Write output to DIR, mirroring the source hierarchy.")
@click.option("--directory", "-D", is_flag=True, default=False,
              help="Treat argument(s) as directories, converting all Markdown files within.")
@click.option("--overwrite/--no-overwrite", "-o", default=False,
              help="Overwrite existing HTML files.")
@click.option("--recursive/--no-recursive", "-r", default=False,
              help="With --directory, descend into subdirectories too.")
@click.option("--verbose/--no-verbose", "-v", default=False,
              help="Print each file as it is written.")
@click.option("--quiet/--no-quiet", "-q", default=False,
              help="Suppress non-error output.")
@click.option("--engine", type=click.Choice(ENGINES), default="markdown", show_default=True,
              help="Markdown renderer to use.")
@click.option("--pandoc-args", default="", help="Extra args passed to pandoc (--engine pandoc).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=str),
    help="Path to config TOML (default: ~/.config/inky/config.toml)",
)
@click.option("--profile", default="default", show_default=True,
              help="Config profile name in the TOML file")
@click.version_option(package_name="inky", prog_name="inky")
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@click.pass_context
def cli(ctx: click.Context, destination: str | None, directory: bool, overwrite: bool,
        recursive: bool, verbose: bool, quiet: bool, engine: str, pandoc_args: str,
        config_path: str | None, profile: str, paths: tuple[str, ...]):
    """
    Convert one or more Markdown files to HTML.
    """
    if not paths:
        raise UsageError("at least one path is required", ctx=ctx)

    cfg = load_config(config_path, profile)
    config = build_configuration(
        ctx, cfg,
        paths=paths, destination=destination, directory=directory,
        overwrite=overwrite, recursive=recursive, verbose=verbose, quiet=quiet,
        engine=engine, pandoc_args=pandoc_args, config_path=config_path,
    )

    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "verbose": config.verbose, "quiet": config.quiet})

    count = 0
    for result in iter_conversions(config):
        count += 1
        if config.verbose:
            info(ctx, f"Wrote {result.source} → {result.output} ({result.size_bytes} bytes)")

    if count == 0:
        warn(ctx, "No Markdown files found")
        return
    success(ctx, f"Converted {count} file(s)")


if __name__ == "__main__":
    cli()
