import subprocess

import pytest

from inky.converters.markdown import get_renderer, render_markdown, render_pandoc
from inky.errors import ConfigError, ConversionError, PandocNotFound
from inky.models import Configuration


def test_render_heading():
    assert render_markdown("# Title\n").strip() == "<h1>Title</h1>"


def test_render_fenced_code_enabled_by_default():
    html = render_markdown("```\nx = 1\n```\n")
    assert "<pre><code>x = 1" in html


def test_pandoc_missing(monkeypatch):
    # Force pandoc missing by clearing PATH
    monkeypatch.setenv('PATH', '')
    with pytest.raises(PandocNotFound):
        render_pandoc("# a")


def test_pandoc_failure(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda name: "/usr/bin/pandoc")

    def boom(args, **kw):
        raise subprocess.CalledProcessError(64, args, stderr="bad input")

    monkeypatch.setattr("subprocess.run", boom)
    with pytest.raises(ConversionError, match="bad input"):
        render_pandoc("# a")


def test_pandoc_passes_extra_args(monkeypatch):
    seen = {}
    monkeypatch.setattr("shutil.which", lambda name: "/usr/bin/pandoc")

    def fake_run(args, **kw):
        seen["args"] = args
        seen["input"] = kw["input"]
        return subprocess.CompletedProcess(args, 0, stdout="<h1>a</h1>\n", stderr="")

    monkeypatch.setattr("subprocess.run", fake_run)
    assert render_pandoc("# a", "--wrap=none") == "<h1>a</h1>\n"
    assert seen["args"][-1] == "--wrap=none"
    assert seen["input"] == "# a"


def test_get_renderer_unknown_engine():
    with pytest.raises(ConversionError):
        get_renderer(Configuration(paths=(), engine="textile"))


def test_unknown_extension_rejected_up_front():
    with pytest.raises(ConfigError, match="nosuchext"):
        get_renderer(Configuration(paths=(), markdown_extensions=("nosuchext",)))


def test_renderer_is_reusable():
    render = get_renderer(Configuration(paths=()))
    assert render("# One\n").strip() == "<h1>One</h1>"
    assert render("# Two\n").strip() == "<h1>Two</h1>"
