import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    # Never pick up the real ~/.config/inky/config.toml
    missing = tmp_path_factory.mktemp("home") / "config.toml"
    monkeypatch.setattr("inky.utils.config.DEFAULT_CONFIG_PATH", missing)
    return missing


@pytest.fixture
def write(tmp_path):
    def _write(rel: str, text: str = "# Title\n"):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p
    return _write
