from __future__ import annotations

import io

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A throwaway $HOME with an empty .bashrc and fish config."""
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".bashrc").write_text("# existing\n")
    fish_dir = tmp_path / ".config" / "fish"
    fish_dir.mkdir(parents=True)
    (fish_dir / "config.fish").write_text("")
    return tmp_path


@pytest.fixture
def stdin(monkeypatch):
    """Feed lines to input() by replacing sys.stdin."""

    def feed(*lines: str) -> None:
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed
