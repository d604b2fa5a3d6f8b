from pathlib import Path
from typing import Any

from pytest import fixture

from mdeck.configuring import settings as settings_module


@fixture(autouse=True)
def user_config_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    config_dir = tmp_path / "user-config"
    monkeypatch.setattr(settings_module, "user_config_dir", config_dir)
    return config_dir


@fixture
def deck_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "deck"
    directory.mkdir()
    (directory / "talk.md").write_text(
        "# A\n\n---\n\n# B\n\n```python\ndef f():\n    return 1\n```\n\n---\n\n# C\n",
        encoding="utf8",
    )
    return directory
