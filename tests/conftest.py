from pathlib import Path
from shutil import copy

from pytest import MonkeyPatch, fixture

import pitchz.settings


@fixture
def user_config_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    user_config_dir = tmp_path / "config"
    user_config_dir.mkdir()
    monkeypatch.setattr(pitchz.settings, "_user_config_dir", user_config_dir)
    return user_config_dir


@fixture
def working_dir(tmp_path: Path, user_config_dir: Path) -> Path:
    working_dir = tmp_path / "talks" / "iterators"
    working_dir.mkdir(parents=True)
    copy(Path(__file__).parent / "data" / "PITCHME.md", working_dir / "PITCHME.md")
    return working_dir
