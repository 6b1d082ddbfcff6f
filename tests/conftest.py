import json
import tempfile
from pathlib import Path

import pytest

USERS = [
    {"id": "1", "email": "a@x.com", "age": 30},
    {"id": "2", "email": "b@x.com", "age": 41},
    {"id": "3", "email": "c@x.com", "age": 25},
]


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store_file(temp_dir):
    path = temp_dir / "users.json"
    path.write_text(json.dumps(USERS, separators=(",", ":")))
    return path


@pytest.fixture
def empty_file(temp_dir):
    path = temp_dir / "empty.json"
    path.touch()
    return path


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))

    return {"config": config_dir}


def read_items(path: Path) -> list[dict]:
    return json.loads(path.read_text())
