from pathlib import Path
from typing import Callable

import pytest

VALID_TOML = """\
name = "coiner"
request_timeout = "30s"
slow_threshold = "200ms"
max_threads = 8

[node]
protocol = "https"
host = "node.example.com"
user = "alice"
password = "secret"
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str = VALID_TOML, name: str = "coiner.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_toml() -> str:
    return VALID_TOML
