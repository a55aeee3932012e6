from __future__ import annotations

from pathlib import Path

import pytest

from fakes import RULES_TOML, FakePiston, add_runner


@pytest.fixture()
def fake_piston() -> FakePiston:
    return FakePiston(add_runner)


@pytest.fixture()
def piston_client(fake_piston: FakePiston):
    client = fake_piston.client()
    yield client
    client.close()


@pytest.fixture()
def exercise_dir(tmp_path: Path) -> Path:
    root = tmp_path / "exercises"
    root.mkdir()
    (root / "add").write_text("a, b = map(int, input().split())\nprint(a + b)\n", encoding="utf-8")
    (root / "rules.toml").write_text(RULES_TOML, encoding="utf-8")
    return root
