from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_long_description_is_the_readme():
    project = tomllib.loads((ROOT / 'pyproject.toml').read_text(encoding='utf-8'))['project']

    assert project['readme'] == 'README.md'
    assert (ROOT / project['readme']).exists()
