"""Shared fixtures for the vuescaffold test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vuescaffold.core.config import FeatureFlags
from vuescaffold.core.context import RenderContext


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create *files* (relative path -> content) below *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def tree_files(root: Path) -> set[str]:
    """Relative POSIX paths of every file below *root*."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    d = tmp_path / "dest"
    d.mkdir()
    return d


@pytest.fixture
def ctx(dest: Path) -> RenderContext:
    return RenderContext(root=dest, flags=FeatureFlags())


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A miniature fragment tree exercising every merge rule."""
    root = tmp_path / "templates"
    write_tree(
        root / "base",
        {
            "package.json": json.dumps(
                {
                    "scripts": {"dev": "vite"},
                    "dependencies": {"vue": "^3.0.0"},
                }
            ),
            "_gitignore": "node_modules\ndist\n",
            "index.html": '<script src="/src/main.js"></script>\n',
            "jsconfig.json": "{}\n",
            "greeting.txt.j2": "Hello {{ who }}!\n",
            "greeting.txt.data.py": "def get_data(old_data):\n    return {'who': 'base'}\n",
            "src/main.js": "console.log('base')\n",
        },
    )
    write_tree(
        root / "config/router",
        {
            "package.json": json.dumps({"dependencies": {"vue-router": "^4.0.0"}}),
            "_gitignore": "dist\ncoverage\n",
            "src/router/index.js": "export default {}\n",
        },
    )
    write_tree(
        root / "config/pinia",
        {
            "package.json": json.dumps({"dependencies": {"pinia": "^2.0.0", "vue": "^3.5.0"}}),
            "greeting.txt.data.py": (
                "async def get_data(old_data):\n"
                "    return {'who': old_data['who'] + ' and pinia'}\n"
            ),
        },
    )
    write_tree(root / "code/default", {"src/App.vue": "<template>default</template>\n"})
    write_tree(root / "code/router", {"src/App.vue": "<template>router</template>\n"})
    return root
