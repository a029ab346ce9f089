"""Unit tests for the fragment renderer."""

from __future__ import annotations

import json
from pathlib import Path

from tests.conftest import read_json, tree_files, write_tree
from vuescaffold.core.context import RenderContext
from vuescaffold.core.render import render_template


class TestRenderTemplate:
    def test_copies_fresh_files(self, tmp_path: Path, dest: Path, ctx: RenderContext) -> None:
        src = write_tree(tmp_path / "frag", {"index.html": "<html/>", "src/a/b.js": "b"})
        render_template(src, dest, ctx)

        assert (dest / "index.html").read_text() == "<html/>"
        assert (dest / "src/a/b.js").read_text() == "b"

    def test_later_fragment_overwrites_plain_files(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        first = write_tree(tmp_path / "first", {"src/App.vue": "first"})
        second = write_tree(tmp_path / "second", {"src/App.vue": "second"})
        render_template(first, dest, ctx)
        render_template(second, dest, ctx)

        assert (dest / "src/App.vue").read_text() == "second"

    def test_existing_directories_are_reused(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        (dest / "src").mkdir()
        (dest / "src/keep.js").write_text("keep")
        src = write_tree(tmp_path / "frag", {"src/new.js": "new"})
        render_template(src, dest, ctx)

        assert tree_files(dest) == {"src/keep.js", "src/new.js"}

    def test_underscore_files_become_dotfiles(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        src = write_tree(tmp_path / "frag", {"_gitignore": "dist\n", "_prettierrc.json": "{}"})
        render_template(src, dest, ctx)

        assert (dest / ".gitignore").read_text() == "dist\n"
        assert (dest / ".prettierrc.json").read_text() == "{}"
        assert not (dest / "_gitignore").exists()

    def test_gitignore_lines_are_appended_once(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        first = write_tree(tmp_path / "first", {"_gitignore": "node_modules\ndist\n"})
        second = write_tree(tmp_path / "second", {"_gitignore": "dist\ntest-results/\n"})
        render_template(first, dest, ctx)
        render_template(second, dest, ctx)

        lines = (dest / ".gitignore").read_text().splitlines()
        assert lines.count("dist") == 1
        assert "node_modules" in lines
        assert "test-results/" in lines

    def test_package_json_is_merged(self, tmp_path: Path, dest: Path, ctx: RenderContext) -> None:
        (dest / "package.json").write_text(json.dumps({"name": "my-app", "version": "0.0.0"}))
        src = write_tree(
            tmp_path / "frag",
            {"package.json": json.dumps({"name": "other", "dependencies": {"vue": "^3"}})},
        )
        render_template(src, dest, ctx)

        package = read_json(dest / "package.json")
        assert package == {"name": "my-app", "version": "0.0.0", "dependencies": {"vue": "^3"}}
        assert (dest / "package.json").read_text().endswith("\n")

    def test_data_modules_are_deferred_not_copied(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        src = write_tree(
            tmp_path / "frag",
            {"vite.config.js.data.py": "def get_data(old_data):\n    return {}\n"},
        )
        render_template(src, dest, ctx)

        assert not (dest / "vite.config.js.data.py").exists()
        assert len(ctx.callbacks) == 1
        assert ctx.callbacks[0].dest == dest / "vite.config.js"
        assert ctx.callbacks[0].source == src / "vite.config.js.data.py"

    def test_skips_ds_store_and_node_modules(
        self, tmp_path: Path, dest: Path, ctx: RenderContext
    ) -> None:
        src = write_tree(
            tmp_path / "frag",
            {".DS_Store": "", "node_modules/pkg/index.js": "", "README.md": "hi"},
        )
        render_template(src, dest, ctx)

        assert tree_files(dest) == {"README.md"}
