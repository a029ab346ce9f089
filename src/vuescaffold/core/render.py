"""Materializes one template fragment into the destination tree."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import shutil

from vuescaffold.core.context import DeferredCallback, RenderContext
from vuescaffold.lib.merge import merge_ignore_lines, merge_package_json

logger = logging.getLogger(__name__)

DATA_SUFFIX = ".data.py"

_SKIPPED_FILES = frozenset({".DS_Store"})
_SKIPPED_DIRS = frozenset({"node_modules", "__pycache__"})


def _dest_name(name: str) -> str:
    """``_gitignore`` -> ``.gitignore``; other names are kept."""
    return "." + name[1:] if name.startswith("_") else name


def _is_ignore_file(name: str) -> bool:
    return name.startswith(".") and name.endswith("ignore")


def _write_package_json(src: Path, dest: Path) -> None:
    fragment = json.loads(src.read_text(encoding="utf-8"))
    if dest.exists():
        existing = json.loads(dest.read_text(encoding="utf-8"))
        package = merge_package_json(existing, fragment)
    else:
        package = merge_package_json({}, fragment)
    dest.write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")


def _write_ignore_file(src: Path, dest: Path) -> None:
    content = src.read_text(encoding="utf-8")
    if dest.exists():
        content = merge_ignore_lines(dest.read_text(encoding="utf-8"), content)
    dest.write_text(content, encoding="utf-8")


def render_template(src: Path, dest: Path, ctx: RenderContext) -> None:
    """Copy the fragment tree at *src* onto *dest*, merging where the file type asks for it.

    ``package.json`` files are JSON-merged, ignore files get their missing lines
    appended, ``*.data.py`` modules are deferred onto ``ctx.callbacks`` and every other
    file overwrites whatever an earlier fragment wrote. Filesystem errors propagate.
    """
    if src.is_dir():
        if src.name in _SKIPPED_DIRS:
            return
        dest.mkdir(parents=True, exist_ok=True)
        for child in sorted(src.iterdir()):
            render_template(child, dest / child.name, ctx)
        return

    filename = src.name
    if filename in _SKIPPED_FILES:
        return

    if filename.endswith(DATA_SUFFIX):
        target = dest.with_name(_dest_name(filename[: -len(DATA_SUFFIX)]))
        ctx.defer(DeferredCallback(source=src, dest=target))
        return

    dest = dest.with_name(_dest_name(filename))

    if filename == "package.json":
        _write_package_json(src, dest)
        logger.debug("Merged %s", dest)
    elif _is_ignore_file(dest.name):
        _write_ignore_file(src, dest)
        logger.debug("Appended %s", dest)
    else:
        shutil.copyfile(src, dest)
        logger.debug("Copied %s", dest)
