"""End-to-end scaffolding of one project directory."""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
from pathlib import Path

from vuescaffold.core.compose import TEMPLATE_ROOT, apply_fragments
from vuescaffold.core.config import ProjectOptions
from vuescaffold.core.context import RenderContext
from vuescaffold.core.postprocess import (
    cleanup_language,
    render_marked_templates,
    run_deferred_callbacks,
)
from vuescaffold.lib.traverse import post_order_traverse

logger = logging.getLogger(__name__)

ReadmeHook = Callable[[ProjectOptions], str]


def can_skip_emptying(directory: Path) -> bool:
    """Whether *directory* can be rendered into without asking to overwrite it.

    True when it does not exist, is empty, or only holds a ``.git`` directory.
    """
    if not directory.exists():
        return True
    entries = [p.name for p in directory.iterdir()]
    return not entries or entries == [".git"]


def empty_dir(directory: Path) -> None:
    """Delete everything below *directory* except ``.git``. The directory itself stays."""
    post_order_traverse(directory, lambda d: d.rmdir(), lambda f: f.unlink())


def scaffold_project(
    options: ProjectOptions,
    *,
    readme: ReadmeHook | None = None,
    template_root: Path = TEMPLATE_ROOT,
) -> RenderContext:
    """Materialize a new project at ``options.root``.

    Steps run strictly in order: prepare the root, write the seed ``package.json``,
    apply fragments, run deferred callbacks, render ``*.j2`` files, clean up sources
    of the unselected language and finally write ``README.md`` when *readme* is given.
    Any filesystem error aborts the run and leaves the partial tree in place.
    """
    root = options.root
    if root.exists() and options.overwrite:
        logger.info("Emptying %s", root)
        empty_dir(root)
    root.mkdir(parents=True, exist_ok=True)

    package = {"name": options.package_name, "version": "0.0.0"}
    (root / "package.json").write_text(json.dumps(package, indent=2) + "\n", encoding="utf-8")

    ctx = RenderContext(root=root, flags=options.flags)
    apply_fragments(ctx, template_root=template_root)
    run_deferred_callbacks(ctx)
    render_marked_templates(ctx)
    cleanup_language(ctx)

    if readme is not None:
        (root / "README.md").write_text(readme(options), encoding="utf-8")

    return ctx
