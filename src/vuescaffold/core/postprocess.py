"""Passes that run over the destination tree once every fragment is materialized."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from vuescaffold.core.context import RenderContext
from vuescaffold.core.errors import TemplateRenderError
from vuescaffold.lib.traverse import pre_order_traverse

logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".j2"

# Loaded by Node directly; kept as JavaScript in TypeScript projects.
_KEEP_JS = frozenset({"eslint.config.js"})


def _noop(_: Path) -> None:
    pass


def run_deferred_callbacks(ctx: RenderContext) -> None:
    """Run the deferred callbacks of *ctx* sequentially, in registration order."""
    asyncio.run(ctx.run_callbacks())


def render_marked_templates(ctx: RenderContext) -> list[Path]:
    """Render every ``*.j2`` file under ``ctx.root`` and replace it with its output.

    Variables come from ``ctx.data_store`` keyed by the path without the marker; a
    file with no entry renders with no variables. Returns the written paths.
    """
    env = Environment(
        loader=FileSystemLoader(str(ctx.root)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    written: list[Path] = []

    def render_file(path: Path) -> None:
        if not path.name.endswith(MARKER_SUFFIX):
            return
        dest = path.with_name(path.name[: -len(MARKER_SUFFIX)])
        variables = ctx.data_store.get(dest, {})
        try:
            template = env.get_template(path.relative_to(ctx.root).as_posix())
            content = template.render(**variables)
        except TemplateError as exc:
            raise TemplateRenderError(f"Failed to render {path}: {exc}") from exc

        dest.write_text(content, encoding="utf-8")
        path.unlink()
        written.append(dest)
        logger.debug("Rendered %s", dest)

    pre_order_traverse(ctx.root, _noop, render_file)
    return written


def cleanup_language(ctx: RenderContext) -> None:
    """Drop the sources of the language that was not selected.

    With TypeScript, ``*.js`` files other than ``eslint.config.js`` are replaced by their
    ``*.ts`` sibling or renamed to ``*.ts``, ``jsconfig.json`` is removed and ``index.html``
    points at ``main.ts``.
    Without it, every ``*.ts`` file is removed.
    """
    if ctx.flags.typescript:

        def to_typescript(path: Path) -> None:
            if path.name == "jsconfig.json":
                path.unlink()
                logger.debug("Removed %s", path)
            elif path.suffix == ".js" and path.name not in _KEEP_JS:
                ts = path.with_suffix(".ts")
                if ts.exists():
                    path.unlink()
                    logger.debug("Removed %s in favour of %s", path, ts.name)
                else:
                    path.rename(ts)
                    logger.debug("Renamed %s to %s", path, ts.name)

        pre_order_traverse(ctx.root, _noop, to_typescript)

        index_html = ctx.root / "index.html"
        if index_html.exists():
            html = index_html.read_text(encoding="utf-8")
            index_html.write_text(html.replace("/src/main.js", "/src/main.ts"), encoding="utf-8")
    else:

        def drop_typescript(path: Path) -> None:
            if path.suffix == ".ts":
                path.unlink()
                logger.debug("Removed %s", path)

        pre_order_traverse(ctx.root, _noop, drop_typescript)
