"""Declarative fragment table and the driver that applies it."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from vuescaffold.core.config import FeatureFlags
from vuescaffold.core.context import RenderContext
from vuescaffold.core.render import render_template
from vuescaffold.core.types import E2EFramework

logger = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parent.parent / "template"

FlagPredicate = Callable[[FeatureFlags], bool]


def _code_fragment(flags: FeatureFlags) -> str:
    prefix = "typescript-" if flags.typescript else ""
    return f"code/{prefix}{'router' if flags.router else 'default'}"


def _entry_fragment(flags: FeatureFlags) -> str:
    if flags.router and flags.pinia:
        return "entry/router-and-pinia"
    if flags.router:
        return "entry/router"
    if flags.pinia:
        return "entry/pinia"
    return "entry/default"


# Application order is the table order; flags only decide inclusion.
FRAGMENTS: tuple[tuple[str, FlagPredicate], ...] = (
    ("base", lambda f: True),
    ("config/jsx", lambda f: f.jsx),
    ("config/router", lambda f: f.router),
    ("config/pinia", lambda f: f.pinia),
    ("config/vitest", lambda f: f.vitest),
    ("config/cypress", lambda f: f.e2e is E2EFramework.CYPRESS),
    ("config/cypress-ct", lambda f: f.e2e is E2EFramework.CYPRESS and not f.vitest),
    ("config/nightwatch", lambda f: f.e2e is E2EFramework.NIGHTWATCH),
    ("config/playwright", lambda f: f.e2e is E2EFramework.PLAYWRIGHT),
    ("config/typescript", lambda f: f.typescript),
    ("config/devtools", lambda f: f.devtools),
    ("tsconfig/base", lambda f: f.typescript),
    ("tsconfig/vitest", lambda f: f.typescript and f.vitest),
    ("linting/eslint", lambda f: f.eslint),
    ("linting/typescript", lambda f: f.eslint and f.typescript),
    ("linting/prettier", lambda f: f.prettier),
)

# Exactly one variant of each of these is applied after the table above.
VARIANT_FRAGMENTS: tuple[Callable[[FeatureFlags], str], ...] = (
    _code_fragment,
    _entry_fragment,
)


def select_fragments(flags: FeatureFlags) -> list[str]:
    """Return the ordered fragment names applied for *flags*."""
    selected = [name for name, wanted in FRAGMENTS if wanted(flags)]
    selected.extend(variant(flags) for variant in VARIANT_FRAGMENTS)
    return selected


def apply_fragments(
    ctx: RenderContext,
    fragments: list[str] | None = None,
    template_root: Path = TEMPLATE_ROOT,
) -> list[str]:
    """Render each fragment under *template_root* onto ``ctx.root`` in order.

    Returns the names of the applied fragments, which are also recorded on ``ctx``.
    """
    if fragments is None:
        fragments = select_fragments(ctx.flags)

    for name in fragments:
        src = template_root / name
        if not src.is_dir():
            raise FileNotFoundError(f"Template fragment not found: {src}")
        logger.info("Applying fragment %s", name)
        render_template(src, ctx.root, ctx)
        ctx.applied.append(name)

    return list(ctx.applied)
