"""Template composition and rendering for generated Vue projects."""

from vuescaffold.core.compose import FRAGMENTS, TEMPLATE_ROOT, apply_fragments, select_fragments
from vuescaffold.core.config import (
    FeatureFlags,
    ProjectOptions,
    is_valid_package_name,
    to_valid_package_name,
)
from vuescaffold.core.context import DeferredCallback, RenderContext
from vuescaffold.core.errors import (
    OperationCancelledError,
    ScaffoldError,
    TemplateDataError,
    TemplateRenderError,
)
from vuescaffold.core.postprocess import (
    cleanup_language,
    render_marked_templates,
    run_deferred_callbacks,
)
from vuescaffold.core.project import can_skip_emptying, empty_dir, scaffold_project
from vuescaffold.core.render import render_template
from vuescaffold.core.types import E2EFramework

__all__ = [
    "FRAGMENTS",
    "TEMPLATE_ROOT",
    "DeferredCallback",
    "E2EFramework",
    "FeatureFlags",
    "OperationCancelledError",
    "ProjectOptions",
    "RenderContext",
    "ScaffoldError",
    "TemplateDataError",
    "TemplateRenderError",
    "apply_fragments",
    "can_skip_emptying",
    "cleanup_language",
    "empty_dir",
    "is_valid_package_name",
    "render_marked_templates",
    "render_template",
    "run_deferred_callbacks",
    "scaffold_project",
    "select_fragments",
    "to_valid_package_name",
]
