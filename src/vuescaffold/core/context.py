"""Shared state of a single render pass."""

from __future__ import annotations

from dataclasses import dataclass, field
import importlib.util
import inspect
import logging
from pathlib import Path
from typing import Any

from vuescaffold.core.config import FeatureFlags
from vuescaffold.core.errors import TemplateDataError

logger = logging.getLogger(__name__)

DataStore = dict[Path, dict[str, Any]]


def _load_data_function(source: Path) -> Any:
    module_name = "_vuescaffold_data_" + "".join(c if c.isalnum() else "_" for c in str(source))
    spec = importlib.util.spec_from_file_location(module_name, source)
    if spec is None or spec.loader is None:
        raise TemplateDataError(f"Cannot load template data module {source}.")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    get_data = getattr(module, "get_data", None)
    if not callable(get_data):
        raise TemplateDataError(f"{source} does not define a callable get_data().")
    return get_data


@dataclass(frozen=True)
class DeferredCallback:
    """
    Populates the template variables of one destination file once every fragment is copied.

    Attributes:
        source: The ``*.data.py`` module inside a fragment.
        dest: Destination path of the file whose variables are produced, without the
            ``.j2`` marker.
    """

    source: Path
    dest: Path

    async def __call__(self, data_store: DataStore) -> None:
        get_data = _load_data_function(self.source)
        data = get_data(old_data=dict(data_store.get(self.dest, {})))
        if inspect.isawaitable(data):
            data = await data

        if not isinstance(data, dict):
            raise TemplateDataError(
                f"{self.source} get_data() must return a dict, got {type(data).__name__}."
            )
        data_store[self.dest] = data
        logger.debug("Collected %d template variable(s) for %s", len(data), self.dest)


@dataclass(kw_only=True)
class RenderContext:
    """
    Mutable state owned by one render pass.

    Attributes:
        root: Destination root every fragment is rendered into.
        flags: Selected features, read-only for the whole run.
        data_store: Template variables keyed by final destination path.
        callbacks: Deferred callbacks in registration order.
        applied: Fragment names applied so far, in order.
    """

    root: Path
    flags: FeatureFlags = field(default_factory=FeatureFlags)
    data_store: DataStore = field(default_factory=dict)
    callbacks: list[DeferredCallback] = field(default_factory=list)
    applied: list[str] = field(default_factory=list)

    def defer(self, callback: DeferredCallback) -> None:
        self.callbacks.append(callback)
        logger.debug("Deferred data callback %s -> %s", callback.source, callback.dest)

    async def run_callbacks(self) -> None:
        """Await every deferred callback, one at a time, in registration order."""
        for callback in self.callbacks:
            await callback(self.data_store)
