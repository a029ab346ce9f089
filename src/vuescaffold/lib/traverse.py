"""Recursive directory walks with directory and file callbacks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

PathCallback = Callable[[Path], None]

_SKIPPED_DIRS = frozenset({".git"})


def _children(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.name not in _SKIPPED_DIRS)


def pre_order_traverse(
    directory: Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Walk *directory*, calling ``dir_callback`` on each subdirectory before its children.

    A directory removed by ``dir_callback`` is not descended into. The root itself is
    never passed to a callback, and a missing root is a no-op.
    """
    if not directory.is_dir():
        return

    for path in _children(directory):
        if path.is_dir() and not path.is_symlink():
            dir_callback(path)
            if path.exists():
                pre_order_traverse(path, dir_callback, file_callback)
            continue
        file_callback(path)


def post_order_traverse(
    directory: Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Walk *directory*, calling ``dir_callback`` on each subdirectory after its children.

    Suitable for recursive deletion: files are visited before their (then empty) parent.
    """
    if not directory.is_dir():
        return

    for path in _children(directory):
        if path.is_dir() and not path.is_symlink():
            post_order_traverse(path, dir_callback, file_callback)
            dir_callback(path)
            continue
        file_callback(path)
