"""Content merge helpers for files contributed by more than one fragment."""

from __future__ import annotations

from typing import Any

DEPENDENCY_KEYS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

_PROTECTED_PACKAGE_KEYS: tuple[str, ...] = ("name", "version")


def _union(target: list[Any], source: list[Any]) -> list[Any]:
    merged = list(target)
    for item in source:
        if item not in merged:
            merged.append(item)
    return merged


def deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *source* into a copy of *target*.

    Nested mappings are merged key by key, lists are unioned in first-seen order and
    any other value from *source* replaces the one in *target*.
    """
    merged = dict(target)
    for key, value in source.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = _union(current, value)
        else:
            merged[key] = value
    return merged


def sort_dependencies(package: dict[str, Any]) -> dict[str, Any]:
    """Return *package* with every dependency table ordered by package name."""
    result = dict(package)
    for key in DEPENDENCY_KEYS:
        table = result.get(key)
        if isinstance(table, dict):
            result[key] = dict(sorted(table.items()))
    return result


def merge_package_json(existing: dict[str, Any], fragment: dict[str, Any]) -> dict[str, Any]:
    """Merge a fragment's ``package.json`` onto the one already at the destination.

    The destination keeps its ``name`` and ``version``; everything else follows
    :func:`deep_merge`, so the fragment wins on dependency version collisions.
    """
    merged = deep_merge(existing, fragment)
    for key in _PROTECTED_PACKAGE_KEYS:
        if key in existing:
            merged[key] = existing[key]
    return sort_dependencies(merged)


def merge_ignore_lines(existing: str, fragment: str) -> str:
    """Append the lines of *fragment* that *existing* does not already contain."""
    lines = existing.splitlines()
    seen = set(lines)
    added = []
    for line in fragment.splitlines():
        # Blank lines group entries, they are never treated as duplicates.
        if line.strip() and line in seen:
            continue
        seen.add(line)
        added.append(line)

    while added and not added[0].strip():
        added.pop(0)
    while added and not added[-1].strip():
        added.pop()

    if not added:
        return existing if existing.endswith("\n") or not existing else existing + "\n"

    head = "\n".join(lines).rstrip("\n")
    body = "\n".join(added)
    return f"{head}\n\n{body}\n" if head else f"{body}\n"
