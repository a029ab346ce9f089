"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from vuescaffold.core.config import FeatureFlags, is_valid_package_name
from vuescaffold.core.types import E2EFramework

_console = Console()

T = TypeVar("T")

_BAR = "[dim]│[/]"


def _ask(question: str, hint: str | None = None) -> int:
    """Print an active question and return how many lines it occupies."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    if hint:
        _console.print(f"[dim]│  {hint}[/]")
    _console.print(_BAR)
    return 3 if hint else 2


def _settle(lines: int, question: str, display: str) -> None:
    """Replace the last *lines* terminal lines with the answered form of *question*."""
    sys.stdout.write(f"\033[{lines}A\033[J")
    sys.stdout.flush()
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"{_BAR}  {display}")
    _console.print(_BAR)


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Show a menu of *labels* and return the matching entry of *options*."""
    shown = _ask(question)
    index = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    ).show()
    if index is None:
        raise SystemExit(1)

    _settle(shown, question, labels[int(index)])
    return options[int(index)]


def _confirm(question: str, default: bool = True) -> bool:
    """Ask a yes/no question; an empty answer picks *default*."""
    shown = _ask(question)
    _console.print(f"{_BAR}  ", end="")
    answer = input(" [Y/n] " if default else " [y/N] ").strip().lower()

    result = default if answer == "" else answer in ("y", "yes")
    _settle(shown + 1, question, "Yes" if result else "No")
    return result


def _text(question: str, default: str, hint: str | None = None) -> str:
    """Ask for free text; an empty answer picks *default*."""
    shown = _ask(question, hint)
    _console.print(f"{_BAR}  ", end="")
    answer = input(f"({default}) ").strip() or default

    _settle(shown + 1, question, answer)
    return answer


def prompt_project_name(default: str) -> str:
    """Prompt for the project directory name."""
    return _text("Project name:", default)


def prompt_overwrite(target_dir: str) -> bool:
    """Ask whether a non-empty target directory may be emptied."""
    where = "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
    return _confirm(f"{where} is not empty. Remove existing files and continue?", default=True)


def prompt_package_name(initial: str) -> str:
    """Prompt for a valid npm package name, asking again until one is given."""
    hint = None
    while True:
        name = _text("Package name:", initial, hint)
        if is_valid_package_name(name):
            return name
        hint = f"[red]Invalid package.json name:[/] {name}"


def prompt_e2e() -> E2EFramework:
    """Prompt for the end-to-end testing framework."""
    frameworks = list(E2EFramework)
    labels = [
        f"{f.label} ({f.description})" if f.description else f.label for f in frameworks
    ]
    return _select("Add an End-to-End Testing Solution?", frameworks, labels)


def prompt_features() -> FeatureFlags:
    """Ask for every feature toggle in turn."""
    typescript = _confirm("Add TypeScript?", default=False)
    jsx = _confirm("Add JSX Support?", default=False)
    router = _confirm("Add Vue Router for Single Page Application development?", default=False)
    pinia = _confirm("Add Pinia for state management?", default=False)
    vitest = _confirm("Add Vitest for Unit Testing?", default=False)
    e2e = prompt_e2e()
    eslint = _confirm("Add ESLint for code quality?", default=True)
    prettier = eslint and _confirm("Add Prettier for code formatting?", default=False)
    devtools = _confirm("Add Vue DevTools 7 extension for debugging? (experimental)", default=False)

    return FeatureFlags(
        typescript=typescript,
        jsx=jsx,
        router=router,
        pinia=pinia,
        vitest=vitest,
        e2e=e2e,
        eslint=eslint,
        prettier=prettier,
        devtools=devtools,
    )
