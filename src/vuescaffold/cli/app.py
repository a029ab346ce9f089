"""Typer CLI application for vuescaffold."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from typer import Argument, Context, Exit, Option, Typer

import vuescaffold
from vuescaffold.cli._prompts import (
    prompt_features,
    prompt_overwrite,
    prompt_package_name,
    prompt_project_name,
)
from vuescaffold.cli._readme import generate_readme
from vuescaffold.cli._types import PackageManager
from vuescaffold.core.config import (
    FeatureFlags,
    ProjectOptions,
    is_valid_package_name,
    to_valid_package_name,
)
from vuescaffold.core.errors import OperationCancelledError, ScaffoldError
from vuescaffold.core.project import can_skip_emptying, scaffold_project

app = Typer(
    add_completion=False,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
_console = Console()

DEFAULT_PROJECT_NAME = "vue-project"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"vuescaffold v{vuescaffold.__version__}")
        raise Exit()


def _display_dir(root: Path, cwd: Path) -> str:
    try:
        relative = os.path.relpath(root, cwd)
    except ValueError:
        return str(root)
    return relative if not relative.startswith("..") else str(root)


@app.command()
def create(
    ctx: Context,
    target_dir: Annotated[
        str | None, Argument(help="Directory to create the project in", show_default=False)
    ] = None,
    default: Annotated[
        bool, Option("--default", help="Skip feature prompts and create a bare project")
    ] = False,
    typescript: Annotated[bool, Option("--typescript", "--ts", help="Add TypeScript")] = False,
    jsx: Annotated[bool, Option("--jsx", help="Add JSX support")] = False,
    router: Annotated[bool, Option("--router", "--vue-router", help="Add Vue Router")] = False,
    pinia: Annotated[bool, Option("--pinia", help="Add Pinia")] = False,
    with_tests: Annotated[
        bool, Option("--with-tests", "--tests", help="Add Vitest and Cypress")
    ] = False,
    vitest: Annotated[bool, Option("--vitest", help="Add Vitest")] = False,
    cypress: Annotated[bool, Option("--cypress", help="Add Cypress")] = False,
    nightwatch: Annotated[bool, Option("--nightwatch", help="Add Nightwatch")] = False,
    playwright: Annotated[bool, Option("--playwright", help="Add Playwright")] = False,
    eslint: Annotated[bool, Option("--eslint", help="Add ESLint")] = False,
    eslint_with_prettier: Annotated[
        bool, Option("--eslint-with-prettier", help="Add ESLint and Prettier")
    ] = False,
    devtools: Annotated[
        bool, Option("--vue-devtools", "--devtools", help="Add the Vue DevTools plugin")
    ] = False,
    force: Annotated[
        bool, Option("--force", help="Empty the target directory without asking")
    ] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log every file operation")] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Vue project."""
    _configure_logging(verbose)
    cwd = Path.cwd()

    # Unknown options land in the positional slots; the target is the first real positional.
    positionals = [a for a in (target_dir, *ctx.args) if a is not None and not a.startswith("-")]
    target_dir = positionals[0] if positionals else None

    feature_flags_used = any(
        (
            default,
            typescript,
            jsx,
            router,
            pinia,
            with_tests,
            vitest,
            cypress,
            nightwatch,
            playwright,
            eslint,
            eslint_with_prettier,
            devtools,
        )
    )

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  vuescaffold v{vuescaffold.__version__}")
    _console.print("[dim]│[/]")

    try:
        if target_dir is None:
            target_dir = prompt_project_name(DEFAULT_PROJECT_NAME).strip() or DEFAULT_PROJECT_NAME
        root = (cwd / target_dir).resolve()

        overwrite = force
        if not force and not can_skip_emptying(root):
            if not prompt_overwrite(target_dir):
                raise OperationCancelledError()
            overwrite = True

        package_name = root.name
        if not is_valid_package_name(package_name):
            package_name = prompt_package_name(to_valid_package_name(package_name))

        if feature_flags_used:
            flags = FeatureFlags.from_cli(
                default=default,
                typescript=typescript,
                jsx=jsx,
                router=router,
                pinia=pinia,
                with_tests=with_tests,
                vitest=vitest,
                cypress=cypress,
                nightwatch=nightwatch,
                playwright=playwright,
                eslint=eslint,
                eslint_with_prettier=eslint_with_prettier,
                devtools=devtools,
            )
        else:
            flags = prompt_features()
    except OperationCancelledError as exc:
        _console.print(f"[bold red]✖[/] {exc}")
        raise Exit(code=1) from None
    except OSError as exc:
        _console.print(f"[bold red]Error:[/] {exc}")
        raise Exit(code=1) from None

    options = ProjectOptions(
        root=root, package_name=package_name, flags=flags, overwrite=overwrite
    )
    pm = PackageManager.detect()

    # Render
    _console.print(f"[bold green]◇[/]  Scaffolding project in {root}...")

    try:
        scaffold_project(options, readme=lambda o: generate_readme(o, pm))
    except (ScaffoldError, OSError) as exc:
        _console.print(f"[bold red]Error:[/] {exc}")
        raise Exit(code=1) from None

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done. Now run:")
    _console.print()
    if root != cwd:
        display = _display_dir(root, cwd)
        quoted = f'"{display}"' if " " in display else display
        _console.print(f"   [bold green]cd {quoted}[/]")
    _console.print(f"   [bold green]{pm.install_command}[/]")
    if flags.prettier:
        _console.print(f"   [bold green]{pm.run_command('format')}[/]")
    _console.print(f"   [bold green]{pm.run_command('dev')}[/]")
    _console.print()
