"""README generation for scaffolded projects."""

from __future__ import annotations

from vuescaffold.cli._types import PackageManager
from vuescaffold.core.config import ProjectOptions
from vuescaffold.core.types import E2EFramework

_SFC_TYPE_SUPPORT = """\
## Type Support for `.vue` Imports in TS

TypeScript cannot handle type information for `.vue` imports by default, so we replace the `tsc` CLI with `vue-tsc` for type checking. In editors, we need [Volar](https://marketplace.visualstudio.com/items?itemName=Vue.volar) to make the TypeScript language service aware of `.vue` types.
"""  # noqa: E501


def _section(title: str, command: str) -> str:
    return f"### {title}\n\n```sh\n{command}\n```\n"


def _e2e_section(e2e: E2EFramework, pm: PackageManager) -> str:
    if e2e is E2EFramework.CYPRESS:
        return _section(
            "Run End-to-End Tests with [Cypress](https://www.cypress.io/)",
            f"{pm.run_command('test:e2e:dev')}\n\n# or, against a production build\n"
            f"{pm.run_command('build')}\n{pm.run_command('test:e2e')}",
        )
    if e2e is E2EFramework.NIGHTWATCH:
        return _section(
            "Run End-to-End Tests with [Nightwatch](https://nightwatchjs.org/)",
            f"{pm.run_command('build')}\n{pm.run_command('test:e2e')}",
        )
    if e2e is E2EFramework.PLAYWRIGHT:
        return _section(
            "Run End-to-End Tests with [Playwright](https://playwright.dev)",
            f"# Install browsers for the first run\nnpx playwright install\n\n"
            f"{pm.run_command('build')}\n{pm.run_command('test:e2e')}",
        )
    return ""


def generate_readme(options: ProjectOptions, pm: PackageManager) -> str:
    """Render the README.md of a generated project for the given package manager."""
    flags = options.flags
    build_title = "Type-Check, Compile and Minify for Production" if flags.typescript else (
        "Compile and Minify for Production"
    )

    parts = [
        f"# {options.package_name}\n",
        "This template should help get you started developing with Vue 3 in Vite.\n",
        "## Recommended IDE Setup\n",
        "[VSCode](https://code.visualstudio.com/) + "
        "[Volar](https://marketplace.visualstudio.com/items?itemName=Vue.volar).\n",
    ]
    if flags.typescript:
        parts.append(_SFC_TYPE_SUPPORT)

    parts.append("## Customize configuration\n")
    parts.append("See [Vite Configuration Reference](https://vite.dev/config/).\n")
    parts.append(f"## Project Setup\n\n```sh\n{pm.install_command}\n```\n")
    parts.append(_section("Compile and Hot-Reload for Development", pm.run_command("dev")))
    parts.append(_section(build_title, pm.run_command("build")))

    if flags.vitest:
        parts.append(
            _section("Run Unit Tests with [Vitest](https://vitest.dev/)", pm.run_command("test:unit"))
        )
    elif flags.e2e is E2EFramework.CYPRESS:
        parts.append(
            _section(
                "Run Headed Component Tests with [Cypress Component Testing](https://on.cypress.io/component)",  # noqa: E501
                f"{pm.run_command('test:unit:dev')} # or `{pm.run_command('test:unit')}` for headless testing",  # noqa: E501
            )
        )

    e2e = _e2e_section(flags.e2e, pm)
    if e2e:
        parts.append(e2e)

    if flags.eslint:
        parts.append(
            _section("Lint with [ESLint](https://eslint.org/)", pm.run_command("lint"))
        )

    return "\n".join(parts)
