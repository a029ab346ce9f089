"""Configuration dataclasses for a scaffolding run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re

from vuescaffold.core.types import E2EFramework

_PACKAGE_NAME_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")


def is_valid_package_name(name: str) -> bool:
    """Whether *name* is accepted by npm as a package name."""
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Best-effort conversion of a directory name into an npm package name."""
    name = name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z0-9-~]+", "-", name)


@dataclass(frozen=True, kw_only=True)
class FeatureFlags:
    """
    Feature toggles that decide which template fragments are applied.

    Attributes:
        typescript: Generate TypeScript sources and tsconfig files.
        jsx: Add JSX support through ``@vitejs/plugin-vue-jsx``.
        router: Add Vue Router and the routed application skeleton.
        pinia: Add Pinia and an example store.
        vitest: Add Vitest unit testing.
        e2e: End-to-end testing framework.
        eslint: Add ESLint.
        prettier: Add Prettier, wired through ESLint.
        devtools: Add the Vue DevTools Vite plugin.
    """

    typescript: bool = False
    jsx: bool = False
    router: bool = False
    pinia: bool = False
    vitest: bool = False
    e2e: E2EFramework = E2EFramework.NONE
    eslint: bool = False
    prettier: bool = False
    devtools: bool = False

    def __post_init__(self) -> None:
        if self.prettier and not self.eslint:
            raise ValueError("prettier is only supported together with eslint.")

    @property
    def needs_e2e(self) -> bool:
        return self.e2e is not E2EFramework.NONE

    @classmethod
    def from_cli(
        cls,
        *,
        default: bool = False,
        typescript: bool = False,
        jsx: bool = False,
        router: bool = False,
        pinia: bool = False,
        with_tests: bool = False,
        vitest: bool = False,
        cypress: bool = False,
        nightwatch: bool = False,
        playwright: bool = False,
        eslint: bool = False,
        eslint_with_prettier: bool = False,
        devtools: bool = False,
    ) -> FeatureFlags:
        """Resolve the boolean command line switches into a flag set.

        ``default`` selects the bare project and wins over every other switch.
        ``with_tests`` is shorthand for Vitest plus Cypress.
        """
        if default:
            return cls()

        if cypress or with_tests:
            e2e = E2EFramework.CYPRESS
        elif nightwatch:
            e2e = E2EFramework.NIGHTWATCH
        elif playwright:
            e2e = E2EFramework.PLAYWRIGHT
        else:
            e2e = E2EFramework.NONE

        return cls(
            typescript=typescript,
            jsx=jsx,
            router=router,
            pinia=pinia,
            vitest=vitest or with_tests,
            e2e=e2e,
            eslint=eslint or eslint_with_prettier,
            prettier=eslint_with_prettier,
            devtools=devtools,
        )


@dataclass(kw_only=True)
class ProjectOptions:
    """
    Fully resolved inputs of one scaffolding run.

    Attributes:
        root: Destination directory of the generated project.
        package_name: ``name`` written to the generated ``package.json``.
        flags: Selected features.
        overwrite: Empty an existing, non-empty ``root`` before rendering.
    """

    root: Path
    package_name: str
    flags: FeatureFlags = field(default_factory=FeatureFlags)
    overwrite: bool = False

    def __post_init__(self) -> None:
        if not is_valid_package_name(self.package_name):
            raise ValueError(f"Invalid package name: {self.package_name!r}.")
