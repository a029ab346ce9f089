"""Enums for CLI options."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import os


class PackageManager(str, Enum):
    """Package manager the user invoked the scaffolder through."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    @classmethod
    def detect(cls, environ: Mapping[str, str] | None = None) -> PackageManager:
        """Read the package manager from ``npm_config_user_agent``, defaulting to npm."""
        env = os.environ if environ is None else environ
        user_agent = env.get("npm_config_user_agent", "")
        for manager in (cls.PNPM, cls.YARN, cls.BUN):
            if user_agent.startswith(manager.value):
                return manager
        return cls.NPM

    @property
    def install_command(self) -> str:
        return "yarn" if self is PackageManager.YARN else f"{self.value} install"

    def run_command(self, script: str, args: str = "") -> str:
        """Command line that runs a ``package.json`` script, e.g. ``npm run dev``."""
        if self in (PackageManager.NPM, PackageManager.BUN):
            command = f"{self.value} run {script}"
        else:
            command = f"{self.value} {script}"
        if args:
            separator = " --" if self is PackageManager.NPM else ""
            command = f"{command}{separator} {args}"
        return command
