"""vuescaffold CLI."""

from vuescaffold.cli.app import app

__all__ = ["app"]
