"""vuescaffold: scaffold Vue + Vite projects from composable template fragments."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vuescaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"
