"""Exceptions raised while scaffolding a project."""


class ScaffoldError(Exception):
    """Base class for every error the scaffolder raises on purpose."""


class OperationCancelledError(ScaffoldError):
    """The user declined to overwrite a non-empty target directory."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class TemplateDataError(ScaffoldError):
    """A ``*.data.py`` module could not provide template variables."""


class TemplateRenderError(ScaffoldError):
    """A ``*.j2`` file failed to render against its collected variables."""
