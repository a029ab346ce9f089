"""Enums shared by the core and the CLI."""

from enum import Enum


class E2EFramework(str, Enum):
    """End-to-end testing framework added to the generated project."""

    NONE = "none"
    CYPRESS = "cypress"
    NIGHTWATCH = "nightwatch"
    PLAYWRIGHT = "playwright"

    @property
    def label(self) -> str:
        labels: dict[E2EFramework, str] = {
            E2EFramework.NONE: "No",
            E2EFramework.CYPRESS: "Cypress",
            E2EFramework.NIGHTWATCH: "Nightwatch",
            E2EFramework.PLAYWRIGHT: "Playwright",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[E2EFramework, str] = {
            E2EFramework.NONE: "",
            E2EFramework.CYPRESS: "also supports unit testing with Cypress Component Testing",
            E2EFramework.NIGHTWATCH: "also supports unit testing with Nightwatch Component Testing",  # noqa: E501
            E2EFramework.PLAYWRIGHT: "https://playwright.dev/",
        }
        return descriptions[self]
