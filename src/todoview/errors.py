"""Exceptions raised by the todoview renderers."""


class TodoViewError(Exception):
    """Base exception for all todoview errors."""


class ContractViolation(TodoViewError, ValueError):
    """A view was called with a malformed container or state."""

    def __init__(self, message: str, view: str | None = None, errors: list[str] | None = None):
        self.view = view
        self.errors = errors or []

        full_message = f"{view}: {message}" if view else message
        for error in self.errors:
            full_message += f"\n  - {error}"
        super().__init__(full_message)


class TemplateError(TodoViewError, ValueError):
    """An HTML template could not be parsed into a node tree."""


class SelectorError(TodoViewError, ValueError):
    def __init__(self, message: str, selector: str):
        self.selector = selector
        super().__init__(f"{message}: {selector!r}")
