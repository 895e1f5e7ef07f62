"""Exceptions for cssdocs."""


class CssDocsError(Exception):
    """Base exception for cssdocs failures."""

    pass


class SourceReadError(CssDocsError):
    """Raised when the stylesheet cannot be read."""

    pass


class OutputWriteError(CssDocsError):
    """Raised when the generated document cannot be written."""

    pass


class ValidationFailedError(CssDocsError):
    """Raised when strict validation reports errors."""

    def __init__(self, errors: list[str]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors
