"""Errors raised while loading API example documentation."""


class ExampleDocsError(Exception):
    """Base class for every error this package raises on purpose."""


class DocumentReadError(ExampleDocsError, OSError):
    """The documentation file could not be read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class DocumentParseError(ExampleDocsError, ValueError):
    """The file is not valid JSON, or not the shape of document expected."""

    def __init__(self, path, reason: str, lineno: int | None = None, colno: int | None = None):
        self.path = str(path)
        self.reason = reason
        self.lineno = lineno
        self.colno = colno
        location = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(f"cannot parse {self.path}: {reason}{location}")


class MissingFieldError(ExampleDocsError, KeyError):
    """A required key is absent.

    ``path`` names where the key was expected, e.g. ``resources[0].examples[2].link``.
    """

    def __init__(self, path: str, key: str):
        self.path = path
        self.key = key
        super().__init__(path)

    def __str__(self) -> str:
        # KeyError would repr() the argument
        return f"missing required field '{self.path}'"
