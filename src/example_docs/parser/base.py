"""Data models for parsed API example documentation.

Index and example documents are built from these models. Every model is
frozen: it is constructed once from its slice of raw JSON and only read
afterwards by the page renderer.
"""

from typing import Any, ClassVar, Iterable

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from example_docs.errors import DocumentParseError, MissingFieldError

_MISSING = object()


def field_path(parent: str, key: str | int) -> str:
    """Join a location and a key: ``field_path("requests", 1) == "requests[1]"``."""
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else key


def fetch(data: dict, key: str, location: str = "", default: Any = _MISSING) -> Any:
    """Look up ``key`` in a raw JSON object.

    Without a default the key is required and its absence raises
    MissingFieldError naming ``location.key``.
    """
    if not isinstance(data, dict):
        raise DocumentParseError(location or "<data>", f"expected a JSON object, got {type(data).__name__}")
    if key in data:
        return data[key]
    if default is not _MISSING:
        return default
    raise MissingFieldError(field_path(location, key), key)


def collect_extra_columns(rows: Iterable[dict], special_keys: Iterable[str]) -> list[str]:
    """Keys seen across all rows, first-seen order, minus the special keys."""
    special = set(special_keys)
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            if key not in special:
                seen.setdefault(key, None)
    return list(seen)


class _OpenRow(BaseModel):
    """A table row that keeps its raw JSON so unknown columns stay reachable."""

    model_config = ConfigDict(frozen=True)

    raw: dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)

    def __getitem__(self, key: str) -> Any:
        return self.raw.get(key)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)


class Parameter(_OpenRow):
    """A single request parameter. Columns beyond the typed ones are read with ``param[key]``."""

    name: SkipValidation[str]
    description: SkipValidation[str]
    required: SkipValidation[bool] = False
    scope: SkipValidation[str | None] = None  # e.g. "order" renders as order[name]

    @classmethod
    def from_dict(cls, data: dict, location: str = "") -> "Parameter":
        return cls(
            name=fetch(data, "name", location),
            description=fetch(data, "description", location),
            required=fetch(data, "required", location, False),
            scope=fetch(data, "scope", location, None),
            raw=data,
        )

    def is_required(self) -> bool:
        return bool(self.required)

    def has_scope(self) -> bool:
        return bool(self.scope)


class ResponseField(_OpenRow):
    """A single field of a documented response."""

    name: SkipValidation[str]
    description: SkipValidation[str]
    scope: SkipValidation[str | None] = None

    @classmethod
    def from_dict(cls, data: dict, location: str = "") -> "ResponseField":
        return cls(
            name=fetch(data, "name", location),
            description=fetch(data, "description", location),
            scope=fetch(data, "scope", location, None),
            raw=data,
        )

    def has_scope(self) -> bool:
        return bool(self.scope)


class ParameterTable(BaseModel):
    """An example's parameters plus the unknown columns found across them.

    >>> table = ParameterTable.from_rows([
    ...     {"name": "page", "description": "Page number", "Type": "Integer"},
    ... ])
    >>> table.extra_columns
    ['Type']
    """

    model_config = ConfigDict(frozen=True)

    SPECIAL_KEYS: ClassVar[tuple[str, ...]] = ("name", "description", "required", "scope")

    rows: list[Parameter] = []
    extra_columns: list[str] = []

    @classmethod
    def from_rows(cls, rows: list[dict], location: str = "parameters") -> "ParameterTable":
        return cls(
            rows=[Parameter.from_dict(row, field_path(location, i)) for i, row in enumerate(rows)],
            extra_columns=collect_extra_columns(rows, cls.SPECIAL_KEYS),
        )

    def present(self) -> bool:
        return len(self.rows) > 0


class ResponseFieldTable(BaseModel):
    """An example's response fields. May be built from ``None`` when none were documented."""

    model_config = ConfigDict(frozen=True)

    SPECIAL_KEYS: ClassVar[tuple[str, ...]] = ("name", "description", "scope")

    rows: list[ResponseField] = []
    extra_columns: list[str] = []

    @classmethod
    def from_rows(cls, rows: list[dict] | None, location: str = "response_fields") -> "ResponseFieldTable":
        if rows is None:
            return cls()
        return cls(
            rows=[ResponseField.from_dict(row, field_path(location, i)) for i, row in enumerate(rows)],
            extra_columns=collect_extra_columns(rows, cls.SPECIAL_KEYS),
        )

    def present(self) -> bool:
        return len(self.rows) > 0


def _format_pairs(pairs: dict[str, Any] | None, separator: str) -> str:
    if not pairs:
        return ""
    return "\n".join(f"{key}{separator}{value}" for key, value in pairs.items())


class RequestTranscript(BaseModel):
    """One recorded request and the response it got."""

    model_config = ConfigDict(frozen=True)

    method: SkipValidation[str]
    path: SkipValidation[str]
    request_headers: SkipValidation[dict[str, Any]]  # plain header names, not rack/WSGI style
    query_parameters: SkipValidation[dict[str, Any] | None] = None
    request_body: SkipValidation[str | None] = None
    curl: SkipValidation[str | None] = None
    response_status: SkipValidation[int | str]
    response_headers: SkipValidation[dict[str, Any]] = {}
    response_body: SkipValidation[str | None] = None

    @classmethod
    def from_dict(cls, data: dict, location: str = "") -> "RequestTranscript":
        """Build a transcript from one element of an example's ``requests`` array.

        ``request_headers``, ``request_method``, ``request_path`` and
        ``response_status`` are required; everything else has a default.
        """
        return cls(
            request_headers=fetch(data, "request_headers", location),
            method=fetch(data, "request_method", location),
            path=fetch(data, "request_path", location),
            query_parameters=fetch(data, "request_query_parameters", location, None),
            request_body=fetch(data, "request_body", location, None),
            curl=fetch(data, "curl", location, None),
            response_status=fetch(data, "response_status", location),
            response_headers=fetch(data, "response_headers", location, {}),
            response_body=fetch(data, "response_body", location, None),
        )

    # Joined into one string so templates don't pick up per-line indentation.
    def formatted_request_headers(self) -> str:
        return _format_pairs(self.request_headers, ": ")

    def formatted_response_headers(self) -> str:
        return _format_pairs(self.response_headers, ": ")

    def formatted_query_parameters(self) -> str:
        return _format_pairs(self.query_parameters, "=")

    def has_query_parameters(self) -> bool:
        return bool(self.query_parameters)

    def has_request_body(self) -> bool:
        return self.request_body is not None

    def has_curl(self) -> bool:
        return self.curl is not None

    def has_response(self) -> bool:
        return self.response_status is not None

    def has_response_body(self) -> bool:
        return self.response_body is not None

    @property
    def request_content_type(self) -> Any:
        return self.request_headers.get("Content-Type")

    @property
    def response_content_type(self) -> Any:
        return self.response_headers.get("Content-Type")


class ExampleSummary(BaseModel):
    """An example as listed on the index page."""

    model_config = ConfigDict(frozen=True)

    description: SkipValidation[str]
    link: SkipValidation[str]

    @classmethod
    def from_dict(cls, data: dict, location: str = "") -> "ExampleSummary":
        return cls(
            description=fetch(data, "description", location),
            link=fetch(data, "link", location),
        )

    @property
    def href(self) -> str:
        """The example page name: ``link`` with every ``.json`` removed."""
        return str(self.link).replace(".json", "")


class Resource(BaseModel):
    """A named group of examples, e.g. "Orders"."""

    model_config = ConfigDict(frozen=True)

    name: SkipValidation[str]
    examples: list[ExampleSummary]

    @classmethod
    def from_dict(cls, data: dict, location: str = "") -> "Resource":
        name = fetch(data, "name", location)
        examples_path = field_path(location, "examples")
        examples = [
            ExampleSummary.from_dict(example, field_path(examples_path, i))
            for i, example in enumerate(fetch(data, "examples", location))
        ]
        return cls(name=name, examples=examples)
