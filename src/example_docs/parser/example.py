"""Example page document.

One example documents a single API operation: its parameters, the fields of
its response and the recorded requests made against it.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, SkipValidation

from example_docs.parser.base import (
    ParameterTable,
    RequestTranscript,
    ResponseFieldTable,
    fetch,
    field_path,
)
from example_docs.parser.loader import load_document, require_object

logger = logging.getLogger(__name__)


class ExampleDocument(BaseModel):
    """A fully built example page."""

    model_config = ConfigDict(frozen=True)

    resource: SkipValidation[str]
    description: SkipValidation[str]
    explanation: SkipValidation[str | None] = None
    parameters: ParameterTable
    response_fields: ResponseFieldTable
    requests: list[RequestTranscript]

    @classmethod
    def from_file(cls, file_path: Path | str) -> "ExampleDocument":
        """Load and build an example document from a JSON file."""
        data = require_object(load_document(file_path), file_path)
        example = cls.from_data(data)
        logger.debug(
            "Built example %r from %s: %d parameters, %d response fields, %d requests",
            example.description,
            file_path,
            len(example.parameters.rows),
            len(example.response_fields.rows),
            len(example.requests),
        )
        return example

    @classmethod
    def from_data(cls, data: dict) -> "ExampleDocument":
        """Build an example document from an already parsed JSON object.

        ``resource``, ``description``, ``parameters`` and ``requests`` are
        required. ``explanation`` and ``response_fields`` may be absent.
        """
        return cls(
            resource=fetch(data, "resource"),
            description=fetch(data, "description"),
            explanation=fetch(data, "explanation", default=None),
            parameters=ParameterTable.from_rows(fetch(data, "parameters")),
            response_fields=ResponseFieldTable.from_rows(fetch(data, "response_fields", default=None)),
            requests=[
                RequestTranscript.from_dict(request, field_path("requests", i))
                for i, request in enumerate(fetch(data, "requests"))
            ],
        )

    def has_explanation(self) -> bool:
        return self.explanation is not None
