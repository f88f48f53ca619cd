"""Index page document: every resource and the examples listed under it."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from example_docs.parser.base import Resource, fetch, field_path
from example_docs.parser.loader import load_document, require_object

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"


class IndexDocument(BaseModel):
    """The ordered resources of an index file."""

    model_config = ConfigDict(frozen=True)

    resources: list[Resource] = []

    @classmethod
    def from_file(cls, file_path: Path | str) -> "IndexDocument":
        """Load and build an index document from a JSON file."""
        data = require_object(load_document(file_path), file_path)
        index = cls.from_data(data)
        logger.debug("Built index from %s with %d resources", file_path, len(index.resources))
        return index

    @classmethod
    def from_data(cls, data: dict) -> "IndexDocument":
        """Build an index document from an already parsed JSON object.

        A missing ``resources`` key yields an empty index.
        """
        return cls(
            resources=[
                Resource.from_dict(resource, field_path("resources", i))
                for i, resource in enumerate(fetch(data, "resources", "", []))
            ]
        )

    def example_links(self) -> list[str]:
        """Every example link, in index order."""
        return [example.link for resource in self.resources for example in resource.examples]
