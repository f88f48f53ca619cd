"""Page generator — renders index and example documents as Markdown pages."""

from typing import Any

from example_docs.parser.base import Parameter, ParameterTable, ResponseField, ResponseFieldTable
from example_docs.parser.example import ExampleDocument
from example_docs.parser.index import IndexDocument

DEFAULT_TITLE = "API Documentation"


def render_index(index: IndexDocument, title: str = DEFAULT_TITLE) -> str:
    """Render the index page: one section per resource, one link per example."""
    lines = [f"# {title}"]
    for resource in index.resources:
        lines.extend(["", f"## {resource.name}", ""])
        for example in resource.examples:
            lines.append(f"- [{example.description}]({example.href})")
    return "\n".join(lines) + "\n"


def render_example(example: ExampleDocument) -> str:
    """Render an example page with its tables and recorded requests."""
    lines = [f"# {example.resource} API", "", f"## {example.description}"]

    if example.has_explanation():
        lines.extend(["", str(example.explanation)])

    if example.parameters.present():
        lines.extend(["", "### Parameters", ""])
        lines.extend(_render_parameters(example.parameters))

    if example.response_fields.present():
        lines.extend(["", "### Response Fields", ""])
        lines.extend(_render_response_fields(example.response_fields))

    for request in example.requests:
        lines.extend(["", "### Request", "", f"`{request.method} {request.path}`"])

        if request.has_query_parameters():
            lines.extend(["", "#### Query Parameters", ""])
            lines.extend(_code_block(request.formatted_query_parameters()))

        lines.extend(["", "#### Headers", ""])
        lines.extend(_code_block(request.formatted_request_headers()))

        if request.has_request_body():
            lines.extend(["", "#### Body", ""])
            lines.extend(_code_block(request.request_body, _language(request.request_content_type)))

        if request.has_curl():
            lines.extend(["", "#### cURL", ""])
            lines.extend(_code_block(request.curl, "bash"))

        if request.has_response():
            lines.extend(["", "### Response", "", f"Status: {request.response_status}"])
            if request.response_headers:
                lines.extend(["", "#### Headers", ""])
                lines.extend(_code_block(request.formatted_response_headers()))
            if request.has_response_body():
                lines.extend(["", "#### Body", ""])
                lines.extend(_code_block(request.response_body, _language(request.response_content_type)))

    return "\n".join(lines) + "\n"


def _render_parameters(table: ParameterTable) -> list[str]:
    headers = ["Name", "Description", "Required", *table.extra_columns]
    rows = [
        [
            _scoped_name(param),
            param.description,
            "required" if param.is_required() else "",
            *(param[column] for column in table.extra_columns),
        ]
        for param in table.rows
    ]
    return _table(headers, rows)


def _render_response_fields(table: ResponseFieldTable) -> list[str]:
    headers = ["Name", "Description", *table.extra_columns]
    rows = [
        [_scoped_name(field), field.description, *(field[column] for column in table.extra_columns)]
        for field in table.rows
    ]
    return _table(headers, rows)


def _scoped_name(row: Parameter | ResponseField) -> str:
    if not row.has_scope():
        return str(row.name)
    # nested scopes arrive as a list: ["data", "attributes"] -> data[attributes][name]
    scope = row.scope if isinstance(row.scope, list) else [row.scope]
    head, *rest = [str(part) for part in scope]
    return head + "".join(f"[{part}]" for part in rest) + f"[{row.name}]"


def _table(headers: list[str], rows: list[list[Any]]) -> list[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(value) for value in row) + " |")
    return lines


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value).replace("|", "\\|").replace("\n", " ")


def _code_block(text: Any, language: str = "") -> list[str]:
    return [f"```{language}", str(text), "```"]


def _language(content_type: Any) -> str:
    if not content_type:
        return ""
    if "json" in str(content_type):
        return "json"
    if "xml" in str(content_type):
        return "xml"
    return ""
