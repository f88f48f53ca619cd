import json
from pathlib import Path

import pytest

from example_docs.errors import MissingFieldError
from example_docs.parser.example import ExampleDocument

FIXTURES = Path(__file__).parent / "fixtures"


def _minimal(**overrides) -> dict:
    data = {
        "resource": "Orders",
        "description": "Getting an order",
        "parameters": [],
        "requests": [],
    }
    data.update(overrides)
    return data


class TestExampleDocument:
    def test_load_full_example(self):
        example = ExampleDocument.from_file(FIXTURES / "orders" / "creating_an_order.json")
        assert example.resource == "Orders"
        assert example.description == "Creating an order"
        assert example.has_explanation() is True
        assert example.parameters.extra_columns == ["Type", "Format"]
        assert example.response_fields.extra_columns == ["Type"]
        assert len(example.requests) == 1

    def test_requests_round_trip_required_fields(self):
        path = FIXTURES / "orders" / "getting_a_list_of_orders.json"
        raw = json.loads(path.read_text(encoding="utf-8"))
        example = ExampleDocument.from_file(path)
        assert len(example.requests) == len(raw["requests"])
        for request, data in zip(example.requests, raw["requests"]):
            assert request.method == data["request_method"]
            assert request.path == data["request_path"]
            assert request.request_headers == data["request_headers"]
            assert request.response_status == data["response_status"]

    def test_response_fields_absent(self):
        example = ExampleDocument.from_file(FIXTURES / "orders" / "getting_a_list_of_orders.json")
        assert example.response_fields.present() is False
        assert example.has_explanation() is False
        assert example.explanation is None

    def test_response_fields_null(self):
        example = ExampleDocument.from_data(_minimal(response_fields=None))
        assert example.response_fields.present() is False

    @pytest.mark.parametrize("key", ["resource", "description", "parameters", "requests"])
    def test_required_keys(self, key):
        data = _minimal()
        del data[key]
        with pytest.raises(MissingFieldError) as exc:
            ExampleDocument.from_data(data)
        assert exc.value.path == key

    def test_malformed_request_names_missing_key(self):
        data = _minimal(requests=[
            {"request_method": "GET", "request_path": "/", "request_headers": {}, "response_status": 200},
            {"request_method": "GET", "request_path": "/", "response_status": 200},
        ])
        with pytest.raises(MissingFieldError) as exc:
            ExampleDocument.from_data(data)
        assert exc.value.path == "requests[1].request_headers"

    def test_unknown_top_level_keys_ignored(self):
        example = ExampleDocument.from_data(_minimal(http_method="GET", route="/orders/:id"))
        assert example.requests == []

    def test_non_string_explanation(self):
        example = ExampleDocument.from_data(_minimal(explanation=5))
        assert example.explanation == 5
        assert example.has_explanation() is True

    def test_null_description_is_present(self):
        example = ExampleDocument.from_data(_minimal(description=None))
        assert example.description is None
