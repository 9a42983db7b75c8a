"""Tests for the JSON view of documents."""

from __future__ import annotations

import json

from ppr import parse
from ppr.serialization import to_dict, to_json


class TestToDict:
    def test_type_discriminators(self) -> None:
        data = to_dict(parse("T A\\H2 B\\P C"))
        assert data["_type"] == "Document"
        assert [child["_type"] for child in data["children"]] == ["Title", "Heading", "Paragraph"]
        assert data["children"][1]["level"] == 2

    def test_runs_and_styles(self) -> None:
        data = to_dict(parse("P a **b //c"))
        runs = data["children"][0]["runs"]
        assert runs == [
            {"text": "a ", "styles": []},
            {"text": "b ", "styles": ["BOLD"]},
            {"text": "c", "styles": ["BOLD", "ITALICS"]},
        ]

    def test_location(self) -> None:
        data = to_dict(parse("P one\\P two", source_file="x.ppr"))
        location = data["children"][1]["location"]
        assert location["_type"] == "SourceLocation"
        assert location["source_file"] == "x.ppr"
        assert location["lineno"] == 1


class TestToJson:
    def test_is_valid_json(self) -> None:
        text = to_json(parse("P **x**"))
        assert json.loads(text)["children"][0]["runs"][0]["styles"] == ["BOLD"]

    def test_deterministic(self) -> None:
        source = "T t\\P __u__ --s-- //i//"
        assert to_json(parse(source), indent=2) == to_json(parse(source), indent=2)

    def test_empty_document(self) -> None:
        assert json.loads(to_json(parse("")))["children"] == []
