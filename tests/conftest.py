import json
from pathlib import Path

import pytest


@pytest.fixture()
def json_error_report() -> str:
    """Serialized error report for a JSON document with two itemized errors."""
    return json.dumps({
        "type": "JSON",
        "message": "Unexpected token } in JSON at position 24",
        "allErrors": [
            {"line": 2, "column": 14, "message": "Expected ',' or '}' after property value"},
            {"message": "Unexpected end of input"},
        ],
    })


@pytest.fixture()
def xml_error_report() -> str:
    """Serialized error report for an XML document without itemized errors."""
    return json.dumps({
        "type": "XML",
        "message": "Opening and ending tag mismatch: item line 3 and items",
    })


@pytest.fixture()
def broken_json_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.json"
    path.write_text('{\n  "name": "demo"\n  "tags": ["a", "b"]\n', encoding="utf-8")
    return path


@pytest.fixture()
def json_error_report_file(tmp_path: Path, json_error_report: str) -> Path:
    path = tmp_path / "errors.json"
    path.write_text(json_error_report, encoding="utf-8")
    return path
