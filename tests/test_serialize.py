"""Tests for JSON serialization of result documents."""
import json
import math

import pytest

from ocr_extract.engines.base import RawLine, RawRecognition, RawWord
from ocr_extract.pipeline.assemble import assemble
from ocr_extract.pipeline.document import ResultDocument
from ocr_extract.pipeline.serialize import deserialize, serialize, to_dict

from tests.conftest import make_recognition


def _sample_doc() -> ResultDocument:
    return assemble(make_recognition("Grüße aus Köln", "line two"))


def test_field_names_and_order():
    data = to_dict(_sample_doc())
    assert list(data) == ["FullText", "Lines"]
    assert list(data["Lines"][0]) == ["Text", "Words"]
    assert list(data["Lines"][0]["Words"][0]) == [
        "Text",
        "Confidence",
        "TopLeft",
        "TopRight",
        "BottomRight",
        "BottomLeft",
    ]
    assert data["Lines"][0]["Words"][0]["TopLeft"] == {"X": 0.0, "Y": 0.0}


def test_compact_has_no_whitespace_between_tokens():
    text = serialize(ResultDocument(), pretty=False)
    assert text == '{"FullText":"","Lines":[]}'


def test_empty_document_pretty():
    data = json.loads(serialize(ResultDocument(), pretty=True))
    assert data == {"FullText": "", "Lines": []}


def test_pretty_is_indented():
    text = serialize(_sample_doc(), pretty=True)
    assert "\n" in text
    assert text.startswith('{\n  "FullText"')


def test_pretty_and_compact_carry_same_content():
    doc = _sample_doc()
    assert deserialize(serialize(doc, pretty=True)) == deserialize(serialize(doc, pretty=False))
    assert deserialize(serialize(doc, pretty=True)) == doc


def test_non_ascii_kept_unless_requested():
    doc = _sample_doc()
    assert "Grüße" in serialize(doc)
    assert "Gr\\u00fc\\u00dfe" in serialize(doc, ensure_ascii=True)


def test_geometry_survives_serialization():
    word = RawWord(text="box", confidence=0.123456789012345, corners=((0, 0), (10, 0), (10, 5), (0, 5)))
    doc = assemble(RawRecognition(lines=[RawLine(text="box", words=[word])]))
    encoded = json.loads(serialize(doc, pretty=True))["Lines"][0]["Words"][0]
    assert [encoded[k] for k in ("TopLeft", "TopRight", "BottomRight", "BottomLeft")] == [
        {"X": 0.0, "Y": 0.0},
        {"X": 10.0, "Y": 0.0},
        {"X": 10.0, "Y": 5.0},
        {"X": 0.0, "Y": 5.0},
    ]
    assert encoded["Confidence"] == 0.123456789012345


@pytest.mark.parametrize("pretty", [True, False])
def test_non_finite_values_are_never_written(pretty):
    word = RawWord(text="x", confidence=math.nan, corners=((0, 0), (1, 0), (1, 1), (0, 1)))
    doc = assemble(RawRecognition(lines=[RawLine(text="x", words=[word])]))
    with pytest.raises(ValueError):
        serialize(doc, pretty=pretty)
