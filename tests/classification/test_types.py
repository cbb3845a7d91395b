"""Tests for classification result models."""

import pytest
from pydantic import ValidationError

from seo_search_box.classification import INPUT_TYPES, InputMetadata, ParsedInput


def test_metadata_all_none():
    """Metadata with no data should work."""
    meta = InputMetadata()
    assert meta.domain is None
    assert meta.phone_formatted is None
    assert meta.is_lat_lng is None


def test_parsed_input_defaults():
    """ParsedInput should default to empty metadata and the default detector."""
    parsed = ParsedInput(type="keyword", value="shoes", normalized="shoes", confidence=0.6)
    assert parsed.metadata == InputMetadata()
    assert parsed.detector == "default"


@pytest.mark.parametrize("confidence", [-0.01, 1.01])
def test_confidence_must_be_in_unit_interval(confidence):
    with pytest.raises(ValidationError):
        ParsedInput(type="keyword", value="x", normalized="x", confidence=confidence)


def test_unknown_type_rejected():
    with pytest.raises(ValidationError):
        ParsedInput(type="email", value="a@b.c", normalized="a@b.c", confidence=0.5)


def test_input_types_lists_every_type():
    assert set(INPUT_TYPES) == {"keyword", "url", "phone", "address", "business"}


def test_json_serialization_excludes_unset_metadata():
    """Only populated metadata fields should appear with exclude_none."""
    parsed = ParsedInput(
        type="url",
        value="example.com",
        normalized="example.com",
        confidence=0.9,
        metadata=InputMetadata(domain="example.com", protocol="https", path="/"),
        detector="url",
    )
    dumped = parsed.model_dump(exclude_none=True)
    assert dumped["metadata"] == {"domain": "example.com", "protocol": "https", "path": "/"}


def test_json_deserialization():
    """ParsedInput should deserialize from JSON correctly."""
    json_str = (
        '{"type": "phone", "value": "(555) 123-4567", "normalized": "5551234567",'
        ' "confidence": 0.95, "metadata": {"country_code": "1"}, "detector": "phone"}'
    )
    parsed = ParsedInput.model_validate_json(json_str)
    assert parsed.type == "phone"
    assert parsed.metadata.country_code == "1"
    assert parsed.metadata.domain is None
