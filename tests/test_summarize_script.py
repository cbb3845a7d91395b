"""Tests for scripts/summarize_classifications.py."""

import importlib.util
from pathlib import Path

import pytest

from seo_search_box import classify

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "summarize_classifications.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("summarize_classifications", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_load_queries_skips_blank_lines(script, tmp_path):
    path = tmp_path / "queries.txt"
    path.write_text("example.com\n\n  running shoes  \n", encoding="utf-8")

    assert script.load_queries(path) == ["example.com", "running shoes"]
    assert script.load_queries(tmp_path / "missing.txt") == []


def test_summarize_groups_by_type_and_detector(script):
    results = [classify(q) for q in ["example.com", "shop.example.org", "running shoes"]]

    rows = script.summarize(results)

    assert rows[0] == {"type": "url", "detector": "url", "count": 2, "avg_confidence": 0.9}
    assert rows[1]["type"] == "keyword"


def test_low_confidence_and_table(script):
    results = [classify(q) for q in ["example.com", "running shoes", "Blue Bottle Coffee"]]

    low = script.low_confidence(results, 0.7)
    table = script.render_table(script.summarize(results), low, top=1)

    assert [row["value"] for row in low] == ["Blue Bottle Coffee", "running shoes"]
    assert "Blue Bottle Coffee" in table
    assert "running shoes" not in table
