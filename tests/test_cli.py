"""Tests for the command-line interface."""

import json

import pytest

from seo_search_box import __version__
from seo_search_box.cli import main


def test_formatted_output(capsys):
    assert main(["(555) 123-4567"]) == 0

    out = capsys.readouterr().out
    assert "Type:" in out
    assert "phone" in out
    assert "(555) 123-4567" in out


def test_json_output(capsys):
    assert main(["https://example.com/about", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["type"] == "url"
    assert payload["normalized"] == "example.com"
    assert payload["metadata"] == {"domain": "example.com", "protocol": "https", "path": "/about"}
    assert "route" not in payload


def test_json_output_with_route(capsys):
    assert main(["Joe's Pizza", "--json", "--route"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["route"]["report"] == "business"
    assert payload["route"]["cache_key"] == "seo:business:joe's_pizza"


def test_formatted_output_with_route(capsys):
    assert main(["running shoes", "--route"]) == 0

    out = capsys.readouterr().out
    assert "seo:keyword:running_shoes" in out
    assert "86400s" in out


def test_suggest(capsys):
    assert main(["example.com", "--suggest"]) == 0
    assert capsys.readouterr().out.strip() == "url"


def test_suggest_none(capsys):
    assert main(["ab", "--suggest"]) == 0
    assert capsys.readouterr().out.strip() == "none"


def test_basic_profile(capsys):
    assert main(["running shoes", "--profile", "basic", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["confidence"] == pytest.approx(0.8)


def test_unknown_profile_reports_error(capsys):
    assert main(["running shoes", "--profile", "fancy"]) == 1

    assert "Unsupported classifier profile: fancy" in capsys.readouterr().err


def test_suggest_skips_full_classification(capsys, mocker):
    mock_classify = mocker.patch("seo_search_box.cli.classify")

    assert main(["example.com", "--suggest"]) == 0

    mock_classify.assert_not_called()


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
