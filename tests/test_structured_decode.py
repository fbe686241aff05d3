"""Best-effort JSON extraction from free-form model text."""

from __future__ import annotations

import pytest

from fraudguard.tools.structured_decode import (
    StructuredDecodeError,
    decode_json_object,
    find_json_object,
)


def test_pure_json_body():
    assert find_json_object('{"result": "Genuine Job", "risk_rate": 5}') == {
        "result": "Genuine Job",
        "risk_rate": 5,
    }


def test_json_embedded_in_prose():
    text = 'Here you go:\n{"result":"Fake Job", "risk_rate": 90}\nThanks'
    assert find_json_object(text) == {"result": "Fake Job", "risk_rate": 90}


def test_json_inside_markdown_fence():
    text = 'Analysis:\n```json\n{"result": "Fake Job", "tips": ["a", "b"]}\n```'
    assert find_json_object(text) == {"result": "Fake Job", "tips": ["a", "b"]}


def test_braces_inside_strings_do_not_break_balancing():
    text = 'Note {not json} then {"explanations": ["uses {curly} braces", "quote \\" here"]} end'
    assert find_json_object(text) == {
        "explanations": ["uses {curly} braces", 'quote " here'],
    }


def test_nested_objects_are_kept_whole():
    text = 'prefix {"outer": {"inner": 1}, "n": 2} suffix'
    assert find_json_object(text) == {"outer": {"inner": 1}, "n": 2}


def test_no_object_returns_none():
    assert find_json_object("I cannot help with that.") is None
    assert find_json_object("") is None
    assert find_json_object('{"unterminated": true') is None


def test_decode_reports_missing_fields():
    with pytest.raises(StructuredDecodeError) as exc_info:
        decode_json_object('{"result": "Fake Job"}', ["result", "risk_rate", "safety_tips"])
    assert exc_info.value.missing == ("risk_rate", "safety_tips")


def test_decode_raises_when_no_object():
    with pytest.raises(StructuredDecodeError):
        decode_json_object("plain prose only", ["result"])
