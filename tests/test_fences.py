import json

from carinfo.services.fences import strip_code_fences

def test_text_without_fences_is_unchanged():
    text = '{"vehicle": {"manufacturer": "Toyota"}}'
    assert strip_code_fences(text) == text

def test_surrounding_whitespace_is_kept():
    text = '\n  {"a": 1}\n'
    assert strip_code_fences(text) == text

def test_json_fence_is_removed():
    fenced = '```json\n{"vehicle": {"model": "Camry"}}\n```'
    assert strip_code_fences(fenced) == '\n{"vehicle": {"model": "Camry"}}\n'
    assert json.loads(strip_code_fences(fenced)) == {"vehicle": {"model": "Camry"}}

def test_bare_fence_is_removed():
    fenced = '```\n{"error": "The image does not contain a vehicle."}\n```\n'
    assert json.loads(strip_code_fences(fenced)) == {"error": "The image does not contain a vehicle."}

def test_stripping_twice_gives_same_result():
    fenced = '```json\n{"a": 1}\n```'
    once = strip_code_fences(fenced)
    assert strip_code_fences(once) == once
