import pytest

from shape_verifier import DocumentLoadError
from shape_verifier.parsers.document_parser import DocumentParser, detect_format


def test_detect_format(tmp_path):
    assert detect_format(tmp_path / "a.json") == "json"
    assert detect_format(tmp_path / "a.YAML") == "yaml"
    assert detect_format(tmp_path / "a.yml") == "yaml"
    assert detect_format(tmp_path / "a.txt") == "yaml"


def test_load_json(write_json):
    path = write_json("doc.json", {"a": [1, None]})
    assert DocumentParser().load(path) == {"a": [1, None]}


def test_load_yaml(tmp_path):
    path = tmp_path / "doc.yaml"
    path.write_text("a:\n  - b: 1\nc: ~\n", encoding="utf-8")
    assert DocumentParser().load(path) == {"a": [{"b": 1}], "c": None}


def test_empty_yaml_is_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert DocumentParser().load(path) == {}


def test_missing_file(tmp_path):
    with pytest.raises(DocumentLoadError, match="not found"):
        DocumentParser().load(tmp_path / "nope.json")


def test_directory_is_rejected(tmp_path):
    with pytest.raises(DocumentLoadError, match="not a file"):
        DocumentParser().load(tmp_path)


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentLoadError, match="Invalid JSON"):
        DocumentParser().load(path)


def test_invalid_yaml():
    with pytest.raises(DocumentLoadError, match="Invalid YAML"):
        DocumentParser().load_from_string("a: [1, 2", "yaml")


def test_unsupported_format():
    with pytest.raises(DocumentLoadError, match="Unsupported"):
        DocumentParser().load_from_string("{}", "toml")


def test_cache(write_json):
    path = write_json("doc.json", {"a": 1})
    parser = DocumentParser(cache_enabled=True)
    first = parser.load(path)
    path.write_text('{"a": 2}', encoding="utf-8")
    assert parser.load(path) is first

    parser.clear_cache()
    assert parser.load(path) == {"a": 2}


def test_no_cache_by_default(write_json):
    path = write_json("doc.json", {"a": 1})
    parser = DocumentParser()
    parser.load(path)
    path.write_text('{"a": 2}', encoding="utf-8")
    assert parser.load(path) == {"a": 2}
