import pytest

from shape_verifier import ManifestError
from shape_verifier.models.manifest_schema import (
    clear_cache,
    load_manifest,
    load_schema,
    validate_manifest_data,
)


def test_bundled_schema_loads_and_is_cached():
    clear_cache()
    schema = load_schema()
    assert schema["required"] == ["checks"]
    assert load_schema() is schema


def test_valid_manifest_data():
    data = {"checks": [{"shape": "s.json", "subject": "d.json", "name": "users", "strict": True}]}
    assert validate_manifest_data(data) == []


def test_schema_violations_are_all_reported():
    data = {"checks": [{"shape": "s.json"}, {"shape": "s.json", "subject": 3}]}
    problems = validate_manifest_data(data)
    assert len(problems) == 2
    assert any("'subject' is a required property" in p and "path=/checks/0" in p for p in problems)
    assert any("path=/checks/1/subject" in p for p in problems)


def test_empty_check_list_is_rejected():
    assert validate_manifest_data({"checks": []})


def test_load_manifest_resolves_relative_paths(write_yaml, tmp_path):
    manifest = write_yaml(
        "suite/manifest.yaml",
        {
            "checks": [
                {"name": "users", "shape": "shapes/users.json", "subject": "data/users.yaml"},
                {"shape": "shapes/users.json", "subject": "data/other.yaml", "strict": False},
            ]
        },
    )
    checks = load_manifest(manifest)
    assert [c.name for c in checks] == ["users", "data/other.yaml"]
    assert checks[0].shape_path == tmp_path / "suite" / "shapes" / "users.json"
    assert checks[0].subject_path == tmp_path / "suite" / "data" / "users.yaml"
    assert checks[0].strict is None
    assert checks[1].strict is False


def test_invalid_manifest_raises(write_yaml):
    manifest = write_yaml("manifest.yaml", {"checks": [{"shape": "a.json"}], "extra": 1})
    with pytest.raises(ManifestError, match="Manifest validation failed"):
        load_manifest(manifest)


def test_unreadable_manifest_raises(tmp_path):
    with pytest.raises(ManifestError, match="Failed to load manifest"):
        load_manifest(tmp_path / "missing.yaml")
