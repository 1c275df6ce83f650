import pytest

from shape_verifier.matcher.path_tracker import PathTracker
from shape_verifier.matcher.report import Issue, IssueKind, Report, ReportStatus
from shape_verifier.models.value_kind import ValueKind, type_tag


def test_new_report_is_ok():
    report = Report()
    assert report.status is ReportStatus.OK
    assert report.ok
    assert report.messages == []


def test_add_error_latches_failed():
    report = Report()
    report.add_error(IssueKind.MISSING_REQUIRED_KEY, "Missing required key 'a' at /", "/")
    assert report.status is ReportStatus.FAILED
    report.add_error(IssueKind.EMPTY_ARRAY, "Expected data in array at /b; found nothing", "/b")
    assert report.status is ReportStatus.FAILED
    assert report.issues[1] == Issue(IssueKind.EMPTY_ARRAY, "Expected data in array at /b; found nothing", "/b")


def test_to_dict():
    report = Report()
    report.add_error(IssueKind.ARRAY_TYPE_MISMATCH, "msg", "/p")
    assert report.to_dict() == {
        "status": "failed",
        "messages": ["msg"],
        "issues": [{"kind": "array_type_mismatch", "message": "msg", "path": "/p"}],
    }


def test_path_renders_root():
    assert PathTracker().render() == "/"


def test_path_push_pop_replace():
    path = PathTracker()
    path.push("a")
    path.push("b")
    assert path.render() == "/a/b"
    path.replace_top("c")
    assert path.render() == "/a/c"
    assert path.pop() == "c"
    assert path.segments == ["a"]


def test_replace_top_on_empty_path():
    with pytest.raises(IndexError):
        PathTracker().replace_top("x")


def test_descend_restores_length_after_replace():
    path = PathTracker()
    path.push("root")
    with path.descend("[*:key]"):
        path.replace_top("member")
        assert path.render() == "/root/member"
    assert path.segments == ["root"]


def test_descend_pops_on_exception():
    path = PathTracker()
    with pytest.raises(RuntimeError):
        with path.descend("a"):
            raise RuntimeError("boom")
    assert len(path) == 0


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.SCALAR),
        (1.5, ValueKind.SCALAR),
        ("text", ValueKind.SCALAR),
        ([1], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.MAPPING),
    ],
)
def test_value_kinds(value, kind):
    assert ValueKind.of(value) is kind


def test_type_tags_are_stable():
    assert [type_tag(v) for v in (None, 0, [], {})] == ["null", "scalar", "array", "object"]
