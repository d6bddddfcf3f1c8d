from datetime import date, datetime

import pytest

from inkwell.content.exceptions import ValidationError
from inkwell.content.store import FilesystemDocumentStore
from inkwell.content.validation import validate, validate_records
from inkwell.data_primitives import RawRecord
from tests.conftest import make_record


def test_valid_record_becomes_document():
    doc = validate(make_record(tags=["python", "release"], thumbnail="https://img.example/x.png"), sequence=3)

    assert doc.title == "Hello"
    assert doc.date == date(2025, 6, 4)
    assert doc.author == "Jane"
    assert doc.slug == "hello"
    assert doc.tags == frozenset({"python", "release"})
    assert doc.thumbnail == "https://img.example/x.png"
    assert doc.draft is False
    assert doc.sequence == 3
    assert doc.body == "Some *text*."


def test_optional_fields_default():
    doc = validate(make_record())

    assert doc.tags == frozenset()
    assert doc.draft is False
    assert doc.thumbnail is None
    assert doc.description is None


@pytest.mark.parametrize("missing", ["title", "date", "author"])
def test_missing_required_field_is_named(missing):
    record = make_record(**{missing: None})

    with pytest.raises(ValidationError) as excinfo:
        validate(record)

    assert excinfo.value.fields == (missing,)
    assert excinfo.value.source_id == "hello.md"


def test_every_missing_field_is_reported():
    record = RawRecord(source_id="empty.md", metadata={}, body="")

    with pytest.raises(ValidationError) as excinfo:
        validate(record)

    assert set(excinfo.value.fields) == {"title", "date", "author"}


def test_blank_strings_count_as_missing():
    with pytest.raises(ValidationError) as excinfo:
        validate(make_record(title="   ", author=""))

    assert set(excinfo.value.fields) == {"title", "author"}


@pytest.mark.parametrize("value", ["not-a-date", "2025-13-40", 12345])
def test_date_must_be_a_calendar_date(value):
    with pytest.raises(ValidationError) as excinfo:
        validate(make_record(date=value))

    assert excinfo.value.fields == ("date",)


def test_datetime_is_truncated_to_date():
    doc = validate(make_record(date=datetime(2025, 6, 4, 18, 30)))
    assert doc.date == date(2025, 6, 4)


def test_comma_separated_tags_are_split():
    doc = validate(make_record(tags="python, release, "))
    assert doc.tags == frozenset({"python", "release"})


def test_draft_flag_is_read():
    assert validate(make_record(draft=True)).draft is True


def test_explicit_slug_is_used_verbatim():
    doc = validate(make_record(source_id="posts/2025-06-04-hello.md", slug="hello-world"))
    assert doc.slug == "hello-world"


def test_slug_is_derived_from_file_name():
    doc = validate(make_record(source_id="guides/Getting Started.md"))
    assert doc.slug == "getting-started"


def test_explicit_slug_must_be_url_safe():
    with pytest.raises(ValidationError) as excinfo:
        validate(make_record(slug="Not A Slug"))

    assert excinfo.value.fields == ("slug",)


@pytest.mark.parametrize("source_id", ["日本.md", "中文.md", "!!!.md"])
def test_file_name_without_slug_characters_needs_explicit_slug(source_id):
    with pytest.raises(ValidationError) as excinfo:
        validate(make_record(source_id))

    assert excinfo.value.fields == ("slug",)
    assert "explicit slug" in str(excinfo.value)


def test_explicit_slug_rescues_non_ascii_file_name():
    assert validate(make_record("日本.md", slug="nihon")).slug == "nihon"


def test_non_ascii_file_names_are_rejected_individually():
    report = validate_records([make_record("日本.md"), make_record("中文.md"), make_record("hello.md")])

    assert [d.slug for d in report.documents] == ["hello"]
    assert [r.source_id for r in report.rejected] == ["日本.md", "中文.md"]


def test_numeric_yaml_values_are_read_as_text():
    doc = validate(make_record(title=1984, author=42, tags=[2025, "python"]))

    assert doc.title == "1984"
    assert doc.author == "42"
    assert doc.tags == frozenset({"2025", "python"})


def test_unparseable_front_matter_is_rejected():
    record = RawRecord(source_id="broken.md", body="---\n", parse_error="invalid YAML")

    with pytest.raises(ValidationError) as excinfo:
        validate(record)

    assert excinfo.value.fields == ("front-matter",)
    assert excinfo.value.detail == "invalid YAML"


@pytest.mark.parametrize("workers", [1, 4])
def test_validate_records_isolates_bad_records(workers):
    records = [
        make_record("a.md"),
        make_record("b.md", author=None),
        make_record("c.md"),
    ]

    report = validate_records(records, workers=workers)

    assert [d.source_id for d in report.documents] == ["a.md", "c.md"]
    assert [d.sequence for d in report.documents] == [0, 2]
    assert len(report.rejected) == 1
    assert report.rejected[0].source_id == "b.md"
    assert report.rejected[0].fields == ("author",)
    assert not report.ok


def test_rejections_are_logged(caplog):
    with caplog.at_level("WARNING", logger="inkwell.content.validation"):
        validate_records([make_record("b.md", author=None)])

    assert "b.md" in caplog.text
    assert "author" in caplog.text


def test_numeric_front_matter_from_disk_is_accepted(site_root, write_article):
    write_article("orwell.md", "title: 1984\ndate: 2025-06-04\nauthor: Jane\ntags: [2025, python]")

    report = validate_records(FilesystemDocumentStore(site_root / "content" / "blog").list_all())

    assert report.ok
    (doc,) = report.documents
    assert doc.title == "1984"
    assert doc.tags == frozenset({"2025", "python"})
