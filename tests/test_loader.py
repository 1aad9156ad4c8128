"""Tests for the filesystem collection loader."""

from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from portfolio_site.core.errors import CollectionNotFoundError, EntryValidationError
from portfolio_site.input.dates import normalize_pub_date, parse_iso8601
from portfolio_site.input.frontmatter import parse_frontmatter, split_frontmatter
from portfolio_site.input.loader import CollectionLoader, build_entry, load_snapshot


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_split_frontmatter_returns_yaml_and_body():
    raw, body = split_frontmatter("---\ntitle: Hello\n---\n# Heading\n")

    assert raw == "title: Hello\n"
    assert body == "# Heading\n"


def test_parse_frontmatter_without_block_returns_none():
    assert parse_frontmatter("# Just markdown\n") is None
    assert parse_frontmatter("---\n---\nbody") == {}


def test_parse_frontmatter_rejects_non_mapping():
    with pytest.raises(ValueError):
        parse_frontmatter("---\n- a\n- b\n---\n")


def test_parse_iso8601_handles_zulu_suffix():
    parsed = parse_iso8601("2023-07-10T08:30:00Z")

    assert parsed == datetime(2023, 7, 10, 8, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        date(2023, 7, 8),
        datetime(2023, 7, 8),
        "2023-07-08",
        "2023-07-08T00:00:00+00:00",
        "Jul 08 2023",
        "July 8, 2023",
    ],
)
def test_normalize_pub_date_accepts_common_forms(value):
    assert normalize_pub_date(value) == datetime(2023, 7, 8, tzinfo=timezone.utc)


def test_normalize_pub_date_converts_offsets_to_utc():
    parsed = normalize_pub_date("2023-07-08T02:00:00+02:00")

    assert parsed == datetime(2023, 7, 8, 0, 0, tzinfo=timezone.utc)
    assert parsed.tzinfo == timezone.utc


@pytest.mark.parametrize("value", ["", "next tuesday", 20230708, ["2023-07-08"]])
def test_normalize_pub_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        normalize_pub_date(value)


def test_load_reads_entries_in_path_order(tmp_path: Path):
    _write(
        tmp_path / "blog" / "b-post.md",
        "---\ntitle: B\npubDate: 2023-07-06\ndescription: second\ntags: [python]\n---\nBody\n",
    )
    _write(
        tmp_path / "blog" / "a-post.md",
        "---\ntitle: A\npubDate: 'Jul 10 2023'\ndraft: true\nheroImage: /img/a.png\n---\n",
    )
    _write(tmp_path / "blog" / "tutorial" / "index.mdx", "---\npubDate: 2023-07-08\n---\n")
    _write(tmp_path / "blog" / "notes.txt", "not an entry")

    entries = CollectionLoader(tmp_path).load("blog")

    assert [e.slug for e in entries] == ["a-post", "b-post", "tutorial"]
    first, second, third = entries
    assert first.draft is True
    assert first.hero_image == "/img/a.png"
    assert first.pub_date == datetime(2023, 7, 10, tzinfo=timezone.utc)
    assert second.draft is False
    assert second.description == "second"
    assert second.tags == ("python",)
    assert third.title == "tutorial"
    assert third.collection == "blog"


def test_load_keeps_subfolder_in_slug(tmp_path: Path):
    """Same file name in different folders must give distinct slugs."""
    _write(tmp_path / "blog" / "2022" / "recap.md", "---\npubDate: 2022-12-31\n---\n")
    _write(tmp_path / "blog" / "2023" / "recap.md", "---\npubDate: 2023-12-31\n---\n")
    _write(tmp_path / "blog" / "2023" / "talk" / "index.md", "---\npubDate: 2023-06-01\n---\n")

    entries = CollectionLoader(tmp_path).load("blog")

    assert [e.slug for e in entries] == ["2022/recap", "2023/recap", "2023/talk"]


def test_load_skips_underscore_files_and_folders(tmp_path: Path):
    _write(tmp_path / "blog" / "kept.md", "---\npubDate: 2023-01-01\n---\n")
    _write(tmp_path / "blog" / "_partial.md", "no frontmatter here")
    _write(tmp_path / "blog" / "_drafts" / "idea.md", "no frontmatter either")

    entries = CollectionLoader(tmp_path).load("blog")

    assert [e.slug for e in entries] == ["kept"]


def test_load_rejects_file_that_is_not_utf8(tmp_path: Path):
    path = tmp_path / "blog" / "binary.md"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"---\npubDate: 2023-01-01\ntitle: \xff\xfe\n---\n")

    with pytest.raises(EntryValidationError) as excinfo:
        CollectionLoader(tmp_path).load("blog")

    assert excinfo.value.path == path
    assert "UTF-8" in str(excinfo.value)


def test_load_missing_collection_raises(tmp_path: Path):
    with pytest.raises(CollectionNotFoundError, match="projects"):
        CollectionLoader(tmp_path).load("projects")


def test_load_empty_collection_returns_empty(tmp_path: Path):
    (tmp_path / "projects").mkdir()

    assert CollectionLoader(tmp_path).load("projects") == ()


def test_load_rejects_entry_without_pub_date(tmp_path: Path):
    path = _write(tmp_path / "blog" / "undated.md", "---\ntitle: Undated\n---\n")

    with pytest.raises(EntryValidationError) as excinfo:
        CollectionLoader(tmp_path).load("blog")

    assert excinfo.value.path == path
    assert "pubDate" in str(excinfo.value)


def test_load_rejects_missing_frontmatter(tmp_path: Path):
    _write(tmp_path / "blog" / "bare.md", "# No frontmatter\n")

    with pytest.raises(EntryValidationError, match="missing frontmatter"):
        CollectionLoader(tmp_path).load("blog")


def test_build_entry_rejects_non_boolean_draft():
    with pytest.raises(EntryValidationError, match="draft"):
        build_entry("blog", "post", {"pubDate": "2023-01-01", "draft": "yes please"})


def test_build_entry_treats_absent_draft_as_published():
    entry = build_entry("blog", "post", {"pubDate": "2023-01-01"})

    assert entry.draft is False
    assert entry.title == "post"


def test_load_snapshot_reads_each_collection_once(tmp_path: Path):
    _write(tmp_path / "blog" / "one.md", "---\npubDate: 2023-01-01\n---\n")
    (tmp_path / "projects").mkdir()
    loader = CollectionLoader(tmp_path)
    calls: list[str] = []
    original = loader.load

    def counting_load(name: str):
        calls.append(name)
        return original(name)

    loader.load = counting_load  # type: ignore[method-assign]

    snapshot = load_snapshot(loader, ("blog", "projects"))

    assert calls == ["blog", "projects"]
    assert len(snapshot["blog"]) == 1
    assert snapshot["projects"] == ()
