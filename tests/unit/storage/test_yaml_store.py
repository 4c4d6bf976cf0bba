"""Tests for the YAML record store."""

import logging
from pathlib import Path

import pytest

from ytflow.domain import (
    ShortVideo,
    Sponsorship,
    TitleVariant,
    VideoIndexEntry,
    VideoRecord,
)
from ytflow.storage import (
    StorageError,
    VideoValidationError,
    get_video_path,
    iter_videos,
    load_index,
    load_video,
    sanitize_file_name,
    write_index,
    write_video,
)


class TestVideoPaths:
    """Tests for file name helpers."""

    def test_sanitize_removes_and_replaces(self) -> None:
        """Unsafe characters are removed or replaced by hyphens."""
        assert sanitize_file_name('what-is-k8s?:-part-1"') == "what-is-k8s-part-1"

    def test_get_video_path(self) -> None:
        """Name and category are lower-cased and hyphenated."""
        path = get_video_path("What Is K8s?", "DevOps Tools", Path("m"))
        assert path == Path("m/devops-tools/what-is-k8s.yaml")

    def test_default_manuscript_dir(self) -> None:
        """Paths default to the manuscript directory."""
        assert get_video_path("x", "y") == Path("manuscript/y/x.yaml")


class TestLoadVideo:
    """Tests for load_video."""

    def test_missing_file_yields_empty_record(self, tmp_path: Path) -> None:
        """A missing file reads as a fresh record with its path set."""
        path = tmp_path / "nope.yaml"
        record = load_video(path)
        assert record == VideoRecord(path=str(path))

    def test_empty_file_yields_empty_record(self, tmp_path: Path) -> None:
        """An empty document reads as a fresh record."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_video(path).delayed is False

    def test_reads_lowercase_keys(self, tmp_path: Path, write_yaml) -> None:
        """Stored keys use lower case without separators."""
        path = write_yaml(
            tmp_path / "v.yaml",
            {
                "name": "Argo CD",
                "projectname": "Argo CD",
                "sponsorship": {"amount": "$100", "emails": "a@b.com"},
                "requestedit": True,
                "uploadvideo": "/v.mp4",
                "videoid": "abc",
                "hugopath": "post.md",
                "notifiedsponsors": True,
                "gde": True,
                "shorts": [{"title": "s1", "youtubeid": "yt1"}],
                "dubbing": {"language": "es", "videoid": "dub1"},
            },
        )
        record = load_video(path)
        assert record.project_name == "Argo CD"
        assert record.sponsorship == Sponsorship(amount="$100", emails="a@b.com")
        assert record.request_edit is True
        assert record.upload_video_path == "/v.mp4"
        assert record.video_id == "abc"
        assert record.hugo_post_path == "post.md"
        assert record.notified_sponsors is True
        assert record.gde_posted is True
        assert record.shorts == (ShortVideo(title="s1", youtube_id="yt1"),)
        assert record.dubbing.video_id == "dub1"

    def test_numeric_amount_becomes_string(self, tmp_path: Path, write_yaml) -> None:
        """Unquoted amounts are read as text."""
        path = write_yaml(tmp_path / "v.yaml", {"sponsorship": {"amount": 500}})
        assert load_video(path).sponsorship.amount == "500"

    def test_unquoted_scalars_in_text_fields(self, tmp_path: Path) -> None:
        """Booleans, numbers and dates written bare are read as their text."""
        path = tmp_path / "v.yaml"
        path.write_text(
            "name: v\n"
            "date: 2030-01-21\n"
            "tagline: yes\n"
            "location: no\n"
            "members: 3\n"
            "sponsorship:\n"
            "  amount: 99.5\n"
            "relatedvideos: [1, two]\n",
            encoding="utf-8",
        )
        record = load_video(path)
        assert record.date == "2030-01-21"
        assert record.tagline == "yes"
        assert record.location == "no"
        assert record.members == "3"
        assert record.sponsorship.amount == "99.5"
        assert record.related_videos == ("1", "two")

    def test_unquoted_timestamp_in_date(self, tmp_path: Path) -> None:
        """A bare YAML timestamp keeps the publish date layout."""
        path = tmp_path / "v.yaml"
        path.write_text("date: 2030-01-21 16:00:00\n", encoding="utf-8")
        assert load_video(path).date == "2030-01-21T16:00"

    def test_unquoted_index_name(self, tmp_path: Path) -> None:
        """Index names that look like numbers are read as text."""
        path = tmp_path / "index.yaml"
        path.write_text("- name: 2024\n  category: recap\n", encoding="utf-8")
        assert load_index(path) == [VideoIndexEntry("2024", "recap")]

    def test_nulls_fall_back_to_defaults(self, tmp_path: Path) -> None:
        """Explicit nulls behave like missing keys."""
        path = tmp_path / "v.yaml"
        path.write_text("date: null\ndelayed: null\n", encoding="utf-8")
        record = load_video(path)
        assert record.date == ""
        assert record.delayed is False

    def test_unknown_keys_ignored(self, tmp_path: Path, write_yaml) -> None:
        """Keys this tool does not know about are ignored."""
        path = write_yaml(tmp_path / "v.yaml", {"name": "x", "hackernews": "y"})
        assert load_video(path).name == "x"

    def test_comma_separated_related_videos(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Legacy comma-separated lists are split."""
        path = write_yaml(tmp_path / "v.yaml", {"relatedvideos": "a, b,,c"})
        assert load_video(path).related_videos == ("a", "b", "c")

    def test_legacy_title_becomes_first_variant(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """A single title string is read as variant 1."""
        path = write_yaml(tmp_path / "v.yaml", {"title": "Legacy"})
        assert load_video(path).titles == (TitleVariant(index=1, text="Legacy"),)

    def test_title_variants(self, tmp_path: Path, write_yaml) -> None:
        """Title variants are read with their share."""
        path = write_yaml(
            tmp_path / "v.yaml",
            {
                "title": "ignored when variants exist",
                "titles": [
                    {"index": 1, "text": "A", "share": 55.5},
                    {"index": 2, "text": "B"},
                ],
            },
        )
        record = load_video(path)
        assert record.titles == (
            TitleVariant(index=1, text="A", share=55.5),
            TitleVariant(index=2, text="B"),
        )

    def test_duplicate_variant_index_rejected(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Variant indexes must be unique."""
        path = write_yaml(
            tmp_path / "v.yaml",
            {"titles": [{"index": 1, "text": "A"}, {"index": 1, "text": "B"}]},
        )
        with pytest.raises(VideoValidationError, match="duplicate") as exc_info:
            load_video(path)
        assert exc_info.value.field == "titles"
        assert exc_info.value.path == path

    def test_out_of_range_variant_index_rejected(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Variant indexes must be 1-3."""
        path = write_yaml(tmp_path / "v.yaml", {"titles": [{"index": 4}]})
        with pytest.raises(VideoValidationError) as exc_info:
            load_video(path)
        assert exc_info.value.field == "titles.0.index"

    def test_wrong_type_rejected(self, tmp_path: Path, write_yaml) -> None:
        """Values of the wrong type raise VideoValidationError."""
        path = write_yaml(tmp_path / "v.yaml", {"delayed": "sometimes"})
        with pytest.raises(VideoValidationError, match="delayed"):
            load_video(path)

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        """A document must be a mapping."""
        path = tmp_path / "v.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(VideoValidationError, match="expected a mapping"):
            load_video(path)

    def test_invalid_yaml_raises_storage_error(self, tmp_path: Path) -> None:
        """Malformed YAML raises StorageError."""
        path = tmp_path / "v.yaml"
        path.write_text("name: [unclosed\n", encoding="utf-8")
        with pytest.raises(StorageError, match="Invalid YAML"):
            load_video(path)


class TestWriteVideo:
    """Tests for write_video."""

    def test_written_record_reads_back(self, tmp_path: Path) -> None:
        """A saved record loads to an equal record."""
        path = tmp_path / "devops" / "v.yaml"
        record = VideoRecord(
            name="v",
            category="devops",
            path=str(path),
            sponsorship=Sponsorship(amount="$100", blocked="Legal"),
            related_videos=("a", "b"),
            titles=(TitleVariant(index=1, text="A", share=12.5),),
            request_edit=True,
            upload_video_path="/v.mp4",
        )
        write_video(record, path)
        assert load_video(path) == record

    def test_writes_lowercase_keys(self, tmp_path: Path) -> None:
        """Saved documents use the on-disk key names."""
        path = tmp_path / "v.yaml"
        write_video(VideoRecord(request_edit=True), path)
        text = path.read_text(encoding="utf-8")
        assert "requestedit: true" in text
        assert "request_edit" not in text


class TestIndex:
    """Tests for index load/save."""

    def test_missing_index_is_empty(self, tmp_path: Path) -> None:
        """A missing index file reads as an empty list."""
        assert load_index(tmp_path / "index.yaml") == []

    def test_write_then_load(self, tmp_path: Path) -> None:
        """Index entries keep their order."""
        path = tmp_path / "index.yaml"
        entries = [VideoIndexEntry("b", "x"), VideoIndexEntry("a", "y")]
        write_index(entries, path)
        assert load_index(path) == entries

    def test_entry_without_category_rejected(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Entries need a name and a category."""
        path = write_yaml(tmp_path / "index.yaml", [{"name": "x"}])
        with pytest.raises(VideoValidationError, match="category"):
            load_index(path)

    def test_non_list_rejected(self, tmp_path: Path, write_yaml) -> None:
        """The index must be a list."""
        path = write_yaml(tmp_path / "index.yaml", {"name": "x"})
        with pytest.raises(VideoValidationError, match="expected a list"):
            load_index(path)


class TestIterVideos:
    """Tests for iter_videos."""

    def test_loads_indexed_videos(self, manuscript: Path) -> None:
        """Every indexed video with a file is loaded in index order."""
        records = list(iter_videos(manuscript, manuscript.parent / "manuscript"))
        assert [r.name for r in records] == [
            "Published Video",
            "Edit Me",
            "Blocked Video",
            "Fresh Idea",
        ]

    def test_skips_missing_files_with_warning(
        self, manuscript: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Index entries without a file are skipped."""
        with caplog.at_level(logging.WARNING):
            list(iter_videos(manuscript, manuscript.parent / "manuscript"))
        assert "Skipping Missing File" in caplog.text

    def test_invalid_video_skipped(
        self,
        tmp_path: Path,
        write_yaml,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A broken document is logged and the remaining videos still load."""
        index = write_yaml(
            tmp_path / "index.yaml",
            [
                {"name": "Broken", "category": "c"},
                {"name": "Good", "category": "c"},
            ],
        )
        videos = tmp_path / "manuscript"
        write_yaml(videos / "c" / "broken.yaml", {"delayed": "sometimes"})
        write_yaml(videos / "c" / "good.yaml", {"name": "Good", "category": "c"})

        with caplog.at_level(logging.ERROR):
            records = list(iter_videos(index, videos))

        assert [r.name for r in records] == ["Good"]
        (error,) = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert "delayed" in error.getMessage()
        assert error.path == str(videos / "c" / "broken.yaml")

    def test_malformed_yaml_skipped(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Unparsable video files are skipped too."""
        index = write_yaml(tmp_path / "index.yaml", [{"name": "Bad", "category": "c"}])
        bad = tmp_path / "manuscript" / "c" / "bad.yaml"
        bad.parent.mkdir(parents=True)
        bad.write_text("name: [unclosed\n", encoding="utf-8")
        assert list(iter_videos(index, tmp_path / "manuscript")) == []

    def test_identity_filled_from_index(
        self, tmp_path: Path, write_yaml
    ) -> None:
        """Documents without name or category take them from the index."""
        index = write_yaml(tmp_path / "index.yaml", [{"name": "Bare", "category": "c"}])
        write_yaml(tmp_path / "manuscript" / "c" / "bare.yaml", {"delayed": True})
        (record,) = iter_videos(index, tmp_path / "manuscript")
        assert (record.name, record.category) == ("Bare", "c")
        assert record.delayed is True
