"""Tests for the ytflow CLI commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ytflow.cli import main
from ytflow.cli.exit_codes import ExitCode
from ytflow.config import StorageConfig, YtflowConfig

NOW = ["--now", "2025-06-15T12:00"]


@pytest.fixture
def cli_obj(manuscript: Path) -> dict:
    """Context object with a config pointing at the test manuscript."""
    config = YtflowConfig(
        storage=StorageConfig(
            index_path=manuscript,
            manuscript_dir=manuscript.parent / "manuscript",
        )
    )
    return {"config": config}


@pytest.fixture
def published_yaml(manuscript: Path) -> Path:
    """Path to the published video's YAML file."""
    return manuscript.parent / "manuscript" / "devops" / "published-video.yaml"


class TestMainGroup:
    """Tests for the main command group."""

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        """All commands are registered."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for name in ("phases", "videos", "progress", "classify"):
            assert name in result.output

    def test_index_option(
        self, runner: CliRunner, manuscript: Path, tmp_path: Path
    ) -> None:
        """--index and --manuscript-dir select the data to read."""
        result = runner.invoke(
            main,
            [
                "--log-file",
                str(tmp_path / "ytflow.log"),
                "--index",
                str(manuscript),
                "--manuscript-dir",
                str(manuscript.parent / "manuscript"),
                "phases",
                "--format",
                "json",
                *NOW,
            ],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["total"] == 4

    def test_config_file(
        self, runner: CliRunner, manuscript: Path, tmp_path: Path
    ) -> None:
        """Storage locations can come from the config file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text(
            "[storage]\n"
            f'index_path = "{manuscript.as_posix()}"\n'
            f'manuscript_dir = "{(manuscript.parent / "manuscript").as_posix()}"\n',
            encoding="utf-8",
        )
        result = runner.invoke(
            main,
            [
                "--config",
                str(config_path),
                "--log-file",
                str(tmp_path / "ytflow.log"),
                "phases",
                "--format",
                "json",
                *NOW,
            ],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["phases"]["published"] == 1

    def test_invalid_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """An unparsable config file is a config error."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("[storage\n", encoding="utf-8")
        result = runner.invoke(main, ["--config", str(config_path), "phases"])
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Cannot parse config file" in result.output


class TestPhasesCommand:
    """Tests for ytflow phases."""

    def test_text_hides_empty_phases(self, runner: CliRunner, cli_obj: dict) -> None:
        """Only non-empty phases are listed, in menu order."""
        result = runner.invoke(main, ["phases", *NOW], obj=cli_obj)
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Published (1)",
            "Edit Requested (1)",
            "Sponsored Blocked (1)",
            "Ideas (1)",
        ]

    def test_json_lists_every_phase(self, runner: CliRunner, cli_obj: dict) -> None:
        """JSON output includes zero buckets."""
        result = runner.invoke(main, ["phases", "--format", "json", *NOW], obj=cli_obj)
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total"] == 4
        assert len(data["phases"]) == 8
        assert data["phases"]["started"] == 0
        assert data["phases"]["sponsored_blocked"] == 1

    def test_empty_index(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing index means no videos."""
        obj = {
            "config": YtflowConfig(
                storage=StorageConfig(index_path=tmp_path / "none.yaml")
            )
        }
        result = runner.invoke(main, ["phases"], obj=obj)
        assert result.exit_code == 0
        assert "No videos found." in result.output

    def test_invalid_index(self, runner: CliRunner, tmp_path: Path) -> None:
        """An invalid index is reported as a validation error."""
        index = tmp_path / "index.yaml"
        index.write_text("- name: x\n", encoding="utf-8")
        obj = {"config": YtflowConfig(storage=StorageConfig(index_path=index))}
        result = runner.invoke(main, ["phases"], obj=obj)
        assert result.exit_code == ExitCode.VIDEO_VALIDATION_ERROR
        assert "Error:" in result.output

    def test_broken_video_does_not_hide_others(
        self, runner: CliRunner, cli_obj: dict, manuscript: Path
    ) -> None:
        """A record that fails to load is left out of the counts."""
        broken = manuscript.parent / "manuscript" / "devops" / "fresh-idea.yaml"
        broken.write_text("name: Fresh Idea\ndelayed: maybe\n", encoding="utf-8")
        result = runner.invoke(main, ["phases", *NOW], obj=cli_obj)
        assert result.exit_code == 0, result.output
        assert "Published (1)" in result.output
        assert "Ideas" not in result.output

    def test_bare_yes_in_text_field(
        self, runner: CliRunner, cli_obj: dict, manuscript: Path
    ) -> None:
        """Hand-edited scalars load and classify instead of failing."""
        fresh = manuscript.parent / "manuscript" / "devops" / "fresh-idea.yaml"
        fresh.write_text(
            "name: Fresh Idea\ntagline: yes\nmembers: 3\n", encoding="utf-8"
        )
        result = runner.invoke(main, ["phases", *NOW], obj=cli_obj)
        assert result.exit_code == 0, result.output
        assert "Started (1)" in result.output
        assert "Published (1)" in result.output

    def test_invalid_now(self, runner: CliRunner, cli_obj: dict) -> None:
        """--now must use the publish date layout."""
        result = runner.invoke(main, ["phases", "--now", "tomorrow"], obj=cli_obj)
        assert result.exit_code == 2
        assert "expected YYYY-MM-DDTHH:MM" in result.output


class TestVideosCommand:
    """Tests for ytflow videos."""

    def test_lists_decorated_titles(self, runner: CliRunner, cli_obj: dict) -> None:
        """Titles carry blocked and AMA markers."""
        result = runner.invoke(
            main, ["videos", "sponsored_blocked", *NOW], obj=cli_obj
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Blocked Video (Legal) (AMA)"

    def test_dated_title(self, runner: CliRunner, cli_obj: dict) -> None:
        """Dated videos show their publish date."""
        result = runner.invoke(main, ["videos", "published", *NOW], obj=cli_obj)
        assert result.output.strip() == "Published Video (2025-01-10T16:00)"

    def test_empty_phase(self, runner: CliRunner, cli_obj: dict) -> None:
        """Empty phases say so."""
        result = runner.invoke(main, ["videos", "started", *NOW], obj=cli_obj)
        assert result.exit_code == 0
        assert "No videos in phase Started." in result.output

    def test_json(self, runner: CliRunner, cli_obj: dict) -> None:
        """JSON output lists the videos with their paths."""
        result = runner.invoke(
            main, ["videos", "ideas", "--format", "json", *NOW], obj=cli_obj
        )
        data = json.loads(result.output)
        assert data["phase"] == "ideas"
        assert [v["name"] for v in data["videos"]] == ["Fresh Idea"]
        assert data["videos"][0]["path"].endswith("fresh-idea.yaml")

    def test_unknown_phase(self, runner: CliRunner, cli_obj: dict) -> None:
        """Unknown phases are rejected by click."""
        result = runner.invoke(main, ["videos", "someday"], obj=cli_obj)
        assert result.exit_code == 2


class TestProgressCommand:
    """Tests for ytflow progress."""

    def test_text(self, runner: CliRunner, published_yaml: Path) -> None:
        """One label per aspect."""
        result = runner.invoke(main, ["progress", str(published_yaml)], obj={})
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 8
        assert lines[0] == "Initial Details (4/8)"
        assert "Publishing Details (3/4)" in lines

    def test_single_aspect_with_details(
        self, runner: CliRunner, published_yaml: Path
    ) -> None:
        """--details lists every task of the selected aspect."""
        result = runner.invoke(
            main,
            ["progress", str(published_yaml), "--aspect", "publishing", "--details"],
            obj={},
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "Publishing Details (3/4)",
            "  [x] videoFilePath",
            "  [x] youTubeVideoId",
            "  [ ] hugoPostPath",
            "  [x] shortsUploaded",
        ]

    def test_json(self, runner: CliRunner, published_yaml: Path) -> None:
        """JSON output has one entry per aspect."""
        result = runner.invoke(
            main, ["progress", str(published_yaml), "--format", "json"], obj={}
        )
        data = json.loads(result.output)
        assert data["video"] == "Published Video"
        assert list(data["aspects"]) == [
            "initial-details",
            "work-progress",
            "definition",
            "post-production",
            "publishing",
            "dubbing",
            "post-publish",
            "analysis",
        ]
        assert data["aspects"]["publishing"]["completed"] == 3

    def test_invalid_video(self, runner: CliRunner, tmp_path: Path) -> None:
        """Malformed YAML is a storage error."""
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n", encoding="utf-8")
        result = runner.invoke(main, ["progress", str(path)], obj={})
        assert result.exit_code == ExitCode.STORAGE_ERROR

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """The video file must exist."""
        result = runner.invoke(main, ["progress", str(tmp_path / "nope.yaml")], obj={})
        assert result.exit_code == 2


class TestClassifyCommand:
    """Tests for ytflow classify."""

    def test_text(self, runner: CliRunner, published_yaml: Path) -> None:
        """The phase display name is printed."""
        result = runner.invoke(main, ["classify", str(published_yaml), *NOW], obj={})
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Published"

    def test_trace(self, runner: CliRunner, published_yaml: Path) -> None:
        """--trace lists the rules examined."""
        result = runner.invoke(
            main, ["classify", str(published_yaml), "--trace", *NOW], obj={}
        )
        assert result.output.splitlines() == [
            "Published",
            "  sponsored-blocked: no match",
            "  published: matched",
        ]

    def test_trace_fallback(
        self, runner: CliRunner, manuscript: Path
    ) -> None:
        """A fallback classification says so."""
        path = manuscript.parent / "manuscript" / "devops" / "fresh-idea.yaml"
        result = runner.invoke(main, ["classify", str(path), "--trace", *NOW], obj={})
        assert result.output.splitlines()[-1] == "  fallback: Ideas"

    def test_json(self, runner: CliRunner, published_yaml: Path) -> None:
        """JSON output includes the phase value and trace."""
        result = runner.invoke(
            main,
            ["classify", str(published_yaml), "--trace", "--format", "json", *NOW],
            obj={},
        )
        data = json.loads(result.output)
        assert data["phase"] == "published"
        assert data["display_name"] == "Published"
        assert data["trace"][-1] == {
            "rule": "published",
            "phase": "published",
            "matched": True,
        }

    def test_validation_error_json(self, runner: CliRunner, tmp_path: Path) -> None:
        """Invalid videos produce a JSON error."""
        path = tmp_path / "bad.yaml"
        path.write_text("delayed: sometimes\n", encoding="utf-8")
        result = runner.invoke(
            main, ["classify", str(path), "--format", "json"], obj={}
        )
        assert result.exit_code == ExitCode.VIDEO_VALIDATION_ERROR
        assert '"VIDEO_VALIDATION_ERROR"' in result.output
