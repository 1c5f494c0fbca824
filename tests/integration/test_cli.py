"""Integration tests for the facades CLI.

These tests verify the commands work end-to-end, including:
- validate accepts good configurations and rejects bad ones
- layouts lists the ranked options
- generate produces text and JSON designs, with and without an image
- Exit codes are correct
"""

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from PIL import Image
from typer.testing import CliRunner

from facades.cli.main import app

WriteConfig = Callable[..., Path]


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def small_config() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "wall": {"width": 96, "height": 120, "gap": 0.25},
        "panels": {"widths": [48], "heights": [120]},
        "grid": {"spacing_x": 4.0},
    }


@pytest.fixture
def image_path(tmp_path: Path, gradient_image: Image.Image) -> Path:
    path = tmp_path / "art.png"
    gradient_image.save(path)
    return path


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config: WriteConfig) -> None:
        path = write_config({"schema_version": "1.0"})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "configuration is valid" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_unknown_field(self, runner: CliRunner, write_config: WriteConfig) -> None:
        path = write_config({"schema_version": "1.0", "colour": "red"})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "colour" in result.output

    def test_missing_image(self, runner: CliRunner, write_config: WriteConfig) -> None:
        path = write_config({"schema_version": "1.0", "image": {"path": "nope.png"}})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Image not found" in result.output

    def test_image_resolved_next_to_config(
        self, runner: CliRunner, write_config: WriteConfig, image_path: Path
    ) -> None:
        path = write_config({"schema_version": "1.0", "image": {"path": image_path.name}})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0


class TestLayoutsCommand:
    """Tests for the layouts command."""

    def test_lists_options(self, runner: CliRunner, write_config: WriteConfig) -> None:
        path = write_config({"schema_version": "1.0"})
        result = runner.invoke(app, ["layouts", str(path)])
        assert result.exit_code == 0
        assert "LAYOUT OPTIONS" in result.output
        assert 'H: 120"' in result.output

    def test_no_layout(self, runner: CliRunner, write_config: WriteConfig) -> None:
        path = write_config(
            {"schema_version": "1.0", "wall": {"width": 10, "height": 10}}
        )
        result = runner.invoke(app, ["layouts", str(path)])
        assert result.exit_code == 1
        assert "No layout possible" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_text_without_image(
        self, runner: CliRunner, write_config: WriteConfig, small_config: dict[str, Any]
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 0
        assert "PANEL SCHEDULE" in result.output
        assert "A1" in result.output and "A2" in result.output
        assert "No source image" in result.output

    def test_json_with_image_option(
        self,
        runner: CliRunner,
        write_config: WriteConfig,
        small_config: dict[str, Any],
        image_path: Path,
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(
            app, ["generate", str(path), "--image", str(image_path), "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["has_image"] is True
        assert data["total_apertures"] > 0
        assert [p["label"] for p in data["panels"]] == ["A1", "A2"]

    def test_image_from_config(
        self,
        runner: CliRunner,
        write_config: WriteConfig,
        small_config: dict[str, Any],
        image_path: Path,
    ) -> None:
        small_config["image"] = {"path": image_path.name}
        path = write_config(small_config)
        result = runner.invoke(app, ["generate", str(path), "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["has_image"] is True

    def test_output_file(
        self,
        runner: CliRunner,
        write_config: WriteConfig,
        small_config: dict[str, Any],
        tmp_path: Path,
    ) -> None:
        path = write_config(small_config)
        out = tmp_path / "designs" / "facade.json"
        result = runner.invoke(
            app, ["generate", str(path), "--format", "json", "--output", str(out)]
        )
        assert result.exit_code == 0
        assert f"Wrote {out}" in result.output
        assert json.loads(out.read_text(encoding="utf-8"))["selected_layout"] == 0

    def test_text_output_file(
        self,
        runner: CliRunner,
        write_config: WriteConfig,
        small_config: dict[str, Any],
        tmp_path: Path,
    ) -> None:
        path = write_config(small_config)
        out = tmp_path / "reports" / "facade.txt"
        result = runner.invoke(app, ["generate", str(path), "-o", str(out)])
        assert result.exit_code == 0
        assert "PANEL SCHEDULE" in out.read_text(encoding="utf-8")
        assert "PANEL SCHEDULE" not in result.output

    def test_layout_option_clamped(
        self, runner: CliRunner, write_config: WriteConfig, small_config: dict[str, Any]
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(app, ["generate", str(path), "--layout", "99", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["selected_layout"] == len(data["layout_options"]) - 1

    def test_unknown_format(
        self, runner: CliRunner, write_config: WriteConfig, small_config: dict[str, Any]
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(app, ["generate", str(path), "--format", "dxf"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_missing_image(
        self,
        runner: CliRunner,
        write_config: WriteConfig,
        small_config: dict[str, Any],
        tmp_path: Path,
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(
            app, ["generate", str(path), "--image", str(tmp_path / "none.png")]
        )
        assert result.exit_code == 1
        assert "Image not found" in result.output

    def test_no_layout_exits_nonzero(
        self, runner: CliRunner, write_config: WriteConfig
    ) -> None:
        path = write_config({"schema_version": "1.0", "wall": {"width": 10, "height": 10}})
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 1
        assert "No layout possible" in result.output

    def test_verbose_flag(
        self, runner: CliRunner, write_config: WriteConfig, small_config: dict[str, Any]
    ) -> None:
        path = write_config(small_config)
        result = runner.invoke(app, ["--verbose", "generate", str(path)])
        assert result.exit_code == 0
