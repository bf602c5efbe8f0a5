"""Unit tests for the icon-swapper command line interface.

Tests use CliRunner for isolated command invocation. Every invocation points
``--data-file`` at a temporary JSON file so commands share state through it.
"""

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from icon_swapper.cli.main import cli
from icon_swapper.svg.parser import wrap_icon


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "icons.json"


@pytest.fixture
def invoke(runner: CliRunner, data_file: Path):
    """Invoke the CLI against the temporary data file."""

    def _invoke(*args: str):
        return runner.invoke(cli, ["--data-file", str(data_file), *args])

    return _invoke


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    """Directory of built-in icons with one valid and one broken file."""
    directory = tmp_path / "builtin"
    directory.mkdir()
    (directory / "star.svg").write_text(
        '<svg viewBox="0 0 10 10"><polygon points="5,0 10,10 0,10"/></svg>', encoding="utf-8"
    )
    (directory / "broken.svg").write_text("<svg><path></svg>", encoding="utf-8")
    return directory


class TestSetCommand:
    def test_set_persists_normalized_icon(self, invoke, data_file, gear_file, gear_normalized) -> None:
        result = invoke("set", "gear", str(gear_file))

        assert result.exit_code == 0
        assert "Icon set: gear" in result.output
        assert json.loads(data_file.read_text(encoding="utf-8")) == {"gear": gear_normalized}

    def test_non_svg_input_restores_default(self, invoke, data_file, gear_file, tmp_path) -> None:
        invoke("set", "gear", str(gear_file))
        text_file = tmp_path / "notes.txt"
        text_file.write_text("just some text", encoding="utf-8")

        result = invoke("set", "gear", str(text_file))

        assert result.exit_code == 0
        assert "restored to default" in result.output
        assert json.loads(data_file.read_text(encoding="utf-8")) == {}

    def test_malformed_svg_leaves_icon_unchanged(self, invoke, data_file, tmp_path) -> None:
        bad_file = tmp_path / "bad.svg"
        bad_file.write_text('<svg viewBox="0 0 1 1"><path></svg>', encoding="utf-8")

        result = invoke("set", "gear", str(bad_file))

        assert result.exit_code == 1
        assert "Could not parse SVG" in result.output
        assert not data_file.exists()


class TestShowAndList:
    def test_show_customized_icon(self, invoke, gear_file, gear_normalized) -> None:
        invoke("set", "gear", str(gear_file))

        result = invoke("show", "gear")

        assert result.exit_code == 0
        assert result.output.strip().endswith(wrap_icon(gear_normalized))

    def test_show_unknown_icon(self, invoke) -> None:
        result = invoke("show", "gear")
        assert result.exit_code == 1
        assert "Unknown icon: gear" in result.output

    def test_list_customized(self, invoke, gear_file) -> None:
        invoke("set", "gear", str(gear_file))

        result = invoke("list", "--customized")

        assert result.exit_code == 0
        assert "gear" in result.output
        assert "customized" in result.output
        assert "Total: 1 icons, 1 customized" in result.output

    def test_list_all_includes_catalog(self, invoke) -> None:
        result = invoke("list")
        assert result.exit_code == 0
        assert "trash" in result.output
        assert "0 customized" in result.output

    def test_builtin_icons_from_directory(self, runner, data_file, icons_dir) -> None:
        result = runner.invoke(
            cli, ["--data-file", str(data_file), "--icons-dir", str(icons_dir), "show", "star"]
        )

        assert result.exit_code == 0
        assert '<path d="M50 0 L100 100 L0 100 Z" fill="currentColor" />' in result.output

        broken = runner.invoke(
            cli, ["--data-file", str(data_file), "--icons-dir", str(icons_dir), "show", "broken"]
        )
        assert broken.exit_code == 1


class TestRevertCommand:
    def test_revert_requires_target(self, invoke) -> None:
        result = invoke("revert")
        assert result.exit_code == 1
        assert "Give an icon name or --all" in result.output

    def test_revert_single_icon(self, invoke, data_file, gear_file) -> None:
        invoke("set", "gear", str(gear_file))

        result = invoke("revert", "gear")

        assert result.exit_code == 0
        assert "Restored: 1 icons" in result.output
        assert json.loads(data_file.read_text(encoding="utf-8")) == {}

    def test_revert_all(self, invoke, data_file, gear_file) -> None:
        invoke("set", "gear", str(gear_file))
        invoke("set", "cog", str(gear_file))

        result = invoke("revert", "--all")

        assert result.exit_code == 0
        assert "Restored: 2 icons" in result.output
        assert json.loads(data_file.read_text(encoding="utf-8")) == {}


class TestNormalizeCommand:
    def test_prints_normalized_markup(self, invoke, gear_file, gear_normalized) -> None:
        result = invoke("normalize", str(gear_file))
        assert result.exit_code == 0
        assert result.output == gear_normalized + "\n"

    def test_wrap_option(self, invoke, gear_file, gear_normalized) -> None:
        result = invoke("normalize", "--wrap", str(gear_file))
        assert result.output.strip() == wrap_icon(gear_normalized)

    def test_precision_option(self, invoke, tmp_path) -> None:
        svg_file = tmp_path / "line.svg"
        svg_file.write_text(
            '<svg viewBox="0 0 3 3"><path d="M0 0 L1 2"/></svg>', encoding="utf-8"
        )

        result = invoke("normalize", "-p", "1", str(svg_file))

        assert result.output.strip() == '<path d="M0 0 L33.3 66.7" fill="currentColor" />'

    def test_reads_stdin(self, runner, gear_svg, gear_normalized) -> None:
        result = runner.invoke(cli, ["normalize", "-"], input=gear_svg)
        assert result.output.strip() == gear_normalized

    def test_rejects_non_svg(self, runner) -> None:
        result = runner.invoke(cli, ["normalize", "-"], input="hello")
        assert result.exit_code == 1
        assert "Input is not an SVG document" in result.output


class TestTransferCommands:
    def test_export_to_stdout(self, invoke, gear_file, gear_normalized) -> None:
        invoke("set", "gear", str(gear_file))

        result = invoke("export")

        assert result.exit_code == 0
        assert yaml.safe_load(result.output) == {"gear": wrap_icon(gear_normalized)}

    def test_export_to_file_adds_suffix(self, invoke, gear_file, tmp_path) -> None:
        invoke("set", "gear", str(gear_file))

        result = invoke("export", "-o", str(tmp_path / "out" / "mine"))

        exported = tmp_path / "out" / "mine.icons"
        assert result.exit_code == 0
        assert exported.exists()
        assert "gear" in yaml.safe_load(exported.read_text(encoding="utf-8"))

    def test_import_replaces_configuration(self, invoke, data_file, gear_file, tmp_path) -> None:
        invoke("set", "cog", str(gear_file))
        document = tmp_path / "shared.icons"
        document.write_text(
            "gear: '<svg viewBox=\"0 0 10 10\"><rect width=\"10\" height=\"10\"/></svg>'\n",
            encoding="utf-8",
        )

        result = invoke("import", str(document))

        assert result.exit_code == 0
        assert "Imported 1 icons" in result.output
        assert list(json.loads(data_file.read_text(encoding="utf-8"))) == ["gear"]

    def test_import_invalid_document(self, invoke, data_file, gear_file, tmp_path) -> None:
        invoke("set", "gear", str(gear_file))
        document = tmp_path / "broken.icons"
        document.write_text("- not\n- a mapping\n", encoding="utf-8")

        result = invoke("import", str(document))

        assert result.exit_code == 1
        assert "Error importing icon settings" in result.output
        assert list(json.loads(data_file.read_text(encoding="utf-8"))) == ["gear"]


class TestGlobalOptions:
    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "icon-swapper" in result.output

    def test_invalid_config_file(self, runner, tmp_path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("precision: -3\n", encoding="utf-8")

        result = runner.invoke(cli, ["--config", str(config_file), "list"])

        assert result.exit_code == 1
        assert "precision must be a non-negative integer" in result.output

    def test_config_file_sets_data_file(self, runner, tmp_path, gear_file) -> None:
        data_file = tmp_path / "from-config.json"
        config_file = tmp_path / "config.yaml"
        config_file.write_text(f"data_file: {data_file}\n", encoding="utf-8")

        result = runner.invoke(cli, ["--config", str(config_file), "set", "gear", str(gear_file)])

        assert result.exit_code == 0
        assert data_file.exists()

    def test_context_holds_resolved_config(self, runner, data_file) -> None:
        obj: dict = {}
        result = runner.invoke(
            cli, ["--data-file", str(data_file), "--log-level", "debug", "list"], obj=obj
        )

        assert result.exit_code == 0
        assert set(obj) == {"config"}
        assert obj["config"].log_level == "DEBUG"
        assert obj["config"].data_file == data_file
