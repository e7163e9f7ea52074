"""Tests for the easekit command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console
import yaml

from easekit.cli import main as cli


@pytest.fixture(autouse=True)
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logging: None) -> Path:
    """Run each command in an empty directory with a wide console."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "console", Console(width=200, color_system=None))
    return tmp_path


def _write_config(directory: Path, data: dict) -> Path:
    path = directory / "easekit.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestEval:
    """Tests for the eval command."""

    def test_evaluates_curve(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the curve value."""
        assert cli.main(["eval", "Pow2.INOUT", "0.25"]) == 0
        assert "0.125" in capsys.readouterr().out

    def test_output_range(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--start and --end remap the output."""
        assert cli.main(["eval", "Linear.INOUT", "0.5", "--start", "10", "--end", "20"]) == 0
        assert "15.0" in capsys.readouterr().out

    def test_unknown_tag(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown tags fail with exit code 1."""
        assert cli.main(["eval", "Wobble.IN", "0.5"]) == 1
        assert "Unknown curve tag: Wobble.IN" in capsys.readouterr().out

    def test_custom_curve_from_config(
        self, cli_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Curves declared in easekit.yaml can be evaluated."""
        _write_config(
            cli_env,
            {"custom_curves": [{"tag": "Steep.IN", "generator": "pow_in", "params": {"power": 3.0}}]},
        )
        assert cli.main(["eval", "Steep.IN", "0.5"]) == 0
        assert "0.125" in capsys.readouterr().out


class TestList:
    """Tests for the list command."""

    def test_default_catalogue(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Lists the interpolation catalogue by default."""
        assert cli.main(["list"]) == 0
        out = capsys.readouterr().out
        assert "140 curves" in out
        assert "Bounce.OUT" in out

    def test_tween_catalogue(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--catalogue selects the tween equations."""
        assert cli.main(["list", "--catalogue", "tween_equations"]) == 0
        assert "152 curves" in capsys.readouterr().out

    def test_catalogue_from_config(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The config file selects the catalogue when no flag is given."""
        _write_config(cli_env, {"catalogue": "tween_equations"})
        assert cli.main(["list"]) == 0
        assert "152 curves" in capsys.readouterr().out

    def test_variant_filter(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--variant keeps only matching tags."""
        assert cli.main(["list", "--variant", "OUTIN"]) == 0
        out = capsys.readouterr().out
        assert "34 curves" in out
        assert "Pow2.INOUT" not in out

    def test_missing_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An explicit config that does not exist is an error."""
        assert cli.main(["--config", "absent.yaml", "list"]) == 1
        assert "Could not load config" in capsys.readouterr().out

    def test_bad_custom_curve(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Custom curves with mismatched parameters are reported."""
        _write_config(
            cli_env,
            {"custom_curves": [{"tag": "Bad.IN", "generator": "pow_in", "params": {"exponent": 2}}]},
        )
        assert cli.main(["list"]) == 1
        assert "Could not build curves" in capsys.readouterr().out


class TestSample:
    """Tests for the sample command."""

    def test_samples_curve(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints one row per sample."""
        assert cli.main(["sample", "Pow2.INOUT", "--samples", "5"]) == 0
        out = capsys.readouterr().out
        assert "0.125000" in out
        assert "0.875000" in out

    def test_too_few_samples(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Fewer than two samples is an error."""
        assert cli.main(["sample", "Pow2.INOUT", "--samples", "1"]) == 1
        assert "Could not sample" in capsys.readouterr().out

    def test_unknown_tag(self) -> None:
        """Unknown tags fail with exit code 1."""
        assert cli.main(["sample", "Wobble.IN"]) == 1


class TestArgParser:
    """Tests for argument parsing."""

    def test_subcommand_required(self) -> None:
        """Running without a subcommand exits with usage."""
        with pytest.raises(SystemExit):
            cli.main([])

    def test_log_level_override(self) -> None:
        """--log-level is parsed before the subcommand."""
        args = cli.build_arg_parser().parse_args(["--log-level", "DEBUG", "eval", "Linear.INOUT", "0.5"])
        assert args.log_level == "DEBUG"
        assert args.func is cli.run_eval

    def test_family_count(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The summary line counts the registered families."""
        assert cli.main(["list"]) == 0
        assert "families registered" in capsys.readouterr().out

    def test_mistyped_parameter(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A parameter that is not a number fails before any curve is listed."""
        _write_config(
            cli_env,
            {"custom_curves": [{"tag": "Mine.INOUT", "generator": "pow", "params": {"power": "abc"}}]},
        )
        assert cli.main(["list"]) == 1
        out = capsys.readouterr().out
        assert "Could not build curves" in out
        assert "valid number" in out
        assert "Mine.INOUT" not in out


class TestMistypedCustomCurves:
    """Custom curves whose parameters have the wrong shape."""

    def test_flat_bounce_pairs_on_eval(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Bounce pairs given as a flat list are reported, not raised."""
        config = _write_config(
            cli_env,
            {"custom_curves": [{"tag": "Mine.OUT", "generator": "bounce_out", "params": {"pairs": [1, 2]}}]},
        )
        assert cli.main(["--config", str(config), "eval", "Mine.OUT", "0.5"]) == 1
        assert "Could not build curves" in capsys.readouterr().out

    def test_numeric_string_is_coerced(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A quoted number is accepted for a float parameter."""
        _write_config(
            cli_env,
            {"custom_curves": [{"tag": "Mine.IN", "generator": "pow_in", "params": {"power": "3"}}]},
        )
        assert cli.main(["eval", "Mine.IN", "0.5"]) == 0
        assert "0.125" in capsys.readouterr().out
