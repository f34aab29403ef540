"""
Tests for the Typer CLI.
"""

from typer.testing import CliRunner

from delaystart.cli.app import app

runner = CliRunner()


def _write_config(tmp_path, text: str = ""):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(text, encoding="utf-8")
    return str(config_path)


class TestPlanCommand:
    """Tests for the plan command."""

    def test_overnight_plan(self, tmp_path):
        """Test the exact and appliance options in the output."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "1:26", "--finish", "09:00", "--now", "22:00", "--config", config]
        )

        assert result.exit_code == 0
        assert "9 h 34 min delay" in result.output
        assert "9 h 30 min delay" in result.output
        assert "start at 07:30" in result.output
        assert "~08:56" in result.output

    def test_plan_with_program(self, tmp_path):
        """Test using a named preset as the duration."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "--program", "cotton", "--finish", "07:00", "--now", "22:00", "--config", config]
        )

        assert result.exit_code == 0
        assert "3 h 39 min" in result.output

    def test_unknown_program(self, tmp_path):
        """Test that an unknown preset exits with an error."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "--program", "Spin", "--finish", "07:00", "--config", config]
        )

        assert result.exit_code == 1
        assert "unknown program" in result.output

    def test_duration_and_program_conflict(self, tmp_path):
        """Test that duration and --program are mutually exclusive."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "1:00", "--program", "Cotton", "--finish", "07:00", "--config", config]
        )

        assert result.exit_code == 1

    def test_missing_duration(self, tmp_path):
        """Test that some duration source is required."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["plan", "--finish", "07:00", "--config", config])

        assert result.exit_code == 1
        assert "required" in result.output

    def test_parse_error_message(self, tmp_path):
        """Test the message for malformed times."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "1:26", "--finish", "25:00", "--now", "22:00", "--config", config]
        )

        assert result.exit_code == 1
        assert "HH:MM" in result.output

    def test_infeasible_message(self, tmp_path):
        """Test the message when the program cannot finish in time."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["plan", "10:00", "--finish", "15:00", "--now", "10:00", "--config", config]
        )

        assert result.exit_code == 1
        assert "start earlier" in result.output

    def test_out_of_range_message(self, tmp_path):
        """Test the message when the delay exceeds the configured horizon."""
        config = _write_config(tmp_path, "appliance:\n  max_delay: 720\n")

        result = runner.invoke(
            app, ["plan", "0:30", "--finish", "09:00", "--now", "10:00", "--config", config]
        )

        assert result.exit_code == 1
        assert "more than 12 h" in result.output

    def test_missing_config_file(self, tmp_path):
        """Test that an explicit but missing config file is reported."""
        result = runner.invoke(
            app, ["plan", "1:00", "--finish", "07:00", "--config", str(tmp_path / "nope.yaml")]
        )

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_unknown_timezone_reported(self, tmp_path):
        """Test that a bad timezone in the config exits with an error instead of a traceback."""
        config = _write_config(tmp_path, "timezone: Mars/Olympus\n")

        result = runner.invoke(app, ["plan", "1:00", "--finish", "07:00", "--config", config])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid configuration" in result.output
        assert "Unknown timezone" in result.output


class TestOtherCommands:
    """Tests for quantize, settings, programs and version."""

    def test_quantize(self, tmp_path):
        """Test snapping a delay from the command line."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["quantize", "630", "--config", config])

        assert result.exit_code == 0
        assert "11 h" in result.output
        assert "(660 min)" in result.output

    def test_settings(self, tmp_path):
        """Test listing panel values."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["settings", "--config", config])

        assert result.exit_code == 0
        assert "9 h 30 min" in result.output
        assert "24 h" in result.output

    def test_programs(self, tmp_path):
        """Test the preset table."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["programs", "--config", config])

        assert result.exit_code == 0
        assert "Cotton" in result.output
        assert "3:39" in result.output

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "delaystart" in result.output
