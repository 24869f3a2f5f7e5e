"""Tests for the CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dsconv.cli import app, expand_pretty_flag

runner = CliRunner()


class TestConversion:
    """Tests for converting through the CLI."""

    def test_file_to_stdout(self, json_file: Path):
        """Test converting a file to standard output."""
        result = runner.invoke(app, [str(json_file), "--to", "toml"])

        assert result.exit_code == 0
        assert result.stdout == "a = 1\nb = [2, 3]\n"

    def test_stdin_to_stdout(self):
        """Test converting standard input with explicit formats."""
        result = runner.invoke(app, ["-f", "json", "-t", "yaml"], input='{"a": 1}')

        assert result.exit_code == 0
        assert result.stdout == "a: 1\n"

    def test_output_file(self, json_file: Path, tmp_path: Path):
        """Test writing to -o with the format inferred from its extension."""
        output = tmp_path / "out.yml"
        result = runner.invoke(app, [str(json_file), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text() == "a: 1\nb:\n- 2\n- 3\n"

    def test_binary_output(self, json_file: Path, tmp_path: Path):
        """Test writing a binary format to a file."""
        output = tmp_path / "out.msgpack"
        result = runner.invoke(app, [str(json_file), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == b"\x82\xa1a\x01\xa1b\x92\x02\x03"

    def test_verbose_logs_request(self):
        """Test that --verbose logs the resolved request."""
        result = runner.invoke(app, ["-f", "json", "-t", "yaml", "--verbose"], input="{}")

        assert result.exit_code == 0
        assert "Resolved request" in result.output

    def test_explicit_from_wins(self, tmp_path: Path):
        """Test that --from overrides the input extension."""
        source = tmp_path / "actually-yaml.json"
        source.write_text("a: 1\n")

        result = runner.invoke(app, [str(source), "--from", "yaml", "--to", "json"])

        assert result.exit_code == 0
        assert result.stdout == '{"a":1}\n'


class TestPretty:
    """Tests for -p/--pretty."""

    def test_pretty_true(self):
        """Test an explicit true value."""
        result = runner.invoke(app, ["-f", "json", "-t", "json", "-p", "true"], input='{"a": 1}')

        assert result.exit_code == 0
        assert result.stdout == '{\n  "a": 1\n}\n'

    def test_pretty_false(self):
        """Test an explicit false value."""
        result = runner.invoke(app, ["-f", "json", "-t", "json", "--pretty", "false"], input='{"a": 1}')

        assert result.exit_code == 0
        assert result.stdout == '{"a":1}\n'

    def test_bare_flag(self):
        """Test that a bare -p means true."""
        args = expand_pretty_flag(["-f", "json", "-t", "json", "-p"])
        result = runner.invoke(app, args, input='{"a": 1}')

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"a": 1}
        assert result.stdout.startswith("{\n")

    def test_invalid_value(self):
        """Test that values other than true/false are usage errors."""
        result = runner.invoke(app, ["-f", "json", "-t", "json", "-p", "maybe"], input="{}")
        assert result.exit_code == 2

    def test_config_default(self, write_config):
        """Test that the config file sets the default."""
        write_config("pretty = true\n")
        result = runner.invoke(app, ["-f", "json", "-t", "json"], input='{"a": 1}')

        assert result.exit_code == 0
        assert result.stdout == '{\n  "a": 1\n}\n'

    def test_flag_overrides_config(self, write_config):
        """Test that -p false wins over the config file."""
        write_config("pretty = true\n")
        result = runner.invoke(app, ["-f", "json", "-t", "json", "-p", "false"], input='{"a": 1}')

        assert result.exit_code == 0
        assert result.stdout == '{"a":1}\n'

    def test_invalid_config(self, write_config):
        """Test that a broken config file fails the run."""
        write_config("pretty = 1\n")
        result = runner.invoke(app, ["-f", "json", "-t", "json"], input="{}")

        assert result.exit_code == 1
        assert "Error" in result.output


class TestExpandPrettyFlag:
    """Tests for expand_pretty_flag()."""

    def test_bare_flag_at_end(self):
        """Test a trailing bare flag."""
        assert expand_pretty_flag(["-p"]) == ["-p", "true"]

    def test_bare_flag_before_file(self):
        """Test a bare flag followed by a positional argument."""
        assert expand_pretty_flag(["--pretty", "in.json"]) == ["--pretty", "true", "in.json"]

    def test_explicit_value_untouched(self):
        """Test that explicit values are kept."""
        assert expand_pretty_flag(["-p", "False", "in.json"]) == ["-p", "False", "in.json"]

    def test_after_double_dash(self):
        """Test that arguments after -- are left alone."""
        assert expand_pretty_flag(["--", "-p"]) == ["--", "-p"]


class TestErrors:
    """Tests for failure exit codes and messages."""

    def test_yaml_sequence_to_toml(self, yaml_list_file: Path):
        """Test that an unrepresentable value exits non-zero."""
        result = runner.invoke(app, [str(yaml_list_file), "-t", "toml"])

        assert result.exit_code == 1
        assert "Failed to encode TOML" in result.output

    def test_ambiguous_input(self):
        """Test standard input without --from."""
        result = runner.invoke(app, ["-t", "json"], input="{}")

        assert result.exit_code == 1
        assert "Cannot determine input format" in result.output

    def test_ambiguous_output(self, json_file: Path):
        """Test standard output without --to."""
        result = runner.invoke(app, [str(json_file)])

        assert result.exit_code == 1
        assert "Cannot determine output format" in result.output

    def test_unknown_format(self):
        """Test an unknown --from value."""
        result = runner.invoke(app, ["-f", "xml", "-t", "json"], input="{}")

        assert result.exit_code == 1
        assert "xml" in result.output

    def test_decode_error(self):
        """Test invalid input."""
        result = runner.invoke(app, ["-f", "json", "-t", "yaml"], input="{")

        assert result.exit_code == 1
        assert "Failed to decode JSON" in result.output

    def test_deeply_nested_input(self):
        """Test that excessive nesting is reported, not a traceback."""
        data = "[" * 100_000 + "]" * 100_000
        result = runner.invoke(app, ["-f", "json", "-t", "yaml"], input=data)

        assert result.exit_code == 1
        assert "nested too deeply" in result.output

    def test_missing_file(self, tmp_path: Path):
        """Test a nonexistent input file."""
        result = runner.invoke(app, [str(tmp_path / "missing.json"), "-t", "yaml"])

        assert result.exit_code == 1
        assert "I/O failure" in result.output


class TestInformational:
    """Tests for options that bypass conversion."""

    def test_list_input_formats(self):
        """Test --list-input-formats."""
        result = runner.invoke(app, ["--list-input-formats"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "CBOR",
            "Hjson",
            "JSON",
            "JSON5",
            "MessagePack",
            "RON",
            "TOML",
            "YAML",
        ]

    def test_list_output_formats(self):
        """Test --list-output-formats."""
        result = runner.invoke(app, ["--list-output-formats"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["CBOR", "JSON", "MessagePack", "TOML", "YAML"]

    def test_list_flags_exclusive(self):
        """Test that the two list flags cannot be combined."""
        result = runner.invoke(app, ["--list-input-formats", "--list-output-formats"])
        assert result.exit_code == 2

    def test_version(self):
        """Test -V."""
        result = runner.invoke(app, ["-V"])

        assert result.exit_code == 0
        assert "0.3.0" in result.stdout

    def test_generate_completion(self):
        """Test printing a completion script."""
        result = runner.invoke(app, ["--generate-completion", "fish"])

        assert result.exit_code == 0
        assert "_DSCONV_COMPLETE" in result.stdout

    def test_generate_completion_to_file(self, tmp_path: Path):
        """Test writing a completion script to -o."""
        output = tmp_path / "_dsconv"
        result = runner.invoke(app, ["--generate-completion", "zsh", "-o", str(output)])

        assert result.exit_code == 0
        assert "_DSCONV_COMPLETE" in output.read_text()

    def test_unsupported_shell(self):
        """Test an unknown shell name."""
        result = runner.invoke(app, ["--generate-completion", "tcsh"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        """Test help output for both help flags."""
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert "--list-input-formats" in result.output
        assert "--generate-completion" in result.output
