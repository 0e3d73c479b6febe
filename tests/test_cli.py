import json

import pyperclip
import pytest
from click.testing import CliRunner

from keysmith import __version__
from keysmith.cli import cli
from keysmith.generators.charsets import DIGITS, LETTERS, SYMBOLS
from keysmith.output import clipboard


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args):
    return runner.invoke(cli, args, obj={})


def test_normal_seeded(runner):
    result = invoke(runner, ["--seed", "0", "normal", "--length", "10"])
    assert result.exit_code == 0, result.output
    password = result.output.strip()
    assert len(password) == 10
    assert all(c in LETTERS for c in password)

    again = invoke(runner, ["--seed", "0", "normal", "--length", "10"])
    assert again.output.strip() == password


def test_normal_defaults(runner):
    result = invoke(runner, ["normal"])
    assert result.exit_code == 0
    assert len(result.output.strip()) == 12


def test_normal_all_classes(runner):
    result = invoke(runner, ["--seed", "3", "normal", "-l", "100", "-n", "-s",
                             "--require-each-class"])
    assert result.exit_code == 0
    password = result.output.rstrip("\n")
    assert len(password) == 100
    assert any(c in DIGITS for c in password)
    assert any(c in SYMBOLS for c in password)


def test_pin(runner):
    result = invoke(runner, ["pin", "--length", "6"])
    assert result.exit_code == 0
    pin = result.output.strip()
    assert len(pin) == 6 and all(c in DIGITS for c in pin)

    result = invoke(runner, ["pin"])
    assert len(result.output.strip()) == 4


@pytest.mark.parametrize(
    "args, message",
    [
        (["normal", "--length", "7"], "must be between 8 and 100"),
        (["normal", "--length", "101"], "must be between 8 and 100"),
        (["normal", "--length", "ten"], "must be an integer"),
        (["pin", "--length", "3"], "must be between 4 and 12"),
        (["pin", "--length", "13"], "must be between 4 and 12"),
        (["pin", "-l", "x"], "must be an integer"),
    ],
)
def test_length_validation(runner, args, message):
    result = invoke(runner, args)
    assert result.exit_code == 2
    assert message in result.output


def test_invalid_seed(runner):
    assert invoke(runner, ["--seed", "-1", "pin"]).exit_code == 2
    assert invoke(runner, ["--seed", str(2**64), "pin"]).exit_code == 2


def test_analyze(runner):
    result = invoke(runner, ["--analyze", "--seed", "1", "normal", "-n", "-s"])
    assert result.exit_code == 0, result.output
    for title in ("Generated Password", "Password Security Analysis",
                  "Password Crack Time Estimations", "10^10 attempts/second"):
        assert title in result.output


def test_analyze_longest_password(runner):
    result = invoke(runner, ["--analyze", "--seed", "0", "normal", "-l", "100"])
    assert result.exit_code == 0, result.output
    assert "Password Crack Time Estimations" in result.output


def test_copy(runner, monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)
    result = invoke(runner, ["--copy", "--seed", "2", "pin", "-l", "8"])
    assert result.exit_code == 0
    assert copied == [result.output.strip()]


def test_copy_unavailable(runner, monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(clipboard.pyperclip, "copy", fail)
    result = invoke(runner, ["--copy", "pin"])
    assert result.exit_code == 1
    assert "Unable to access clipboard" in result.output


def test_json_output(runner):
    result = invoke(runner, ["--output", "json", "--analyze", "--seed", "0", "normal"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["kind"] == "password"
    assert payload["seed"] == 0
    assert len(payload["secret"]) == 12
    assert set(payload["analysis"]) == {"strength", "guesses", "crack_times"}
    assert set(payload["analysis"]["crack_times"]) == {"100/h", "10/s", "10^4/s", "10^10/s"}


def test_config_file(runner, tmp_path):
    path = tmp_path / "keysmith.toml"
    path.write_text("[generator]\npassword_length = 20\npin_length = 6\n", encoding="utf-8")
    assert len(invoke(runner, ["-c", str(path), "normal"]).output.strip()) == 20
    assert len(invoke(runner, ["-c", str(path), "pin"]).output.strip()) == 6


def test_config_file_invalid_default(runner, tmp_path):
    path = tmp_path / "keysmith.toml"
    path.write_text("[generator]\npassword_length = 200\n", encoding="utf-8")
    result = invoke(runner, ["-c", str(path), "normal"])
    assert result.exit_code == 1
    assert "invalid default length" in result.output


def test_config_file_malformed(runner, tmp_path):
    path = tmp_path / "keysmith.toml"
    path.write_text("[generator\n", encoding="utf-8")
    assert invoke(runner, ["-c", str(path), "normal"]).exit_code == 2


def test_version(runner):
    result = invoke(runner, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_length_help_mentions_config(runner):
    for command in ("normal", "pin"):
        result = invoke(runner, [command, "--help"])
        assert result.exit_code == 0
        assert "default from config" in " ".join(result.output.split())
