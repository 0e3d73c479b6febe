import json

import pyperclip
import pytest

from conftest import fake_zxcvbn_result
from shared.console import KeysmithConsole
from keysmith.analyzers.strength import StrengthAnalyzer
from keysmith.core.errors import ClipboardError
from keysmith.core.models import CharacterClass, GeneratedSecret, SecretKind
from keysmith.output import clipboard
from keysmith.output.console import KeysmithConsoleOutput
from keysmith.output.report import KeysmithReportGenerator


@pytest.fixture
def secret():
    return GeneratedSecret(
        kind=SecretKind.PASSWORD,
        value="a[b]c{d}$e",
        length=10,
        seed=0,
        classes=(CharacterClass.LETTERS, CharacterClass.SYMBOLS),
    )


@pytest.fixture
def report():
    return StrengthAnalyzer(scorer=lambda s: fake_zxcvbn_result()).analyze("x")


def test_display_secret(capsys, secret):
    KeysmithConsoleOutput(KeysmithConsole()).display_secret(secret)
    assert capsys.readouterr().out == "a[b]c{d}$e\n"


def test_display_report(secret, report):
    console = KeysmithConsole(record=True)
    KeysmithConsoleOutput(console).display_report(secret, report)
    text = console.export_text()

    assert text.index("Generated Password") < text.index("Password Security Analysis")
    assert text.index("Password Security Analysis") < text.index("Password Crack Time Estimations")
    assert "a[b]c{d}$e" in text
    assert "Strength" in text and "strong" in text
    assert "Guesses" in text and "10.4" in text
    assert "10^10" not in text.split("Password Crack Time Estimations")[0]
    for label in ("100 attempts/hour", "10 attempts/second",
                  "10^4 attempts/second", "10^10 attempts/second"):
        assert label in text
    assert "less than a second" in text


def test_console_messages_are_literal():
    console = KeysmithConsole(record=True)
    console.error("bad [bold]token[/bold]")
    assert "ERROR: bad [bold]token[/bold]" in console.export_text()


def test_json_report(secret, report, tmp_path):
    reporter = KeysmithReportGenerator()
    payload = json.loads(reporter.to_json(secret))
    assert payload == {
        "kind": "password",
        "secret": "a[b]c{d}$e",
        "length": 10,
        "classes": ["letters", "symbols"],
        "seed": 0,
    }

    path = reporter.generate_json(secret, tmp_path / "out" / "report.json", report)
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["analysis"]["strength"] == "strong"
    assert saved["analysis"]["guesses"] == "10^10"
    assert saved["analysis"]["crack_times"]["10^10/s"] == "less than a second"


def test_copy_to_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)
    clipboard.copy_to_clipboard("s3cret")
    assert copied == ["s3cret"]


def test_copy_to_clipboard_unavailable(monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(clipboard.pyperclip, "copy", fail)
    with pytest.raises(ClipboardError, match="Unable to access clipboard"):
        clipboard.copy_to_clipboard("s3cret")


def test_table_title_fits_on_one_line():
    console = KeysmithConsole(record=True)
    console.table("Generated Password", [], [["4821"]])
    lines = console.export_text().splitlines()
    assert lines[0].strip() == "Generated Password"
