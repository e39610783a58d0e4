import io
import sys

from exrunner.ui import success, warn


class TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_warn_without_emoji(capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Something broke")
    assert capsys.readouterr().out == "! Something broke\n"


def test_success_without_emoji(capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran x.rs")
    assert capsys.readouterr().out == "✓ Successfully ran x.rs\n"


def test_warn_with_emoji(capsys, monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("Something broke")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith(" Something broke\n")


def test_success_with_emoji(capsys, monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("All good")
    assert capsys.readouterr().out == "✅ All good\n"


def test_colours_on_terminal(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    stream = TtyStream()
    monkeypatch.setattr(sys, "stdout", stream)
    warn("careful")
    success("fine")
    text = stream.getvalue()
    assert "\x1b[31mcareful" in text
    assert "\x1b[32mfine" in text