import io
import time

from rustdrill.ui import Spinner, no_emoji, success, warn


class TtyBuffer(io.StringIO):
    def isatty(self):
        return True


def _wait_for(buffer, text, timeout=2.0):
    deadline = time.monotonic() + timeout
    while text not in buffer.getvalue() and time.monotonic() < deadline:
        time.sleep(0.005)
    return buffer.getvalue()


def test_no_emoji_reads_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran x.rs with errors")
    assert capsys.readouterr().out == "! Ran x.rs with errors\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("broken")
    assert capsys.readouterr().out == "⚠️  broken\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran x.rs")
    assert capsys.readouterr().out == "✓ Successfully ran x.rs\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_spinner_silent_on_plain_stream():
    buffer = io.StringIO()
    spinner = Spinner("Compiling x.rs...", stream=buffer, interval=0.01)
    assert spinner.active is False
    spinner.finish_and_clear()
    assert buffer.getvalue() == ""


def test_spinner_draws_messages_and_clears():
    buffer = TtyBuffer()
    spinner = Spinner("Compiling x.rs...", stream=buffer, interval=0.01)
    assert "Compiling x.rs..." in _wait_for(buffer, "Compiling x.rs...")
    spinner.set_message("Running x.rs...")
    assert "Running x.rs..." in _wait_for(buffer, "Running x.rs...")
    spinner.finish_and_clear()
    assert spinner.active is False
    assert buffer.getvalue().endswith("\r\x1b[2K")


def test_spinner_context_manager_stops():
    buffer = TtyBuffer()
    with Spinner("Testing x.rs...", stream=buffer, interval=0.01) as spinner:
        assert spinner.active is True
    assert spinner.active is False
    length = len(buffer.getvalue())
    spinner.finish_and_clear()
    assert len(buffer.getvalue()) == length