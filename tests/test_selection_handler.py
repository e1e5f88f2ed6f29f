import subprocess

from samwise import selection_handler as sh


def _setup_mocks(monkeypatch, available=True, stdout="", returncode=0):
    calls: list[dict] = []

    def fake_run(args, **kwargs):
        calls.append({"args": args, **kwargs})
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr="")

    monkeypatch.setattr(sh, "_xclip_available", lambda: available)
    monkeypatch.setattr(sh.subprocess, "run", fake_run)
    return calls


def test_primary_selection_is_returned_verbatim(monkeypatch):
    calls = _setup_mocks(monkeypatch, stdout="  selected text\n")

    assert sh.get_primary_selection() == "  selected text\n"
    assert calls[0]["args"] == ["xclip", "-selection", "primary", "-o"]


def test_empty_selection_is_none(monkeypatch):
    _setup_mocks(monkeypatch, stdout="", returncode=1)
    assert sh.get_primary_selection() is None


def test_no_xclip_reads_nothing(monkeypatch):
    calls = _setup_mocks(monkeypatch, available=False)

    assert sh.get_clipboard() is None
    assert sh.set_clipboard("text") is False
    assert calls == []


def test_set_clipboard_pipes_text(monkeypatch):
    calls = _setup_mocks(monkeypatch)

    assert sh.set_clipboard("result") is True
    assert calls[0]["args"] == ["xclip", "-selection", "clipboard"]
    assert calls[0]["input"] == "result"
