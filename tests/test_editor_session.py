import io
import threading
from pathlib import Path

import pytest

import main as entry
from mdeditor.models.element import ElementKind
from mdeditor.models.errors import ChannelStartError
from mdeditor.services.config_service import EditorConfig
from mdeditor.services.editor_session import EditorSession


def _session(tmp_path: Path, buf: io.StringIO) -> EditorSession:
    cfg = EditorConfig(plugin_dir=str(tmp_path / "plugins"), observer_timeout=0.05)
    return EditorSession(cfg, stream=buf)


def test_build_document_order(tmp_path: Path):
    session = _session(tmp_path, io.StringIO())
    doc = session.build_document()
    assert [e.kind for e in doc] == [
        ElementKind.BOLD,
        ElementKind.ITALIC,
        ElementKind.BOLD,
        ElementKind.BOLD,
        ElementKind.ITALIC,
    ]
    # The clone is a distinct instance
    assert doc[2] is not doc[0]


def test_run_demo_output(tmp_path: Path):
    buf = io.StringIO()
    _session(tmp_path, buf).run_demo()
    assert buf.getvalue().splitlines() == [
        "Markdown document has changed.",
        "**Bold Text**",
        "*Italic Text*",
        "**Bold Text**",
        "**Bold Text**",
        "*Italic Text*",
        "Mediator: EditorSession raised 'document rendered'",
        "Editor is in read-only mode.",
        "Editor is in editable mode.",
        "Filtered text: Some raw text.",
        "2+2 = 4",
        "10*3 = 30",
    ]
    # The demo does not touch the filesystem
    assert not (tmp_path / "plugins").exists()


def test_serve_returns_when_stop_event_set(tmp_path: Path, wait_for):
    buf = io.StringIO()
    session = _session(tmp_path, buf)
    stop = threading.Event()
    worker = threading.Thread(target=session.serve, args=(stop, 0.02), daemon=True)
    worker.start()

    assert wait_for(lambda: session.channel.is_watching)
    (tmp_path / "plugins" / "preview.py").touch()
    assert wait_for(lambda: "Plugin created: preview.py" in buf.getvalue())

    stop.set()
    worker.join(timeout=3)
    assert not worker.is_alive()
    assert not session.channel.is_watching


def test_serve_surfaces_start_failure(tmp_path: Path):
    blocker = tmp_path / "plugins"
    blocker.write_text("x", encoding="utf-8")
    session = _session(tmp_path, io.StringIO())
    with pytest.raises(ChannelStartError):
        session.serve(threading.Event())


def test_main_once_runs_demo_without_watching(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.delenv("MDEDITOR_RENDER_STYLE", raising=False)
    plugin_dir = tmp_path / "plugins"
    rc = entry.main(["--once", "--plugin-dir", str(plugin_dir)])
    assert rc == 0
    assert "**Bold Text**" in capsys.readouterr().out
    assert not plugin_dir.exists()


def test_main_reports_channel_start_error(tmp_path: Path, capsys):
    blocker = tmp_path / "plugins"
    blocker.write_text("x", encoding="utf-8")
    rc = entry.main(["--plugin-dir", str(blocker)], stop_event=threading.Event())
    assert rc == 1
    assert "error:" in capsys.readouterr().err


def test_main_serves_until_stopped(tmp_path: Path):
    stop = threading.Event()
    stop.set()
    rc = entry.main(
        ["--plugin-dir", str(tmp_path / "plugins"), "--observer-timeout", "0.05"],
        stop_event=stop,
    )
    assert rc == 0
    assert (tmp_path / "plugins").is_dir()
