import io
import logging
import signal

import pytest
import main

@pytest.fixture
def quiet_main(monkeypatch, tmp_path):
    """Runs main() without touching real logging, signals or stdio."""
    calls = {}
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: calls.setdefault("logging", kwargs))
    monkeypatch.setattr(main.signal, "signal", lambda sig, handler: calls.setdefault("signals", []).append(sig))
    monkeypatch.setattr(main, "load_settings", lambda: {
        "log_file": str(tmp_path / "validator.log"),
        "log_level": "DEBUG",
        "max_log_size_mb": 1,
        "log_backup_count": 3,
        "use_color": False,
        "show_guidance": True,
    })
    return calls

def test_main_runs_session_and_returns_zero(quiet_main, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.2.3.4\nn\n"))
    assert main.main() == 0
    assert "Result: '1.2.3.4' is VALID" in capsys.readouterr().out
    assert quiet_main["logging"]["log_level"] == logging.DEBUG
    assert quiet_main["signals"] == [signal.SIGINT, signal.SIGTERM]

@pytest.mark.parametrize("error", [KeyboardInterrupt, RuntimeError("boom")])
def test_main_returns_zero_on_errors(quiet_main, monkeypatch, error):
    def fail(self):
        raise error
    monkeypatch.setattr(main.IPValidatorApp, "run", fail)
    assert main.main() == 0

def test_signal_handler_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main.signal_handler(signal.SIGTERM, None)
    assert exc_info.value.code == 0
    assert "shutting down gracefully" in capsys.readouterr().out
