# tests/test_cli.py - CLI smoke checks
import json

import pytest
from rich.prompt import Prompt

from glossary_browser.cli import CLI, main


@pytest.fixture
def cfg_path(tmp_path):
    return str(tmp_path / "cfg.json")


def test_query(data_path, cfg_path, capsys):
    assert main([str(data_path), "--query", "memory", "--config", cfg_path]) == 0
    out = capsys.readouterr().out
    assert "ram" in out
    assert "operating-system" in out
    assert "3 matches" in out


def test_query_without_matches(data_path, cfg_path, capsys):
    assert main([str(data_path), "-q", "quantum", "--config", cfg_path]) == 0
    assert "no matches" in capsys.readouterr().out


def test_show_by_synonym(data_path, cfg_path, capsys):
    assert main([str(data_path), "--show", "Processor", "--config", cfg_path]) == 0
    out = capsys.readouterr().out
    assert "CPU" in out
    assert "Central processing unit (Wikipedia)" in out


def test_show_unknown(data_path, cfg_path, capsys):
    assert main([str(data_path), "--show", "nope", "--config", cfg_path]) == 1
    assert "No such term" in capsys.readouterr().out


def test_missing_data_file(tmp_path, cfg_path, capsys):
    assert main([str(tmp_path / "missing.json"), "-q", "cpu", "--config", cfg_path]) == 1
    assert "Could not load glossary" in capsys.readouterr().out


def test_interactive_loop(glossary, monkeypatch, capsys):
    lines = iter(["cpu", "", "/stats", "/categories", "/show ram", "/bogus", "/quit"])
    monkeypatch.setattr(Prompt, "ask", lambda *a, **k: next(lines))
    cli = CLI(glossary)
    cli.run()
    out = capsys.readouterr().out
    assert not cli.running
    assert "apu" in out
    assert "tokens:" in out
    assert "Hardware / Memory" in out
    assert "Random Access Memory" in out
    assert "Unknown command" in out


def test_max_results(glossary):
    cli = CLI(glossary, max_results=1)
    shown = cli.search("c")
    assert len(shown) == 1


def _write_config(tmp_path, data):
    p = tmp_path / "bad_cfg.json"
    p.write_text(json.dumps(data), encoding="utf8")
    return str(p)


def test_config_weights_not_an_object(data_path, tmp_path, capsys):
    cfg = _write_config(tmp_path, {"weights": "heavy"})
    assert main([str(data_path), "-q", "cpu", "--config", cfg]) == 0
    assert "cpu" in capsys.readouterr().out


def test_config_weight_not_a_number(data_path, tmp_path, capsys):
    cfg = _write_config(tmp_path, {"weights": {"title": None}})
    assert main([str(data_path), "-q", "cpu", "--config", cfg]) == 1
    assert "Could not load glossary" in capsys.readouterr().out


def test_config_unknown_log_level(data_path, tmp_path, capsys):
    cfg = _write_config(tmp_path, {"log_level": "loud"})
    assert main([str(data_path), "-q", "cpu", "--config", cfg]) == 1
    assert "Bad configuration" in capsys.readouterr().out


def test_unknown_log_level_flag(data_path, cfg_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(data_path), "-q", "cpu", "--config", cfg_path, "--log-level", "loud"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(data_path, cfg_path):
    assert main([str(data_path), "-q", "cpu", "--config", cfg_path, "--log-level", "warning"]) == 0
