import sys

import pytest

import display_layout


def run_main(monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['display_layout.py', *argv])
    display_layout.main()


def write_config(tmp_path, default_times):
    path = tmp_path / "config.yaml"
    path.write_text(
        "common:\n  default_preset: qwerty\n"
        f"shuffle:\n  default_times: {default_times}\n  random_seed: 3\n",
        encoding='utf-8')
    return str(path)


@pytest.mark.parametrize("count", ['-5', '-1'])
def test_negative_shuffle_count_is_rejected(monkeypatch, capsys, count):
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, '--shuffle', count, '--config', 'missing.yaml')
    assert excinfo.value.code == 2
    assert "non-negative" in capsys.readouterr().err


def test_bare_shuffle_uses_configured_count(monkeypatch, capsys, tmp_path):
    run_main(monkeypatch, '--shuffle', '--config', write_config(tmp_path, 0))
    out = capsys.readouterr().out
    assert "QWERTY LAYOUT" in out
    assert "Positions changed: 0" in out


def test_explicit_shuffle_count_overrides_config(monkeypatch, capsys, tmp_path):
    run_main(monkeypatch, '--shuffle', '0', '--config', write_config(tmp_path, 500))
    assert "Positions changed: 0" in capsys.readouterr().out


def test_explicit_shuffle_count_is_applied(monkeypatch, capsys, tmp_path):
    run_main(monkeypatch, '--shuffle', '50', '--config', write_config(tmp_path, 0))
    assert "Positions changed: 0" not in capsys.readouterr().out
