"""Tests for the command line entry point (the "Criar Formulário desta Planilha" action)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging
import sys

import main
from sheetform.core import config


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    main.run_cli_mode()


class TestBuildCommand:

    def test_dry_run_prints_edit_url(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "Cores.csv"
        path.write_text("Name,Color\ntexto curto,múltipla escolha\n,Red\n,Blue\n", encoding="utf-8")

        _run(monkeypatch, "build", "--file", str(path), "--dry-run")

        out = capsys.readouterr().out
        assert "Formulário criado! Você pode editá-lo aqui: memory://forms/" in out

    def test_single_row_shows_alert(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "Plan1.csv"
        path.write_text("Name\n", encoding="utf-8")

        _run(monkeypatch, "build", "--file", str(path), "--dry-run")

        out = capsys.readouterr().out
        assert "pelo menos 2 linhas" in out
        assert "Formulário criado!" not in out

    def test_blank_type_row_creates_empty_form(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "Plan1.csv"
        path.write_bytes(b"Q1\n\ntexto curto\n")

        _run(monkeypatch, "build", "--file", str(path), "--dry-run")

        assert "Formulário criado!" in capsys.readouterr().out

    def test_unsupported_extension_does_nothing(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("Name\ntexto curto\n", encoding="utf-8")

        _run(monkeypatch, "build", "--file", str(path), "--dry-run")

        assert capsys.readouterr().out == ""

    def test_create_sample(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        _run(monkeypatch, "build", "--create-sample")
        assert (tmp_path / "sample_sheet.csv").exists()


class TestLogLevel:

    def test_verbose_config_gives_info(self):
        assert main.default_log_level(True) == logging.INFO

    def test_quiet_config_gives_warning(self, monkeypatch):
        monkeypatch.setitem(config.AUTOMATION_CONFIG, "verbose", False)
        assert main.default_log_level() == logging.WARNING
