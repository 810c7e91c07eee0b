"""Tests for the argtex command line entry point."""

import logging
from pathlib import Path

import pytest

import argtex


def run(tmp_path: Path, *args: str) -> int:
    return argtex.main([*args, "--log-dir", str(tmp_path / "logs")])


class TestMain:
    def test_writes_output(self, sheet: str, tmp_path: Path) -> None:
        source = tmp_path / "sheet.txt"
        source.write_text(sheet, encoding="utf-8")
        target = tmp_path / "sheet.tex"

        assert run(tmp_path, str(source), str(target)) == 0
        assert r"\section*{Modus ponens}" in target.read_text(encoding="utf-8")

    def test_default_output_name(self, sheet: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sheet.txt").write_text(sheet, encoding="utf-8")

        assert run(tmp_path, "sheet.txt") == 0
        assert (tmp_path / "output.tex").is_file()

    def test_output_from_config(self, sheet: str, tmp_path: Path) -> None:
        (tmp_path / "sheet.txt").write_text(sheet, encoding="utf-8")
        target = tmp_path / "from_config.tex"
        config = tmp_path / "argtex.yaml"
        config.write_text(f"output: {target}\n")

        assert run(tmp_path, str(tmp_path / "sheet.txt"), "--config", str(config)) == 0
        assert target.is_file()

    def test_translation_error(self, header: str, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        source = tmp_path / "bad.txt"
        source.write_text(header + "1: P\n3: Q\n|- Q\n", encoding="utf-8")
        target = tmp_path / "bad.tex"

        with caplog.at_level(logging.ERROR):
            assert run(tmp_path, str(source), str(target)) == 1

        assert "Expected exercise number to be 2, got 3" in caplog.text
        assert "6 | 3: Q" in caplog.text
        assert not target.exists()

    def test_missing_input(self, tmp_path: Path) -> None:
        assert run(tmp_path, str(tmp_path / "missing.txt")) == 1

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"[config]\ntitle: Caf\xe9\n")

        assert run(tmp_path, str(source)) == 1

    def test_print_tree(self, header: str, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        source = tmp_path / "sheet.txt"
        source.write_text(header + "1: P_1\n", encoding="utf-8")

        assert run(tmp_path, str(source), "--print-tree") == 0

        out = capsys.readouterr().out
        assert out.startswith(" Rule:    root")
        assert "Rule:    operand" in out
        assert "Text:    P_1" in out
