"""Tests for the flashcards-gen command line."""

import json

import pytest

from cardgen.modules.flashcards.cli import main


def test_generate_offline_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["generate", "--offline", "-s", "Biology", "-t", "Photosynthesis", "-n", "4"])
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["success"] is True
    assert len(data["cards"]) == 4


def test_generate_failure_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["generate", "--offline", "-s", "Biology", "-t", "Photosynthesis", "-n", "20"])
    data = json.loads(capsys.readouterr().out)
    assert code == 1
    assert data["error"] == "Card count must be between 1 and 15"


def test_suggest(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["suggest", "--subject", "Programming"]) == 0
    assert "Loops" in json.loads(capsys.readouterr().out)
