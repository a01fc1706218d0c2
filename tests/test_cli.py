"""Tests for the meal-calories command line."""

import io
import json
import logging
import sys

import pytest

from meal_calories import cli


def _run(monkeypatch, *args: str, stdin: str = "") -> int:
    monkeypatch.setattr(sys, "argv", ["meal-calories", *args])
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    return cli.main()


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **k: False)


class TestJsonOutput:

    def test_estimate(self, monkeypatch, capsys):
        assert _run(monkeypatch, "--json", "2 tbsp peanut butter") == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["totalCalories"] == 190
        assert payload["items"][0]["calculationText"] == "2 tbsp × 95 cal/tbsp"
        assert "clarification" not in payload

    def test_clarify(self, monkeypatch, capsys):
        assert _run(monkeypatch, "--json", "--clarify", "a handful of almonds") == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["clarification"]["matchedFood"] == "almonds"

    def test_clarify_without_prompt(self, monkeypatch, capsys):
        assert _run(monkeypatch, "--json", "--clarify", "1 banana") == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["clarification"] is None

    def test_stdin(self, monkeypatch, capsys):
        assert _run(monkeypatch, "--json", "-", stdin="1 banana\n") == 0
        assert json.loads(capsys.readouterr().out)["totalCalories"] == 105


class TestTableOutput:

    def test_prints_items_and_total(self, monkeypatch, capsys):
        assert _run(monkeypatch, "1 banana") == 0
        out = capsys.readouterr().out
        assert "Banana" in out
        assert "Total: 105 kcal" in out

    def test_no_match(self, monkeypatch, capsys):
        assert _run(monkeypatch, "moon dust") == 0
        assert "No known foods" in capsys.readouterr().out

    def test_clarify_prompt(self, monkeypatch, capsys):
        assert _run(monkeypatch, "--clarify", "some rice") == 0
        assert "roughly how much" in capsys.readouterr().out


def test_missing_text(monkeypatch):
    assert _run(monkeypatch) == 1


class TestLogLevel:

    def test_env_level_applied(self, monkeypatch):
        monkeypatch.setenv("MEAL_CALORIES_LOG_LEVEL", "error")
        assert cli._log_level() == logging.ERROR

    @pytest.mark.parametrize("flags", [[], ["-v"]])
    def test_invalid_env_level_rejected(self, monkeypatch, flags):
        monkeypatch.setenv("MEAL_CALORIES_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="Unsupported log level: LOUD"):
            _run(monkeypatch, *flags, "1 banana")
