from __future__ import annotations

from typer.testing import CliRunner

from mayi.cli.main import app

runner = CliRunner()

SCENARIO_TOKENS = ["03D", "12D", "00D", "JJJ", "01D", "11D", "07H", "10H", "08H", "03S", "03D"]


def test_score_command_prints_breakdown() -> None:
    result = runner.invoke(app, ["score", *SCENARIO_TOKENS, "-f", "2", "-t", "1"])

    assert result.exit_code == 0, result.output
    assert "Hand Score" in result.output
    assert "112.12" in result.output


def test_score_command_rejects_malformed_cards() -> None:
    result = runner.invoke(app, ["score", "03D", "5D"])

    assert result.exit_code != 0


def test_laydowns_command_lists_laydowns() -> None:
    result = runner.invoke(app, ["laydowns", *SCENARIO_TOKENS, "-f", "2", "-t", "1"])

    assert result.exit_code == 0, result.output
    assert "1 laydown(s) found." in result.output


def test_laydowns_command_reports_missing_laydown() -> None:
    result = runner.invoke(app, ["laydowns", "00H", "05D", "-f", "1", "-t", "0"])

    assert result.exit_code == 0, result.output
    assert "No laydown" in result.output


def test_deal_command_is_reproducible() -> None:
    first = runner.invoke(app, ["deal", "--cards", "10", "--seed", "9"])
    second = runner.invoke(app, ["deal", "--cards", "10", "--seed", "9"])

    assert first.exit_code == 0, first.output
    assert first.output == second.output
    assert len(first.output.split()) == 10


def test_odds_command_prints_table() -> None:
    result = runner.invoke(app, ["odds", "--simulations", "3", "--seed", "2"])

    assert result.exit_code == 0, result.output
    assert "Instant Laydown Odds" in result.output
