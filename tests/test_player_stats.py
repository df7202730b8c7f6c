"""BDD tests for player statistics."""

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from football_championship.models import Player

# Load scenarios from feature file
scenarios("player_stats.feature")


@pytest.fixture
def context():
    """Shared context for test steps."""
    return {"player": None}


@given(parsers.parse('a player "{name}" playing as "{position}"'))
def create_player(context, name, position):
    """Create a player with no stats."""
    context["player"] = Player(name, position)


@when(parsers.parse(
    "the player is credited with goals={goals:d} assists={assists:d} "
    "saves={saves:d} conceded={conceded:d}"
))
def credit_player(context, goals, assists, saves, conceded):
    """Apply a stat update to the player."""
    context["player"].update_stats(goals, assists, saves, conceded)


@then(parsers.parse("the player should have goals={goals:d} assists={assists:d}"))
def check_goals_assists(context, goals, assists):
    """Check outfield counters."""
    player = context["player"]
    assert player.goals == goals, f"Expected {goals} goals, got {player.goals}"
    assert player.assists == assists, f"Expected {assists} assists, got {player.assists}"


@then(parsers.parse("the player should have saves={saves:d} conceded={conceded:d}"))
def check_keeper_stats(context, saves, conceded):
    """Check goalkeeper counters."""
    player = context["player"]
    assert player.saves == saves, f"Expected {saves} saves, got {player.saves}"
    assert player.goals_conceded == conceded, \
        f"Expected {conceded} conceded, got {player.goals_conceded}"


@then(parsers.parse('the player should be shown as "{text}"'))
def check_rendering(context, text):
    """Check the player's display line."""
    assert str(context["player"]) == text
