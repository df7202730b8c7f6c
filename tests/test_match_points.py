"""BDD tests for tournament points and the championship winner."""

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from football_championship.models import Team

# Load scenarios from feature file
scenarios("match_points.feature")


@pytest.fixture
def context():
    """Shared context for test steps."""
    return {"manager": None, "home": None, "away": None}


@given(parsers.parse('a championship with teams "{home}" and "{away}"'))
def championship_with_teams(manager, context, home, away):
    """Register a home and an away team."""
    context["manager"] = manager
    context["home"] = Team(home)
    context["away"] = Team(away)
    manager.add_team(context["home"])
    manager.add_team(context["away"])


@given(parsers.parse('"{name}" has {points:d} points'))
def team_has_points(context, name, points):
    """Give a team a starting points total."""
    context["manager"].find_team(name).add_points(points)


@when(parsers.parse("the match ends {home_goals:d} - {away_goals:d}"))
def match_ends(context, home_goals, away_goals):
    """Award points for a final score."""
    context["manager"].record_match_points(
        context["home"], context["away"], home_goals, away_goals
    )


@then(parsers.parse('"{name}" should have {points:d} points'))
def check_points(context, name, points):
    """Check a team's points total."""
    team = context["manager"].find_team(name)
    assert team.points == points, f"Expected {points} points, got {team.points}"


@then("the competition should be over")
def check_over(context):
    assert context["manager"].is_competition_over()


@then("the competition should not be over")
def check_not_over(context):
    assert not context["manager"].is_competition_over()
    assert context["manager"].get_winner() is None


@then(parsers.parse('the winner should be "{name}"'))
def check_winner(context, name):
    """Check the champion."""
    winner = context["manager"].get_winner()
    assert winner is not None, "Expected a winner"
    assert winner.name == name, f"Expected winner '{name}', got '{winner.name}'"
