"""Pytest configuration and fixtures for Football Championship tests."""

import os
import pytest

# Keep test runs independent of the caller's environment
os.environ.setdefault("CHAMPIONSHIP_STRICT_NAMES", "false")
os.environ.setdefault("CHAMPIONSHIP_SEED_SAMPLE_DATA", "true")

from football_championship import server
from football_championship.championship import ChampionshipManager
from football_championship.data_loader import get_sample_data
from football_championship.models import Player, Team


@pytest.fixture
def manager():
    """An empty championship in lenient (default) name mode."""
    return ChampionshipManager(strict_names=False)


@pytest.fixture
def strict_manager():
    """An empty championship that rejects duplicate and ambiguous names."""
    return ChampionshipManager(strict_names=True)


@pytest.fixture
def team_a():
    team = Team("Team A")
    team.add_player(Player("Alice", "Forward"))
    team.add_player(Player("Bob", "Goalkeeper"))
    return team


@pytest.fixture
def team_b():
    team = Team("Team B")
    team.add_player(Player("Carl", "Forward"))
    team.add_player(Player("Dana", "Goalkeeper"))
    return team


@pytest.fixture
def two_team_championship(manager, team_a, team_b):
    """Team A (Alice, Bob) and Team B (Carl, Dana), in that order."""
    manager.add_team(team_a)
    manager.add_team(team_b)
    return manager


@pytest.fixture
def sample_manager():
    """Championship seeded with the demo teams."""
    return get_sample_data(ChampionshipManager(strict_names=False))


@pytest.fixture
def server_manager(monkeypatch, sample_manager):
    """Point the MCP tools at a fresh seeded championship."""
    monkeypatch.setattr(server, "_manager", sample_manager)
    return sample_manager
