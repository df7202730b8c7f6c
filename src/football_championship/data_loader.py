"""Sample data for a new championship."""

from typing import Optional

from .championship import ChampionshipManager
from .models import Player, Team


def get_sample_teams() -> list[Team]:
    """Build the demo teams with their starting rosters."""
    real_madrid = Team("Real Madrid")
    real_madrid.add_player(Player("Cristiano Ronaldo", "Forward"))
    real_madrid.add_player(Player("Iker Casillas", "Goalkeeper"))

    barcelona = Team("FC Barcelona")
    barcelona.add_player(Player("Lionel Messi", "Forward"))
    barcelona.add_player(Player("Mark Ter-Stegen", "Goalkeeper"))

    return [real_madrid, barcelona]


def get_sample_data(manager: Optional[ChampionshipManager] = None) -> ChampionshipManager:
    """Register the demo teams, on a fresh manager unless one is given."""
    manager = manager if manager is not None else ChampionshipManager()
    for team in get_sample_teams():
        manager.add_team(team)
    return manager
