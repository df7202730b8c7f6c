"""Championship manager: owns the teams, awards points and detects the winner."""

import logging
from typing import Optional

from . import config
from .exceptions import AmbiguousNameError, DuplicateNameError
from .models import Player, Team

logger = logging.getLogger(__name__)

POINTS_TO_WIN = 40
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0


class ChampionshipManager:
    """Manage the teams of a championship and its point table.

    The competition is active until a team reaches ``POINTS_TO_WIN``; from
    then on it is concluded and further results award no points.
    """

    def __init__(self, strict_names: Optional[bool] = None):
        self.strict_names = config.STRICT_NAMES if strict_names is None else strict_names
        self._teams: list[Team] = []
        self._winner_index: Optional[int] = None
        self._unregistered_winner: Optional[Team] = None

    @property
    def teams(self) -> list[Team]:
        return self._teams

    def get_teams(self) -> list[Team]:
        return self._teams

    def add_team(self, team: Team) -> None:
        """Add a team to the championship."""
        if self.strict_names:
            if self.find_team(team.name) is not None:
                raise DuplicateNameError(f"Team '{team.name}' already exists")
            seen = set()
            for player in team.players:
                key = player.name.casefold()
                if key in seen:
                    raise DuplicateNameError(
                        f"Player '{player.name}' appears twice on {team.name}"
                    )
                seen.add(key)
            team.strict_names = True
        self._teams.append(team)
        logger.info(f"Added team: {team.name}")

    def find_team(self, name: str) -> Optional[Team]:
        """Find a team by name (case-insensitive), first match wins."""
        wanted = name.casefold()
        return next((t for t in self._teams if t.name.casefold() == wanted), None)

    def find_player(self, name: str) -> Optional[Player]:
        """Find a player across all teams, in team order then roster order.

        Same-named players resolve to the first one found. In strict mode an
        ambiguous name raises AmbiguousNameError instead.
        """
        if not self.strict_names:
            for team in self._teams:
                player = team.find_player(name)
                if player is not None:
                    return player
            return None

        wanted = name.casefold()
        found = [
            p for team in self._teams for p in team.players
            if p.name.casefold() == wanted
        ]
        if len(found) > 1:
            raise AmbiguousNameError(f"{len(found)} players named '{name}'")
        return found[0] if found else None

    def record_match_points(
        self, home: Team, away: Team, home_goals: int, away_goals: int
    ) -> None:
        """Award tournament points for a result and check for a winner.

        Args:
            home: Home team
            away: Away team
            home_goals: Goals scored by the home team
            away_goals: Goals scored by the away team
        """
        if self.is_competition_over():
            logger.warning(
                f"Competition already over, ignoring {home.name} {home_goals} - "
                f"{away_goals} {away.name}"
            )
            return

        if home_goals > away_goals:
            home.add_points(POINTS_FOR_WIN)
            away.add_points(POINTS_FOR_LOSS)
        elif home_goals == away_goals:
            home.add_points(POINTS_FOR_DRAW)
            away.add_points(POINTS_FOR_DRAW)
        else:
            home.add_points(POINTS_FOR_LOSS)
            away.add_points(POINTS_FOR_WIN)
        logger.info(
            f"Points: {home.name} {home.points}, {away.name} {away.points}"
        )

        # Only the two teams of this result can cross the threshold here
        for team in (home, away):
            if team.points >= POINTS_TO_WIN:
                self._conclude(team)
                break

    def _conclude(self, team: Team) -> None:
        index = next((i for i, t in enumerate(self._teams) if t is team), None)
        if index is None:
            logger.warning(f"Winner {team.name} is not registered in the championship")
            self._unregistered_winner = team
        self._winner_index = index
        logger.info(f"Competition ended, winner: {team.name}")

    def is_competition_over(self) -> bool:
        return self._winner_index is not None or self._unregistered_winner is not None

    @property
    def winner(self) -> Optional[Team]:
        if self._winner_index is not None:
            return self._teams[self._winner_index]
        return self._unregistered_winner

    def get_winner(self) -> Optional[Team]:
        return self.winner

    def list_all(self) -> str:
        """List every team followed by its roster, one entry per line."""
        lines = []
        for team in self._teams:
            lines.append(f"{team}\n")
            for player in team.players:
                lines.append(f"  - {player}\n")
        return "".join(lines)
