"""Data models for the Football Championship tracker."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import DuplicateNameError

logger = logging.getLogger(__name__)


class Role(Enum):
    FORWARD = "Forward"
    MIDFIELDER = "Midfielder"
    DEFENDER = "Defender"
    GOALKEEPER = "Goalkeeper"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: str) -> "Role":
        """Map a free-text position label to a role (case-insensitive)."""
        wanted = label.lower()
        for role in cls:
            if role is not cls.OTHER and role.value.lower() == wanted:
                return role
        return cls.OTHER


@dataclass
class Player:
    name: str
    position: str  # label as entered, e.g. "Forward" or "goalkeeper"
    goals: int = 0
    assists: int = 0
    # Goalkeeper-only counters
    saves: int = 0
    goals_conceded: int = 0

    @property
    def role(self) -> Role:
        return Role.from_label(self.position)

    @property
    def is_goalkeeper(self) -> bool:
        return self.role is Role.GOALKEEPER

    def update_stats(
        self,
        goals_to_add: int = 0,
        assists_to_add: int = 0,
        saves_to_add: int = 0,
        conceded_to_add: int = 0,
    ) -> None:
        """Add to the player's counters.

        Goals and assists always apply. Saves and conceded goals only apply to
        goalkeepers and are dropped for every other role.
        """
        self.goals += goals_to_add
        self.assists += assists_to_add
        if self.is_goalkeeper:
            self.saves += saves_to_add
            self.goals_conceded += conceded_to_add
        logger.debug(
            f"Updated {self.name}: goals={self.goals} assists={self.assists} "
            f"saves={self.saves} conceded={self.goals_conceded}"
        )

    def __str__(self) -> str:
        text = f"{self.name} ({self.position}) Goals:{self.goals} Assists:{self.assists}"
        if self.is_goalkeeper:
            text += f" Saves:{self.saves} Conceded:{self.goals_conceded}"
        return text


def _matches(name: str, wanted: str) -> bool:
    return name.casefold() == wanted.casefold()


@dataclass
class Team:
    name: str
    players: list[Player] = field(default_factory=list)
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0  # 3 win, 1 draw, 0 loss
    strict_names: bool = field(default=False, repr=False, compare=False)

    def get_players(self) -> list[Player]:
        return self.players

    def add_player(self, player: Player) -> None:
        """Append a player to the roster.

        Duplicate names are allowed unless the team is in strict mode.
        """
        if self.strict_names and self.find_player(player.name) is not None:
            raise DuplicateNameError(
                f"Player '{player.name}' already on {self.name}"
            )
        self.players.append(player)
        logger.info(f"Added {player.position} {player.name} to {self.name}")

    def find_player(self, name: str) -> Optional[Player]:
        """Return the first roster player whose name matches, ignoring case."""
        return next((p for p in self.players if _matches(p.name, name)), None)

    def add_points(self, points: int) -> None:
        self.points += points

    def _aggregate(self) -> tuple[int, int]:
        goals_for = sum(p.goals for p in self.players)
        goals_against = sum(p.goals_conceded for p in self.players if p.is_goalkeeper)
        return goals_for, goals_against

    def recalculate_stats(self) -> None:
        """Refresh goals for/against from the roster.

        Call after any player stat update; the stored totals are not kept in
        sync automatically.
        """
        self.goals_for, self.goals_against = self._aggregate()

    def __str__(self) -> str:
        # Display totals come straight from the roster; stored fields stay untouched.
        goals_for, goals_against = self._aggregate()
        return f"{self.name} [Pts:{self.points}] GS:{goals_for} GA:{goals_against}"
