"""Record a match result: player stats, team totals and tournament points."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .championship import ChampionshipManager
from .models import Player, Team

logger = logging.getLogger(__name__)


@dataclass
class GoalEvent:
    scorer: str
    assister: Optional[str] = None


@dataclass
class MatchReport:
    home: Team
    away: Team
    home_goals: int
    away_goals: int
    home_events: list[GoalEvent] = field(default_factory=list)
    away_events: list[GoalEvent] = field(default_factory=list)
    saves: dict[str, int] = field(default_factory=dict)  # goalkeeper name -> saves

    def saves_for(self, keeper: Player) -> int:
        wanted = keeper.name.casefold()
        return next(
            (count for name, count in self.saves.items() if name.casefold() == wanted),
            0,
        )


@dataclass
class MatchResult:
    home: Team
    away: Team
    home_goals: int
    away_goals: int
    home_points: int
    away_points: int
    winner: Optional[Team] = None  # set when this match ended the competition

    @property
    def score_line(self) -> str:
        return f"{self.home.name} {self.home_goals} - {self.away_goals} {self.away.name}"


def _resolve(manager: ChampionshipManager, name: Optional[str], role: str) -> Optional[Player]:
    if not name or not name.strip():
        return None
    player = manager.find_player(name.strip())
    if player is None:
        logger.warning(f"Unknown {role} '{name}', skipping")
    return player


def _resolve_events(
    manager: ChampionshipManager, events: list[GoalEvent]
) -> list[tuple[Optional[Player], Optional[Player]]]:
    return [
        (_resolve(manager, event.scorer, "scorer"), _resolve(manager, event.assister, "assister"))
        for event in events
    ]


def _credit_goals(credits: list[tuple[Optional[Player], Optional[Player]]]) -> None:
    for scorer, assister in credits:
        if scorer is not None:
            scorer.update_stats(goals_to_add=1)
        if assister is not None and assister is not scorer:
            assister.update_stats(assists_to_add=1)


def _credit_goalkeepers(report: MatchReport, team: Team, conceded: int) -> None:
    for player in team.players:
        if player.is_goalkeeper:
            player.update_stats(
                saves_to_add=report.saves_for(player), conceded_to_add=conceded
            )


def record_match(manager: ChampionshipManager, report: MatchReport) -> MatchResult:
    """Apply a full match report to the championship.

    Order matters: goals and assists first, then goalkeeper saves and
    conceded goals, then team totals, then tournament points.
    """
    was_over = manager.is_competition_over()
    home_before = report.home.points
    away_before = report.away.points

    # All names resolve before any counter changes
    home_credits = _resolve_events(manager, report.home_events)
    away_credits = _resolve_events(manager, report.away_events)

    _credit_goals(home_credits)
    _credit_goals(away_credits)

    _credit_goalkeepers(report, report.home, report.away_goals)
    _credit_goalkeepers(report, report.away, report.home_goals)

    report.home.recalculate_stats()
    report.away.recalculate_stats()

    manager.record_match_points(report.home, report.away, report.home_goals, report.away_goals)

    result = MatchResult(
        home=report.home,
        away=report.away,
        home_goals=report.home_goals,
        away_goals=report.away_goals,
        home_points=report.home.points - home_before,
        away_points=report.away.points - away_before,
        winner=None if was_over else manager.winner,
    )
    logger.info(f"Match recorded: {result.score_line}")
    return result
