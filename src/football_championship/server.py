"""MCP Server for the Football Championship tracker."""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from . import config
from .championship import ChampionshipManager
from .data_loader import get_sample_data
from .exceptions import ChampionshipError
from .match import GoalEvent, MatchReport, record_match as apply_match_report
from .models import Player, Team

logger = logging.getLogger(__name__)

# Initialize the server
mcp = FastMCP("football-championship")

# Championship state (lazy initialization, lives as long as the process)
_manager: Optional[ChampionshipManager] = None


def get_manager() -> ChampionshipManager:
    """Get or create the championship manager."""
    global _manager
    if _manager is None:
        _manager = ChampionshipManager()
        if config.SEED_SAMPLE_DATA:
            get_sample_data(_manager)
    return _manager


def _text(output: str) -> list[TextContent]:
    return [TextContent(type="text", text=output)]


def _goal_events(scorers: list[str], assisters: Optional[list[str]]) -> list[GoalEvent]:
    assisters = assisters or []
    events = []
    for i, scorer in enumerate(scorers):
        assister = assisters[i] if i < len(assisters) else None
        events.append(GoalEvent(scorer=scorer, assister=assister or None))
    return events


# ============================================================================
# Roster Tools
# ============================================================================


@mcp.tool()
async def list_teams() -> list[TextContent]:
    """List every team with its points and goal totals, followed by its players."""
    manager = get_manager()
    if not manager.teams:
        return _text("No teams registered.")
    return _text(manager.list_all())


@mcp.tool()
async def add_team(name: str) -> list[TextContent]:
    """Register a new team.

    Args:
        name: Team name (must not match an existing team, ignoring case)
    """
    manager = get_manager()
    name = name.strip()
    if manager.find_team(name) is not None:
        return _text("Team already exists.")
    manager.add_team(Team(name))
    return _text(f"Added team: {name}")


@mcp.tool()
async def add_player(team: str, name: str, position: str) -> list[TextContent]:
    """Add a player to a team's roster.

    Args:
        team: Team name (case-insensitive)
        name: Player name
        position: Forward, Midfielder, Defender, Goalkeeper or any other label
    """
    found = get_manager().find_team(team.strip())
    if found is None:
        return _text("Team not found.")

    name = name.strip()
    position = position.strip()
    try:
        found.add_player(Player(name, position))
    except ChampionshipError as e:
        logger.error(f"Could not add player: {e}")
        return _text(str(e))
    return _text(f"Added {position} {name} to {found.name}")


@mcp.tool()
async def find_player(name: str) -> list[TextContent]:
    """Look up a player anywhere in the championship.

    Args:
        name: Player name (case-insensitive, exact)
    """
    try:
        player = get_manager().find_player(name.strip())
    except ChampionshipError as e:
        return _text(str(e))
    if player is None:
        return _text(f"Player '{name}' not found")
    return _text(str(player))


# ============================================================================
# Match Tools
# ============================================================================


@mcp.tool()
async def record_match(
    home: str,
    away: str,
    home_goals: int,
    away_goals: int,
    home_scorers: Optional[list[str]] = None,
    away_scorers: Optional[list[str]] = None,
    home_assisters: Optional[list[str]] = None,
    away_assisters: Optional[list[str]] = None,
    goalkeeper_saves: Optional[dict[str, int]] = None,
) -> list[TextContent]:
    """Record a match: scorers, assisters, goalkeeper saves and points.

    Args:
        home: Home team name
        away: Away team name
        home_goals: Goals scored by the home team
        away_goals: Goals scored by the away team
        home_scorers: One player name per home goal
        away_scorers: One player name per away goal
        home_assisters: Assister per home goal, same order ("" for none)
        away_assisters: Assister per away goal, same order ("" for none)
        goalkeeper_saves: Saves per goalkeeper name; missing keepers get 0
    """
    manager = get_manager()

    home_team = manager.find_team(home.strip())
    if home_team is None:
        return _text("Team not found.")
    away_team = manager.find_team(away.strip())
    if away_team is None:
        return _text("Team not found.")

    report = MatchReport(
        home=home_team,
        away=away_team,
        home_goals=home_goals,
        away_goals=away_goals,
        home_events=_goal_events(home_scorers or [], home_assisters),
        away_events=_goal_events(away_scorers or [], away_assisters),
        saves=goalkeeper_saves or {},
    )
    try:
        result = apply_match_report(manager, report)
    except ChampionshipError as e:
        logger.error(f"Could not record match: {e}")
        return _text(str(e))

    output = f"Match recorded: {result.score_line}\n"
    if manager.is_competition_over():
        output += f"Competition ended! Winner: {manager.winner.name}\n"
    return _text(output)


@mcp.tool()
async def get_winner() -> list[TextContent]:
    """Show the champion once a team has reached the points threshold."""
    winner = get_manager().winner
    if winner is None:
        return _text("Competition still in progress.")
    return _text(f"Winner: {winner}")


async def main():
    """Run the MCP server."""
    config.configure_logging()
    logger.info("Starting football-championship MCP server")
    await mcp.run_stdio_async()


def run():
    """Console entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
