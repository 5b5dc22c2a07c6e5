"""Phase 4: Victory condition checking.

This module handles:
1. Win: the enemy faction holds no planets
2. Loss: the player faction holds no planets
3. Rating a finished match for the game-over screen
"""

from ..models.faction import Faction
from ..models.game import GameState

LIGHTNING_VICTORY_SECONDS = 60
FAST_VICTORY_SECONDS = 120
COMBO_VICTORY_STREAK = 5


def check_victory(state: GameState) -> bool:
    """Execute the win-check phase.

    The win is checked first, so a board with neither faction left counts as
    a win. Either way exactly one outcome is recorded.

    Args:
        state: Current simulation state

    Returns:
        True if the match has ended, False otherwise
    """
    if not state.planets_owned_by(Faction.ENEMY):
        state.ended = True
        state.won = True
    elif not state.planets_owned_by(Faction.PLAYER):
        state.ended = True
        state.won = False
    return state.ended


def victory_rating(won: bool, play_time: float, combo: int) -> str:
    """Grade a finished match.

    Args:
        won: Whether the player won
        play_time: Wall-clock match length in seconds
        combo: Conquest streak standing when the match ended (frozen at the
            end, so a streak that broke earlier does not count)

    Returns:
        "defeat", "lightning", "fast", "combo", or "excellent"

    Examples:
        >>> victory_rating(True, 45.0, 1)
        'lightning'
        >>> victory_rating(True, 300.0, 6)
        'combo'
    """
    if not won:
        return "defeat"
    if play_time < LIGHTNING_VICTORY_SECONDS:
        return "lightning"
    if play_time < FAST_VICTORY_SECONDS:
        return "fast"
    if combo >= COMBO_VICTORY_STREAK:
        return "combo"
    return "excellent"
