"""Simulation engine components."""

from .combat import ArrivalEvent, CombatResult, resolve_arrival, resolve_combat
from .movement import dispatch_ships, process_ship_movement
from .opponent import OpponentDecision, OpponentPolicy
from .placement import generate_planets
from .production import process_production
from .simulation import FactionSummary, MatchStats, Simulation, TickResult
from .victory import check_victory, victory_rating

__all__ = [
    "ArrivalEvent",
    "CombatResult",
    "resolve_arrival",
    "resolve_combat",
    "dispatch_ships",
    "process_ship_movement",
    "OpponentDecision",
    "OpponentPolicy",
    "generate_planets",
    "process_production",
    "FactionSummary",
    "MatchStats",
    "Simulation",
    "TickResult",
    "check_victory",
    "victory_rating",
]
