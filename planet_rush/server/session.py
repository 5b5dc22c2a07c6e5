"""Game session management for browser-driven matches."""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..config import DEFAULT_PROFILE, get_profile
from ..engine.simulation import Simulation, TickResult
from ..models.planet import Planet
from ..models.ship_group import ShipGroup
from ..utils import GameRNG

logger = logging.getLogger(__name__)

DEFAULT_FRAME_RATE = 30.0


@dataclass
class GameSession:
    """Manages one match and the browser clients watching it.

    A session can be driven two ways: a client calls ``tick`` with its own
    frame deltas, or a WebSocket client connects and the session runs its
    own frame loop, broadcasting a snapshot after every frame.
    """

    id: str
    simulation: Simulation
    seed: int
    frame_rate: float = DEFAULT_FRAME_RATE
    connections: list[WebSocket] = field(default_factory=list)
    frame_task: asyncio.Task | None = None

    def get_state(self) -> dict:
        """Serialize everything the presentation layer draws each frame.

        Returns:
            Dictionary with planets, ship groups, selection, match and HUD state
        """
        sim = self.simulation
        state = sim.state
        summary = sim.faction_summary()
        stats = sim.stats()

        return {
            "profile": sim.config.name,
            "arena": {"width": sim.config.arena_width, "height": sim.config.arena_height},
            "planets": [self._serialize_planet(i, p) for i, p in enumerate(state.planets)],
            "shipGroups": [self._serialize_group(g) for g in state.ship_groups],
            "selected": state.selected,
            "sendAllMode": state.send_all_mode,
            "ended": state.ended,
            "won": state.won,
            "boost": {
                "enabled": sim.config.boost_enabled,
                "active": state.boost.active,
                "cooldown": state.boost.cooldown,
                "timeLeft": state.boost.time_left,
            },
            "combo": stats.combo,
            "bestCombo": stats.best_combo,
            "conqueredPlanets": stats.conquered_planets,
            "progress": sim.progress(),
            "factions": {
                faction.value: {"planets": entry.planets, "units": entry.units}
                for faction, entry in summary.items()
            },
            "playTime": stats.play_time,
            "rating": stats.rating,
        }

    def _serialize_planet(self, index: int, planet: Planet) -> dict:
        """Convert Planet to dict for API response."""
        return {
            "index": index,
            "x": planet.x,
            "y": planet.y,
            "radius": planet.radius,
            "owner": planet.owner.value,
            "units": planet.display_units,
            "productionRate": planet.production_rate,
        }

    def _serialize_group(self, group: ShipGroup) -> dict:
        """Convert ShipGroup to dict for API response."""
        return {
            "id": group.id,
            "owner": group.owner.value,
            "units": int(group.units),
            "x": group.x,
            "y": group.y,
            "heading": group.heading,
            "target": group.target,
        }

    def serialize_tick(self, result: TickResult) -> dict:
        """Convert a TickResult to dict for API response."""
        return {
            "elapsed": result.elapsed,
            "arrivals": [
                {
                    "groupId": event.group_id,
                    "planet": event.planet_index,
                    "attacker": event.attacker.value,
                    "controlBefore": event.control_before.value,
                    "controlAfter": event.control_after.value,
                    "winner": event.winner,
                }
                for event in result.arrivals
            ],
            "opponentDispatch": result.opponent_dispatch.id if result.opponent_dispatch else None,
            "ended": result.ended,
            "won": result.won,
        }

    def tick(self, elapsed: float) -> TickResult:
        return self.simulation.tick(elapsed)

    # =========================================================================
    # SERVER-SIDE FRAME LOOP
    # =========================================================================

    def start_frame_loop(self) -> None:
        """Start ticking the match in the background if not already running."""
        if self.frame_task is None or self.frame_task.done():
            self.frame_task = asyncio.create_task(self._run_frames())
            logger.info(f"Frame loop started for game {self.id} at {self.frame_rate} fps")

    async def stop_frame_loop(self) -> None:
        """Cancel the background frame loop and wait for it to finish."""
        if self.frame_task is None:
            return
        self.frame_task.cancel()
        try:
            await self.frame_task
        except asyncio.CancelledError:
            pass
        self.frame_task = None
        logger.info(f"Frame loop stopped for game {self.id}")

    async def _run_frames(self) -> None:
        interval = 1.0 / self.frame_rate
        last = time.monotonic()
        while True:
            await asyncio.sleep(interval)
            now = time.monotonic()
            try:
                result = self.tick(now - last)
                await self.broadcast(
                    {
                        "type": "FRAME",
                        "tick": self.serialize_tick(result),
                        "state": self.get_state(),
                    }
                )
            except Exception as e:
                # A failed frame is logged and the loop keeps running
                logger.error(f"Frame failed in game {self.id}: {e}", exc_info=True)
            last = now

    async def broadcast(self, message: dict):
        """Send message to all connected WebSocket clients.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        # Handlers can drop their socket while a send is awaited
        for ws in list(self.connections):
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket: {e}")
                disconnected.append(ws)

        for ws in disconnected:
            self.remove_connection(ws)

    def add_connection(self, websocket: WebSocket):
        """Add a WebSocket connection to this session."""
        self.connections.append(websocket)
        logger.info(f"WebSocket connected to game {self.id}, total: {len(self.connections)}")

    def remove_connection(self, websocket: WebSocket):
        """Remove a WebSocket connection from this session."""
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(
                f"WebSocket disconnected from game {self.id}, remaining: {len(self.connections)}"
            )


class GameSessionManager:
    """Manages all active game sessions.

    In-memory storage; sessions live only as long as the server process.
    """

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        seed: int | None = None,
        profile: str = DEFAULT_PROFILE,
        frame_rate: float = DEFAULT_FRAME_RATE,
    ) -> GameSession:
        """Create a new match.

        Args:
            seed: Optional RNG seed for determinism
            profile: Configuration profile name
            frame_rate: Frames per second for the server-side frame loop

        Returns:
            Newly created GameSession

        Raises:
            KeyError: If the profile name is unknown
        """
        config = get_profile(profile)

        # Generate unique game ID
        game_id = f"game-{uuid.uuid4().hex[:8]}"

        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        session = GameSession(
            id=game_id,
            simulation=Simulation(config=config, rng=GameRNG(seed)),
            seed=seed,
            frame_rate=frame_rate,
        )
        self.sessions[game_id] = session

        logger.info(f"Created game {game_id}: profile={profile}, seed={seed}")
        return session

    def get(self, game_id: str) -> GameSession | None:
        """Get a game session by ID.

        Args:
            game_id: Game session ID

        Returns:
            GameSession if found, None otherwise
        """
        return self.sessions.get(game_id)

    async def delete(self, game_id: str) -> bool:
        """Delete a game session, stopping its frame loop.

        Args:
            game_id: Game session ID

        Returns:
            True if deleted, False if not found
        """
        session = self.sessions.pop(game_id, None)
        if session is None:
            return False
        await session.stop_frame_loop()
        logger.info(f"Deleted game {game_id}")
        return True

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        for session in self.sessions.values():
            await session.stop_frame_loop()
        self.sessions.clear()
