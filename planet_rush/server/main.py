"""FastAPI server for Planet Rush.

Exposes the simulation's command interface and per-frame state to a browser
front end over HTTP and WebSocket.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from .schemas.requests import ClickRequest, CreateGameRequest, TickRequest
from .schemas.responses import (
    CommandResponse,
    CreateGameResponse,
    GameStateResponse,
    TickResponse,
)
from .session import GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Planet Rush server starting...")
    yield
    logger.info("Planet Rush server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Planet Rush API",
    description="Command and state bridge for the Planet Rush simulation",
    version="0.1.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Planet Rush",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new match.

    Example:
        POST /api/games
        {"seed": 42, "profile": "extended"}
    """
    try:
        session = sessions.create_session(
            seed=request.seed, profile=request.profile, frame_rate=request.frameRate
        )
    except KeyError as e:
        raise HTTPException(status_code=400, detail=str(e.args[0]))

    return CreateGameResponse(
        gameId=session.id,
        seed=session.seed,
        profile=session.simulation.config.name,
        state=session.get_state(),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state."""
    session = _get_session(game_id)
    return GameStateResponse(gameId=game_id, state=session.get_state())


@app.post("/api/games/{game_id}/tick", response_model=TickResponse)
async def tick_game(game_id: str, request: TickRequest):
    """Advance the match by one client-driven frame.

    Example:
        POST /api/games/game-abc123/tick
        {"elapsed": 0.016}
    """
    session = _get_session(game_id)
    result = session.tick(request.elapsed)
    return TickResponse(gameId=game_id, tick=session.serialize_tick(result), state=session.get_state())


@app.post("/api/games/{game_id}/click", response_model=CommandResponse)
async def click(game_id: str, request: ClickRequest):
    """Select a planet or dispatch from the selected one."""
    session = _get_session(game_id)
    sim = session.simulation
    selected_before = sim.state.selected

    group = sim.select_or_dispatch(request.x, request.y)
    applied = group is not None or sim.state.selected != selected_before

    return CommandResponse(
        applied=applied,
        state=session.get_state(),
        shipGroup=group.id if group else None,
    )


@app.post("/api/games/{game_id}/send-all", response_model=CommandResponse)
async def toggle_send_all(game_id: str):
    """Toggle send-all mode."""
    session = _get_session(game_id)
    session.simulation.toggle_send_all_mode()
    return CommandResponse(applied=True, state=session.get_state())


@app.post("/api/games/{game_id}/boost", response_model=CommandResponse)
async def activate_boost(game_id: str):
    """Activate the production boost."""
    session = _get_session(game_id)
    applied = session.simulation.activate_boost()
    return CommandResponse(applied=applied, state=session.get_state())


@app.post("/api/games/{game_id}/restart", response_model=CommandResponse)
async def restart_game(game_id: str):
    """Start a new match after the current one has ended."""
    session = _get_session(game_id)
    applied = session.simulation.restart()
    return CommandResponse(applied=applied, state=session.get_state())


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if await sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    raise HTTPException(status_code=404, detail="Game not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/games/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    """WebSocket connection for real-time play.

    The server ticks the match while at least one client is connected.

    Clients receive:
    - CONNECTED: Initial connection confirmation with state
    - FRAME: Tick events and state after every frame
    - PONG: Reply to PING

    Clients send:
    - CLICK {x, y}, TOGGLE_SEND_ALL, BOOST, RESTART, PING
    """
    session = sessions.get(game_id)
    if not session:
        await websocket.close(code=1008, reason="Game not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {"type": "CONNECTED", "gameId": game_id, "state": session.get_state()}
        )
        session.start_frame_loop()

        while True:
            data = await websocket.receive_json()
            message_type = data.get("type")
            sim = session.simulation

            if message_type == "PING":
                await websocket.send_json({"type": "PONG"})
            elif message_type == "CLICK":
                sim.select_or_dispatch(float(data.get("x", 0)), float(data.get("y", 0)))
            elif message_type == "TOGGLE_SEND_ALL":
                sim.toggle_send_all_mode()
            elif message_type == "BOOST":
                sim.activate_boost()
            elif message_type == "RESTART":
                sim.restart()
            else:
                logger.debug(f"Ignoring unknown message type {message_type!r} in game {game_id}")

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from game {game_id}")
    except Exception as e:
        logger.error(f"WebSocket error in game {game_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)
        if not session.connections:
            await session.stop_frame_loop()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
