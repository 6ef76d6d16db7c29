from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from typing import Dict, Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from simulation import Simulation, SimulationConfig
from simulation.logging_config import configure_from_env

logger = logging.getLogger(__name__)


class SchedulerSelection(BaseModel):
    name: str
    options: Dict[str, object] = {}


class FloorRequestBody(BaseModel):
    floor: int
    direction: str


class SimulationManager:
    """Drives a simulation against the wall clock and streams its state.

    One simulated time unit passes every ``tick_seconds / speed_factor`` wall
    seconds. Ticks and submitted calls go through the same lock, so the
    engine never sees concurrent writers.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, tick_seconds: float = 0.1) -> None:
        self.simulation = Simulation(config)
        self.tick_interval = tick_seconds / self.simulation.config.speed_factor
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        if self._task is None:
            logger.info("Starting real-time driver, one tick every %.3fs", self.tick_interval)
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run(self) -> None:
        while True:
            try:
                async with self._lock:
                    self.simulation.advance()
                    payload = self.current_state()
                await self.broadcast(payload)
            except Exception:
                logger.exception("Tick %s failed", self.simulation.current_time)
            await asyncio.sleep(self.tick_interval)

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except (WebSocketDisconnect, RuntimeError, OSError):
                # Starlette raises RuntimeError once the socket has been closed.
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(RuntimeError, OSError):
            await websocket.close()

    def current_state(self) -> dict:
        state = self.simulation.snapshot()
        state["scheduler"] = self.simulation.scheduler_name
        return state

    async def submit(self, floor: int, direction: str) -> dict:
        async with self._lock:
            request = self.simulation.submit(floor, direction)
            state = self.current_state()
            state["request"] = request.as_dict()
            return state

    async def random_request(self) -> dict:
        async with self._lock:
            request = self.simulation.random_request()
            state = self.current_state()
            state["request"] = request.as_dict()
            return state

    async def set_scheduler(self, name: str, options: Dict[str, object]) -> dict:
        async with self._lock:
            self.simulation.set_scheduler(name, **options)
            return self.current_state()


manager = SimulationManager()
app = FastAPI(title="liftsim Dispatch API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    configure_from_env()
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/requests")
async def submit_request(body: FloorRequestBody) -> dict:
    try:
        return await manager.submit(body.floor, body.direction)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/requests/random")
async def submit_random_request() -> dict:
    return await manager.random_request()


@app.post("/scheduler")
async def set_scheduler(selection: SchedulerSelection) -> dict:
    try:
        return await manager.set_scheduler(selection.name, selection.options)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
