# -*- coding: utf-8 -*-
"""
Wellness realtime module

Drives session controllers from an asyncio ticker and streams state and
notices to the client over a WebSocket.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional
from uuid import uuid4

from fastapi import WebSocket, WebSocketDisconnect

from ..config import settings
from ..sessions.security import is_valid_session_id
from .controller import Notice, Scheduler, SessionController
from .machine import SessionState
from .timings import parse_kind

logger = logging.getLogger(__name__)


class AsyncioTickHandle:
    """Cancellation handle for a running tick task."""

    def __init__(self, task: asyncio.Task) -> None:
        self._task = task

    def cancel(self) -> None:
        self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()


async def _tick_loop(callback: Callable[[float], None], interval_ms: float) -> None:
    loop = asyncio.get_running_loop()
    interval_sec = max(float(interval_ms), 1.0) / 1000.0
    last = loop.time()
    try:
        while True:
            await asyncio.sleep(interval_sec)
            now = loop.time()
            callback((now - last) * 1000.0)
            last = now
    except asyncio.CancelledError:
        logger.debug("Tick loop cancelled")
    except Exception as exc:
        logger.error("Tick loop error: %s", exc)


def asyncio_schedule(callback: Callable[[float], None], interval_ms: float) -> AsyncioTickHandle:
    """Run ``callback(elapsed_ms)`` every ``interval_ms`` on the running event loop."""
    task = asyncio.get_running_loop().create_task(_tick_loop(callback, interval_ms))
    return AsyncioTickHandle(task)


@dataclass
class WellnessConnection:
    """Live WebSocket client"""
    client_id: str
    session_id: Optional[str]
    connected_at: datetime
    controller: SessionController
    outbox: "asyncio.Queue[Dict[str, Any]]"


class WellnessManager:
    """Live wellness session manager"""

    def __init__(self, schedule: Scheduler = asyncio_schedule) -> None:
        self.schedule = schedule
        self.connections: Dict[str, WellnessConnection] = {}

    def open(self, session_id: Optional[str] = None) -> WellnessConnection:
        client_id = str(uuid4())
        outbox: "asyncio.Queue[Dict[str, Any]]" = asyncio.Queue()

        def push_state(state: SessionState) -> None:
            outbox.put_nowait({"type": "state", "state": state.to_dict()})

        def push_notice(notice: Notice) -> None:
            outbox.put_nowait({"type": "notice", **notice.to_dict()})

        controller = SessionController(
            self.schedule,
            exercise_tick_ms=settings.exercise_tick_ms,
            meditation_tick_ms=settings.meditation_tick_ms,
            on_change=push_state,
            on_notice=push_notice,
        )
        conn = WellnessConnection(
            client_id=client_id,
            session_id=session_id,
            connected_at=datetime.now(),
            controller=controller,
            outbox=outbox,
        )
        self.connections[client_id] = conn
        return conn

    def close(self, client_id: str) -> None:
        conn = self.connections.pop(client_id, None)
        if conn is not None:
            conn.controller.close()
            logger.info("Wellness client disconnected: %s", client_id)

    def handle_command(self, client_id: str, data: Dict[str, Any]) -> SessionState:
        """Apply one client command; raises ValueError on a malformed command."""
        conn = self.connections.get(client_id)
        if conn is None:
            raise KeyError(client_id)
        if not isinstance(data, dict):
            raise ValueError("command must be a JSON object")
        action = str(data.get("action") or "").strip().lower()
        kind = parse_kind(str(data.get("kind") or "")) if action == "start" else None
        return conn.controller.dispatch(action, kind)

    def get_summary(self, client_id: str) -> Optional[dict]:
        conn = self.connections.get(client_id)
        if conn is None:
            return None
        return {
            "client_id": conn.client_id,
            "session_id": conn.session_id,
            "connected_at": conn.connected_at.isoformat(),
            "duration_seconds": (datetime.now() - conn.connected_at).total_seconds(),
            "ticking": conn.controller.is_ticking,
            "state": conn.controller.state.to_dict(),
        }


wellness_manager = WellnessManager()


async def _pump(websocket: WebSocket, outbox: "asyncio.Queue[Dict[str, Any]]") -> None:
    try:
        while True:
            message = await outbox.get()
            await websocket.send_json(message)
    except WebSocketDisconnect:
        pass
    except Exception as exc:
        logger.error("Wellness sender error: %s", exc)


async def websocket_endpoint(websocket: WebSocket, session_id: Optional[str] = None) -> None:
    """WebSocket handler: one controller per connection."""
    if session_id is not None and not is_valid_session_id(session_id.strip().lower()):
        await websocket.close(code=1008)
        return

    await websocket.accept()
    conn = wellness_manager.open(session_id.strip().lower() if session_id else None)
    logger.info("Wellness client connected: %s", conn.client_id)
    await websocket.send_json(
        {
            "type": "connected",
            "client_id": conn.client_id,
            "state": conn.controller.state.to_dict(),
            "timestamp": datetime.now().isoformat(),
        }
    )
    sender = asyncio.create_task(_pump(websocket, conn.outbox))
    try:
        while True:
            try:
                data = await websocket.receive_json()
            except ValueError as exc:
                # Undecodable frame; the connection stays open.
                conn.outbox.put_nowait({"type": "error", "message": f"invalid JSON: {exc}"})
                continue
            try:
                wellness_manager.handle_command(conn.client_id, data)
            except ValueError as exc:
                conn.outbox.put_nowait({"type": "error", "message": str(exc)})
    except WebSocketDisconnect:
        pass
    except Exception as exc:
        logger.error("Wellness WebSocket error: %s", exc)
    finally:
        sender.cancel()
        wellness_manager.close(conn.client_id)
