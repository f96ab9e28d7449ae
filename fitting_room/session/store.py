"""In-memory ownership of fitting sessions."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from fitting_room.session.state import FittingSession

Transition = Callable[..., FittingSession]


class SessionStore:
    """Keeps one :class:`FittingSession` per user for the lifetime of the process."""

    def __init__(self) -> None:
        self._sessions: dict[str, FittingSession] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        if user_id not in self._locks:
            self._locks[user_id] = asyncio.Lock()
        return self._locks[user_id]

    async def get(self, user_id: str) -> FittingSession:
        """Return the user's session, creating an empty one on first use."""

        async with self._lock_for(user_id):
            return self._sessions.setdefault(user_id, FittingSession())

    async def apply(self, user_id: str, transition: Transition, *args: Any) -> FittingSession:
        """Run ``transition(session, *args)`` atomically and store its result.

        Exceptions raised by the transition leave the stored session untouched.
        """

        async with self._lock_for(user_id):
            current = self._sessions.setdefault(user_id, FittingSession())
            updated = transition(current, *args)
            self._sessions[user_id] = updated
            return updated

    async def reset(self, user_id: str) -> FittingSession:
        """Forget everything the user supplied, including the API key."""

        async with self._lock_for(user_id):
            session = FittingSession()
            self._sessions[user_id] = session
            return session
