"""
Lazily created, shared YouTube session.

The session is built on first use and reused afterwards. Concurrent callers
that arrive while it is being built wait on the same initialization instead of
starting another one; a failed initialization is forgotten so the next caller
can try again.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Callable, Generic, TypeVar

from .youtube import YouTubeSession, create_session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class SessionManager(Generic[T]):
    """Owns one session handle and the state machine around creating it."""

    def __init__(self, factory: Callable[[], T]):
        """
        Initialize the manager.

        Args:
            factory: Blocking callable that builds a new session.
        """
        self._factory = factory
        self._state = SessionState.UNINITIALIZED
        self._session: T | None = None
        self._pending: asyncio.Task | None = None
        self._last_error: BaseException | None = None
        # Bumped by reset() so a stale initialization cannot publish its result
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def last_error(self) -> BaseException | None:
        return self._last_error

    async def acquire(self) -> T:
        """
        Return the shared session, creating it if needed.

        Returns:
            The ready session handle.

        Raises:
            Exception: Whatever the factory raised; every caller waiting on
                that initialization sees the same error.
        """
        if self._state is SessionState.READY:
            return self._session

        if self._state is not SessionState.INITIALIZING:
            self._state = SessionState.INITIALIZING
            self._pending = asyncio.ensure_future(self._initialize(self._generation))
        else:
            logger.debug("Session initialization in progress, waiting")

        return await asyncio.shield(self._pending)

    async def _initialize(self, generation: int) -> T:
        logger.info("Initializing session...")
        try:
            session = await asyncio.to_thread(self._factory)
        except Exception as e:
            logger.error(f"Session initialization failed: {e}")
            if generation == self._generation:
                self._state = SessionState.FAILED
                self._last_error = e
                self._pending = None
            raise

        if generation == self._generation:
            self._session = session
            self._state = SessionState.READY
            self._pending = None
            self._last_error = None
        logger.info("Session initialized successfully")
        return session

    def reset(self) -> None:
        """Discard the cached session so the next acquire builds a new one."""
        self._generation += 1
        self._session = None
        self._pending = None
        self._state = SessionState.UNINITIALIZED


_default_manager: SessionManager[YouTubeSession] | None = None


def get_session_manager() -> SessionManager[YouTubeSession]:
    """Return the process-wide session manager."""
    global _default_manager
    if _default_manager is None:
        _default_manager = SessionManager(create_session)
    return _default_manager
