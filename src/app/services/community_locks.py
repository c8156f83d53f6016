"""
Per-community advisory locks.

Keeps two deletions of the same community from running at the same time
within one process. Not shared across processes.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict
from uuid import UUID


class CommunityLocks:
    def __init__(self) -> None:
        self._locks: Dict[UUID, asyncio.Lock] = {}

    def is_locked(self, community_id: UUID) -> bool:
        lock = self._locks.get(community_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, community_id: UUID) -> AsyncIterator[bool]:
        """
        Try to take the lock without waiting.

        Yields:
            True if the lock was taken, False if another operation holds it
        """
        if self.is_locked(community_id):
            yield False
            return

        lock = self._locks.setdefault(community_id, asyncio.Lock())
        async with lock:
            try:
                yield True
            finally:
                self._locks.pop(community_id, None)


community_locks = CommunityLocks()
