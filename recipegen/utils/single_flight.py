"""
In-process single-flight gate for named async operations.

This module provides a tiny guard ensuring at most one instance of a named
operation is running at a time. A second caller is rejected immediately with
GenerationInProgressError instead of being queued.

The gate is process-local and in-memory. It relies on the asyncio event loop
being single-threaded: the membership check and the insert happen without an
await in between, so no lock is needed.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Set

from recipegen.errors import GenerationInProgressError


class SingleFlight:
    """
    Tracks which named operations are currently in flight.

    Usage:
        gate = SingleFlight()
        async with gate.acquire("generate_recipes"):
            ...
    """

    def __init__(self) -> None:
        self._in_flight: Set[str] = set()

    @asynccontextmanager
    async def acquire(self, name: str) -> AsyncIterator[None]:
        """
        Mark `name` as in flight for the duration of the block.

        Raises:
            GenerationInProgressError: If `name` is already in flight
        """
        if name in self._in_flight:
            raise GenerationInProgressError(f"Operation '{name}' is already in progress")

        self._in_flight.add(name)
        try:
            yield
        finally:
            self._in_flight.discard(name)

    def is_in_flight(self, name: str) -> bool:
        """Return True while an operation with this name is running."""
        return name in self._in_flight
