"""
Tests for the single-flight gate.
"""

import asyncio

import pytest

from recipegen.errors import GenerationInProgressError
from recipegen.utils.single_flight import SingleFlight


class TestSingleFlight:
    """Test cases for SingleFlight."""

    def test_marks_operation_in_flight_inside_block(self):
        gate = SingleFlight()

        async def run():
            async with gate.acquire("generate_recipes"):
                assert gate.is_in_flight("generate_recipes")
            assert not gate.is_in_flight("generate_recipes")

        asyncio.run(run())

    def test_second_acquire_is_rejected(self):
        gate = SingleFlight()

        async def run():
            async with gate.acquire("generate_recipes"):
                with pytest.raises(GenerationInProgressError):
                    async with gate.acquire("generate_recipes"):
                        pass

        asyncio.run(run())

    def test_different_names_do_not_block_each_other(self):
        gate = SingleFlight()

        async def run():
            async with gate.acquire("a"):
                async with gate.acquire("b"):
                    assert gate.is_in_flight("a") and gate.is_in_flight("b")

        asyncio.run(run())

    def test_released_after_exception(self):
        gate = SingleFlight()

        async def run():
            with pytest.raises(ValueError):
                async with gate.acquire("generate_recipes"):
                    raise ValueError("boom")
            assert not gate.is_in_flight("generate_recipes")
            async with gate.acquire("generate_recipes"):
                pass

        asyncio.run(run())

    def test_concurrent_tasks_only_one_runs(self):
        gate = SingleFlight()
        started = []

        async def worker(n: int):
            async with gate.acquire("generate_recipes"):
                started.append(n)
                await asyncio.sleep(0.01)
            return n

        async def run():
            return await asyncio.gather(worker(1), worker(2), return_exceptions=True)

        results = asyncio.run(run())
        assert started == [1]
        assert results[0] == 1
        assert isinstance(results[1], GenerationInProgressError)
