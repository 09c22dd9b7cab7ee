#
# udisks2 - Copyright (C) 2026 UDisks2 Client Developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#

"""
Unit tests for udisks2.util module.
"""

import asyncio
import contextlib

from udisks2.util import Signal, ensure_future


# =============================================================================
# Signal
# =============================================================================
class TestSignal:
    """Tests for the Signal helper."""

    def test_fire(self):
        signal = Signal()
        received = []
        signal.connect(lambda *args, **kwargs: received.append((args, kwargs)))
        signal.fire(1, two=2)
        assert received == [((1,), {"two": 2})]

    def test_connect_once(self):
        signal = Signal()
        received = []
        handler = received.append
        signal.connect(handler)
        signal.connect(handler)
        signal.fire("x")
        assert received == ["x"]

    def test_disconnect(self):
        signal = Signal()
        received = []
        handler = received.append
        signal.connect(handler)
        signal.disconnect(handler)
        signal.disconnect(handler)
        signal.fire("x")
        assert received == []

    def test_failing_handler_does_not_stop_others(self):
        signal = Signal()
        received = []

        def broken(_value):
            raise RuntimeError("boom")

        signal.connect(broken)
        signal.connect(received.append)
        signal.fire("x")
        assert received == ["x"]


# =============================================================================
# ensure_future
# =============================================================================
class TestEnsureFuture:
    """Tests for the ensure_future wrapper."""

    @staticmethod
    def _run(coro):
        reported = []

        async def scenario():
            loop = asyncio.get_running_loop()
            loop.set_exception_handler(lambda loop, context: reported.append(context))
            fut = ensure_future(coro)
            await asyncio.sleep(0)
            fut.cancel()
            with contextlib.suppress(BaseException):
                await fut
            await asyncio.sleep(0)

        asyncio.run(scenario())
        return reported

    def test_exception_reported(self):
        async def fail():
            raise RuntimeError("boom")

        reported = self._run(fail())
        assert len(reported) == 1
        assert isinstance(reported[0]["exception"], RuntimeError)

    def test_cancel_not_reported(self):
        async def wait():
            await asyncio.Event().wait()

        assert self._run(wait()) == []

    def test_result(self):
        async def scenario():
            return await ensure_future(asyncio.sleep(0, result=42))

        assert asyncio.run(scenario()) == 42
