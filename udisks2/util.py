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
Various helper functions that are used across the library.
"""
import asyncio

from udisks2.log import Log


def ensure_future(coro, loop=None):
    """
    Wrapper for asyncio.ensure_future which dumps exceptions
    """
    if loop is None:
        loop = asyncio.get_event_loop()
    fut = asyncio.ensure_future(coro, loop=loop)
    def exception_logging_done_cb(fut):
        try:
            e = fut.exception()
        except asyncio.CancelledError:
            return
        if e is not None:
            loop.call_exception_handler({
                'message': 'Unhandled exception in async future',
                'future': fut,
                'exception': e,
            })
    fut.add_done_callback(exception_logging_done_cb)
    return fut


class Signal(object):
    """
    A simple signalling construct.

    Listeners may connect() to this signal, and their handlers will
    be invoked when fire() is called. A failing handler is logged
    and does not prevent the others from running.
    """
    def __init__(self):
        self._handlers = []


    def connect(self, handler):
        """
        Connect a handler to this signal

        :param handler: Function to invoke when the signal fires
        """
        if handler not in self._handlers:
            self._handlers.append(handler)


    def disconnect(self, handler):
        """
        Disconnect a previously connected handler
        """
        if handler in self._handlers:
            self._handlers.remove(handler)


    def fire(self, *args, **kwargs):
        """
        Fire the signal, invoking all connected handlers

        :params args: Arguments to call handlers with
        """
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception: # pylint: disable=broad-except
                Log.get('udisks2.util').exception('Signal handler %r failed', handler)
