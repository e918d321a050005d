"""Async location-event pump built on anyio memory object streams.

Hosts that learn about location changes on an event loop send
``Location`` items into a channel; ``follow()`` hands them to the router
one at a time, so resolutions never overlap.

Usage::

    send, receive = open_location_channel()
    async with anyio.create_task_group() as tg:
        tg.start_soon(follow, router, receive)
        async with send:
            await send.send(Location("/foos/1"))
"""

import logging
import math

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from wren.router import Router
from wren.sink import Location

logger = logging.getLogger("wren.events")


def open_location_channel(
    max_buffer_size: float = math.inf,
) -> tuple[MemoryObjectSendStream[Location], MemoryObjectReceiveStream[Location]]:
    """Create a ``(send, receive)`` stream pair carrying ``Location`` items."""
    return anyio.create_memory_object_stream(max_buffer_size)


async def follow(router: Router, receive: MemoryObjectReceiveStream[Location]) -> int:
    """Dispatch every location from *receive* until the stream is closed.

    Returns the number of locations handled. Errors raised by route
    callbacks propagate and stop the pump.
    """
    handled = 0
    async with receive:
        async for location in receive:
            router.handle_location_change(location.path, location.search)
            handled += 1
    logger.debug("Location stream closed after %d events", handled)
    return handled
