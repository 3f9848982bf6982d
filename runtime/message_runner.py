"""
Ordered Message Runner

Sends a list of outbound messages strictly one after another:
- Each send is awaited before the next one starts
- A pacing delay runs between consecutive sends (never after the last)
- The first failing send aborts the remaining items
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundMessage:
    """A single chat message waiting to be sent"""
    channel: str
    text: str


class DeliveryFailure(Exception):
    """Raised when a send fails; remaining messages are not sent"""

    def __init__(self, cause: BaseException, sent: int, message: Optional[OutboundMessage] = None):
        super().__init__(str(cause))
        self.cause = cause
        self.sent = sent
        self.message = message


class NoDelay:
    """Delay strategy that does not wait at all"""

    async def __call__(self) -> None:
        return None


class AsyncioSleepDelay:
    """Delay strategy backed by asyncio.sleep"""

    def __init__(self, seconds: float = 0.05):
        if seconds < 0:
            raise ValueError(f"delay must be >= 0, got {seconds}")
        self.seconds = seconds

    async def __call__(self) -> None:
        await asyncio.sleep(self.seconds)


SendFunc = Callable[[OutboundMessage], Awaitable[Any]]
DelayFunc = Callable[[], Awaitable[None]]


class OrderedMessageRunner:
    """Processes pending outbound messages in order with pacing between sends"""

    def __init__(self, send: SendFunc, delay: Optional[DelayFunc] = None):
        self.send = send
        self.delay = delay or AsyncioSleepDelay()

    async def run(self, messages: List[OutboundMessage]) -> int:
        """
        Send every message in order.

        Returns:
            Number of messages sent

        Raises:
            DeliveryFailure: a send raised; nothing after it was sent
        """
        sent = 0
        for i, message in enumerate(messages):
            try:
                await self.send(message)
            except Exception as e:
                logger.error(f"Send {i + 1}/{len(messages)} to {message.channel} failed: {e}")
                raise DeliveryFailure(e, sent, message) from e
            sent += 1

            if i < len(messages) - 1:
                await self.delay()

        logger.info(f"Sent {sent} messages in order")
        return sent
