"""Session lifecycle events.

Owners of per-user state (the cart) receive a SessionEvents instance at
construction and subscribe to logout there.
"""
import inspect
from typing import Awaitable, Callable, Union

from foodcart.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

LogoutCallback = Callable[[str], Union[None, Awaitable[None]]]


class SessionEvents:
    """Observer registry for the session-end signal."""

    def __init__(self) -> None:
        self._subscribers: list[LogoutCallback] = []

    def subscribe(self, callback: LogoutCallback) -> Callable[[], None]:
        """
        Register a logout callback (sync or async).

        Subscribing the same callback twice has no effect.

        Returns:
            A function that removes the subscription.
        """
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def emit_logout(self, owner_id: str) -> None:
        """Notify every subscriber once, in subscription order."""
        logger.info(f"Session ended for {sanitize_id_for_logging(owner_id)}")
        for callback in list(self._subscribers):
            try:
                result = callback(owner_id)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Logout subscriber {callback!r} failed: {e}", exc_info=True)
