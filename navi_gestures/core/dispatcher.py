"""
Dispatch of resolved action names to host-provided handlers.
"""

import logging
from typing import Callable, Dict

from ..config.settings import GestureConfig

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Maps action names to callables supplied by the platform integration."""

    def __init__(self, use_default_handlers: bool = True):
        self.handlers: Dict[str, Callable[[], None]] = {}
        if use_default_handlers:
            for action in GestureConfig.ACTIONS:
                self.handlers[action] = self._make_default_handler(action)

    def _make_default_handler(self, action: str) -> Callable[[], None]:
        label = GestureConfig.ACTION_LABELS.get(action, action)

        def handler():
            logger.info(f"Action requested: {label}")

        return handler

    def register(self, action: str, handler: Callable[[], None]):
        """Register (or replace) the handler for an action."""
        if action not in GestureConfig.ACTIONS:
            raise ValueError(f"Unknown action: {action}")
        self.handlers[action] = handler

    def dispatch(self, action: str) -> bool:
        """
        Run the handler for ``action``.

        Returns:
            True if a handler ran to completion
        """
        if not action or action == 'none':
            return False

        handler = self.handlers.get(action)
        if handler is None:
            logger.warning(f"No handler registered for action: {action}")
            return False

        try:
            handler()
        except Exception as e:
            # Platform operations fail routinely (no history, restricted window)
            logger.error(f"Error performing action {action}: {e}")
            return False
        return True
