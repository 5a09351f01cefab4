"""
Logging utilities for recognized gestures and dispatched actions.
"""

import datetime
import logging
from typing import Optional

from ..config.settings import GestureConfig

logger = logging.getLogger(__name__)


class GestureLogger:
    """Handles console and debug-file logging of gesture results."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_gesture(self, result):
        """Log a completed gesture."""
        timestamp = self._timestamp()
        path = '-'.join(result.path) or '(none)'

        if result.action:
            label = GestureConfig.ACTION_LABELS.get(result.action, result.action)
            print(f"[{timestamp}] 🧭 GESTURE {path} -> {result.action} ({label})")
            print(f"   Matched by: {result.matched_by}, score: {result.score:.2f}")
        elif result.invalid:
            print(f"[{timestamp}] ❌ INVALID GESTURE {path}")
        else:
            print(f"[{timestamp}] ❔ NO MATCH {path}")
        suppress = 'yes' if result.suppress_default else 'no'
        print(f"   Distance: {int(result.total_distance)}px, suppress default: {suppress}")

        self._write_debug(f"[{timestamp}] {result}\n")

    def log_action(self, action: str, source: str = 'gesture'):
        """Log an action being handed to the dispatcher."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] ▶️ ACTION {action} ({source})")
        self._write_debug(f"[{timestamp}] action={action} source={source}\n")

    def log_rocker(self, side: str, action: str):
        """Log a rocker gesture."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 🖱️ ROCKER middle+{side} -> {action}")
        self._write_debug(f"[{timestamp}] rocker={side} action={action}\n")

    def _write_debug(self, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(message)
            self.debug_file.flush()
        except OSError as e:
            logger.warning(f"Could not write debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
