"""
Console and debug-file reporting for captured strokes.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class GestureLogger:
    """Handles logging of recognized strokes and dispatched actions."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_result(self, result, point_count: int):
        """Log the recognition result for a completed stroke."""
        timestamp = self._timestamp()
        if result.recognized:
            print(f"[{timestamp}] ✍️ GESTURE '{result.name}' [{point_count} points]")
            print(f"   Distance: {result.score:.3f}, recognized in {result.time_ms:.2f}ms")
        else:
            print(f"[{timestamp}] ❓ UNRECOGNIZED STROKE [{point_count} points]")
        self._write(f"[{timestamp}] result={result.name} score={result.score} "
                    f"points={point_count} time_ms={result.time_ms:.3f}")

    def log_action(self, label: str, action: Optional[str]):
        """Log the action dispatched for a label."""
        timestamp = self._timestamp()
        if action:
            print(f"[{timestamp}] ▶️ ACTION {action} (gesture '{label}')")
        self._write(f"[{timestamp}] label={label} action={action}")

    def log_rejected(self, reason: str, point_count: int):
        """Log a stroke that was not sent to the recognizer."""
        timestamp = self._timestamp()
        print(f"[{timestamp}] 🚫 STROKE REJECTED: {reason} [{point_count} points]")
        self._write(f"[{timestamp}] rejected reason={reason!r} points={point_count}")

    def _write(self, message: str):
        if not self.debug_file:
            return
        try:
            self.debug_file.write(message + "\n")
            self.debug_file.flush()
        except OSError as e:
            logger.warning(f"Could not write debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
