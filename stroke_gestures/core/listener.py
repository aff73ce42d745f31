"""
Touchscreen listener that turns single-finger strokes into dispatched actions.
"""

import logging
import threading
from typing import Dict, Optional

from evdev import ecodes

from ..config.settings import CaptureConfig
from ..device.device_manager import DeviceManager
from ..errors import InvalidStroke
from ..gestures.recognizer import Recognizer
from ..utils.logger import GestureLogger
from .capture import StrokeCapture
from .dispatcher import ActionDispatcher

logger = logging.getLogger(__name__)


class StrokeListener:
    """
    Reads touch events in a background thread and recognizes each stroke.

    A stroke runs from the first finger touching down to the last finger
    lifting. Only then is it classified and its label dispatched; nothing
    is recognized while the finger is still moving.
    """

    def __init__(self, recognizer: Recognizer, dispatcher: ActionDispatcher,
                 device_manager: Optional[DeviceManager] = None,
                 gesture_logger: Optional[GestureLogger] = None):
        self.recognizer = recognizer
        self.dispatcher = dispatcher
        self.device_manager = device_manager or DeviceManager()
        self.logger = gesture_logger or GestureLogger(CaptureConfig.DEBUG_LOG_FILE)
        self.capture = StrokeCapture()

        # State management
        self.running = False
        self.current_slot = 0
        # Last reported coordinates per slot, kept across contacts because
        # an unchanged axis is not resent for a new contact in the same slot
        self.slot_positions: Dict[int, Dict[str, Optional[int]]] = {}
        self.active_contacts = set()
        self.dirty_slots = set()

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        self.running = True
        self._print_startup_info(self.device_manager.get_device_info())

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=CaptureConfig.THREAD_JOIN_TIMEOUT)
        # A thread still blocked in read_loop checks running under the lock
        with self.state_lock:
            self.device_manager.close()
            self.logger.close()

    def _print_startup_info(self, device_info: Dict):
        """Print startup information."""
        print(f"✅ Found: {device_info['name']}")
        print(f"📺 Screen: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"🔤 Gestures: {', '.join(self.recognizer.labels)}")
        print("🎯 Ready! Draw a single stroke with one finger.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    if not self._handle_batch(event_batch):
                        break
                    event_batch = []

        except OSError as e:
            if self.running:
                logger.error(f"Error in event loop: {e}")

    def _handle_batch(self, event_batch) -> bool:
        """Process a synced batch unless the listener was stopped; returns False once stopped."""
        with self.state_lock:
            if not self.running:
                return False
            self._process_event_batch(event_batch)
            return True

    def _process_event_batch(self, event_batch):
        """Process a batch of events ending in SYN_REPORT."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        # Positions are complete once the batch is synced
        for slot in sorted(self.dirty_slots):
            position = self.slot_positions.get(slot)
            if position and position['x'] is not None and position['y'] is not None:
                self.capture.add_point(slot, position['x'], position['y'])
        self.dirty_slots.clear()

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            if ev.value == -1:
                self._handle_finger_lift(self.current_slot)
            else:
                self._handle_finger_place(self.current_slot)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._update_position(self.current_slot, 'x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._update_position(self.current_slot, 'y', ev.value)

    def _update_position(self, slot: int, axis: str, value: int):
        self.slot_positions.setdefault(slot, {'x': None, 'y': None})[axis] = value
        if slot in self.active_contacts:
            self.dirty_slots.add(slot)

    def _handle_finger_place(self, slot: int):
        """Handle finger placement event."""
        self.slot_positions.setdefault(slot, {'x': None, 'y': None})
        self.active_contacts.add(slot)
        # Record the start position even if neither axis changes in this batch
        self.dirty_slots.add(slot)
        self.capture.begin(slot)

    def _handle_finger_lift(self, slot: int):
        """Handle finger lift event."""
        # Flush the last position of this finger before it is released
        self.active_contacts.discard(slot)
        position = self.slot_positions.get(slot)
        if slot in self.dirty_slots and position and None not in position.values():
            self.capture.add_point(slot, position['x'], position['y'])
        self.dirty_slots.discard(slot)

        multi_touch = self.capture.multi_touch
        stroke = self.capture.end(slot)
        if self.capture.in_progress:
            return

        if stroke is None:
            if multi_touch:
                self.logger.log_rejected("multi-touch gesture", 0)
            return

        self._process_stroke(stroke)

    def _process_stroke(self, stroke):
        """Recognize a completed stroke and dispatch its label."""
        try:
            result = self.recognizer.recognize(stroke)
        except InvalidStroke as e:
            self.logger.log_rejected(str(e), len(stroke))
            return

        self.logger.log_result(result, len(stroke))
        action = self.dispatcher.dispatch(result.name)
        self.logger.log_action(result.name, action)
