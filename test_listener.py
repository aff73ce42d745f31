"""Tests for the touchscreen listener, fed with synthetic evdev event batches."""

import pytest

evdev = pytest.importorskip("evdev")

from evdev import InputEvent, ecodes

from stroke_gestures import Recognizer
from stroke_gestures.core.dispatcher import message_dispatcher
from stroke_gestures.core.listener import StrokeListener


class RecordingLogger:
    """Collects what the listener reports instead of printing it."""

    def __init__(self):
        self.events = []
        self.closed = False

    def log_result(self, result, point_count):
        self.events.append(('result', result.name, point_count))

    def log_action(self, label, action):
        self.events.append(('action', label, action))

    def log_rejected(self, reason, point_count):
        self.events.append(('rejected', reason, point_count))

    def close(self):
        self.closed = True


class StubDeviceManager:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeTouchscreen:
    """
    Emits multitouch protocol B batches for a listener.

    Like the kernel, an axis value is only sent when it differs from the
    last value reported for that slot.
    """

    def __init__(self, listener):
        self.listener = listener
        self.axes = {}

    @staticmethod
    def abs_event(code, value):
        return InputEvent(0, 0, ecodes.EV_ABS, code, value)

    def sync(self, events):
        batch = list(events) + [InputEvent(0, 0, ecodes.EV_SYN, ecodes.SYN_REPORT, 0)]
        return self.listener._handle_batch(batch)

    def position_events(self, slot, x, y):
        last = self.axes.setdefault(slot, {})
        events = []
        if last.get('x') != x:
            events.append(self.abs_event(ecodes.ABS_MT_POSITION_X, x))
        if last.get('y') != y:
            events.append(self.abs_event(ecodes.ABS_MT_POSITION_Y, y))
        last.update(x=x, y=y)
        return events

    def touch_down(self, slot, tracking_id, x, y):
        self.sync([
            self.abs_event(ecodes.ABS_MT_SLOT, slot),
            self.abs_event(ecodes.ABS_MT_TRACKING_ID, tracking_id),
        ] + self.position_events(slot, x, y))

    def move(self, slot, x, y):
        self.sync([self.abs_event(ecodes.ABS_MT_SLOT, slot)] + self.position_events(slot, x, y))

    def lift(self, slot):
        self.sync([
            self.abs_event(ecodes.ABS_MT_SLOT, slot),
            self.abs_event(ecodes.ABS_MT_TRACKING_ID, -1),
        ])

    def stroke(self, slot, tracking_id, points):
        (x, y), rest = points[0], points[1:]
        self.touch_down(slot, tracking_id, x, y)
        for x, y in rest:
            self.move(slot, x, y)
        self.lift(slot)


LESS_THAN = [(80, 20), (60, 35), (40, 50), (60, 65), (80, 80)]


@pytest.fixture
def listener():
    messages = []
    stroke_listener = StrokeListener(
        Recognizer(),
        message_dispatcher(messages.append),
        device_manager=StubDeviceManager(),
        gesture_logger=RecordingLogger()
    )
    stroke_listener.messages = messages
    stroke_listener.running = True
    return stroke_listener


def test_single_finger_stroke_is_recognized_and_dispatched(listener):
    FakeTouchscreen(listener).stroke(0, 1, LESS_THAN)
    assert listener.logger.events == [
        ('result', '<', 5),
        ('action', '<', 'start_audio_capture'),
    ]
    assert listener.messages == ['Audio recording started...']


def test_last_position_is_flushed_on_lift(listener):
    screen = FakeTouchscreen(listener)
    screen.touch_down(0, 1, 80, 20)
    screen.move(0, 40, 50)
    # Final position and release arrive in the same batch
    screen.sync([
        screen.abs_event(ecodes.ABS_MT_SLOT, 0),
    ] + screen.position_events(0, 80, 80) + [
        screen.abs_event(ecodes.ABS_MT_TRACKING_ID, -1),
    ])
    assert listener.logger.events[0] == ('result', '<', 3)


def test_multi_touch_gesture_is_rejected(listener):
    screen = FakeTouchscreen(listener)
    screen.touch_down(0, 1, 80, 20)
    screen.touch_down(1, 2, 300, 300)
    screen.move(0, 40, 50)
    screen.move(1, 320, 340)
    screen.lift(1)
    assert listener.logger.events == []
    screen.lift(0)
    assert listener.logger.events == [('rejected', 'multi-touch gesture', 0)]
    assert listener.messages == []


def test_tap_is_rejected_as_invalid_stroke(listener):
    screen = FakeTouchscreen(listener)
    screen.touch_down(0, 1, 50, 50)
    screen.lift(0)
    kind, reason, count = listener.logger.events[0]
    assert kind == 'rejected'
    assert 'at least 2 points' in reason
    assert count == 1


def test_new_contact_reuses_unchanged_axis_of_slot(listener):
    vertical = [(100, y) for y in range(10, 201, 10)]
    screen = FakeTouchscreen(listener)
    screen.stroke(0, 1, vertical)
    # The second contact starts at the same x, so no X event is ever sent
    screen.stroke(0, 2, vertical)

    results = [event for event in listener.logger.events if event[0] == 'result']
    assert len(results) == 2
    assert results[0][2] == results[1][2] == len(vertical)
    assert not any(event[0] == 'rejected' for event in listener.logger.events)


def test_batches_after_stop_are_ignored(listener):
    screen = FakeTouchscreen(listener)
    screen.touch_down(0, 1, 80, 20)
    listener.stop()
    assert listener.logger.closed
    assert listener.device_manager.closed

    assert screen.sync([screen.abs_event(ecodes.ABS_MT_TRACKING_ID, -1)]) is False
    assert listener.logger.events == []
