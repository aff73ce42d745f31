"""
Touchscreen discovery for stroke capture.
"""

import logging
from typing import Dict, Optional

import evdev
from evdev import InputDevice, ecodes

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds a multitouch screen and reports its coordinate extents."""

    def __init__(self, device_path: Optional[str] = None):
        self.device_path = device_path
        self.device: Optional[InputDevice] = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    @staticmethod
    def is_touchscreen(device: InputDevice) -> bool:
        """True if the device reports multitouch slots."""
        abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
        return any(code == ecodes.ABS_MT_SLOT for code, _ in abs_caps)

    def find_device(self) -> Optional[InputDevice]:
        """Open the configured device, or the first multitouch screen found."""
        if self.device_path:
            candidates = [self.device_path]
        else:
            candidates = evdev.list_devices()

        for path in candidates:
            try:
                device = InputDevice(path)
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
                continue

            if not self.is_touchscreen(device):
                device.close()
                continue

            self._read_extents(device)
            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
            return device

        logger.error("No touchscreen device found")
        return None

    def _read_extents(self, device: InputDevice):
        abs_info = dict(device.capabilities().get(ecodes.EV_ABS, []))
        if ecodes.ABS_MT_POSITION_X in abs_info:
            self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
        if ecodes.ABS_MT_POSITION_Y in abs_info:
            self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

    def get_device_info(self) -> Dict:
        """Get device and screen information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height
        }

    def close(self):
        if self.device:
            self.device.close()
            self.device = None
