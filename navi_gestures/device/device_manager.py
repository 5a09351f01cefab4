"""
Device management for mouse and keyboard discovery.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)

MODIFIER_KEYS = {
    'alt': (ecodes.KEY_LEFTALT, ecodes.KEY_RIGHTALT, ecodes.KEY_LEFTMETA, ecodes.KEY_RIGHTMETA),
    'shift': (ecodes.KEY_LEFTSHIFT, ecodes.KEY_RIGHTSHIFT),
    'ctrl': (ecodes.KEY_LEFTCTRL, ecodes.KEY_RIGHTCTRL)
}


class DeviceManager:
    """Manages pointer and keyboard device discovery."""

    def __init__(self):
        self.device = None
        self.keyboards = []

    def _list_devices(self):
        return [evdev.InputDevice(path) for path in evdev.list_devices()]

    def find_device(self):
        """Find the first pointer device with relative motion and a trigger button."""
        for device in self._list_devices():
            caps = device.capabilities()
            rel_codes = caps.get(ecodes.EV_REL, [])
            key_codes = caps.get(ecodes.EV_KEY, [])

            if ecodes.REL_X not in rel_codes or ecodes.REL_Y not in rel_codes:
                continue
            if ecodes.BTN_RIGHT in key_codes or ecodes.BTN_MIDDLE in key_codes:
                self.device = device
                logger.info(f"Found pointer device: {device.name}")
                return device

        logger.error("No pointer device found")
        return None

    def find_keyboards(self):
        """Find devices that report modifier keys."""
        modifier_codes = {code for codes in MODIFIER_KEYS.values() for code in codes}
        self.keyboards = []
        for device in self._list_devices():
            if self.device is not None and device.path == self.device.path:
                continue
            key_codes = device.capabilities().get(ecodes.EV_KEY, [])
            if modifier_codes.intersection(key_codes):
                self.keyboards.append(device)
                logger.info(f"Found keyboard: {device.name}")
        return self.keyboards

    def get_device_info(self):
        """Get device information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'keyboards': [kb.name for kb in self.keyboards]
        }
