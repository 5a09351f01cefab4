"""
Main mouse gesture listener that wires evdev input to the recognizer.
"""

import threading
import logging
from typing import Callable, List, Optional
from evdev import ecodes

from ..config.settings import GestureSettings, default_settings
from ..device.device_manager import DeviceManager, MODIFIER_KEYS
from ..gestures.gesture_recognizer import RecognitionResult, Recognizer
from ..utils.gesture_utils import Point
from ..utils.logger import GestureLogger
from .dispatcher import ActionDispatcher

TRIGGER_BUTTONS = {
    'right': ecodes.BTN_RIGHT,
    'middle': ecodes.BTN_MIDDLE
}


class MouseGestureListener:
    """Reads pointer devices and turns button-held drags into gesture actions."""

    def __init__(self, settings: Optional[GestureSettings] = None,
                 dispatcher: Optional[ActionDispatcher] = None,
                 gesture_logger: Optional[GestureLogger] = None):
        self.settings = settings or default_settings()
        self.recognizer = Recognizer(self.settings)
        self.device_manager = DeviceManager()
        self.dispatcher = dispatcher or ActionDispatcher()
        self.logger = gesture_logger or GestureLogger(
            'gesture_debug.log' if self.settings.show_debug_log else None
        )

        # Virtual pointer position integrated from relative motion
        self.position = Point(0, 0)
        self.pressed_buttons = set()
        self.pressed_keys = set()

        # Called with the invalid flag whenever it changes mid-gesture
        self.on_feedback: Optional[Callable[[bool], None]] = None
        self._last_feedback = False

        self.running = False
        self.threads: List[threading.Thread] = []
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No pointer device found")
            return False

        devices = [device]
        if self.settings.trigger_modifier != 'unset':
            devices.extend(self.device_manager.find_keyboards())

        self.running = True
        self._print_startup_info()

        for dev in devices:
            thread = threading.Thread(target=self._event_loop, args=(dev,))
            thread.daemon = True
            thread.start()
            self.threads.append(thread)

        return True

    def stop(self):
        """Stop the listener, dropping any gesture in progress."""
        self.running = False
        with self.state_lock:
            self.recognizer.cancel()
        for thread in self.threads:
            thread.join(timeout=1)
        self.threads = []
        self.logger.close()

    def update_settings(self, settings: GestureSettings):
        """Swap in a new settings snapshot; takes effect on the next event."""
        with self.state_lock:
            self.settings = settings
            self.recognizer.update_settings(settings)

    def cancel(self):
        """Abandon the current gesture (focus loss, screen lock, ...)."""
        with self.state_lock:
            self.recognizer.cancel()
            self._notify_feedback(False)

    def _print_startup_info(self):
        """Print startup information."""
        info = self.device_manager.get_device_info()
        settings = self.settings
        print(f"✅ Found: {info['name']}")
        if info['keyboards']:
            print(f"⌨️  Keyboards: {', '.join(info['keyboards'])}")
        print(f"🖱️  Trigger: {settings.trigger_mouse_button} button"
              f" (modifier: {settings.trigger_modifier})")
        print(f"📏 Min segment: {settings.min_segment_px}px")
        print(f"📐 Inaccuracy: {settings.inaccuracy_degrees}°")
        for gesture in settings.gestures:
            if gesture.directions:
                print(f"   {'-'.join(gesture.directions):<8} {gesture.action}")
        print("🎯 Ready! Hold the trigger button and draw a gesture.")

    def _event_loop(self, device):
        """Event processing loop for one device."""
        try:
            event_batch = []
            for event in device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except OSError as e:
            logging.error(f"Error reading {device.name}: {e}")
            with self.state_lock:
                # Trigger state is unknown now, never act on this gesture
                self._complete_gesture(False)

    def _process_event_batch(self, event_batch):
        """Process one SYN_REPORT frame of events."""
        dx = dy = 0
        for ev in event_batch:
            if ev.type == ecodes.EV_REL:
                if ev.code == ecodes.REL_X:
                    dx += ev.value
                elif ev.code == ecodes.REL_Y:
                    dy += ev.value
            elif ev.type == ecodes.EV_KEY:
                # Apply motion before the button change it came with
                self._apply_motion(dx, dy)
                dx = dy = 0
                self._handle_key_event(ev.code, ev.value)

        self._apply_motion(dx, dy)

    def _apply_motion(self, dx: int, dy: int):
        if not dx and not dy:
            return
        self.position = Point(self.position.x + dx, self.position.y + dy)
        if self.recognizer.tracking:
            invalid = self.recognizer.extend(self.position)
            self._notify_feedback(invalid)

    def _handle_key_event(self, code: int, value: int):
        """Handle button and modifier key transitions."""
        if value == 2:
            return  # autorepeat

        if code not in (ecodes.BTN_LEFT, ecodes.BTN_RIGHT, ecodes.BTN_MIDDLE):
            if value:
                self.pressed_keys.add(code)
            else:
                self.pressed_keys.discard(code)
            return

        trigger = TRIGGER_BUTTONS[self.settings.trigger_mouse_button]

        if value == 1:
            middle_held = ecodes.BTN_MIDDLE in self.pressed_buttons
            self.pressed_buttons.add(code)
            if middle_held and code in (ecodes.BTN_LEFT, ecodes.BTN_RIGHT):
                self._handle_rocker('left' if code == ecodes.BTN_LEFT else 'right')
            elif code == trigger and self._modifier_satisfied():
                self.recognizer.begin(self.position)
                self._notify_feedback(False)
        else:
            self.pressed_buttons.discard(code)
            if code == trigger:
                self._complete_gesture(True)

    def _modifier_satisfied(self) -> bool:
        modifier = self.settings.trigger_modifier
        if modifier == 'unset':
            return True
        return any(key in self.pressed_keys for key in MODIFIER_KEYS[modifier])

    def _handle_rocker(self, side: str):
        """Middle button held plus a left/right click."""
        if side == 'left':
            action = self.settings.rocker_middle_left_action
        else:
            action = self.settings.rocker_middle_right_action

        # A rocker click is never also the start of a drawn gesture
        self.recognizer.cancel()
        self._notify_feedback(False)

        if action == 'none':
            return
        self.logger.log_rocker(side, action)
        self.dispatcher.dispatch(action)

    def _complete_gesture(self, release_allowed: bool) -> Optional[RecognitionResult]:
        """End the tracked gesture, log it and dispatch its action."""
        result = self.recognizer.end(release_allowed)
        self._notify_feedback(False)
        if result is None:
            return None

        self.logger.log_gesture(result)
        logging.debug(
            f"Gesture ended: release_allowed={release_allowed} "
            f"suppress_default={result.suppress_default}"
        )
        if result.action:
            self.logger.log_action(result.action)
            self.dispatcher.dispatch(result.action)
        return result

    def _notify_feedback(self, invalid: bool):
        if invalid == self._last_feedback:
            return
        self._last_feedback = invalid
        if self.on_feedback:
            self.on_feedback(invalid)
