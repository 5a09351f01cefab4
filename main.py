#!/usr/bin/env python3
"""
Navi Gestures - Main Entry Point
Listens for mouse gestures and dispatches the matching actions.

Usage: main.py [settings.json]
"""

import logging
import sys
import time

from navi_gestures.config.settings import default_settings, load_settings
from navi_gestures.core.listener import MouseGestureListener


def main():
    """Main entry point for the gesture listener."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings(sys.argv[1]) if len(sys.argv) > 1 else default_settings()
    listener = MouseGestureListener(settings)

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
