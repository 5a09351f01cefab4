#!/usr/bin/env python3
"""
Real-time gesture path monitor.
Shows the direction path and its validity live while you draw.
"""

from navi_gestures.core.listener import MouseGestureListener
import time


class PathMonitor:
    def __init__(self):
        self.listener = MouseGestureListener()
        self.running = False

    def start(self):
        """Start monitoring gesture paths."""
        if not self.listener.start():
            return False

        self.running = True
        print("🎯 Gesture Path Monitor Started")
        print("=" * 50)
        print("🖱️  Hold the trigger button and draw to see the path")
        print("⌨️  Press Ctrl+C to stop")
        print()

        try:
            self._monitor_loop()
        except KeyboardInterrupt:
            self.stop()

        return True

    def stop(self):
        """Stop monitoring."""
        self.running = False
        self.listener.stop()
        print("\n✅ Monitoring stopped")

    def _monitor_loop(self):
        """Main monitoring loop."""
        last_snapshot = None

        while self.running:
            with self.listener.state_lock:
                recognizer = self.listener.recognizer
                snapshot = (recognizer.tracking, recognizer.path, recognizer.invalid,
                            int(recognizer.state.total_distance))

            if snapshot != last_snapshot:
                self._display(*snapshot)
                last_snapshot = snapshot

            time.sleep(0.05)

    def _display(self, tracking, path, invalid, distance):
        """Display the current path."""
        print("\r" + " " * 80 + "\r", end="")
        if not tracking:
            print("🤏 Idle...", end="\r")
            return

        status = "❌ invalid" if invalid else "✅ valid"
        print(f"🧭 {'-'.join(path) or '...':<20} {status:<10} {distance:5d}px", end="\r")


def main():
    """Main entry point."""
    monitor = PathMonitor()
    monitor.start()

if __name__ == "__main__":
    main()
