#!/usr/bin/env python3
"""Mouse Gesture Demo with Trail Feedback.

Hold the right mouse button and draw. The trail turns red as soon as the
path can no longer match any configured gesture; on release the resolved
action is shown.
"""

import sys
from typing import List, Optional, Tuple

import pygame

from navi_gestures.config.settings import GestureConfig, default_settings, load_settings
from navi_gestures.gestures.gesture_recognizer import RecognitionResult, Recognizer


class GestureTrailDemo:
    """Interactive demo for the gesture recognizer."""

    def __init__(self, settings_path: Optional[str] = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1200, 800))
        pygame.display.set_caption("Mouse Gesture Demo")

        self.settings = load_settings(settings_path) if settings_path else default_settings()
        self.recognizer = Recognizer(self.settings)
        self.trail: List[Tuple[int, int]] = []
        self.invalid = False
        self.result: Optional[RecognitionResult] = None

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GREEN = (0, 160, 0)
        self.GRAY = (128, 128, 128)
        self.trail_color = pygame.Color(self.settings.trail_color)
        self.invalid_color = pygame.Color(GestureConfig.INVALID_TRAIL_COLOR)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 30)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 3:  # Right click
                        self.start_gesture(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.recognizer.tracking:
                        self.continue_gesture(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 3:
                        self.finish_gesture(release_allowed=True)
                elif event.type == pygame.WINDOWFOCUSLOST:
                    self.cancel_gesture()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_c:
                        self.clear_screen()

            self.draw()
            clock.tick(60)

    def start_gesture(self, pos: Tuple[int, int]) -> None:
        self.recognizer.begin(pos)
        self.trail = [pos]
        self.invalid = False
        self.result = None

    def continue_gesture(self, pos: Tuple[int, int]) -> None:
        self.trail.append(pos)
        self.invalid = self.recognizer.extend(pos)

    def finish_gesture(self, release_allowed: bool) -> None:
        self.result = self.recognizer.end(release_allowed)
        self.invalid = False

    def cancel_gesture(self) -> None:
        self.recognizer.cancel()
        self.trail = []
        self.invalid = False

    def clear_screen(self) -> None:
        """Clear the trail and result."""
        self.trail = []
        self.result = None

    def draw(self) -> None:
        """Render the UI and current trail."""
        self.screen.fill(self.WHITE)

        y = 10
        self.screen.blit(
            self.small_font.render("Hold RIGHT button and draw.  C: Clear", True, self.BLACK),
            (10, y)
        )
        y += 40
        for gesture in self.settings.gestures:
            if not gesture.directions:
                continue
            line = f"{'-'.join(gesture.directions):<8} {GestureConfig.ACTION_LABELS[gesture.action]}"
            self.screen.blit(self.small_font.render(line, True, self.GRAY), (10, y))
            y += 28

        if len(self.trail) > 1:
            color = self.invalid_color if self.invalid else self.trail_color
            pygame.draw.lines(self.screen, color, False, self.trail, self.settings.trail_width)

        path = '-'.join(self.recognizer.path)
        if path:
            self.screen.blit(self.font.render(path, True, self.BLACK), (10, 700))

        if self.result is not None:
            if self.result.action:
                text = (f"{GestureConfig.ACTION_LABELS[self.result.action]}"
                        f"  ({'-'.join(self.result.path)}, {self.result.matched_by})")
                color = self.GREEN
            else:
                text = f"No action  ({'-'.join(self.result.path) or 'no path'})"
                color = self.invalid_color
            self.screen.blit(self.font.render(text, True, color), (10, 740))

        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = GestureTrailDemo(sys.argv[1] if len(sys.argv) > 1 else None)
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
