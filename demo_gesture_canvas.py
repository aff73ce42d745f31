#!/usr/bin/env python3
"""Gesture Canvas Demo.

Draw one stroke with the mouse on a small canvas. When the button is
released the stroke is recognized and the bound action reports its
status message on screen:

    <  start audio capture
    >  start video capture
    V  call guardian
    ^  alert police
"""

from typing import List, Optional, Tuple

import pygame

from stroke_gestures.core.dispatcher import message_dispatcher
from stroke_gestures.errors import InvalidStroke
from stroke_gestures.gestures.recognizer import MatchResult, Recognizer


class GestureCanvasDemo:
    """Interactive single-stroke canvas."""

    CANVAS_SIZE = 300
    PANEL_HEIGHT = 110

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.CANVAS_SIZE, self.CANVAS_SIZE + self.PANEL_HEIGHT)
        )
        pygame.display.set_caption("Gesture Canvas")

        self.recognizer = Recognizer()
        self.dispatcher = message_dispatcher(self.show_message)
        self.current_path: List[Tuple[int, int]] = []
        self.is_drawing = False
        self.result: Optional[MatchResult] = None
        self.message = "Draw <, >, V or ^"

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GRAY = (128, 128, 128)
        self.BLUE = (0, 0, 255)

        # Fonts
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 20)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1 and self.on_canvas(event.pos):
                        self.start_drawing()
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing and self.on_canvas(event.pos):
                        self.current_path.append(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1 and self.is_drawing:
                        self.finish_drawing()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_c:
                        self.clear_canvas()

            self.draw()
            clock.tick(60)

    def on_canvas(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.CANVAS_SIZE and 0 <= y < self.CANVAS_SIZE

    def start_drawing(self) -> None:
        """Start a new stroke; the previous one is cleared."""
        self.current_path = []
        self.is_drawing = True

    def finish_drawing(self) -> None:
        """Finish the stroke, recognize it and dispatch the label."""
        self.is_drawing = False
        try:
            self.result = self.recognizer.recognize(self.current_path)
        except InvalidStroke:
            self.result = None
            self.show_message("Draw a longer stroke!")
            return
        self.dispatcher.dispatch(self.result.name)

    def show_message(self, text: str) -> None:
        self.message = text

    def clear_canvas(self) -> None:
        """Clear the drawing and results."""
        self.current_path = []
        self.result = None
        self.message = "Draw <, >, V or ^"

    def draw(self) -> None:
        """Render the canvas, the stroke and the status panel."""
        self.screen.fill(self.WHITE)
        canvas = pygame.Rect(0, 0, self.CANVAS_SIZE, self.CANVAS_SIZE)
        pygame.draw.rect(self.screen, self.GRAY, canvas, 1)

        if len(self.current_path) > 1:
            pygame.draw.lines(self.screen, self.BLACK, False, self.current_path, 2)

        y = self.CANVAS_SIZE + 10
        self.screen.blit(self.font.render(self.message, True, self.BLUE), (10, y))
        if self.result:
            detail = f"{self.result.name}  distance {self.result.score:.2f}"
            self.screen.blit(self.small_font.render(detail, True, self.GRAY), (10, y + 30))
        help_text = "C: clear"
        self.screen.blit(self.small_font.render(help_text, True, self.GRAY), (10, y + 60))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = GestureCanvasDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
