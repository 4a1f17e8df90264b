"""Scene base class and utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import pygame

from .. import settings
from ..ui import draw_glossy_button

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App


class Scene:
    """Base class for all scenes."""

    back_label = "Back"

    def __init__(self, app: "App") -> None:
        self.app = app
        self.show_back_button = True
        self.back_button_rect: pygame.Rect | None = None
        self.helper_font = settings.load_font(24)
        self.feedback_message = ""
        self.feedback_timer = 0.0

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """React to incoming events. Child classes override as needed."""

    def update(self, delta_time: float) -> None:
        if self.feedback_timer > 0:
            self.feedback_timer = max(self.feedback_timer - delta_time, 0)
            if self.feedback_timer == 0:
                self.feedback_message = ""

    def render(self, surface: pygame.Surface) -> None:
        raise NotImplementedError

    # Utility helpers -------------------------------------------------
    @staticmethod
    def draw_vertical_gradient(surface: pygame.Surface, top_color: tuple[int, int, int], bottom_color: tuple[int, int, int]) -> None:
        """Draw a simple vertical gradient as the background."""

        height = surface.get_height()
        width = surface.get_width()
        for y in range(height):
            ratio = y / max(height - 1, 1)
            color = tuple(
                int(top_color[i] + (bottom_color[i] - top_color[i]) * ratio)
                for i in range(3)
            )
            pygame.draw.line(surface, color, (0, y), (width, y))

    def show_feedback(self, message: str, seconds: float = 2.5) -> None:
        self.feedback_message = message
        self.feedback_timer = seconds

    def render_feedback(self, surface: pygame.Surface, center_y: int) -> None:
        if not self.feedback_message:
            return
        alpha = 255 if self.feedback_timer > 1 else int(255 * self.feedback_timer)
        text_surface = self.helper_font.render(self.feedback_message, True, settings.COLOR_TEXT_LIGHT)
        text_surface.set_alpha(alpha)
        surface.blit(text_surface, text_surface.get_rect(center=(surface.get_width() // 2, center_y)))

    # Back button helpers ---------------------------------------------
    def render_back_button(self, surface: pygame.Surface, bottomleft: tuple[int, int] | None = None) -> None:
        if not self.show_back_button:
            self.back_button_rect = None
            return

        margin = settings.SCREEN_MARGIN
        text = self.helper_font.render(f"‹ {self.back_label}", True, settings.COLOR_TEXT_PRIMARY)
        rect = pygame.Rect(margin, margin - 24, text.get_width() + 64, text.get_height() + 36)
        if bottomleft is not None:
            rect.bottomleft = bottomleft
        face_rect = draw_glossy_button(
            surface,
            rect,
            settings.PALETTE_BACK,
            hover=rect.collidepoint(pygame.mouse.get_pos()),
            corner_radius=28,
        )
        surface.blit(text, text.get_rect(center=face_rect.center))
        self.back_button_rect = rect

    def handle_back_button_event(self, event: pygame.event.Event) -> bool:
        if not self.show_back_button or self.back_button_rect is None:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.back_button_rect.collidepoint(event.pos):
                self.on_back()
                return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.on_back()
            return True
        return False

    def on_back(self) -> None:
        """Override to implement back navigation."""


__all__ = ["Scene"]
