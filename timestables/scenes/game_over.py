"""Final score screen."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable, List

import pygame

from .. import settings
from ..answers import ANIMALS
from ..models import DecoyCandidate
from ..ui import Button, draw_decoy_tile
from .base import Scene

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App

ANIMAL_ROW_SIZE = 8


class GameOverScene(Scene):
    """Shows the score with a border of animals and offers another round."""

    back_label = "Exit"

    def __init__(self, app: "App", score: int, total: int) -> None:
        super().__init__(app)
        self.score = score
        self.total = total
        self.animals: List[DecoyCandidate] = [
            DecoyCandidate(animal) for animal in random.sample(ANIMALS, ANIMAL_ROW_SIZE * 2)
        ]

        self.title_font = settings.load_font(54, bold=True)
        self.label_font = settings.load_font(36)
        self.score_font = settings.load_font(72, bold=True)
        self.animal_font = settings.load_font(18)
        self.play_again_button = Button(
            pygame.Rect(0, 0, 300, 86),
            "Play again ▶",
            settings.load_font(30, bold=True),
            settings.PALETTE_START,
            text_color=settings.COLOR_TEXT_PRIMARY,
            callback=self.app.play_again,
        )

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if self.handle_back_button_event(event):
                return
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.app.play_again()
                return
            if self.play_again_button.handle_event(event):
                return

    def render(self, surface: pygame.Surface) -> None:
        Scene.draw_vertical_gradient(surface, settings.GRADIENT_TOP, settings.GRADIENT_BOTTOM)
        margin = settings.SCREEN_MARGIN
        width = surface.get_width()

        title = self.title_font.render("Well done!", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(title, title.get_rect(midtop=(width // 2, margin - 20)))

        size = (width - margin * 2) // ANIMAL_ROW_SIZE
        self._draw_animals(surface, self.animals[:ANIMAL_ROW_SIZE], margin + 60, size)
        self._draw_animals(surface, self.animals[ANIMAL_ROW_SIZE:], surface.get_height() - margin - 110 - size, size)

        center_y = surface.get_height() // 2
        label = self.label_font.render("You scored:", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(label, label.get_rect(midbottom=(width // 2, center_y - 10)))
        score = self.score_font.render(f"{self.score} out of {self.total}", True, settings.COLOR_CORRECT)
        surface.blit(score, score.get_rect(midtop=(width // 2, center_y)))

        self.render_back_button(surface, bottomleft=(margin, surface.get_height() - margin + 10))
        rect = pygame.Rect(0, 0, 300, 86)
        rect.bottomright = (width - margin, surface.get_height() - margin + 10)
        self.play_again_button.set_rect(rect)
        self.play_again_button.render(surface)

    def _draw_animals(self, surface: pygame.Surface, animals: List[DecoyCandidate], top: int, size: int) -> None:
        left = settings.SCREEN_MARGIN
        for index, animal in enumerate(animals):
            rect = pygame.Rect(left + index * size + 4, top, size - 8, size - 8)
            draw_decoy_tile(surface, rect, animal, self.app.animal_image(animal.animal), self.animal_font)

    def on_back(self) -> None:
        self.app.show_settings()


__all__ = ["GameOverScene"]
