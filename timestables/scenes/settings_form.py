"""Settings form shown before a game starts."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, List, Sequence, Tuple

import pygame

from .. import settings
from ..errors import TimesTablesError
from ..models import MAX_FACTOR, MIN_FACTOR, QuestionAmount, Settings
from ..ui import Button, draw_glossy_button
from .base import Scene

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App

# Values the steppers allow; the core accepts a wider range.
TABLE_RANGE = (MIN_FACTOR, MAX_FACTOR)
MULTIPLIER_RANGE = (3, MAX_FACTOR)


class SettingsFormScene(Scene):
    """Lets the player pick the times table, range, and number of questions."""

    def __init__(self, app: "App") -> None:
        super().__init__(app)
        self.show_back_button = False
        self.form: Settings = app.game_settings

        self.title_font = settings.load_font(54, bold=True)
        self.section_font = settings.load_font(30, bold=True)
        self.option_font = settings.load_font(28)
        self.button_font = settings.load_font(30, bold=True)

        self.stepper_rects: List[Tuple[pygame.Rect, str, int]] = []
        self.amount_rects: List[Tuple[pygame.Rect, QuestionAmount]] = []
        self.toggle_rect: pygame.Rect | None = None
        self.start_button = Button(
            pygame.Rect(0, 0, 300, 86),
            "▶ Start game",
            self.button_font,
            settings.PALETTE_START,
            text_color=settings.COLOR_TEXT_PRIMARY,
            callback=self._start_game,
        )

    # Event handling -------------------------------------------------
    def handle_events(self, events: Sequence[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    self._start_game()
                    return
                if event.key == pygame.K_UP:
                    self._step("table", 1)
                elif event.key == pygame.K_DOWN:
                    self._step("table", -1)
                elif event.key == pygame.K_RIGHT:
                    self._step("max_multiplier", 1)
                elif event.key == pygame.K_LEFT:
                    self._step("max_multiplier", -1)

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.start_button.handle_event(event):
                    return
                for rect, field_name, delta in self.stepper_rects:
                    if rect.collidepoint(event.pos):
                        self._step(field_name, delta)
                        break
                for rect, amount in self.amount_rects:
                    if rect.collidepoint(event.pos):
                        self.form = replace(self.form, question_amount=amount)
                        break
                if self.toggle_rect and self.toggle_rect.collidepoint(event.pos):
                    self.form = replace(self.form, random_order=not self.form.random_order)

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        Scene.draw_vertical_gradient(surface, settings.GRADIENT_TOP, settings.GRADIENT_BOTTOM)
        margin = settings.SCREEN_MARGIN
        title = self.title_font.render("Times Tables", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(title, (margin, margin - 10))
        header = self.section_font.render("Game settings", True, settings.COLOR_TEXT_LIGHT)
        surface.blit(header, (margin, margin + 70))

        self.stepper_rects = []
        top = margin + 130
        self._draw_stepper(surface, top, "table", f"{self.form.table} times table")
        self._draw_stepper(
            surface,
            top + 100,
            "max_multiplier",
            f"Up to {self.form.table} × {self.form.max_multiplier}",
        )
        self._draw_amount_picker(surface, top + 200)
        if self.form.question_amount is QuestionAmount.ALL:
            self._draw_toggle(surface, top + 300)
        else:
            self.toggle_rect = None

        rect = pygame.Rect(margin, surface.get_height() - margin - 86, 300, 86)
        self.start_button.set_rect(rect)
        self.start_button.render(surface)
        self.render_feedback(surface, rect.top - 30)

    def _draw_stepper(self, surface: pygame.Surface, top: int, field_name: str, label: str) -> None:
        margin = settings.SCREEN_MARGIN
        card = pygame.Rect(margin, top, surface.get_width() - margin * 2, 80)
        pygame.draw.rect(surface, settings.COLOR_CARD_BASE, card, border_radius=22)
        text = self.option_font.render(label, True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(text, text.get_rect(midleft=(card.left + 24, card.centery)))

        mouse_pos = pygame.mouse.get_pos()
        for index, (symbol, delta) in enumerate((("−", -1), ("+", 1))):
            rect = pygame.Rect(0, 0, 76, 64)
            rect.midright = (card.right - 16 - (1 - index) * 88, card.centery)
            face = draw_glossy_button(surface, rect, settings.PALETTE_INACTIVE, hover=rect.collidepoint(mouse_pos), corner_radius=20)
            glyph = self.button_font.render(symbol, True, settings.COLOR_TEXT_PRIMARY)
            surface.blit(glyph, glyph.get_rect(center=face.center))
            self.stepper_rects.append((rect, field_name, delta))

    def _draw_amount_picker(self, surface: pygame.Surface, top: int) -> None:
        margin = settings.SCREEN_MARGIN
        card = pygame.Rect(margin, top, surface.get_width() - margin * 2, 80)
        pygame.draw.rect(surface, settings.COLOR_CARD_BASE, card, border_radius=22)
        text = self.option_font.render("Questions", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(text, text.get_rect(midleft=(card.left + 24, card.centery)))

        self.amount_rects = []
        width = 96
        mouse_pos = pygame.mouse.get_pos()
        amounts = list(QuestionAmount)
        for index, amount in enumerate(amounts):
            rect = pygame.Rect(0, 0, width, 64)
            rect.midright = (card.right - 16 - (len(amounts) - 1 - index) * (width + 8), card.centery)
            is_selected = amount is self.form.question_amount
            palette = settings.PALETTE_ACTIVE if is_selected else settings.PALETTE_INACTIVE
            face = draw_glossy_button(surface, rect, palette, selected=is_selected, hover=rect.collidepoint(mouse_pos), corner_radius=20)
            label = self.option_font.render(amount.value, True, settings.COLOR_TEXT_PRIMARY)
            surface.blit(label, label.get_rect(center=face.center))
            self.amount_rects.append((rect, amount))

    def _draw_toggle(self, surface: pygame.Surface, top: int) -> None:
        margin = settings.SCREEN_MARGIN
        card = pygame.Rect(margin, top, surface.get_width() - margin * 2, 80)
        pygame.draw.rect(surface, settings.COLOR_CARD_BASE, card, border_radius=22)
        text = self.option_font.render("Random order", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(text, text.get_rect(midleft=(card.left + 24, card.centery)))

        track = pygame.Rect(0, 0, 96, 48)
        track.midright = (card.right - 24, card.centery)
        on = self.form.random_order
        pygame.draw.rect(surface, settings.COLOR_CORRECT if on else settings.PALETTE_INACTIVE["bottom"], track, border_radius=24)
        knob_x = track.right - 24 if on else track.left + 24
        pygame.draw.circle(surface, settings.COLOR_TEXT_LIGHT, (knob_x, track.centery), 20)
        self.toggle_rect = track

    # Logic ----------------------------------------------------------
    def _step(self, field_name: str, delta: int) -> None:
        low, high = TABLE_RANGE if field_name == "table" else MULTIPLIER_RANGE
        value = max(low, min(high, getattr(self.form, field_name) + delta))
        self.form = replace(self.form, **{field_name: value})

    def _start_game(self) -> None:
        try:
            self.app.start_game(self.form)
        except TimesTablesError as exc:
            self.show_feedback(str(exc))


__all__ = ["SettingsFormScene"]
