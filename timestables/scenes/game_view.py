"""The playing screen: a question and a grid of answer tiles."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

import pygame

from .. import settings
from ..models import Candidate, CandidateState, DecoyCandidate, NumberCandidate, Outcome
from ..session import GameSession
from ..ui import Button, candidate_is_tappable, draw_decoy_tile, draw_number_tile
from .base import Scene

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from ..app import App


class GameViewScene(Scene):
    """Shows one question at a time and forwards taps to the session."""

    def __init__(self, app: "App", session: GameSession) -> None:
        super().__init__(app)
        self.session = session
        self.config = session.config

        self.title_font = settings.load_font(64, bold=True)
        self.tile_font = settings.load_font(36, bold=True)
        self.animal_font = settings.load_font(18)
        self.status_font = settings.load_font(36, bold=True)
        self.info_font = settings.load_font(26, bold=True)
        self.dialog_font = settings.load_font(30, bold=True)

        self.tile_rects: List[Tuple[pygame.Rect, Candidate]] = []
        self.block_colors: Dict[str, str] = {}
        self.fall_left: Dict[str, bool] = {}
        self.flipped = False
        self.outcome: Outcome | None = None
        self.advance_timer = 0.0
        self.confirming_exit = False

        self.exit_button = Button(
            pygame.Rect(0, 0, 180, 70),
            "Exit",
            self.dialog_font,
            settings.PALETTE_DANGER,
            callback=self._exit,
        )
        self.cancel_button = Button(
            pygame.Rect(0, 0, 180, 70),
            "Cancel",
            self.dialog_font,
            settings.PALETTE_INACTIVE,
            text_color=settings.COLOR_TEXT_PRIMARY,
            callback=self._cancel_exit,
        )
        self._deal()

    # Event handling -------------------------------------------------
    def handle_events(self, events: Sequence[pygame.event.Event]) -> None:
        for event in events:
            if self.confirming_exit:
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self._cancel_exit()
                    return
                if self.exit_button.handle_event(event) or self.cancel_button.handle_event(event):
                    return
                continue
            if self.handle_back_button_event(event):
                return
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.outcome is None:
                for rect, candidate in self.tile_rects:
                    if rect.collidepoint(event.pos) and candidate_is_tappable(candidate):
                        self._answer(candidate)
                        return

    # Update ---------------------------------------------------------
    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.outcome is None or self.confirming_exit:
            return
        self.advance_timer = max(self.advance_timer - delta_time, 0.0)
        if self.advance_timer > 0:
            return
        if self.outcome.finished:
            self.app.finish_game(self.session)
            return
        self.session.advance()
        self._deal()

    # Rendering ------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        Scene.draw_vertical_gradient(surface, settings.GRADIENT_TOP, settings.GRADIENT_BOTTOM)
        self.render_back_button(surface)
        self._draw_title(surface)
        self._draw_status(surface)
        self._draw_grid(surface)
        self._draw_footer(surface)
        if self.confirming_exit:
            self._draw_confirm_dialog(surface)

    def _draw_title(self, surface: pygame.Surface) -> None:
        margin = settings.SCREEN_MARGIN
        text = self.session.current_question.as_text(flipped=self.flipped)
        title = self.title_font.render(text, True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(title, title.get_rect(topleft=(margin, margin + 50)))

    def _draw_status(self, surface: pygame.Surface) -> None:
        if self.outcome is None:
            return
        if self.outcome.correct:
            label = self.status_font.render("Correct!", True, settings.COLOR_CORRECT)
        else:
            label = self.status_font.render("Incorrect.", True, settings.COLOR_INCORRECT)
        surface.blit(label, label.get_rect(topright=(surface.get_width() - settings.SCREEN_MARGIN, settings.SCREEN_MARGIN - 10)))

    def _draw_grid(self, surface: pygame.Surface) -> None:
        margin = settings.SCREEN_MARGIN
        columns = settings.GRID_COLUMNS
        spacing = 12
        candidates = list(self.session.answer_set)
        rows = max((len(candidates) + columns - 1) // columns, 1)
        top = margin + 140
        available_height = surface.get_height() - top - margin - 70
        available_width = surface.get_width() - margin * 2
        size = min(
            (available_width - spacing * (columns - 1)) // columns,
            (available_height - spacing * (rows - 1)) // rows,
        )
        left = (surface.get_width() - (size * columns + spacing * (columns - 1))) // 2
        mouse_pos = pygame.mouse.get_pos()

        self.tile_rects = []
        for index, candidate in enumerate(candidates):
            rect = pygame.Rect(
                left + (index % columns) * (size + spacing),
                top + (index // columns) * (size + spacing),
                size,
                size,
            )
            self.tile_rects.append((rect, candidate))

        # Highlighted tiles grow, so draw them last to keep them on top.
        for rect, candidate in sorted(self.tile_rects, key=lambda item: item[1].state in (CandidateState.CORRECT, CandidateState.REVEALED)):
            if isinstance(candidate, NumberCandidate):
                colour = self.block_colors.get(candidate.key, "grey")
                draw_number_tile(
                    surface,
                    rect,
                    candidate.value,
                    candidate.state,
                    settings.BLOCK_PALETTES[colour],
                    self.tile_font,
                    settings.BLOCK_TEXT_COLORS[colour],
                    hover=rect.collidepoint(mouse_pos) and self.outcome is None,
                )
            else:
                draw_decoy_tile(
                    surface,
                    rect,
                    candidate,
                    self.app.animal_image(candidate.animal),
                    self.animal_font,
                    fall_left=self.fall_left.get(candidate.key, False),
                )

    def _draw_footer(self, surface: pygame.Surface) -> None:
        margin = settings.SCREEN_MARGIN
        bottom = surface.get_height() - margin
        score = self.status_font.render(f"Score: {self.session.score}", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(score, score.get_rect(bottomleft=(margin, bottom)))
        index, total = self.session.progress
        progress = self.info_font.render(f"Question {index + 1} of {total}", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(progress, progress.get_rect(bottomright=(surface.get_width() - margin, bottom)))

    def _draw_confirm_dialog(self, surface: pygame.Surface) -> None:
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(settings.COLOR_DIALOG_SHADE)
        surface.blit(shade, (0, 0))

        card = pygame.Rect(0, 0, 520, 260)
        card.center = surface.get_rect().center
        pygame.draw.rect(surface, settings.COLOR_CARD_BASE, card, border_radius=28)
        title = self.dialog_font.render("Confirm exit", True, settings.COLOR_TEXT_PRIMARY)
        surface.blit(title, title.get_rect(midtop=(card.centerx, card.top + 28)))
        message = self.helper_font.render("Are you sure you want to exit?", True, settings.COLOR_TEXT_DIM)
        surface.blit(message, message.get_rect(midtop=(card.centerx, card.top + 80)))

        self.cancel_button.set_rect(pygame.Rect(card.left + 50, card.bottom - 100, 180, 70))
        self.exit_button.set_rect(pygame.Rect(card.right - 230, card.bottom - 100, 180, 70))
        self.cancel_button.render(surface)
        self.exit_button.render(surface)

    # Logic ----------------------------------------------------------
    def _deal(self) -> None:
        """Prepare presentation state for the session's current answer grid."""

        self.outcome = None
        self.flipped = self.config.flip_questions and random.random() < 0.5
        self.block_colors = {}
        self.fall_left = {}
        for candidate in self.session.answer_set:
            if isinstance(candidate, DecoyCandidate):
                self.fall_left[candidate.key] = random.random() < 0.5
            else:
                self.block_colors[candidate.key] = random.choice(list(settings.BLOCK_PALETTES))

    def _answer(self, candidate: Candidate) -> None:
        self.outcome = self.session.submit_answer(candidate)
        self.advance_timer = self.config.correct_delay if self.outcome.correct else self.config.incorrect_delay
        self.app.play_sound("good" if self.outcome.correct else "wrong")

    def on_back(self) -> None:
        self.confirming_exit = True

    def _cancel_exit(self) -> None:
        self.confirming_exit = False

    def _exit(self) -> None:
        self.app.show_settings()


__all__ = ["GameViewScene"]
