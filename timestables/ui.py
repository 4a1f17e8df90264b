"""UI drawing helpers for glossy buttons and answer tiles."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
import pygame

from .models import Candidate, CandidateState, DecoyCandidate
from .settings import Palette

_STATE_OFFSETS = {
    "rest": {"base": 12, "face": -6},
    "hover": {"base": 8, "face": -3},
    "pressed": {"base": 4, "face": 2},
}

# Opacity and scale per annotation, mirroring how the tiles react after an answer.
_NUMBER_ALPHA = {CandidateState.FADED: 64, CandidateState.WRONG_CHOSEN: 64}
_DECOY_ALPHA = {CandidateState.FADED: 128, CandidateState.WRONG_CHOSEN: 128}
_NUMBER_SCALE = {
    CandidateState.CORRECT: 1.25,
    CandidateState.REVEALED: 1.25,
    CandidateState.WRONG_CHOSEN: 0.75,
}


def _blend(color_a: tuple[int, int, int], color_b: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    factor = max(0.0, min(1.0, factor))
    return tuple(int(color_a[i] + (color_b[i] - color_a[i]) * factor) for i in range(3))


def _rounded_gradient(size: tuple[int, int], top: tuple[int, int, int], bottom: tuple[int, int, int], radius: int) -> pygame.Surface:
    fill = pygame.Surface(size, pygame.SRCALPHA)
    height = fill.get_height()
    for y in range(height):
        color = _blend(top, bottom, y / max(height - 1, 1))
        pygame.draw.line(fill, color, (0, y), (fill.get_width(), y))
    mask = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(mask, (255, 255, 255, 255), mask.get_rect(), border_radius=radius)
    fill.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    return fill


def draw_glossy_button(
    surface: pygame.Surface,
    rect: pygame.Rect,
    palette: Palette,
    *,
    selected: bool = False,
    hover: bool = False,
    corner_radius: int | None = None,
) -> pygame.Rect:
    """Render a candy-like button with a soft depth effect and return the face rect."""

    state = "pressed" if selected else "hover" if hover else "rest"
    offsets = _STATE_OFFSETS[state]

    radius = corner_radius if corner_radius is not None else rect.height // 2
    radius = max(8, min(radius, rect.width // 2))

    base_rect = rect.inflate(-16, -8).move(0, offsets["base"])
    shadow = palette["shadow"]
    surface.blit(_rounded_gradient(base_rect.size, shadow, _blend(shadow, (0, 0, 0), 0.35), radius), base_rect.topleft)

    face_rect = rect.inflate(-12, -12).move(0, offsets["face"])
    surface.blit(_rounded_gradient(face_rect.size, palette["top"], palette["bottom"], radius), face_rect.topleft)
    pygame.draw.rect(surface, palette["border"], face_rect, width=4, border_radius=radius)

    return face_rect


class Button:
    """Interactive button built on top of the glossy button helper."""

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        font: pygame.font.Font,
        palette: Palette,
        *,
        text_color: tuple[int, int, int] = (255, 255, 255),
        callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.rect = rect
        self.label = label
        self.font = font
        self.palette = palette
        self.text_color = text_color
        self._callback = callback

    def set_rect(self, rect: pygame.Rect) -> None:
        self.rect = rect

    def render(self, surface: pygame.Surface, *, selected: bool = False) -> pygame.Rect:
        face_rect = draw_glossy_button(
            surface,
            self.rect,
            self.palette,
            selected=selected,
            hover=self.rect.collidepoint(pygame.mouse.get_pos()),
        )
        text_surface = self.font.render(self.label, True, self.text_color)
        surface.blit(text_surface, text_surface.get_rect(center=face_rect.center))
        return face_rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.trigger()
                return True
        return False

    def trigger(self) -> None:
        if self._callback:
            self._callback()


def greyscale_surface(surface: pygame.Surface) -> pygame.Surface:
    """Return a luminance-only copy of ``surface`` keeping its alpha channel."""

    grey = surface.copy()
    arr = pygame.surfarray.pixels3d(grey)
    luminance = (arr[:, :, 0] * 0.299 + arr[:, :, 1] * 0.587 + arr[:, :, 2] * 0.114).astype(np.uint8)
    arr[:, :, 0] = luminance
    arr[:, :, 1] = luminance
    arr[:, :, 2] = luminance
    del arr
    return grey


def draw_number_tile(
    surface: pygame.Surface,
    rect: pygame.Rect,
    value: int,
    state: CandidateState,
    palette: Palette,
    font: pygame.font.Font,
    text_color: tuple[int, int, int],
    *,
    hover: bool = False,
) -> None:
    scale = _NUMBER_SCALE.get(state, 1.0)
    tile = pygame.Surface((int(rect.width * scale), int(rect.height * scale)), pygame.SRCALPHA)
    face = draw_glossy_button(
        tile,
        tile.get_rect(),
        palette,
        selected=state is CandidateState.CORRECT,
        hover=hover and state is CandidateState.NONE,
        corner_radius=tile.get_width() // 5,
    )
    label = font.render(str(value), True, text_color)
    tile.blit(label, label.get_rect(center=face.center))
    tile.set_alpha(_NUMBER_ALPHA.get(state, 255))
    surface.blit(tile, tile.get_rect(center=rect.center))


def draw_decoy_tile(
    surface: pygame.Surface,
    rect: pygame.Rect,
    candidate: DecoyCandidate,
    image: pygame.Surface | None,
    font: pygame.font.Font,
    *,
    fall_left: bool = False,
) -> None:
    if image is not None:
        tile = pygame.transform.smoothscale(image, rect.size)
        if candidate.state is CandidateState.FADED:
            tile = greyscale_surface(tile)
    else:
        tile = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(tile, (255, 255, 255, 90), tile.get_rect(), border_radius=rect.width // 5)
        label = font.render(candidate.animal, True, (35, 46, 67))
        tile.blit(label, label.get_rect(center=tile.get_rect().center))
    if candidate.state is CandidateState.WRONG_CHOSEN:
        tile = pygame.transform.rotate(tile, 90 if fall_left else -90)
    tile.set_alpha(_DECOY_ALPHA.get(candidate.state, 255))
    surface.blit(tile, tile.get_rect(center=rect.center))


def candidate_is_tappable(candidate: Candidate) -> bool:
    return not isinstance(candidate, DecoyCandidate) and not candidate.is_annotated


__all__ = [
    "draw_glossy_button",
    "Button",
    "greyscale_surface",
    "draw_number_tile",
    "draw_decoy_tile",
    "candidate_is_tappable",
]
