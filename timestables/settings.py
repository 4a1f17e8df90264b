"""Display settings and font helpers for the times tables window."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

import pygame

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
SCREEN_SIZE = (SCREEN_WIDTH, SCREEN_HEIGHT)
FPS = 60
SCREEN_MARGIN = 48
GRID_COLUMNS = 4

COLOR_TEXT_PRIMARY = (35, 46, 67)
COLOR_TEXT_DIM = (102, 92, 92)
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_CORRECT = (46, 170, 70)
COLOR_INCORRECT = (214, 59, 59)
COLOR_CARD_BASE = (255, 236, 220)
COLOR_DIALOG_SHADE = (0, 0, 0, 140)

GRADIENT_TOP = (137, 214, 255)
GRADIENT_BOTTOM = (73, 158, 236)

Palette = Dict[str, Tuple[int, int, int]]

# Number tiles pick one of these at random, like coloured toy blocks.
BLOCK_PALETTES: Dict[str, Palette] = {
    "blue": {"top": (92, 156, 255), "bottom": (43, 102, 214), "border": (28, 70, 160), "shadow": (22, 55, 128)},
    "green": {"top": (126, 227, 128), "bottom": (63, 186, 94), "border": (36, 140, 67), "shadow": (45, 122, 59)},
    "grey": {"top": (236, 236, 236), "bottom": (196, 196, 196), "border": (150, 150, 150), "shadow": (120, 120, 120)},
    "red": {"top": (255, 120, 110), "bottom": (224, 64, 58), "border": (168, 40, 36), "shadow": (130, 32, 30)},
    "yellow": {"top": (255, 226, 110), "bottom": (247, 190, 49), "border": (191, 138, 38), "shadow": (160, 109, 34)},
}
BLOCK_TEXT_COLORS: Dict[str, Tuple[int, int, int]] = {
    "blue": COLOR_TEXT_LIGHT,
    "green": COLOR_TEXT_PRIMARY,
    "grey": COLOR_TEXT_PRIMARY,
    "red": COLOR_TEXT_LIGHT,
    "yellow": COLOR_TEXT_PRIMARY,
}

PALETTE_ACTIVE: Palette = {"top": (255, 215, 90), "bottom": (247, 176, 49), "border": (191, 128, 38), "shadow": (160, 109, 34)}
PALETTE_INACTIVE: Palette = {"top": (242, 236, 228), "bottom": (209, 197, 184), "border": (168, 156, 145), "shadow": (150, 140, 130)}
PALETTE_BACK: Palette = {"top": (216, 196, 255), "bottom": (176, 148, 227), "border": (126, 98, 192), "shadow": (102, 78, 152)}
PALETTE_START: Palette = {"top": (126, 227, 128), "bottom": (63, 186, 94), "border": (36, 140, 67), "shadow": (45, 122, 59)}
PALETTE_DANGER: Palette = BLOCK_PALETTES["red"]

ROOT_DIR = Path(__file__).resolve().parents[1]
ASSETS_DIR = ROOT_DIR / "assets"
ANIMAL_DIR = ASSETS_DIR / "animals"
FONT_PREFERRED = "Avenir Next"
BODY_FALLBACK = "Verdana"

_font_cache: Dict[Tuple[int, bool], pygame.font.Font] = {}


def load_font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a font object, falling back to the default if preferred not found."""

    key = (size, bold)
    if key in _font_cache:
        return _font_cache[key]
    pygame.font.init()
    font_path = pygame.font.match_font(FONT_PREFERRED, bold=bold, italic=False)
    if not font_path:
        font_path = pygame.font.match_font(BODY_FALLBACK, bold=bold, italic=False)
    font = pygame.font.Font(font_path, size) if font_path else pygame.font.Font(None, size)
    _font_cache[key] = font
    return font
