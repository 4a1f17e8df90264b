"""Scene definitions for the times tables game."""

from .settings_form import SettingsFormScene
from .game_view import GameViewScene
from .game_over import GameOverScene

__all__ = [
    "SettingsFormScene",
    "GameViewScene",
    "GameOverScene",
]
