"""Main application loop for the times tables game."""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Type

import pygame

from . import settings
from .config import load_config
from .models import GameConfig, Settings
from .scenes import GameOverScene, GameViewScene, SettingsFormScene
from .scenes.base import Scene
from .session import GameSession, start_session

logger = logging.getLogger(__name__)


class App:
    """Owns the main loop, current scene, and shared resources."""

    def __init__(self, config: GameConfig | None = None) -> None:
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error:
            logger.info("Audio unavailable, continuing without sound")
        is_web = sys.platform == "emscripten" or bool(os.environ.get("PYGBAG"))
        flags = 0 if is_web else pygame.RESIZABLE
        self.screen = pygame.display.set_mode(settings.SCREEN_SIZE, flags)
        pygame.display.set_caption("Times Tables")
        self.clock = pygame.time.Clock()
        self.running = True

        self.config = config or load_config()
        self.game_settings = Settings()
        self.session: GameSession | None = None
        self._animal_images: Dict[str, pygame.Surface | None] = {}
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._load_sounds()

        self._scene: Scene = SettingsFormScene(self)

    @property
    def scene(self) -> Scene:
        return self._scene

    def change_scene(self, new_scene_cls: Type[Scene], **kwargs: object) -> None:
        """Replace the active scene with a new one."""

        self._scene = new_scene_cls(self, **kwargs)
        logger.info("Scene: %s", new_scene_cls.__name__)

    # Navigation ----------------------------------------------------
    def start_game(self, game_settings: Settings) -> None:
        """Start a session; raises ``InvalidSettings`` before leaving the form."""

        session = start_session(game_settings, self.config)
        self.game_settings = game_settings
        self.session = session
        self.change_scene(GameViewScene, session=session)

    def finish_game(self, session: GameSession) -> None:
        self.change_scene(GameOverScene, score=session.score, total=session.total)

    def play_again(self) -> None:
        self.start_game(self.game_settings)

    def show_settings(self) -> None:
        self.session = None
        self.change_scene(SettingsFormScene)

    # Resources -----------------------------------------------------
    def animal_image(self, animal: str) -> pygame.Surface | None:
        """Return the artwork for ``animal``, or ``None`` to draw its name instead."""

        if animal not in self._animal_images:
            path = settings.ANIMAL_DIR / f"{animal}.png"
            image = None
            if path.exists():
                try:
                    image = pygame.image.load(str(path)).convert_alpha()
                except pygame.error:
                    logger.warning("Could not load animal image %s", path)
            self._animal_images[animal] = image
        return self._animal_images[animal]

    def _load_sounds(self) -> None:
        if not pygame.mixer.get_init():
            return
        sound_map = {
            "good": "good.wav",
            "wrong": "wrong.wav",
        }
        for key, filename in sound_map.items():
            path = settings.ASSETS_DIR / "sounds" / filename
            if path.exists():
                try:
                    self.sounds[key] = pygame.mixer.Sound(str(path))
                except pygame.error:
                    logger.warning("Could not load sound %s", path)

    def play_sound(self, key: str) -> None:
        sound = self.sounds.get(key)
        if sound:
            sound.play()

    def run(self) -> None:
        """Main loop of the application."""

        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            events = pygame.event.get()

            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

            self._scene.handle_events(events)
            self._scene.update(dt)
            self._scene.render(self.screen)
            pygame.display.flip()

        pygame.quit()


__all__ = ["App"]
