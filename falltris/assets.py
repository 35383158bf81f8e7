"""Loading of images, sounds, music and rendered text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

TEXT_COLOR = (255, 255, 255)


@dataclass
class Sprite:
    """An image together with the rectangle it is drawn into."""

    texture: pygame.Surface | None
    bounds: pygame.Rect

    def render(self, surface: pygame.Surface) -> None:
        """Draw the sprite onto ``surface`` at its bounds."""
        if self.texture is not None:
            surface.blit(self.texture, self.bounds)


def load_sprite(path: str | Path, x: int, y: int) -> Sprite:
    """Load an image placed at (x, y).

    A missing or unreadable image gives a sprite with no texture and empty bounds.
    """
    try:
        texture = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("Failed to load image %s: %s", path, exc)
        return Sprite(None, pygame.Rect(x, y, 0, 0))
    width, height = texture.get_size()
    return Sprite(texture, pygame.Rect(x, y, width, height))


def load_sound(path: str | Path) -> pygame.mixer.Sound | None:
    """Load a sound effect, or return None if it cannot be loaded."""
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("Failed to load sound effect %s: %s", path, exc)
        return None


def load_music(path: str | Path) -> Path | None:
    """Load a music track into the mixer's stream; return its path or None."""
    try:
        pygame.mixer.music.load(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("Failed to load music %s: %s", path, exc)
        return None
    return Path(path)


def render_text(font: pygame.font.Font | None, text: str) -> pygame.Surface:
    """Render ``text`` in white, anti-aliased, with a transparent background."""
    if font is None:
        raise ValueError("no font to render text with")
    return font.render(text, True, TEXT_COLOR)