"""Window, input, drawing and the main loop of the game."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame
from pygame._sdl2 import controller as sdl_controller

from falltris.assets import load_music, load_sound, render_text
from falltris.blocks import Block
from falltris.game import TOTAL_COLUMNS, TOTAL_ROWS, Game

SCALE = 2
SCREEN_WIDTH = 480 * SCALE
SCREEN_HEIGHT = 272 * SCALE

CELL_SIZE = 15 * SCALE
POSITION_OFFSET = 2 * SCALE
CELL_OFFSET = 2

WINDOW_SIZE = (
    TOTAL_COLUMNS * CELL_SIZE + 200,
    TOTAL_ROWS * CELL_SIZE + 2 * SCALE,
)

BACKGROUND = (29, 29, 27, 255)
PANEL = (80, 80, 80, 255)
FPS = 60

_COLORS = (
    (80, 80, 80, 255),
    (47, 230, 23, 255),
    (232, 18, 18, 255),
    (226, 116, 17, 255),
    (237, 234, 4, 255),
    (166, 0, 247, 255),
    (21, 204, 209, 255),
    (13, 64, 216, 255),
)

_KEY_BUTTONS = {
    pygame.K_RETURN: pygame.CONTROLLER_BUTTON_START,
    pygame.K_p: pygame.CONTROLLER_BUTTON_START,
    pygame.K_UP: pygame.CONTROLLER_BUTTON_DPAD_UP,
    pygame.K_SPACE: pygame.CONTROLLER_BUTTON_A,
    pygame.K_LEFT: pygame.CONTROLLER_BUTTON_DPAD_LEFT,
    pygame.K_RIGHT: pygame.CONTROLLER_BUTTON_DPAD_RIGHT,
    pygame.K_DOWN: pygame.CONTROLLER_BUTTON_DPAD_DOWN,
}


def start_pygame(size: tuple[int, int]) -> pygame.Surface:
    """Initialise video, audio and fonts and open a window of ``size``."""
    pygame.mixer.pre_init(44100, -16, 2, 2048)
    pygame.init()
    if not pygame.display.get_init():
        raise RuntimeError("video could not initialize")
    try:
        screen = pygame.display.set_mode(size)
    except pygame.error as exc:
        raise RuntimeError(f"failed to create window: {exc}") from exc
    pygame.display.set_caption("Falltris")
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            raise RuntimeError(f"audio mixer could not initialize: {exc}") from exc
    if not pygame.font.get_init():
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"fonts could not initialize: {exc}") from exc
    return screen


def color_for(index: int) -> tuple[int, int, int, int]:
    """Colour of a grid cell value: 0 is empty, 1-7 are the block ids."""
    if not 0 <= index < len(_COLORS):
        raise IndexError(f"no colour for index {index}")
    return _COLORS[index]


def _open_controller():
    try:
        sdl_controller.init()
        if sdl_controller.get_count() > 0 and sdl_controller.is_controller(0):
            return sdl_controller.Controller(0)
    except pygame.error:
        pass
    return None


def _play(sound: pygame.mixer.Sound | None) -> None:
    if sound is not None:
        sound.play()


class App:
    """The running game: a window, its assets and the game state."""

    def __init__(self, asset_dir: str | Path = ".") -> None:
        asset_dir = Path(asset_dir)
        self.screen = start_pygame(WINDOW_SIZE)
        self.controller = _open_controller()
        self.font = pygame.font.Font(str(asset_dir / "monogram.ttf"), 18 * SCALE)

        self.score_label = render_text(self.font, "Score")
        self.score_label_bounds = self.score_label.get_rect(topleft=(182 * SCALE, 7 * SCALE))
        self.next_label = render_text(self.font, "Next")
        self.next_label_bounds = self.next_label.get_rect(topleft=(185 * SCALE, 88 * SCALE))
        self.pause_bounds = render_text(self.font, "Game Paused").get_rect(
            topleft=(165 * SCALE, 225 * SCALE)
        )

        self.pause_sound = load_sound(asset_dir / "okay.wav")
        self.clear_sound = load_sound(asset_dir / "clear.wav")
        self.rotate_sound = load_sound(asset_dir / "rotate.wav")
        self.music = load_music(asset_dir / "music.wav")
        if self.music is not None:
            pygame.mixer.music.play(-1)

        self.down_held = False
        self.game = Game(on_clear=lambda: _play(self.clear_sound))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one input event; return False when the game should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.CONTROLLERBUTTONDOWN:
            self._press(event.button)
        elif event.type == pygame.CONTROLLERBUTTONUP:
            self._release(event.button)
        elif event.type == pygame.KEYDOWN and event.key in _KEY_BUTTONS:
            self._press(_KEY_BUTTONS[event.key])
        elif event.type == pygame.KEYUP and event.key in _KEY_BUTTONS:
            self._release(_KEY_BUTTONS[event.key])
        return True

    def _press(self, button: int) -> None:
        if button == pygame.CONTROLLER_BUTTON_DPAD_DOWN:
            self.down_held = True
        if self.game.game_over:
            self.game.restart()
        if button == pygame.CONTROLLER_BUTTON_START:
            self.game.toggle_pause()
            _play(self.pause_sound)
        if button in (pygame.CONTROLLER_BUTTON_DPAD_UP, pygame.CONTROLLER_BUTTON_A):
            self.game.rotate()
            _play(self.rotate_sound)
        if button == pygame.CONTROLLER_BUTTON_DPAD_RIGHT:
            self.game.move_right()
        elif button == pygame.CONTROLLER_BUTTON_DPAD_LEFT:
            self.game.move_left()

    def _release(self, button: int) -> None:
        if button == pygame.CONTROLLER_BUTTON_DPAD_DOWN:
            self.down_held = False

    def _draw_cell(self, color, row: int, column: int, offset_x: int, offset_y: int) -> None:
        rect = pygame.Rect(
            column * CELL_SIZE + offset_x,
            row * CELL_SIZE + offset_y,
            CELL_SIZE - CELL_OFFSET,
            CELL_SIZE - CELL_OFFSET,
        )
        self.screen.fill(color, rect)

    def _draw_block(self, block: Block, offset_x: int, offset_y: int) -> None:
        color = color_for(block.id)
        for row, column in block.cell_positions():
            self._draw_cell(color, row, column, offset_x, offset_y)

    def _draw_overlay(self, text: str) -> None:
        surface = pygame.transform.scale(render_text(self.font, text), self.pause_bounds.size)
        self.screen.blit(surface, self.pause_bounds)

    def render(self) -> None:
        """Draw the whole frame and show it."""
        self.screen.fill(BACKGROUND)

        for row, values in enumerate(self.game.grid.cells):
            for column, value in enumerate(values):
                self._draw_cell(color_for(value), row, column, POSITION_OFFSET, POSITION_OFFSET)

        self._draw_block(self.game.current, POSITION_OFFSET, POSITION_OFFSET)

        self.screen.blit(self.score_label, self.score_label_bounds)
        self.screen.fill(PANEL, pygame.Rect(157 * SCALE, 27 * SCALE, 85 * SCALE, 30 * SCALE))
        self.screen.blit(render_text(self.font, str(self.game.score)), (182 * SCALE, 32 * SCALE))

        self.screen.blit(self.next_label, self.next_label_bounds)
        self.screen.fill(PANEL, pygame.Rect(157 * SCALE, 106 * SCALE, 85 * SCALE, 90 * SCALE))

        upcoming = self.game.next_block
        if upcoming.id == 3:
            self._draw_block(upcoming, 127 * SCALE, 145 * SCALE)
        elif upcoming.id == 4:
            self._draw_block(upcoming, 127 * SCALE, 140 * SCALE)
        else:
            self._draw_block(upcoming, 137 * SCALE, 135 * SCALE)

        if self.game.game_over:
            self._draw_overlay("Game Over")
        if self.game.paused:
            self._draw_overlay("Game Pause")

        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        clock = pygame.time.Clock()
        previous = pygame.time.get_ticks()
        try:
            while True:
                now = pygame.time.get_ticks()
                delta_time = (now - previous) / 1000.0
                previous = now

                if not all(self.handle_event(event) for event in pygame.event.get()):
                    break

                self.game.update(delta_time, self.down_held)
                self.render()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="falltris", description="A falling-blocks puzzle game.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding monogram.ttf and the sound files (default: current directory)",
    )
    args = parser.parse_args(argv)
    App(Path(args.assets)).run()
    return 0