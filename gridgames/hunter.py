"""Duck shooting game: the duck's flight, hit tests, scoring and the window."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from pathlib import Path

WINDOW_SIZE = (800, 600)
TITLE = "MyHunter"
FRAMERATE = 60
FRAME_SIZE = 110
FRAME_COUNT = 3
TICKS_PER_FRAME = 10
RIGHT_EDGE = 910
LEFT_EDGE = -150
RESPAWN_X = -110
RESPAWN_RANGE = 500
SPEED_BOOST = 0.4
MAX_MISSES = 2
RETICULE_SCALE = 0.1
RETICULE_ORIGIN = 360
EXIT_FAILURE = 1

HELP_TEXT = (
    "This is my hunter\n\nYou have to shoot the duck\n\n"
    "Click left to kill them\n\nYou have 2 lifes\n\n"
    "GOOD LUCK SOLDIER\n"
)


def wants_to_play(argv: list[str]) -> bool:
    """Tell whether the arguments (program name excluded) start a game.

    A single ``-h`` or more than one argument asks for the rules instead.
    """
    if len(argv) == 1:
        return argv[0] != "-h"
    return len(argv) == 0


@dataclass
class Duck:
    """The flying target, its speed and its sprite orientation."""

    x: float = RESPAWN_X
    y: float = 0.0
    speed_x: float = 1.0
    speed_y: float = 0.0
    alive: bool = True
    tick: int = 0
    move: int = 0
    facing: int = 1
    origin_x: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        """Tell whether (x, y) lies strictly inside the duck's box."""
        return (
            self.x < x < self.x + FRAME_SIZE
            and self.y < y < self.y + FRAME_SIZE
        )

    def _misses(self, x: float, y: float) -> bool:
        return (
            x > self.x + FRAME_SIZE
            or y > self.y + FRAME_SIZE
            or x < self.x
            or y < self.y
        )

    def shoot(self, x: float, y: float, rng: random.Random) -> bool:
        """Fire at (x, y); on a hit send the duck back to the left edge."""
        if not self.contains(x, y):
            return False
        self.alive = False
        self.x = RESPAWN_X
        self.y = rng.randrange(RESPAWN_RANGE) + 1
        self.origin_x = 0.0
        return True

    def turn(self) -> None:
        """Reverse the horizontal flight at either edge of the field."""
        if self.x >= RIGHT_EDGE:
            self.facing = -1
            self.speed_x = -self.speed_x
            self.origin_x = FRAME_SIZE
        elif self.x <= LEFT_EDGE:
            self.facing = 1
            self.speed_x = -self.speed_x

    def advance(self) -> None:
        """Move the duck by one step of its speed."""
        self.x += self.speed_x
        self.y += self.speed_y


@dataclass
class Hunter:
    """Game state: the duck, the score, the misses and the animation frame."""

    duck: Duck = field(default_factory=Duck)
    score: int = 0
    miss: int = 0
    frame: int = 0
    frame_left: int = 0
    rng: random.Random = field(default_factory=random.Random)

    def click(self, x: float, y: float) -> bool:
        """Handle a shot at (x, y); return whether the duck was hit."""
        if self.duck._misses(x, y):
            self.miss += 1
        hit = self.duck.shoot(x, y, self.rng)
        if hit:
            self.score += 1
        self.duck.speed_x += SPEED_BOOST
        return hit

    def tick(self) -> None:
        """Advance the animation and the duck's flight by one frame."""
        duck = self.duck
        duck.tick += 1
        if duck.tick == TICKS_PER_FRAME:
            self.frame += 1
            duck.tick = 0
            duck.move += FRAME_SIZE
            self.frame_left += FRAME_SIZE
            if self.frame_left == FRAME_SIZE * FRAME_COUNT:
                self.frame_left = 0
        duck.advance()
        duck.turn()

    def finished(self) -> bool:
        """Tell whether the player has run out of lives."""
        return self.miss >= MAX_MISSES


def _click_report(hunter: Hunter) -> str:
    return f"Well done !\nScore {hunter.score}\nMiss {hunter.miss}\n"


def _farewell(hunter: Hunter) -> str:
    return (
        "We should do this again some times!\n"
        f"Final Score = {hunter.score}\n"
    )


def _sprite_left(duck: Duck) -> float:
    if duck.facing == 1:
        return duck.x - duck.origin_x
    return duck.x + duck.origin_x - FRAME_SIZE


def run_window(hunter: Hunter, asset_dir: str | Path) -> int:
    """Open the game window and play until it closes; return an exit status."""
    import pygame

    assets = Path(asset_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        try:
            sheet = pygame.image.load(str(assets / "spritesheet.png")).convert_alpha()
            background = pygame.image.load(str(assets / "background.png")).convert()
            cursor = pygame.image.load(str(assets / "cursor.png")).convert_alpha()
        except (pygame.error, OSError) as error:
            print(f"hunter: {error}", file=sys.stderr)
            return EXIT_FAILURE
        cursor = pygame.transform.smoothscale(
            cursor,
            (
                max(1, int(cursor.get_width() * RETICULE_SCALE)),
                max(1, int(cursor.get_height() * RETICULE_SCALE)),
            ),
        )
        offset = RETICULE_ORIGIN * RETICULE_SCALE
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()
        pointer = (0, 0)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.MOUSEBUTTONDOWN:
                    hunter.click(*event.pos)
                    sys.stdout.write(_click_report(hunter))
                if event.type == pygame.QUIT or hunter.finished():
                    running = False
                    sys.stdout.write(_farewell(hunter))
                    break
                if event.type == pygame.MOUSEMOTION:
                    pointer = event.pos
            if not running:
                break
            hunter.tick()
            frame = pygame.Surface((FRAME_SIZE, FRAME_SIZE), pygame.SRCALPHA)
            frame.blit(
                sheet, (0, 0), pygame.Rect(hunter.frame_left, 0, FRAME_SIZE, FRAME_SIZE)
            )
            if hunter.duck.facing == -1:
                frame = pygame.transform.flip(frame, True, False)
            screen.fill((0, 0, 0))
            screen.blit(background, (0, 0))
            screen.blit(frame, (_sprite_left(hunter.duck), hunter.duck.y))
            screen.blit(cursor, (pointer[0] - offset, pointer[1] - offset))
            pygame.display.flip()
            clock.tick(FRAMERATE)
        sys.stdout.flush()
        return 0
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Show the rules or start a game, depending on the arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not wants_to_play(args):
        sys.stdout.write(HELP_TEXT)
        return 0
    return run_window(Hunter(), Path("utils"))


if __name__ == "__main__":
    sys.exit(main())