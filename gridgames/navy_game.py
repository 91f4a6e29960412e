"""Turn loop, command line and attack input for the two-player naval battle."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from gridgames.navy_board import COLUMNS, SIZE, Board, PositionError, Status
from gridgames.navy_morse import BIT_WAIT, TIMEOUT, MorseLink
from gridgames.text import is_numeric

STR_ATTACK = "attack: "
STR_WRONG_POSITION = "\nwrong position\n"
STR_WAIT_ATTACK = "waiting for enemy's attack...\n"
STR_MY_PID = "my_pid : {}\n"
STR_WAIT_FOR_ENEMY = "waiting for enemy connection..."
STR_ENEMY_CONNECTED = "\n\nenemy connected\n\n"
STR_CONNECTED = "successfully connected\n\n"
STR_WRONG_PID = "wrong pid\n\n"
STR_WIN = "I won\n\n"
STR_ENEMY_WIN = "Enemy won\n\n"
STR_HIT = "hit"
STR_MISSED = "missed"
STR_ERROR = "( error )"
ROWS = "12345678"
EXIT_ERROR = 84


def check_arguments(args: list[str]) -> None:
    """Validate the command-line arguments, program name excluded.

    Accepts either a positions file alone, or a numeric pid followed by a
    positions file. Raises ValueError otherwise.
    """
    if not 1 <= len(args) <= 2:
        raise ValueError("expected [first_player_pid] navy_positions")
    if len(args) == 2 and not is_numeric(args[0]):
        raise ValueError(f"invalid pid: {args[0]!r}")


def parse_attack(text: str) -> tuple[int, int]:
    """Turn a position such as ``B3`` into zero-based (x, y) coordinates."""
    if len(text) != 2 or text[0] not in COLUMNS or text[1] not in ROWS:
        raise ValueError(f"wrong position: {text!r}")
    return COLUMNS.index(text[0]), ROWS.index(text[1])


def read_attack(stream: TextIO, out: TextIO) -> str | None:
    """Prompt until a valid position is typed; None when input ends."""
    while True:
        out.write(STR_ATTACK)
        out.flush()
        line = stream.readline()
        if not line:
            return None
        text = line.rstrip("\n")
        try:
            parse_attack(text)
        except ValueError:
            out.write(STR_WRONG_POSITION)
            continue
        return text


def result_text(status: int) -> str:
    """Describe the outcome of a shot."""
    if status in (Status.HIT, Status.WIN):
        return STR_HIT
    if status == Status.MISSED:
        return STR_MISSED
    return STR_ERROR


def help_text(program: str) -> str:
    """Return the usage message for ``program``."""
    return (
        f"USAGE:\n     {program} [first_player_pid] navy_positions\n"
        "DESCRIPTION:\n"
        "     first_player_pid:  only for the 2nd player. pid of the first player.\n"
        "     navy_positions:  file representing the positions of the ships.\n"
    )


@dataclass
class Game:
    """One player's side of a match, talking to the enemy over a link."""

    board: Board
    link: MorseLink
    is_server: bool
    stream: TextIO = field(default_factory=lambda: sys.stdin)
    out: TextIO = field(default_factory=lambda: sys.stdout)
    pause: float = 2 * BIT_WAIT
    enemy_pid: int = -1
    my_turn: bool = field(init=False)
    _show_next: bool = field(init=False, default=True, repr=False)

    def __post_init__(self) -> None:
        self.my_turn = self.is_server

    def _sleep(self) -> None:
        if self.pause:
            time.sleep(self.pause)

    def _display(self, force: bool = False) -> None:
        if self._show_next or force:
            self.out.write(self.board.render())
        self._show_next = not self._show_next

    def connect(self, pid: int | None = None) -> int:
        """Perform the handshake and return the enemy's pid.

        The first player waits for anyone to connect; the second player
        contacts ``pid``. Raises ConnectionError when no answer comes.
        """
        self.out.write(STR_MY_PID.format(os.getpid()))
        if self.is_server:
            self.out.write(STR_WAIT_FOR_ENEMY)
            self.out.flush()
            value = self.link.receive(0)
            self.link.send(value, self.link.last_pid)
            self.out.write(STR_ENEMY_CONNECTED)
            self.enemy_pid = self.link.last_pid
            return self.enemy_pid
        if pid is None:
            raise ConnectionError("no pid to connect to")
        try:
            self.link.send(Status.OK, pid)
        except OSError:
            pass
        value = self.link.receive(TIMEOUT)
        if value != Status.OK:
            self.out.write(STR_WRONG_PID)
            raise ConnectionError(f"no answer from pid {pid}")
        self.out.write(STR_CONNECTED)
        self.enemy_pid = pid
        return pid

    def play(self) -> int:
        """Read an attack, send it, and return the enemy's verdict."""
        position = read_attack(self.stream, self.out)
        if position is None:
            raise EOFError("input ended before an attack was given")
        x, y = parse_attack(position)
        for coordinate in (x, y):
            self.link.send(coordinate, self.enemy_pid)
            self._sleep()
            self.link.receive(0)
            self._sleep()
        status = self.link.receive(0)
        self.board.record_result(x, y, status)
        self.out.write(f"\n{position}: ")
        return status

    def wait_for_play(self) -> Status:
        """Receive the enemy's attack, apply it and send back the verdict."""
        self.out.write(STR_WAIT_ATTACK)
        self.out.flush()
        x = self.link.receive(0)
        self.link.send(Status.OK, self.enemy_pid)
        y = self.link.receive(0)
        self.link.send(Status.OK, self.enemy_pid)
        if 0 <= x < SIZE and 0 <= y < SIZE:
            status = self.board.attack(x, y)
        else:
            status = Status.NONE
        self.link.send(status, self.enemy_pid)
        self.out.write(f"{chr(x + ord('A'))}{chr(y + ord('1'))}: ")
        return status

    def run(self) -> int:
        """Alternate turns until someone wins; 0 if this player won, else 1."""
        status: int = Status.NONE
        while status != Status.WIN:
            self._display()
            status = self.play() if self.my_turn else self.wait_for_play()
            self.out.write(result_text(status) + "\n\n")
            self.my_turn = not self.my_turn
        self._display(force=True)
        if not self.my_turn:
            self.out.write(STR_WIN)
            return 0
        self.out.write(STR_ENEMY_WIN)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Start a match from the command line and return the exit status."""
    program = Path(sys.argv[0]).name or "navy"
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "-h":
        sys.stdout.write(help_text(program))
        return 0
    try:
        check_arguments(args)
        board = Board.from_file(args[-1])
    except (ValueError, OSError) as error:
        if not isinstance(error, PositionError | ValueError | OSError):
            raise
        return EXIT_ERROR
    pid = int(args[0]) if len(args) == 2 else None
    with MorseLink() as link:
        game = Game(board=board, link=link, is_server=pid is None)
        try:
            game.connect(pid)
            return game.run()
        except (ConnectionError, EOFError):
            return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())