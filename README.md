# gridgames

Three small games built around grids, each with its own command.

Install the package together with its test tools:

```
pip install .[test]
```

## gridgames-bsq: the biggest square

Finds a largest square of empty cells in a map and marks it with `x`.

A map file starts with a line holding the number of rows, followed by the
rows themselves. Each row is made of `.` (empty) and `o` (obstacle):

```
4
....o.
......
.o....
......
```

Run it with the path of the map:

```
gridgames-bsq map.txt
```

The map is printed back with the chosen square filled in with `x`. Each
row is printed at the width of the first row. A missing argument, an
unreadable file, a file with no header line or fewer rows than declared
ends the command with status 84 and a message on standard error.

From Python, the same work is available in `gridgames.bsq`: `load_map` or
`parse_map` read a map into a `BsqMap`, `solve` returns the grid with the
square filled in, and `render` turns a grid back into text.
`largest_square` returns the `Square` it found (bottom-right corner and
side length) without changing the grid, and `fill_first_in_row` and
`fill_first_in_column` return copies with one empty cell marked.

## gridgames-navy: battleship between two terminals

Two players each start the command in their own terminal on the same
machine. The two processes talk to each other with the `SIGUSR1` and
`SIGUSR2` signals, one bit per signal, so a POSIX system is required.

Each player needs a positions file describing four ships, one per line, in
the form `LENGTH:START:END`, where the length is 2 to 5 and each end is a
column `A`–`H` followed by a row `1`–`8`:

```
2:C1:C2
3:D4:F4
4:B5:B8
5:D7:H7
```

The first player starts with just the positions file and is shown their
process id:

```
gridgames-navy positions.txt
```

The second player passes that process id first:

```
gridgames-navy 12345 positions.txt
```

Players then take turns typing an attack such as `B4`; an invalid position
is asked for again. Both boards are shown every other turn: hits are
marked `x` and misses `o`. The game ends when one side has no ship cells
left; the command exits with 0 for the winner, 1 for the loser, and 84 on
bad arguments, an unreadable or invalid positions file, a failed
connection, or input ending before an attack is given.

`gridgames-navy -h` prints the usage.

The pieces can be used on their own: `gridgames.navy_board` holds `Board`,
`Ship`, `Status`, `parse_positions` and `load_positions`;
`gridgames.navy_morse` holds `MorseLink` with `encode_bits` and
`decode_bits`; `gridgames.navy_game` holds the `Game` turn loop together
with `parse_attack`, `read_attack` and `check_arguments`.

## gridgames-hunter: shoot the duck

A duck flies back and forth across an 800×600 window; left-click on it to
shoot. Every click speeds the duck up, and two missed shots end the game.
The score and misses are printed to the terminal as you play, and the
final score when the window closes.

```
gridgames-hunter
```

starts the game, and

```
gridgames-hunter -h
```

prints the rules instead.

The game logic lives in `gridgames.hunter` as `Duck` and `Hunter`, which
can be driven without a window; `run_window` opens the window for a given
`Hunter` and image directory.

## What is not included

- The duck shooter ships no images. It loads `spritesheet.png`,
  `background.png` and `cursor.png` from a `utils` directory in the current
  working directory and exits with status 1 if they cannot be read. It
  plays no sound.
- The battleship game only works between two processes on one machine;
  there is no network play.

## Running the tests

```
pytest
```