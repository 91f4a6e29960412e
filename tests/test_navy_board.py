import pytest

from gridgames.navy_board import (
    Board,
    PositionError,
    Ship,
    Status,
    empty_grid,
    format_grid,
    load_positions,
    parse_positions,
    place_ships,
)

POSITIONS = "2:C1:C2\n3:D4:F4\n4:B5:B8\n5:D7:H7\n"


def test_parse_positions_reads_four_ships():
    ships = parse_positions(POSITIONS)
    assert len(ships) == 4
    assert ships[0] == Ship(length=2, x1=2, y1=0, x2=2, y2=1)
    assert ships[3] == Ship(length=5, x1=3, y1=6, x2=7, y2=6)


@pytest.mark.parametrize(
    "text",
    [
        "1:C1:C2\n3:D4:F4\n4:B5:B8\n5:D7:H7\n",
        "2:I1:I2\n3:D4:F4\n4:B5:B8\n5:D7:H7\n",
        "2:C1:C9\n3:D4:F4\n4:B5:B8\n5:D7:H7\n",
        "2:C1:C1\n3:D4:F4\n4:B5:B8\n5:D7:H7\n",
        "2:C1:C2\n3:D4:F4\n",
        "2:C1\n3:D4:F4\n4:B5:B8\n5:D7:H7\n",
    ],
)
def test_parse_positions_rejects_bad_input(text):
    with pytest.raises(PositionError):
        parse_positions(text)


def test_place_ships_marks_lengths():
    ships = parse_positions(POSITIONS)
    grid = place_ships(ships)
    assert grid[0][2] == "2" and grid[1][2] == "2"
    assert grid[3][3:6] == ["3", "3", "3"]
    assert [grid[y][1] for y in range(4, 8)] == ["4"] * 4
    assert grid[6][3:8] == ["5"] * 5
    marked = sum(cell != "." for row in grid for cell in row)
    assert marked == sum(ship.length for ship in ships)


def test_empty_grid_is_all_dots():
    grid = empty_grid()
    assert len(grid) == 8
    assert all(row == ["."] * 8 for row in grid)


def test_format_grid_layout():
    grid = place_ships(parse_positions(POSITIONS))
    lines = format_grid("my positions", grid).split("\n")
    assert lines[0] == "my positions:"
    assert lines[1] == " |A B C D E F G H"
    assert lines[2] == "-+---------------"
    assert lines[3] == "1|" + " ".join("..2.....") + " "
    assert lines[10] == "8|" + " ".join(".4......") + " "


def test_load_positions_and_from_file(tmp_path):
    path = tmp_path / "pos"
    path.write_text(POSITIONS)
    assert load_positions(path) == parse_positions(POSITIONS)
    board = Board.from_file(path)
    assert board.my_grid == place_ships(parse_positions(POSITIONS))
    assert board.enemy_grid == empty_grid()


def test_attack_hit_then_repeat_is_missed():
    board = Board(my_grid=place_ships(parse_positions(POSITIONS)))
    assert board.attack(2, 0) == Status.HIT
    assert board.my_grid[0][2] == "x"
    assert board.attack(2, 0) == Status.MISSED
    assert board.my_grid[0][2] == "o"


def test_attack_on_empty_water_reports_nothing():
    board = Board(my_grid=place_ships(parse_positions(POSITIONS)))
    assert board.attack(0, 0) == Status.NONE
    assert board.my_grid[0][0] == "."


def test_sinking_every_ship_wins():
    ships = parse_positions(POSITIONS)
    board = Board(my_grid=place_ships(ships))
    cells = [cell for ship in ships for cell in ship.cells()]
    results = [board.attack(x, y) for x, y in cells]
    assert results[-1] == Status.WIN
    assert all(status == Status.HIT for status in results[:-1])
    assert not board.has_ships()


def test_record_result_marks_enemy_grid():
    board = Board(my_grid=empty_grid())
    board.record_result(1, 2, Status.HIT)
    board.record_result(3, 4, Status.MISSED)
    board.record_result(5, 6, Status.WIN)
    board.record_result(7, 7, Status.NONE)
    assert board.enemy_grid[2][1] == "x"
    assert board.enemy_grid[4][3] == "o"
    assert board.enemy_grid[6][5] == "x"
    assert board.enemy_grid[7][7] == "."


def test_render_shows_both_grids():
    board = Board(my_grid=place_ships(parse_positions(POSITIONS)))
    text = board.render()
    assert text.startswith("my positions:\n")
    assert "\n\nenemy's positions:\n" in text
    assert text.endswith("\n\n")


def test_attack_statuses_carry_protocol_values():
    ships = parse_positions(POSITIONS)
    board = Board(my_grid=place_ships(ships))
    assert board.attack(2, 0) == 20
    assert board.attack(2, 0) == 21
    cells = [cell for ship in ships for cell in ship.cells()][1:]
    results = [board.attack(x, y) for x, y in cells]
    assert results[-1] == 22