import pytest

from raycaster.worldmap import WorldMap

ROWS = [
    [1, 1, 1, 1],
    [1, 0, 2, 1],
    [1, 1, 1, 1],
]


def _as_text(rows):
    lines = [f"{len(rows[0])} {len(rows)}"]
    lines.extend(" ".join(str(v) for v in row) for row in rows)
    return "\n".join(lines)


def test_from_rows_keeps_dimensions_and_cells():
    world = WorldMap.from_rows(ROWS)
    assert world.width == len(ROWS[0])
    assert world.height == len(ROWS)
    for y, row in enumerate(ROWS):
        for x, value in enumerate(row):
            assert world.cell(x, y) == value


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        WorldMap.from_rows([[1, 1], [1]])


def test_from_rows_rejects_empty():
    with pytest.raises(ValueError):
        WorldMap.from_rows([])


def test_from_text_round_trip():
    world = WorldMap.from_text(_as_text(ROWS))
    assert world == WorldMap.from_rows(ROWS)


def test_from_text_too_few_cells():
    with pytest.raises(ValueError):
        WorldMap.from_text("3 2 1 1 1")


def test_from_text_non_integer():
    with pytest.raises(ValueError):
        WorldMap.from_text("2 1 a b")


def test_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(_as_text(ROWS))
    assert WorldMap.from_file(path).cells == tuple(tuple(r) for r in ROWS)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        WorldMap.from_file(tmp_path / "absent.txt")


def test_is_wall_matches_cell_values():
    world = WorldMap.from_rows(ROWS)
    for y in range(world.height):
        for x in range(world.width):
            assert world.is_wall(x, y) == (world.cell(x, y) > 0)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_cell_out_of_range(x, y):
    world = WorldMap.from_rows(ROWS)
    with pytest.raises(IndexError):
        world.cell(x, y)