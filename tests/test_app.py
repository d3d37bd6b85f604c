from raycaster.app import START_POSITION, WORLD_MAP, format_map, main
from raycaster.worldmap import WorldMap


def test_format_map_layout():
    world = WorldMap.from_rows([[1, 2], [3, 4]])
    assert format_map(world) == "2\n2\n1 2 \n3 4 \n"


def test_format_map_round_trips_through_text():
    assert WorldMap.from_text(format_map(WORLD_MAP)) == WORLD_MAP


def test_builtin_world_size_and_start():
    assert (WORLD_MAP.width, WORLD_MAP.height) == (24, 24)
    x, y = START_POSITION
    assert WORLD_MAP.cell(int(x), int(y)) == 0


def test_builtin_world_is_enclosed():
    width, height = WORLD_MAP.width, WORLD_MAP.height
    assert all(WORLD_MAP.is_wall(x, 0) for x in range(width))
    assert all(WORLD_MAP.is_wall(x, height - 1) for x in range(width))
    assert all(WORLD_MAP.is_wall(0, y) for y in range(height))
    assert all(WORLD_MAP.is_wall(width - 1, y) for y in range(height))


def test_main_prints_builtin_map(capsys):
    assert main(["--print-map"]) == 0
    out = capsys.readouterr().out
    assert out == format_map(WORLD_MAP)
    assert out.splitlines()[:2] == ["24", "24"]


def test_main_prints_map_file(tmp_path, capsys):
    path = tmp_path / "level.txt"
    path.write_text("3 2\n1 1 1\n1 0 1\n")
    assert main(["--map", str(path), "--print-map"]) == 0
    assert capsys.readouterr().out == format_map(WorldMap.from_file(path))


def test_main_missing_map_file(tmp_path, capsys):
    assert main(["--map", str(tmp_path / "none.txt"), "--print-map"]) == 1
    assert "cannot load map" in capsys.readouterr().err


def test_main_missing_textures(tmp_path, capsys):
    assert main(["--res", str(tmp_path)]) == 1
    assert "cannot load texture" in capsys.readouterr().err