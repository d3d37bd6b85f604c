# raycaster

A first-person raycasting renderer over a grid world map. Walls and floor are
textured and the sky is a flat colour. It is built on pygame and numpy.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Play

    raycaster

This opens a 1080×720 window on the built-in 24×24 level. The player starts
at (1, 2). The textures are read from a directory, which is `res` under the
current working directory unless you give another one. It must hold
`redbrick.png` for the walls and `greystone.png` for the floor.

Options:

- `--map PATH`: play a map file instead of the built-in level.
- `--res DIR`: the directory that holds the textures (default `res`).
- `--print-map`: print the map's width, height and rows, then exit. No window
  is opened.

If the map or a texture cannot be loaded, the command prints a message to
standard error and exits with status 1.

Controls:

- `W` / `S`: move forward / backward. Each axis is blocked by walls on its
  own, so the player slides along walls.
- `A` / `D`: turn.
- `Esc` or closing the window quits.

The window title shows the current frame rate.

## Maps

A map is a rectangular grid of integers. `0` is open floor and any positive
value is a wall.

```python
from raycaster.worldmap import WorldMap

world = WorldMap.from_rows([
    [1, 1, 1, 1],
    [1, 0, 0, 1],
    [1, 1, 1, 1],
])
world.is_wall(1, 1)   # False
world.cell(0, 0)      # 1
```

`cell(x, y)` raises `IndexError` for a cell outside the map. A map whose rows
differ in length, or that has no cells, raises `ValueError`.

Map files are plain text. The first two numbers are the width and the height.
After them come the cells row by row, separated by any whitespace. Load one
with `WorldMap.from_file(path)` or `WorldMap.from_text(text)`.

## Using the engine

```python
from raycaster.engine import Engine
from raycaster.worldmap import WorldMap

engine = Engine(800, 600, 0.63, (1.5, 1.5), 0.0)
engine.add_map(WorldMap.from_file("maps/level.txt"), "level")
engine.load_wall_texture("res/redbrick.png", "wall")
engine.load_floor_texture("res/greystone.png", "floor")
engine.run()
```

`Engine.update(dt, keys)` applies one frame of input. It takes a set of pygame
key codes. `Engine.render(surface)` draws one frame onto a surface of the
screen's size. Both work without a window, so you can drive the engine from
your own loop. `add_map_file(path, name)` reads a map file directly.

Maps and textures live in a shared `ResourceHolder` from
`raycaster.resources`, reached through `ResourceHolder.instance()`. Adding a
map, texture or image under a name that is already taken keeps the first
one, but `load_map_file` raises `ValueError` for such a name. Asking for an
unknown name raises `KeyError`.

## Geometry

`raycaster.raycasting` holds the parts that need no display:

- `cast_ray` runs a DDA grid traversal and returns a `Ray` with the
  perpendicular distance and the hit position along the wall face.
- `march_ray` advances a ray in small fixed steps up to a depth.
- `Camera` holds the direction and plane vectors.
- `move` and `can_enter` handle movement against walls.
- `wall_span`, `shade` and `floor_texture_coords` work out what is drawn for
  each screen column and floor row.

## Limitations

- The rendered view's width comes from the camera plane, which is set by the
  screen's aspect ratio. The `fov` given to `Engine` is kept on the player and
  used only by `march_ray`.
- The engine draws with `cast_ray`. `march_ray` is provided for use on its
  own.
- There are no sprites, doors, sound or map editor. Wall values other than
  zero all draw with the same wall texture.