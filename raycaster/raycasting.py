"""Ray casting against a grid map, wall shading and floor texturing."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from raycaster.worldmap import WorldMap

Vec = tuple[float, float]

_MARCH_STEP = 0.01
_WHITE = 255


@dataclass(frozen=True)
class Ray:
    """Distance to the wall hit and where along the wall face it struck (0..1)."""

    dist: float
    side: float


@dataclass
class Camera:
    """View direction plus the camera plane spanning the screen."""

    direction: Vec = (0.5, 0.0)
    plane: Vec = (0.0, 0.66)

    @classmethod
    def for_screen(cls, width: int, height: int) -> Camera:
        """Camera whose plane is scaled by the screen's aspect ratio."""
        aspect = width / height
        base = cls()
        return cls(base.direction, (0.5 * aspect * base.plane[0], 0.5 * aspect * base.plane[1]))

    def rotate(self, angle: float) -> None:
        """Turn direction and plane together by angle radians."""
        self.direction = _rotated(self.direction, angle)
        self.plane = _rotated(self.plane, angle)

    def ray_direction(self, camera_x: float) -> Vec:
        """Direction of the ray for camera_x in [-1, 1]."""
        return (
            self.direction[0] - self.plane[0] * camera_x,
            self.direction[1] - self.plane[1] * camera_x,
        )


def _rotated(vec: Vec, angle: float) -> Vec:
    c, s = math.cos(angle), math.sin(angle)
    return (vec[0] * c - vec[1] * s, vec[0] * s + vec[1] * c)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def cast_ray(world_map: WorldMap, position: Vec, ray_dir: Vec) -> Ray:
    """Step through grid cells along ray_dir until a wall is met.

    Returns the perpendicular distance to the wall. Raises IndexError if
    the ray leaves the map without meeting a wall.
    """
    px, py = position
    dx, dy = ray_dir
    if dx == 0 and dy == 0:
        raise ValueError("ray direction must not be zero")

    delta_x = math.inf if dx == 0 else math.sqrt(1.0 + (dy * dy) / (dx * dx))
    delta_y = math.inf if dy == 0 else math.sqrt(1.0 + (dx * dx) / (dy * dy))
    map_x, map_y = int(px), int(py)

    if dx < 0:
        step_x = -1
        side_x = (px - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - px) * delta_x
    if dy < 0:
        step_y = -1
        side_y = (py - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - py) * delta_y

    dist = 0.0
    crossed_x = False
    while world_map.cell(map_x, map_y) == 0:
        if side_x < side_y or math.isnan(side_y):
            side_x += delta_x
            map_x += step_x
            crossed_x = True
            dist = (map_x - px + (1 - step_x) / 2) / dx
        else:
            side_y += delta_y
            map_y += step_y
            crossed_x = False
            dist = (map_y - py + (1 - step_y) / 2) / dy

    wall = py + dist * dy if crossed_x else px + dist * dx
    return Ray(dist, wall - math.floor(wall))


def march_ray(
    world_map: WorldMap,
    position: Vec,
    angle: float,
    fov: float,
    column: int,
    screen_width: int,
    depth: float,
) -> Ray:
    """Advance a ray in small fixed steps; a ray leaving the grid ends at depth."""
    px, py = position
    ray_angle = (angle - fov / 2) + column / screen_width * fov
    rx, ry = math.cos(ray_angle), math.sin(ray_angle)

    dist = 0.0
    hit = False
    vertical = False
    tx, ty = int(px), int(py)
    while not hit and dist < depth:
        dist += _MARCH_STEP
        hx, hy = px + dist * rx, py + dist * ry
        tx, ty = int(hx), int(hy)
        # This caster indexes the grid with x selecting the row.
        if 0 <= tx < world_map.height and 0 <= ty < world_map.width:
            if world_map.cell(ty, tx) > 0:
                hit = True
                vertical = abs(hx - _round_half_away(hx)) < abs(hy - _round_half_away(hy))
        else:
            hit = True
            dist = depth

    if vertical:
        side = (py + dist * ry) - ty
    else:
        side = (px + dist * rx) - tx
    return Ray(math.cos(ray_angle - angle) * dist, side)


def shade(dist: float, depth: float) -> tuple[int, int, int, int]:
    """RGBA colour for a wall at dist: white darkened in bands, black near depth."""
    level = 0 if dist >= depth - 1 else _WHITE
    if dist > depth / 1.5:
        level //= 8
    if depth / 2.0 < dist < depth / 1.5:
        level //= 5
    if depth / 2.5 < dist < depth / 2.0:
        level //= 3
    if depth / 3 < dist < depth / 2.5:
        level //= 2
    return (level, level, level, 255)


def can_enter(world_map: WorldMap, position: Vec) -> bool:
    """True when the cell under position is open floor."""
    return world_map.cell(int(position[0]), int(position[1])) <= 0


def move(world_map: WorldMap, position: Vec, direction: Vec, distance: float) -> Vec:
    """Move along direction, sliding: each axis is blocked separately by walls."""
    x, y = position
    dx = distance * direction[0]
    dy = distance * direction[1]
    if can_enter(world_map, (x + dx, y)):
        x += dx
    if can_enter(world_map, (x, y + dy)):
        y += dy
    return (x, y)


def wall_span(distance: float, screen_height: int) -> tuple[float, float]:
    """Top and bottom screen rows of a wall column at distance."""
    height = screen_height / distance if distance else math.inf
    return ((screen_height - height) / 2, (screen_height + height) / 2)


def floor_texture_coords(
    camera: Camera,
    position: Vec,
    row: int,
    screen_width: int,
    screen_height: int,
    texture_width: int,
    texture_height: int,
) -> np.ndarray:
    """Texture coordinates for every column of a floor row below the horizon.

    Returns an integer array of shape (screen_width, 2).
    """
    p = int(row - screen_height / 2)
    if p <= 0:
        raise ValueError("floor rows lie below the middle of the screen")
    dir_x, dir_y = camera.direction
    plane_x, plane_y = camera.plane
    left = (dir_x - plane_x, dir_y - plane_y)
    right = (dir_x + plane_x, dir_y + plane_y)

    row_distance = 0.5 * screen_height / p
    step_x = row_distance * (left[0] - right[0]) / screen_width
    step_y = row_distance * (left[1] - right[1]) / screen_width
    columns = np.arange(screen_width, dtype=np.float64)
    floor_x = position[0] + row_distance * right[0] + columns * step_x
    floor_y = position[1] + row_distance * right[1] + columns * step_y

    frac_x = floor_x - np.trunc(floor_x)
    frac_y = floor_y - np.trunc(floor_y)
    tex_x = np.trunc(texture_width * frac_x).astype(np.int64) & int(texture_width - 1)
    tex_y = np.trunc(texture_height * frac_y).astype(np.int64) & int(texture_height - 1)
    return np.stack([tex_x, tex_y], axis=1)