"""The game engine: player control, frame rendering and the main loop."""

from __future__ import annotations

import math
from collections.abc import Collection
from pathlib import Path

import numpy as np
import pygame

from raycaster.player import Player
from raycaster.raycasting import (
    Camera,
    cast_ray,
    floor_texture_coords,
    move,
    shade,
    wall_span,
)
from raycaster.resources import ResourceHolder
from raycaster.worldmap import WorldMap

SKY_COLOR = (187, 211, 255)
VIEW_DEPTH = 15.0
ROTATION_SPEED = 3.0
MOVE_SPEED = 5.0
WALL_TEXTURE_SPAN = 64
WINDOW_TITLE = "3d"

_CONTROL_KEYS = (pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s)


class Engine:
    """Holds the player, the camera and the names of the map and textures in use."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        fov: float,
        start_pos: tuple[float, float],
        start_angle: float = 0.0,
    ) -> None:
        if screen_width <= 0 or screen_height <= 0:
            raise ValueError(f"invalid screen size {screen_width}x{screen_height}")
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.depth = VIEW_DEPTH
        self.player = Player(fov, start_angle, (float(start_pos[0]), float(start_pos[1])))
        self.camera = Camera.for_screen(screen_width, screen_height)
        self.resources = ResourceHolder.instance()
        self.map_name: str | None = None
        self.wall_name: str | None = None
        self.floor_name: str | None = None
        self.world_width = 0
        self.world_height = 0

    @property
    def world_map(self) -> WorldMap:
        if self.map_name is None:
            raise KeyError("no map has been added")
        return self.resources.get_map(self.map_name)

    def _use_map(self, name: str) -> None:
        self.map_name = name
        world = self.resources.get_map(name)
        self.world_width = world.width
        self.world_height = world.height

    def add_map(self, world_map: WorldMap, name: str) -> None:
        """Store world_map under name and make it the current map."""
        self.resources.add_map(world_map, name)
        self._use_map(name)

    def add_map_file(self, path: str | Path, name: str) -> None:
        """Read a map file, store it under name and make it the current map."""
        self.resources.load_map_file(path, name)
        self._use_map(name)

    def load_wall_texture(self, path: str | Path, name: str) -> None:
        self.resources.load_texture(path, name)
        self.wall_name = name

    def load_floor_texture(self, path: str | Path, name: str) -> None:
        self.resources.load_texture(path, name)
        self.floor_name = name

    def load_image(self, path: str | Path) -> None:
        """Load an image, stored under its path."""
        self.resources.load_image(path, str(path))

    def change_map_name(self, name: str) -> None:
        self.map_name = name

    def update(self, dt: float, keys: Collection[int]) -> None:
        """Apply one frame of input: A/D turn, W/S walk forward and back."""
        rot = ROTATION_SPEED * dt
        if pygame.K_a in keys:
            self.camera.rotate(rot)
        if pygame.K_d in keys:
            self.camera.rotate(-rot)
        if pygame.K_w in keys:
            self.player.position = move(
                self.world_map, self.player.position, self.camera.direction, MOVE_SPEED * dt
            )
        if pygame.K_s in keys:
            self.player.position = move(
                self.world_map, self.player.position, self.camera.direction, -MOVE_SPEED * dt
            )

    def render(self, surface: pygame.Surface) -> None:
        """Draw the textured floor, walls and sky onto surface."""
        if surface.get_size() != (self.screen_width, self.screen_height):
            raise ValueError("surface size does not match the screen size")
        if self.wall_name is None or self.floor_name is None:
            raise KeyError("wall and floor textures must be loaded before rendering")
        wall_tex = pygame.surfarray.array3d(self.resources.get_texture(self.wall_name))
        floor_tex = pygame.surfarray.array3d(self.resources.get_texture(self.floor_name))
        world = self.world_map

        frame = np.zeros((self.screen_width, self.screen_height, 3), dtype=np.uint8)
        self._draw_floor(frame, floor_tex)
        self._draw_walls(frame, wall_tex, world)
        pygame.surfarray.blit_array(surface, frame)

    def _draw_floor(self, frame: np.ndarray, texture: np.ndarray) -> None:
        width, height = self.screen_width, self.screen_height
        tex_w, tex_h = texture.shape[0], texture.shape[1]
        for row in range(height // 2 + 1, height):
            if row - height / 2 < 1:
                continue
            coords = floor_texture_coords(
                self.camera, self.player.position, row, width, height, tex_w, tex_h
            )
            frame[:, row] = texture[coords[:, 0], coords[:, 1]]

    def _draw_walls(self, frame: np.ndarray, texture: np.ndarray, world: WorldMap) -> None:
        width, height = self.screen_width, self.screen_height
        tex_w, tex_h = texture.shape[0], texture.shape[1]
        for column in range(width):
            ray = cast_ray(
                world, self.player.position, self.camera.ray_direction(2 * column / width - 1)
            )
            top, bottom = wall_span(ray.dist, height)
            level = shade(ray.dist, self.depth)[0]
            u = min(max(int(ray.side * tex_w), 0), tex_w - 1)

            if math.isfinite(top) and math.isfinite(bottom) and bottom > top:
                start = min(max(math.ceil(top), 0), height)
                end = min(max(math.ceil(bottom), 0), height)
                rows = np.arange(start, end, dtype=np.float64)
                v = ((rows - top) / (bottom - top) * WALL_TEXTURE_SPAN).astype(np.int64)
            else:
                start, end = 0, height
                v = np.zeros(height, dtype=np.int64)
            v = np.clip(v, 0, tex_h - 1)

            colors = texture[u, v].astype(np.uint16) * level // 255
            frame[column, start:end] = colors.astype(np.uint8)
            frame[column, :start] = SKY_COLOR

    def run(self) -> None:
        """Open a window and play until it is closed or Escape is pressed."""
        pygame.init()
        try:
            window = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                dt = clock.tick() / 1000.0
                if dt > 0:
                    pygame.display.set_caption(f"{1 / dt} FPS")
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                if not running:
                    break
                self.render(window)
                pressed = pygame.key.get_pressed()
                self.update(dt, {key for key in _CONTROL_KEYS if pressed[key]})
                pygame.display.flip()
        finally:
            pygame.quit()