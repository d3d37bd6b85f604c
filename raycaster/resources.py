"""Named store for maps, textures and images."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

import pygame

from raycaster.worldmap import WorldMap


def _load_surface(path: str | Path) -> pygame.Surface:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"no such file: {path}")
    return pygame.image.load(str(path))


class ResourceHolder:
    """Keeps maps and pictures under names; an existing name is never replaced."""

    _instance: ClassVar[ResourceHolder | None] = None

    def __init__(self) -> None:
        self._maps: dict[str, WorldMap] = {}
        self._textures: dict[str, pygame.Surface] = {}
        self._images: dict[str, pygame.Surface] = {}

    @classmethod
    def instance(cls) -> ResourceHolder:
        """Return the shared holder, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load_map_file(self, path: str | Path, name: str) -> None:
        """Read a map file and store it under name."""
        if name in self._maps:
            raise ValueError(f"map already exists: {name}")
        self._maps[name] = WorldMap.from_file(path)

    def add_map(self, world_map: WorldMap, name: str) -> None:
        self._maps.setdefault(name, world_map)

    def load_texture(self, path: str | Path, name: str) -> None:
        self._textures.setdefault(name, _load_surface(path))

    def load_image(self, path: str | Path, name: str) -> None:
        self._images.setdefault(name, _load_surface(path))

    def get_map(self, name: str) -> WorldMap:
        try:
            return self._maps[name]
        except KeyError:
            raise KeyError(f"unknown map: {name}") from None

    def get_texture(self, name: str) -> pygame.Surface:
        try:
            return self._textures[name]
        except KeyError:
            raise KeyError(f"unknown texture: {name}") from None

    def get_image(self, name: str) -> pygame.Surface:
        try:
            return self._images[name]
        except KeyError:
            raise KeyError(f"unknown image: {name}") from None