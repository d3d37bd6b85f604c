import pygame
import pytest

from raycaster.resources import ResourceHolder
from raycaster.worldmap import WorldMap


def _write_bitmap(path, size):
    surface = pygame.Surface(size)
    surface.fill((200, 10, 10))
    pygame.image.save(surface, str(path))
    return path


def test_instance_is_shared():
    world = WorldMap.from_rows([[1, 1], [1, 0]])
    ResourceHolder.instance().add_map(world, "shared-instance-check")
    assert ResourceHolder.instance().get_map("shared-instance-check") == world


def test_add_and_get_map():
    holder = ResourceHolder()
    world = WorldMap.from_rows([[1, 0], [0, 1]])
    holder.add_map(world, "world")
    assert holder.get_map("world") == world


def test_add_map_keeps_first():
    holder = ResourceHolder()
    first = WorldMap.from_rows([[1]])
    holder.add_map(first, "world")
    holder.add_map(WorldMap.from_rows([[0]]), "world")
    assert holder.get_map("world") == first


def test_load_map_file_twice_raises(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("2 1\n1 0\n")
    holder = ResourceHolder()
    holder.load_map_file(path, "level")
    assert holder.get_map("level").cells == ((1, 0),)
    with pytest.raises(ValueError):
        holder.load_map_file(path, "level")


def test_unknown_names_raise():
    holder = ResourceHolder()
    with pytest.raises(KeyError):
        holder.get_map("nothing")
    with pytest.raises(KeyError):
        holder.get_texture("nothing")
    with pytest.raises(KeyError):
        holder.get_image("nothing")


def test_load_texture(tmp_path):
    path = _write_bitmap(tmp_path / "wall.bmp", (8, 4))
    holder = ResourceHolder()
    holder.load_texture(path, "wall")
    assert holder.get_texture("wall").get_size() == (8, 4)


def test_load_image(tmp_path):
    path = _write_bitmap(tmp_path / "pic.bmp", (3, 5))
    holder = ResourceHolder()
    holder.load_image(path, "pic")
    assert holder.get_image("pic").get_size() == (3, 5)


def test_load_texture_missing_file(tmp_path):
    holder = ResourceHolder()
    with pytest.raises(FileNotFoundError):
        holder.load_texture(tmp_path / "absent.bmp", "wall")