from raycaster.player import Player


def test_defaults():
    player = Player(fov=1.0)
    assert player.angle == 0.0
    assert player.position == (0.0, 0.0)


def test_step_moves_position():
    player = Player(fov=1.0, angle=0.5, position=(1.0, 2.0))
    player.step(0.5, -0.25)
    assert player.position == (1.5, 1.75)


def test_step_then_reverse_returns():
    player = Player(fov=1.0, position=(3.0, 4.0))
    player.step(0.75, 0.5)
    player.step(-0.75, -0.5)
    assert player.position == (3.0, 4.0)


def test_step_keeps_fov_and_angle():
    player = Player(fov=0.6, angle=1.2, position=(1.0, 1.0))
    player.step(1.0, 1.0)
    assert (player.fov, player.angle) == (0.6, 1.2)