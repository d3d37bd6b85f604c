"""The player: field of view, heading and position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """Where the player stands and where it looks."""

    fov: float
    angle: float = 0.0
    position: tuple[float, float] = (0.0, 0.0)

    def step(self, dx: float, dy: float) -> None:
        """Shift the player's position by (dx, dy)."""
        x, y = self.position
        self.position = (x + dx, y + dy)