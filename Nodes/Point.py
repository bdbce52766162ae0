from dataclasses import dataclass
from typing import Any, NamedTuple


class Vec2(NamedTuple):
    """Coordenada (x, y) en el plano."""
    x: float
    y: float


def as_vec(pos) -> Vec2:
    # acepta Vec2, tuplas, listas o arrays de numpy de dos elementos
    if isinstance(pos, Vec2):
        return pos
    x, y = pos
    return Vec2(float(x), float(y))


@dataclass(frozen=True)
class Point:
    """Entrada del quadtree: una posición y el dato asociado."""
    position: Vec2
    data: Any = None

    @property
    def x(self):
        return self.position.x

    @property
    def y(self):
        return self.position.y
