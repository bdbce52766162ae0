from Nodes.Bucket import Bucket
from Nodes.Rectangle_Q import Rectangle_Q

# índices de los cuadrantes, en el mismo orden que Rectangle_Q.quadrant
TOP_LEFT = 0
TOP_RIGHT = 1
BOTTOM_LEFT = 2
BOTTOM_RIGHT = 3


class Quad_node:
    """Nodo del quadtree.

    Cubre una región rectangular del plano. Es una hoja con una lista de
    puntos (bucket) o un nodo interno con hasta cuatro hijos, uno por
    cuadrante, partidos en el centro de la región.
    """

    def __init__(self, x1, y1, x2, y2):
        self.boundary = Rectangle_Q(x1, y1, x2, y2)
        self.top_left = self.boundary.top_left
        self.bottom_right = self.boundary.bottom_right
        self.center = self.boundary.center

        # hijos
        self.slots = [None, None, None, None]
        self.bucket = Bucket()

    @property
    def points(self):
        return self.bucket.points

    def quadrant(self, pos):
        """Cuadrante al que pertenece `pos` (semiabierto en las líneas centrales)."""
        if pos.x < self.center.x and pos.y < self.center.y:
            return TOP_LEFT
        elif pos.x < self.center.x and pos.y >= self.center.y:
            return BOTTOM_LEFT
        elif pos.x >= self.center.x and pos.y < self.center.y:
            return TOP_RIGHT
        else:
            return BOTTOM_RIGHT

    def get_child(self, pos):
        return self.slots[self.quadrant(pos)]

    def set_child(self, pos, node):
        self.slots[self.quadrant(pos)] = node

    def make_child(self, pos):
        """Crea el hijo del cuadrante de `pos` y lo devuelve."""
        idx = self.quadrant(pos)
        rect = self.boundary.quadrant(idx)
        child = Quad_node(rect.top_left.x, rect.top_left.y, rect.bottom_right.x, rect.bottom_right.y)
        self.slots[idx] = child
        return child

    def split(self):
        """Crea los cuatro hijos y reparte entre ellos los puntos de este nodo."""
        for idx in range(4):
            rect = self.boundary.quadrant(idx)
            self.slots[idx] = Quad_node(rect.top_left.x, rect.top_left.y,
                                        rect.bottom_right.x, rect.bottom_right.y)

        for p in self.bucket:
            self.get_child(p.position).bucket.insert(p)
        self.bucket.clear()

    def intersects_with(self, top_left, bottom_right):
        return self.boundary.intersects(top_left, bottom_right)

    def has_children(self):
        return any(child is not None for child in self.slots)

    def children(self):
        return [child for child in self.slots if child is not None]

    def is_empty(self):
        return not self.has_children() and len(self.bucket) == 0

    def __repr__(self):
        return f"Quad_node({self.top_left}, {self.bottom_right}, points={len(self.bucket)})"
