from Nodes.Point import Vec2


class Rectangle_Q:
    def __init__(self, x1, y1, x2, y2):
        # (x1, y1) = esquina superior izquierda, (x2, y2) = esquina inferior derecha
        self.top_left = Vec2(x1, y1)
        self.bottom_right = Vec2(x2, y2)
        self.center = Vec2((x1 + x2) / 2, (y1 + y2) / 2)

    def contains(self, point):
        """Contención cerrada: los bordes cuentan como dentro."""
        return (self.top_left.x <= point.x <= self.bottom_right.x and
                self.top_left.y <= point.y <= self.bottom_right.y)

    def intersects(self, top_left, bottom_right):
        # separación por ejes, inclusiva en los bordes
        return not (bottom_right.y < self.top_left.y or
                    bottom_right.x < self.top_left.x or
                    top_left.y > self.bottom_right.y or
                    top_left.x > self.bottom_right.x)

    def quadrant(self, idx):
        """Sub-rectángulo idx: 0 sup-izq, 1 sup-der, 2 inf-izq, 3 inf-der."""
        tl, br, c = self.top_left, self.bottom_right, self.center
        if idx == 0:
            return Rectangle_Q(tl.x, tl.y, c.x, c.y)
        if idx == 1:
            return Rectangle_Q(c.x, tl.y, br.x, c.y)
        if idx == 2:
            return Rectangle_Q(tl.x, c.y, c.x, br.y)
        return Rectangle_Q(c.x, c.y, br.x, br.y)

    def __eq__(self, other):
        if not isinstance(other, Rectangle_Q):
            return NotImplemented
        return self.top_left == other.top_left and self.bottom_right == other.bottom_right

    def __repr__(self):
        return f"Rectangle_Q({self.top_left}, {self.bottom_right})"
