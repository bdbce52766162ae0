from typing import Iterator, List, Tuple

from Nodes.Point import Point, as_vec
from Nodes.Quad_node import Quad_node
from trees.errors import InvariantViolation, NotFoundError, OutOfRangeError
from trees.logger import logger

MAX_POINTS_PER_NODE = 5
MAX_DEPTH = 5

# "overflow": dividir una hoja cuando ya tiene max_points_per_node puntos.
# "eager": dividir mientras la hoja tenga menos de max_points_per_node puntos,
# con lo que cada inserción baja hasta max_depth.
SPLIT_POLICIES = ("overflow", "eager")


class QuadTree:
    """Quadtree de puntos sobre un rectángulo fijo.

    Cada punto guarda una posición y un dato arbitrario. El dato sólo
    necesita soportar ``==``, que es lo que usa ``remove`` para encontrarlo.
    """

    def __init__(self, top_left=(0.0, 0.0), bottom_right=(1.0, 1.0),
                 max_points_per_node=MAX_POINTS_PER_NODE, max_depth=MAX_DEPTH,
                 split_policy="overflow"):
        top_left = as_vec(top_left)
        bottom_right = as_vec(bottom_right)
        if top_left.x > bottom_right.x or top_left.y > bottom_right.y:
            raise ValueError(f"esquinas inválidas: {top_left} no está arriba a la izquierda de {bottom_right}")
        if max_points_per_node < 1:
            raise ValueError("max_points_per_node debe ser >= 1")
        if max_depth < 1:
            raise ValueError("max_depth debe ser >= 1")
        if split_policy not in SPLIT_POLICIES:
            raise ValueError(f"split_policy desconocida: {split_policy!r} (opciones: {SPLIT_POLICIES})")

        self.max_points_per_node = max_points_per_node
        self.max_depth = max_depth
        self.split_policy = split_policy
        self.root = Quad_node(top_left.x, top_left.y, bottom_right.x, bottom_right.y)
        self._size = 0

    @property
    def bounds(self):
        return self.root.boundary

    def contains(self, pos) -> bool:
        return self.bounds.contains(as_vec(pos))

    def _should_split(self, node) -> bool:
        if self.split_policy == "eager":
            return len(node.bucket) < self.max_points_per_node
        return len(node.bucket) >= self.max_points_per_node

    def insert(self, pos, data) -> None:
        """Inserta un punto. Lanza OutOfRangeError si cae fuera del árbol."""
        if self.root is None:
            raise InvariantViolation("el quadtree no tiene raíz")
        pos = as_vec(pos)
        if not self.root.boundary.contains(pos):
            raise OutOfRangeError(f"el punto {tuple(pos)} está fuera del área {self.root.boundary}")

        # bajar hasta el primer nodo sin hijo para este cuadrante
        node = self.root
        depth = 1
        child = node.get_child(pos)
        while child is not None:
            node = child
            depth += 1
            child = node.get_child(pos)

        # crecer el árbol si hace falta
        while depth < self.max_depth:
            if node.has_children():
                # el hijo de este cuadrante se podó en un remove anterior
                node = node.make_child(pos)
            elif self._should_split(node):
                logger.debug("dividiendo %r a profundidad %d", node, depth)
                node.split()
                node = node.get_child(pos)
            else:
                break
            depth += 1

        if node.has_children():
            raise InvariantViolation(f"se intentó guardar un punto en el nodo interno {node!r}")
        node.bucket.insert(Point(pos, data))
        self._size += 1

    def remove(self, pos, data) -> None:
        """Elimina el punto con dato `data` del camino de `pos`.

        Sólo se compara el dato, no la posición. Lanza NotFoundError si no
        está. Después poda las hojas que quedaron vacías.
        """
        if self.root is None:
            raise InvariantViolation("el quadtree no tiene raíz")
        pos = as_vec(pos)

        # la raíz va en la pila para que sus hijos directos también se puedan podar
        stack = [self.root]
        node = self.root
        child = node.get_child(pos)
        while child is not None:
            node = child
            stack.append(node)
            child = node.get_child(pos)

        idx = node.bucket.find(data)
        if idx < 0:
            raise NotFoundError(f"no hay ningún punto con dato {data!r} en la posición {tuple(pos)}")
        node.bucket.remove_at(idx)
        self._size -= 1
        logger.debug("eliminado %r de %r", data, node)

        # podar nodos vacíos hacia arriba; la raíz nunca se desconecta
        while len(stack) > 1:
            node = stack.pop()
            if not node.is_empty():
                break
            stack[-1].set_child(pos, None)
            logger.debug("podado %r", node)

    def query(self, top_left, bottom_right) -> List[Point]:
        """Todos los puntos dentro del rectángulo cerrado [top_left, bottom_right]."""
        top_left = as_vec(top_left)
        bottom_right = as_vec(bottom_right)

        # pila de nodos que aún hay que recorrer
        stack = [self.root]
        result = []

        while stack:
            node = stack.pop()

            for child in node.slots:
                if child is not None and child.intersects_with(top_left, bottom_right):
                    stack.append(child)

            for p in node.bucket:
                if (top_left.x <= p.position.x <= bottom_right.x and
                        top_left.y <= p.position.y <= bottom_right.y):
                    result.append(p)

        return result

    def nodes(self) -> Iterator[Tuple[Quad_node, int]]:
        """Recorre todos los nodos como pares (nodo, profundidad)."""
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in node.slots:
                if child is not None:
                    stack.append((child, depth + 1))

    def points(self) -> Iterator[Point]:
        for node, _ in self.nodes():
            yield from node.bucket

    def __iter__(self):
        return self.points()

    def __len__(self):
        return self._size

    def __repr__(self):
        return (f"QuadTree({self.bounds.top_left}, {self.bounds.bottom_right}, "
                f"points={self._size}, policy={self.split_policy!r})")
