class QuadTreeError(Exception):
    """Base de los errores del quadtree."""


class OutOfRangeError(QuadTreeError, ValueError):
    """El punto está fuera del área que cubre el árbol."""


class NotFoundError(QuadTreeError, LookupError):
    """No hay ningún punto con ese dato en el camino de la posición dada."""


class InvariantViolation(QuadTreeError, RuntimeError):
    """Estado interno imposible: indica un bug, no un error de uso."""
