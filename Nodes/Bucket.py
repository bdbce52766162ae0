class Bucket:
    def __init__(self):
        self.points = []

    def insert(self, point):
        self.points.append(point)

    def find(self, data):
        """Índice del primer punto cuyo dato es igual a `data`, o -1."""
        for i, p in enumerate(self.points):
            if p.data == data:
                return i
        return -1

    def remove_at(self, i):
        # intercambiar con el último y sacarlo; no conserva el orden
        last = len(self.points) - 1
        self.points[i], self.points[last] = self.points[last], self.points[i]
        return self.points.pop()

    def clear(self):
        self.points.clear()

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"Bucket({self.points})"
