"""Undirected graphs: traversals, greedy colouring and grid connectivity."""

from collections import deque


class Graph:
    """An undirected graph on vertices 0..vertex_count-1."""

    def __init__(self, vertex_count):
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.adjacency = [[] for _ in range(vertex_count)]

    def _check(self, vertex):
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u, v):
        """Connect u and v in both directions."""
        self._check(u)
        self._check(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def bfs(self):
        """Breadth-first visiting order, starting a new search at every
        unvisited vertex in ascending order."""
        visited = [False] * self.vertex_count
        order = []
        for start in range(self.vertex_count):
            if visited[start]:
                continue
            visited[start] = True
            queue = deque([start])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for neighbour in self.adjacency[vertex]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        queue.append(neighbour)
        return order

    def dfs(self):
        """Depth-first visiting order, starting a new search at every
        unvisited vertex in ascending order."""
        visited = [False] * self.vertex_count
        order = []
        for start in range(self.vertex_count):
            if visited[start]:
                continue
            visited[start] = True
            order.append(start)
            stack = [iter(self.adjacency[start])]
            while stack:
                for neighbour in stack[-1]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        order.append(neighbour)
                        stack.append(iter(self.adjacency[neighbour]))
                        break
                else:
                    stack.pop()
        return order

    def greedy_coloring(self):
        """Colour vertices in order, each with the smallest colour no
        already-coloured neighbour uses; returns the colour of each vertex."""
        colours = [None] * self.vertex_count
        for vertex in range(self.vertex_count):
            taken = {
                colours[n] for n in self.adjacency[vertex] if colours[n] is not None
            }
            colour = 0
            while colour in taken:
                colour += 1
            colours[vertex] = colour
        return colours


def min_connecting_values(grid, queries):
    """For each query (x1, y1, x2, y2), the smallest threshold e >= 1 such
    that the two cells are joined through orthogonal neighbours whose values
    are all at most e; a query naming one cell twice answers 1.

    Raises ValueError for a ragged grid or a non-positive value, and
    IndexError for a query cell outside the grid.
    """
    rows = [list(row) for row in grid]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    if any(value < 1 for row in rows for value in row):
        raise ValueError("grid values must be positive")

    cell_count = height * width
    parent = list(range(cell_count))
    size = [1] * cell_count
    pending = [set() for _ in range(cell_count)]
    queries = [tuple(query) for query in queries]
    answers = [0] * len(queries)

    def cell_id(x, y):
        if not (0 <= x < height and 0 <= y < width):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return x * width + y

    for index, (x1, y1, x2, y2) in enumerate(queries):
        first, second = cell_id(x1, y1), cell_id(x2, y2)
        if first == second:
            answers[index] = 1
        else:
            pending[first].add(index)
            pending[second].add(index)

    def find(cell):
        while parent[cell] != cell:
            parent[cell] = parent[parent[cell]]
            cell = parent[cell]
        return cell

    def union(a, b, value):
        ra, rb = find(a), find(b)
        if ra == rb:
            return
        if size[ra] < size[rb]:
            ra, rb = rb, ra
        parent[rb] = ra
        size[ra] += size[rb]
        large, small = pending[ra], pending[rb]
        if len(large) < len(small):
            large, small = small, large
        for query in small:
            if query in large:
                large.remove(query)
                answers[query] = value
            else:
                large.add(query)
        pending[ra] = large
        pending[rb] = set()

    cells = sorted(
        ((rows[x][y], x, y) for x in range(height) for y in range(width))
    )
    for value, x, y in cells:
        for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
            if 0 <= nx < height and 0 <= ny < width and rows[nx][ny] <= value:
                union(x * width + y, nx * width + ny, value)
    return answers