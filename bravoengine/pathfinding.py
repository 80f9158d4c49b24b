"""A* path search over a grid graph given as an adjacency mapping."""

from __future__ import annotations

import heapq
from collections.abc import Mapping, Sequence


class Pathfinding:
    """Finds shortest paths between grid nodes numbered row by row."""

    def __init__(self, adjacency_list: Mapping[int, Sequence[int]], map_width: int, map_height: int) -> None:
        self.adjacency_list: dict[int, list[int]] = {node: list(nbrs) for node, nbrs in adjacency_list.items()}
        self.map_width = map_width
        self.map_height = map_height

    def find_path(self, start: int, goal: int) -> list[int]:
        """Return the nodes from start to goal, or an empty list if unreachable.

        Raises KeyError when a visited node has no adjacency entry.
        """
        open_set: list[tuple[float, int]] = [(0.0, start)]
        came_from: dict[int, int] = {}
        g: dict[int, float] = {start: 0.0}

        while open_set:
            _, current = heapq.heappop(open_set)
            if current == goal:
                return self._reconstruct_path(came_from, current)

            for neighbor in self.adjacency_list[current]:
                tentative = g[current] + self.distance(current, neighbor)
                if neighbor not in g or tentative < g[neighbor]:
                    came_from[neighbor] = current
                    g[neighbor] = tentative
                    heapq.heappush(open_set, (tentative + self.distance(neighbor, goal), neighbor))

        return []

    def distance(self, node_a: int, node_b: int) -> float:
        """Manhattan distance between two nodes on the grid."""
        xa, ya = node_a % self.map_width, node_a // self.map_width
        xb, yb = node_b % self.map_width, node_b // self.map_width
        return float(abs(xa - xb) + abs(ya - yb))

    @staticmethod
    def _reconstruct_path(came_from: dict[int, int], current: int) -> list[int]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path