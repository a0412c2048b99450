"""Circular dependency detector module.

This module implements Tarjan's algorithm for finding strongly connected components
to detect circular dependencies between components.
"""


class CircularDependencyDetector:
    """Implements Tarjan's algorithm for finding strongly connected components.

    Iterative rewrite: an explicit work stack replaces recursion, so graph
    depth is not limited by the interpreter's recursion limit.

    Time Complexity: O(V + E) where V = components, E = edges
    Space Complexity: O(V)
    """

    def __init__(self):
        """Initialize the detector state."""
        self._reset()

    def _reset(self):
        self.index_counter = 0
        self.stack: list[str] = []
        self.lowlinks: dict[str, int] = {}
        self.index: dict[str, int] = {}
        self.on_stack: set[str] = set()
        self.sccs: list[list[str]] = []

    def detect_cycles(self, adjacency_list: dict[str, list[str]]) -> list[list[str]]:
        """Detect all circular dependency groups in the graph.

        A group is either a strongly connected component with two or more
        members, or a single component that depends on itself.

        Args:
            adjacency_list: Map of component id → list of dependency ids.
                Ids that only appear as targets are treated as nodes too.

        Returns:
            List of groups; members of each group are sorted by id and groups
            are ordered by their first member, so the result does not depend
            on the iteration order of the input
        """
        self._reset()

        graph: dict[str, list[str]] = {}
        for node in sorted(adjacency_list):
            graph.setdefault(node, [])
            for successor in adjacency_list[node]:
                graph[node].append(successor)
                graph.setdefault(successor, [])
        for node, successors in graph.items():
            graph[node] = sorted(set(successors))

        for node in sorted(graph):
            if node not in self.index:
                self._strongconnect(node, graph)

        cycles = []
        for scc in self.sccs:
            if len(scc) > 1 or scc[0] in graph[scc[0]]:
                cycles.append(sorted(scc))
        cycles.sort(key=lambda group: group[0])
        return cycles

    def _strongconnect(self, root: str, graph: dict[str, list[str]]):
        """Iterative helper for Tarjan's algorithm.

        Each work item is (node, position of the next successor to visit).

        Args:
            root: Node to start the depth-first search from
            graph: Complete graph as adjacency list
        """
        work: list[tuple[str, int]] = [(root, 0)]

        while work:
            node, position = work.pop()

            if position == 0:
                # First visit: assign the smallest unused index
                self.index[node] = self.index_counter
                self.lowlinks[node] = self.index_counter
                self.index_counter += 1
                self.stack.append(node)
                self.on_stack.add(node)

            successors = graph[node]
            descended = False
            while position < len(successors):
                successor = successors[position]
                position += 1
                if successor not in self.index:
                    # Resume this node after the successor is finished
                    work.append((node, position))
                    work.append((successor, 0))
                    descended = True
                    break
                if successor in self.on_stack:
                    self.lowlinks[node] = min(
                        self.lowlinks[node], self.index[successor]
                    )
            if descended:
                continue

            # All successors done; a root node pops its SCC off the stack
            if self.lowlinks[node] == self.index[node]:
                scc = []
                while True:
                    w = self.stack.pop()
                    self.on_stack.remove(w)
                    scc.append(w)
                    if w == node:
                        break
                self.sccs.append(scc)

            # Propagate the lowlink to the parent waiting below on the stack
            if work:
                parent = work[-1][0]
                self.lowlinks[parent] = min(self.lowlinks[parent], self.lowlinks[node])
