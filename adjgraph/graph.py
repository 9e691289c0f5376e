"""Directed graph with integer vertex ids."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, TextIO

from adjgraph.adjacency import AdjacencyList, Neighbors


class Vertex:

    """A vertex in a Graph.

    The id is assigned by the graph and never changes. The pre and post fields
    are reserved for depth-first numbering and are not set by any operation.
    """

    def __init__(self, id: int):  # pylint: disable=redefined-builtin
        self._id = id
        self.pre: Optional[int] = None
        self.post: Optional[int] = None

    def __repr__(self) -> str:
        return f"Vertex(id={self._id})"

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)


class Graph:

    """A directed graph.

    Vertices are identified by integers issued in increasing order from 0.
    Edges are stored in an AdjacencyList indexed by those ids. Deleting a
    vertex removes it from the live set and clears its slot, but the id is
    never issued again.

    Example usage:

        g = Graph()
        g.add_vertices(2)
        g.add_edge(0, 1)
        assert g.count_vertices() == 2
        g.display()
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._next_id = 0
        self.vertices: List[Vertex] = []
        self.adjacency_list = AdjacencyList()

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, V={self.count_vertices()}, "
            f"E={self.count_edges()})"
        )

    def __iter__(self) -> Iterator[Vertex]:
        """Iterate over the live vertices in insertion order."""
        return iter(self.vertices)

    @property
    def next_id(self) -> int:
        """The id the next added vertex will get."""
        return self._next_id

    def add_vertex(self) -> Vertex:
        vertex = Vertex(self._next_id)
        self.vertices.append(vertex)
        assert self._next_id == len(self.adjacency_list)
        self.adjacency_list.add_slot()
        self._next_id += 1
        return vertex

    def add_vertices(self, n: int) -> Graph:
        """Add n vertices. Returns self for chaining."""
        for _ in range(n):
            self.add_vertex()
        logging.debug("added %d vertices to graph %r", max(n, 0), self.name)
        return self

    def add_edge(self, src: int, dst: int):
        """Add the edge src -> dst.

        Raises IndexError if src was never issued. The dst id is not checked.
        """
        self.adjacency_list.add_edge(src, dst)

    def fully_connect(self) -> Graph:
        """Add an edge between every ordered pair of live vertices.

        This includes a self-loop on each vertex. Only vertices live at the
        time of the call take part. Returns self for chaining.
        """
        ids = [v.id for v in self.vertices]
        for src in ids:
            for dst in ids:
                self.add_edge(src, dst)
        logging.debug("fully connected %d vertices", len(ids))
        return self

    def count_vertices(self) -> int:
        return len(self.vertices)

    def count_edges(self) -> int:
        """Count stored edges, including edges to deleted vertices."""
        return self.adjacency_list.count_edges()

    def delete_vertex(self, v: int):
        """Delete the vertex with id v.

        Does nothing to the live set if v is not live. The outgoing edges of v
        are cleared, but edges from other vertices into v are kept and become
        dangling. Raises IndexError if v was never issued.
        """
        before = len(self.vertices)
        self.vertices = [vertex for vertex in self.vertices if vertex.id != v]
        self.adjacency_list.delete_vertex(v)
        if len(self.vertices) < before:
            logging.debug("deleted vertex %d", v)

    def display(self, out: Optional[TextIO] = None):
        """Print each live vertex and its outgoing edges.

        Writes to out, or to the current sys.stdout if out is None.
        """
        for vertex in self.vertices:
            edges = self.adjacency_list.get_adjacent_vertices(vertex.id)
            print(f"|vertex {vertex.id}| edges: {edges!r}", file=out)

    def get_vertex(self, id: int) -> Optional[Vertex]:  # pylint: disable=redefined-builtin
        """Return the live vertex with the given id, or None."""
        for vertex in self.vertices:
            if vertex.id == id:
                return vertex
        return None

    def get_adjacent_vertices(self, v: int) -> Neighbors:
        """Return a read-only view of the out-neighbors of v.

        Raises IndexError if v was never issued.
        """
        return self.adjacency_list.get_adjacent_vertices(v)


class UndirectedGraph:

    """An undirected graph built on a directed Graph.

    Each undirected edge is stored as a pair of directed edges. All storage
    lives in the wrapped graph.
    """

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()

    def __repr__(self) -> str:
        return f"UndirectedGraph(graph={self.graph!r})"

    def add_vertex(self) -> Vertex:
        return self.graph.add_vertex()

    def add_vertices(self, n: int) -> UndirectedGraph:
        self.graph.add_vertices(n)
        return self

    def add_edge(self, src: int, dst: int):
        """Add the edge between src and dst in both directions.

        Raises IndexError, storing nothing, if either id was never issued.
        """
        self.graph.get_adjacent_vertices(dst)
        self.graph.add_edge(src, dst)
        self.graph.add_edge(dst, src)

    def count_vertices(self) -> int:
        return self.graph.count_vertices()

    def count_edges(self) -> int:
        """Count stored directed edges (two per undirected edge)."""
        return self.graph.count_edges()

    def delete_vertex(self, v: int):
        self.graph.delete_vertex(v)

    def get_vertex(self, id: int) -> Optional[Vertex]:  # pylint: disable=redefined-builtin
        return self.graph.get_vertex(id)

    def get_adjacent_vertices(self, v: int) -> Neighbors:
        return self.graph.get_adjacent_vertices(v)

    def display(self, out: Optional[TextIO] = None):
        self.graph.display(out)
