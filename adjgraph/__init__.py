"""Minimal directed graph built on an adjacency list."""

from adjgraph.adjacency import AdjacencyList, Neighbors
from adjgraph.graph import Graph, UndirectedGraph, Vertex

__all__ = [
    "AdjacencyList",
    "Graph",
    "Neighbors",
    "UndirectedGraph",
    "Vertex",
]
