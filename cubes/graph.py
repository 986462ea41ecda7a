"""Planar graph augmentation and straight-line drawing of small undirected graphs.

Vertices are the integers ``0 .. vertex_count - 1``; edges are pairs of
vertices. Every function returns new values and leaves its input untouched.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable

import networkx as nx

_log = logging.getLogger(__name__)

Edge = tuple[int, int]


class NotPlanarError(ValueError):
    """Raised when a graph has no planar embedding."""


def _normalised(edge: Iterable[int]) -> Edge:
    a, b = edge
    return (a, b) if a <= b else (b, a)


def _sorted_edges(graph: nx.Graph) -> list[Edge]:
    return sorted(_normalised(edge) for edge in graph.edges())


def _build_graph(vertex_count: int, edges: Iterable[Iterable[int]]) -> nx.Graph:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative: {vertex_count}")
    graph = nx.Graph()
    graph.add_nodes_from(range(vertex_count))
    for edge in edges:
        a, b = edge
        for vertex in (a, b):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range 0..{vertex_count - 1}")
        if a == b:
            raise ValueError(f"self-loop at vertex {a} is not supported")
        graph.add_edge(a, b)
    return graph


def _embedding(graph: nx.Graph) -> nx.PlanarEmbedding:
    is_planar, embedding = nx.check_planarity(graph)
    if not is_planar:
        _log.debug("graph is not planar")
        raise NotPlanarError("graph is not planar")
    _log.debug("graph is planar")
    return embedding


def _is_planar(graph: nx.Graph) -> bool:
    return nx.check_planarity(graph)[0]


def _connect(graph: nx.Graph) -> None:
    components = sorted(nx.connected_components(graph), key=min)
    for previous, current in zip(components, components[1:]):
        graph.add_edge(min(previous), min(current))


def _biconnect(graph: nx.Graph) -> None:
    while True:
        cut_vertex = min(nx.articulation_points(graph), default=None)
        if cut_vertex is None:
            return
        embedding = _embedding(graph)
        rest = graph.subgraph(node for node in graph if node != cut_vertex)
        component_of = {
            node: index
            for index, component in enumerate(nx.connected_components(rest))
            for node in component
        }
        neighbours = list(embedding.neighbors_cw_order(cut_vertex))
        for a, b in zip(neighbours, neighbours[1:] + neighbours[:1]):
            if component_of[a] != component_of[b]:
                # Consecutive neighbours around a vertex share a face.
                graph.add_edge(a, b)
                break


def _add_chord(graph: nx.Graph, face: list[int]) -> bool:
    size = len(face)
    for i, j in combinations(range(size), 2):
        if j - i in (1, size - 1):
            continue
        a, b = face[i], face[j]
        if a == b or graph.has_edge(a, b):
            continue
        graph.add_edge(a, b)
        if _is_planar(graph):
            return True
        graph.remove_edge(a, b)
    return False


def _triangulate(graph: nx.Graph) -> None:
    if graph.number_of_nodes() < 3:
        return
    changed = True
    while changed:
        changed = False
        embedding = _embedding(graph)
        visited: set[tuple[int, int]] = set()
        for v, w in list(embedding.edges()):
            if (v, w) in visited:
                continue
            face = embedding.traverse_face(v, w, mark_half_edges=visited)
            if len(face) > 3 and _add_chord(graph, face):
                changed = True
                break


def make_connected(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[Edge]:
    """Return the sorted edges of the graph with edges added to make it connected."""
    graph = _build_graph(vertex_count, edges)
    _embedding(graph)
    _connect(graph)
    return _sorted_edges(graph)


def make_biconnected(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[Edge]:
    """Return the sorted edges of a connected planar graph made biconnected, still planar."""
    graph = _build_graph(vertex_count, edges)
    _embedding(graph)
    _biconnect(graph)
    return _sorted_edges(graph)


def make_maximal_planar(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[Edge]:
    """Return the sorted edges of a biconnected planar graph triangulated to maximal planar."""
    graph = _build_graph(vertex_count, edges)
    _embedding(graph)
    _triangulate(graph)
    return _sorted_edges(graph)


def get_coordinates(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[tuple[int, int]]:
    """Return integer grid coordinates of a straight-line planar drawing, one per vertex."""
    graph = _build_graph(vertex_count, edges)
    embedding = _embedding(graph)
    positions = nx.combinatorial_embedding_to_pos(embedding)
    coordinates = [(int(positions[v][0]), int(positions[v][1])) for v in range(vertex_count)]
    _log.debug("straight line drawing: %s", coordinates)
    return coordinates


def rearrange_graph(vertex_count: int, edges: Iterable[Iterable[int]]) -> list[tuple[int, int]]:
    """Lay out a planar graph on a grid; raise NotPlanarError if it is not planar.

    Fewer than three vertices are placed at (0, 0) and (0, 1).
    """
    if vertex_count < 3:
        coordinates = [(0, 0)]
        if vertex_count == 2:
            coordinates.append((0, 1))
        return coordinates

    augmented = make_connected(vertex_count, list(edges))
    augmented = make_biconnected(vertex_count, augmented)
    augmented = make_maximal_planar(vertex_count, augmented)
    return get_coordinates(vertex_count, augmented)