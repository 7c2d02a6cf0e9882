"""
그래프 생성 + Dijkstra 최단 경로 탐색
"""

from subway.algorithms.graph_builder import SubwayGraph, Edge, build_graph
from subway.algorithms.dijkstra import PathFinder, PathResult

__all__ = [
    "SubwayGraph",
    "Edge",
    "build_graph",
    "PathFinder",
    "PathResult",
]
