# 경로 조회용 그래프 생성
# 조회 요청마다 새로 만들고 버림 => 캐싱 X

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set

from subway.models.domain import Line, PathFindType, Section, Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    target: Station
    weight: int
    section: Section  # 결과에 거리/소요시간 합계를 모두 제공하기 위해 보관


class SubwayGraph:
    """
    역을 정점, 구간을 간선으로 하는 가중치 그래프

    구간 하나당 양방향 간선 한 쌍을 추가하며, 같은 역 쌍을 잇는 구간이
    여러 노선에 있어도 중복 제거하지 않는다
    """

    def __init__(self, path_find_type: PathFindType):
        self.path_find_type = path_find_type
        self._adjacency: Dict[Station, List[Edge]] = defaultdict(list)
        self.edge_count = 0

    def add_section(self, section: Section) -> None:
        weight = self.path_find_type.weight_of(section)
        self._adjacency[section.up_station].append(
            Edge(section.down_station, weight, section)
        )
        self._adjacency[section.down_station].append(
            Edge(section.up_station, weight, section)
        )
        self.edge_count += 1

    def has_station(self, station: Station) -> bool:
        return station in self._adjacency

    def neighbors(self, station: Station) -> List[Edge]:
        return self._adjacency.get(station, [])

    @property
    def stations(self) -> Set[Station]:
        return set(self._adjacency)


def build_graph(lines: Iterable[Line], path_find_type: PathFindType) -> SubwayGraph:
    """
    모든 노선의 구간을 하나의 그래프로 펼치기

    Args:
        lines: 전체 노선
        path_find_type: 간선 가중치 기준 (DISTANCE/DURATION)

    Returns:
        SubwayGraph
    """
    graph = SubwayGraph(path_find_type)

    line_count = 0
    for line in lines:
        # line.sections => 변경 전/후 snapshot 중 하나
        for section in line.sections:
            graph.add_section(section)
        line_count += 1

    logger.debug(
        f"그래프 생성 완료: 노선={line_count}개, 역={len(graph.stations)}개, "
        f"구간={graph.edge_count}개, 기준={path_find_type.value}"
    )
    return graph
