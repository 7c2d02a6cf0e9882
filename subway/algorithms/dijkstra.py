# 최단 경로 탐색 (Dijkstra)
import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from subway.algorithms.graph_builder import SubwayGraph
from subway.core.exceptions import (
    PathNotFoundException,
    SameStationPathException,
    StationNotFoundException,
)
from subway.models.domain import Section, Station

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    stations: List[Station]
    sections: List[Section]
    total_weight: int

    @property
    def distance(self) -> int:
        return sum(s.distance for s in self.sections)

    @property
    def duration(self) -> int:
        return sum(s.duration for s in self.sections)


class PathFinder:
    """
    우선순위 큐 기반 Dijkstra

    가중치는 항상 0 이상 (distance > 0, duration >= 0)
    동일 가중치 경로가 여러 개면 역 id 순서가 사전순으로 가장 작은 경로 선택
    => heap key를 (누적 가중치, 역 id 경로)로 두어 결정적으로 처리
    """

    def find_path(
        self, graph: SubwayGraph, source: Station, target: Station
    ) -> PathResult:
        """
        Args:
            graph: build_graph로 만든 그래프
            source: 출발역
            target: 도착역

        Raises:
            SameStationPathException: 출발역과 도착역이 같을 때
            StationNotFoundException: 그래프에 없는 역 (어떤 노선에도 속하지 않음)
            PathNotFoundException: 두 역이 연결되어 있지 않을 때
        """
        if source == target:
            raise SameStationPathException(
                f"출발역과 도착역이 같습니다: {source.name}"
            )

        for station in (source, target):
            if not graph.has_station(station):
                raise StationNotFoundException(
                    f"노선에 등록되지 않은 역입니다: {station.name}"
                )

        # heap item => (가중치, 역 id 경로, 순번, 역 경로, 구간 경로)
        # 평행 구간은 가중치와 id 경로가 같을 수 있음 => 순번으로 비교 종료
        counter = itertools.count()
        heap: List[Tuple] = [(0, (source.id,), next(counter), (source,), ())]
        settled: Dict[Station, int] = {}

        while heap:
            weight, id_path, _, station_path, section_path = heapq.heappop(heap)
            current = station_path[-1]

            if current in settled:
                continue
            settled[current] = weight

            if current == target:
                logger.debug(
                    f"경로 탐색 완료: {source.name} → {target.name}, "
                    f"가중치={weight}, 방문={len(settled)}개 역"
                )
                return PathResult(list(station_path), list(section_path), weight)

            for edge in graph.neighbors(current):
                if edge.target in settled:
                    continue
                heapq.heappush(
                    heap,
                    (
                        weight + edge.weight,
                        id_path + (edge.target.id,),
                        next(counter),
                        station_path + (edge.target,),
                        section_path + (edge.section,),
                    ),
                )

        raise PathNotFoundException(
            f"{source.name}에서 {target.name}까지 연결된 경로가 없습니다"
        )
