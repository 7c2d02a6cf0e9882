# 최단 경로 조회 서비스

import logging
import time
import json
from typing import Any, Dict, Optional, Union

from subway.algorithms.dijkstra import PathFinder
from subway.algorithms.graph_builder import build_graph
from subway.core.config import settings
from subway.core.exceptions import (
    InvalidArgumentException,
    NotFoundException,
)
from subway.db.repository import LineRepository, get_line_repository
from subway.models.domain import PathFindType
from subway.services.station_service import StationService

logger = logging.getLogger(__name__)


class PathService:

    def __init__(
        self,
        station_service: Optional[StationService] = None,
        line_repository: Optional[LineRepository] = None,
    ):
        self.lines = line_repository or get_line_repository()
        self.station_service = station_service or StationService(
            line_repository=self.lines
        )
        self.finder = PathFinder()
        logger.info("PathService 초기화 완료")

    def find_shortest_path(
        self,
        source_id: int,
        target_id: int,
        path_find_type: Union[PathFindType, str] = PathFindType.DISTANCE,
    ) -> Dict[str, Any]:
        """
        최단 경로 조회

        요청마다 전체 노선으로 그래프를 새로 만들어 탐색한다

        Args:
            source_id: 출발역 id
            target_id: 도착역 id
            path_find_type: 조회 기준 (DISTANCE/DURATION)

        Returns:
            {"stations": [...], "distance": int, "duration": int}
            distance/duration 모두 선택된 경로를 따라 합산한 값

        Raises:
            InvalidPathFindTypeException: 지원하지 않는 조회 기준
            SameStationPathException: 출발역과 도착역이 같을 때
            StationNotFoundException: 역이 없거나 어떤 노선에도 속하지 않을 때
            PathNotFoundException: 경로가 없을 때
        """
        start_time = time.time()

        try:
            find_type = PathFindType.from_value(path_find_type)
            source = self.station_service.find_station(source_id)
            target = self.station_service.find_station(target_id)

            logger.info(
                f"경로 조회 요청: {source.name}({source.id}) → "
                f"{target.name}({target.id}), 기준={find_type.value}"
            )

            graph = build_graph(self.lines.find_all(), find_type)
            path = self.finder.find_path(graph, source, target)

            result = {
                "stations": [
                    {"id": station.id, "name": station.name}
                    for station in path.stations
                ],
                "distance": path.distance,
                "duration": path.duration,
            }

            elapsed_time = time.time() - start_time
            logger.info(
                f"경로 조회 완료: {source.name} → {target.name}, "
                f"역={len(path.stations)}개, 거리={path.distance}, "
                f"소요시간={path.duration}, 응답시간={elapsed_time*1000:.1f}ms"
            )

            self._log_path_metrics(
                response_time_ms=elapsed_time * 1000,
                source=source.name,
                target=target.name,
                path_find_type=find_type.value,
                station_count=len(path.stations),
                graph_edges=graph.edge_count,
            )
            return result

        except (InvalidArgumentException, NotFoundException) as e:
            logger.error(f"경로 조회 실패: {e.message}")
            raise
        except Exception as e:
            logger.error(f"경로 조회 오류: {e}", exc_info=True)
            raise

    def _log_path_metrics(
        self,
        response_time_ms: float,
        source: str,
        target: str,
        path_find_type: str,
        station_count: Optional[int] = None,
        graph_edges: Optional[int] = None,
    ) -> None:
        """
        경로 조회 메트릭 로깅 => 로그 수집기에서 분석
        """
        if not settings.ENABLE_PATH_METRICS:
            return

        metrics = {
            "event": "path_query",
            "response_time_ms": round(response_time_ms, 2),
            "source": source,
            "target": target,
            "path_find_type": path_find_type,
        }

        if station_count is not None:
            metrics["station_count"] = station_count

        if graph_edges is not None:
            metrics["graph_edges"] = graph_edges

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
