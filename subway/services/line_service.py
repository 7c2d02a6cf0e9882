# 노선 및 구간 관리 서비스

import logging
from typing import List, Optional

from subway.core.exceptions import DuplicateNameException, LineNotFoundException
from subway.db.repository import LineRepository, get_line_repository
from subway.models.domain import Line
from subway.services.station_service import StationService

logger = logging.getLogger(__name__)


class LineService:
    def __init__(
        self,
        station_service: Optional[StationService] = None,
        line_repository: Optional[LineRepository] = None,
    ):
        self.lines = line_repository or get_line_repository()
        self.station_service = station_service or StationService(
            line_repository=self.lines
        )

    def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
        duration: int = 0,
    ) -> Line:
        """
        노선 생성 + 첫 구간 등록

        첫 구간이 유효하지 않으면 노선도 저장하지 않음 (구간 없는 노선은 생성 직후에만 존재)
        """
        if self.lines.find_by_name(name) is not None:
            raise DuplicateNameException(f"이미 등록된 노선 이름입니다: {name}")

        with self.station_service.stations.lock_membership():
            up_station = self.station_service.find_station(up_station_id)
            down_station = self.station_service.find_station(down_station_id)

            line = Line(name=name, color=color)
            line.register_section(up_station, down_station, distance, duration)

            self.lines.save(line)

        logger.info(
            f"노선 등록: {line.name}({line.id}), "
            f"{up_station.name} → {down_station.name}, 거리={distance}"
        )
        return line

    def get_lines(self) -> List[Line]:
        return self.lines.find_all()

    def find_line(self, line_id: int) -> Line:
        """
        Raises:
            LineNotFoundException: 등록되지 않은 노선 id
        """
        line = self.lines.find_by_id(line_id)
        if line is None:
            raise LineNotFoundException(f"노선을 찾을 수 없습니다: id={line_id}")
        return line

    def update_line(self, line_id: int, name: str, color: str) -> Line:
        duplicated = self.lines.find_by_name(name)
        if duplicated is not None and duplicated.id != line_id:
            raise DuplicateNameException(f"이미 등록된 노선 이름입니다: {name}")

        with self.lines.lock_line(line_id) as line:
            line.update(name, color)

        logger.info(f"노선 수정: {line.name}({line.id}), color={line.color}")
        return line

    def delete_line(self, line_id: int) -> None:
        # 진행 중인 구간 변경이 끝난 뒤 삭제
        with self.lines.lock_line(line_id) as line:
            self.lines.delete(line_id)

        logger.info(f"노선 삭제: {line.name}({line.id})")

    def register_section(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
        duration: int = 0,
    ) -> Line:
        """
        노선에 구간 등록

        Raises:
            LineNotFoundException: 노선이 없을 때
            StationNotFoundException: 역이 없을 때
            InvalidSectionException: 구간 등록 조건 위반
        """
        # 역 조회 ~ 등록까지 역 삭제와 겹치지 않도록 membership Lock 유지
        with self.station_service.stations.lock_membership():
            up_station = self.station_service.find_station(up_station_id)
            down_station = self.station_service.find_station(down_station_id)

            with self.lines.lock_line(line_id) as line:
                line.register_section(up_station, down_station, distance, duration)

        logger.info(
            f"구간 등록: {line.name}, {up_station.name} → {down_station.name}, "
            f"거리={distance}, 소요시간={duration}"
        )
        logger.debug(f"{line.name} 역 목록: {[s.name for s in line.get_stations()]}")
        return line

    def delete_section(self, line_id: int, station_id: int) -> Line:
        """
        노선에서 역 제거

        Raises:
            LineNotFoundException: 노선이 없을 때
            StationNotFoundException: 역이 없을 때
            InvalidSectionException: 구간이 하나뿐이거나 노선에 없는 역
        """
        station = self.station_service.find_station(station_id)

        with self.lines.lock_line(line_id) as line:
            line.delete_section(station)

        logger.info(f"구간 삭제: {line.name}, 역={station.name}")
        return line
