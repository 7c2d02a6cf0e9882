# 역 관리 서비스

import logging
from typing import List, Optional

from subway.core.exceptions import (
    DuplicateNameException,
    StationInUseException,
    StationNotFoundException,
)
from subway.db.repository import (
    LineRepository,
    StationRepository,
    get_line_repository,
    get_station_repository,
)
from subway.models.domain import Station

logger = logging.getLogger(__name__)


class StationService:
    def __init__(
        self,
        station_repository: Optional[StationRepository] = None,
        line_repository: Optional[LineRepository] = None,
    ):
        self.stations = station_repository or get_station_repository()
        self.lines = line_repository or get_line_repository()

    def create_station(self, name: str) -> Station:
        if self.stations.find_by_name(name) is not None:
            raise DuplicateNameException(f"이미 등록된 역 이름입니다: {name}")

        station = self.stations.save(name)
        logger.info(f"역 등록: {station.name}({station.id})")
        return station

    def get_stations(self) -> List[Station]:
        return self.stations.find_all()

    def find_station(self, station_id: int) -> Station:
        """
        Raises:
            StationNotFoundException: 등록되지 않은 역 id
        """
        station = self.stations.find_by_id(station_id)
        if station is None:
            raise StationNotFoundException(f"역을 찾을 수 없습니다: id={station_id}")
        return station

    def delete_station(self, station_id: int) -> None:
        """
        역 삭제

        노선 소속 확인 ~ 삭제 사이에 구간 등록이 끼어들지 않도록 membership Lock 사용
        """
        with self.stations.lock_membership():
            station = self.find_station(station_id)

            in_use = [
                line.name for line in self.lines.find_all() if line.contains(station)
            ]
            if in_use:
                raise StationInUseException(
                    f"노선에 등록된 역은 삭제할 수 없습니다: {station.name} "
                    f"(노선={', '.join(in_use)})"
                )

            self.stations.delete(station_id)
        logger.info(f"역 삭제: {station.name}({station.id})")
