"""
in-memory 저장소
Thread Lock으로 등록/삭제를 보호하고, 노선마다 별도 Lock을 두어
같은 노선의 구간 변경이 동시에 일어나지 않도록 직렬화
=> 영속성 계층은 범위 밖이므로 프로세스 메모리에만 유지
"""

import itertools
import logging
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Iterator, List, Optional

from subway.core.exceptions import LineNotFoundException
from subway.models.domain import Line, Station

logger = logging.getLogger(__name__)


class StationRepository:
    def __init__(self):
        self._lock = Lock()
        # 역 삭제와 구간 등록 사이의 노선 소속 여부 확인을 원자적으로 처리
        self._membership_lock = Lock()
        self._ids = itertools.count(1)
        self._stations: Dict[int, Station] = {}  # {station_id: Station}

    def save(self, name: str) -> Station:
        with self._lock:
            station = Station(id=next(self._ids), name=name)
            self._stations[station.id] = station
        return station

    def find_by_id(self, station_id: int) -> Optional[Station]:
        return self._stations.get(station_id)

    def find_by_name(self, name: str) -> Optional[Station]:
        return next((s for s in self.find_all() if s.name == name), None)

    def find_all(self) -> List[Station]:
        with self._lock:
            return list(self._stations.values())

    def delete(self, station_id: int) -> bool:
        with self._lock:
            return self._stations.pop(station_id, None) is not None

    @contextmanager
    def lock_membership(self) -> Iterator[None]:
        """역의 노선 소속 변경(구간 등록 / 역 삭제) 직렬화"""
        with self._membership_lock:
            yield

    def clear(self) -> None:
        with self._lock:
            self._stations.clear()
            self._ids = itertools.count(1)


class LineRepository:
    def __init__(self):
        self._lock = Lock()
        self._ids = itertools.count(1)
        self._lines: Dict[int, Line] = {}  # {line_id: Line}
        self._line_locks: Dict[int, Lock] = {}  # {line_id: 구간 변경 Lock}

    def save(self, line: Line) -> Line:
        with self._lock:
            if line.id is None:
                line.id = next(self._ids)
            self._lines[line.id] = line
            self._line_locks.setdefault(line.id, Lock())
        return line

    def find_by_id(self, line_id: int) -> Optional[Line]:
        return self._lines.get(line_id)

    def find_by_name(self, name: str) -> Optional[Line]:
        return next((line for line in self.find_all() if line.name == name), None)

    def find_all(self) -> List[Line]:
        with self._lock:
            return list(self._lines.values())

    def delete(self, line_id: int) -> bool:
        with self._lock:
            self._line_locks.pop(line_id, None)
            return self._lines.pop(line_id, None) is not None

    @contextmanager
    def lock_line(self, line_id: int) -> Iterator[Line]:
        """
        노선 하나의 변경 구간을 직렬화하고, Lock을 잡은 상태에서 조회한 노선 반환

        Raises:
            LineNotFoundException: 없는 노선이거나 Lock 대기 중 삭제된 노선
        """
        with self._lock:
            line_lock = self._line_locks.get(line_id)

        if line_lock is None:
            raise LineNotFoundException(f"노선을 찾을 수 없습니다: id={line_id}")

        with line_lock:
            line = self._lines.get(line_id)
            if line is None:
                raise LineNotFoundException(f"노선을 찾을 수 없습니다: id={line_id}")
            yield line

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()
            self._line_locks.clear()
            self._ids = itertools.count(1)


# 모든 서비스가 동일한 저장소 인스턴스 참조 (싱글톤)
_station_repository = StationRepository()
_line_repository = LineRepository()


def get_station_repository() -> StationRepository:
    return _station_repository


def get_line_repository() -> LineRepository:
    return _line_repository


def reset_repositories() -> None:
    """저장소 초기화 (테스트용)"""
    _station_repository.clear()
    _line_repository.clear()
    logger.info("저장소 초기화 완료")
