from enum import Enum
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from subway.core.exceptions import (
    InvalidSectionException,
    InvalidPathFindTypeException,
)

# domain 정의


@dataclass(frozen=True)
class Station:
    id: int  # 내부 연산은 id로 통일
    name: str


@dataclass(frozen=True)
class Section:
    """
    두 역 사이의 구간 (불변)

    구간 분할, 병합 시에도 필드를 수정하지 않고 새로운 Section을 생성한다
    """

    up_station: Station
    down_station: Station
    distance: int
    duration: int = 0

    def __post_init__(self):
        if self.up_station == self.down_station:
            raise InvalidSectionException("상행역과 하행역이 같을 수 없습니다")
        if self.distance <= 0:
            raise InvalidSectionException(
                f"구간 거리는 0보다 커야 합니다: {self.distance}"
            )
        if self.duration < 0:
            raise InvalidSectionException(
                f"구간 소요시간은 0 이상이어야 합니다: {self.duration}"
            )

    def split(self, inner: "Section") -> "Section":
        """
        inner 구간을 떼어내고 남은 구간 반환

        inner는 self와 상행역 또는 하행역을 공유해야 하며 거리가 더 짧아야 함
        """
        if self.distance <= inner.distance:
            raise InvalidSectionException(
                f"기존 구간보다 짧은 구간만 사이에 등록할 수 있습니다 "
                f"(기존={self.distance}, 신규={inner.distance})"
            )
        if self.duration < inner.duration:
            raise InvalidSectionException(
                f"기존 구간보다 소요시간이 긴 구간은 사이에 등록할 수 없습니다 "
                f"(기존={self.duration}, 신규={inner.duration})"
            )

        distance = self.distance - inner.distance
        duration = self.duration - inner.duration

        if inner.up_station == self.up_station:
            # A-B 사이에 A-C 등록 => 남은 구간 C-B
            return Section(inner.down_station, self.down_station, distance, duration)

        # A-B 사이에 C-B 등록 => 남은 구간 A-C
        return Section(self.up_station, inner.up_station, distance, duration)

    def merge(self, lower: "Section") -> "Section":
        """A-B, B-C 두 구간을 A-C 하나로 병합"""
        return Section(
            self.up_station,
            lower.down_station,
            self.distance + lower.distance,
            self.duration + lower.duration,
        )


@dataclass
class Line:
    """
    지하철 노선

    구간들은 순서 없이 보관하고, 조회 시 상행 종점부터 구간을 따라가며 순서를 복원한다.
    구간 변경은 새로운 tuple을 만들어 한 번에 교체 => 읽는 쪽은 항상 변경 전/후 중 하나만 본다
    """

    name: str
    color: str
    id: Optional[int] = None
    _sections: Tuple[Section, ...] = field(default=(), repr=False)

    @property
    def sections(self) -> Tuple[Section, ...]:
        """현재 구간 snapshot (순서 보장 X)"""
        return self._sections

    def update(self, name: str, color: str) -> None:
        self.name = name
        self.color = color

    def register_section(
        self,
        up_station: Station,
        down_station: Station,
        distance: int,
        duration: int = 0,
    ) -> None:
        """
        구간 등록

        - 빈 노선: 첫 구간으로 등록
        - 상행역/하행역이 모두 노선에 있거나 모두 없으면 등록 불가
        - 기존 구간과 상행역(또는 하행역)이 같으면 기존 구간을 분할
        - 그 외에는 상행 종점 앞 또는 하행 종점 뒤에 연장

        Raises:
            InvalidSectionException: 등록 조건을 만족하지 않을 때 (노선은 변경되지 않음)
        """
        new_section = Section(up_station, down_station, distance, duration)

        if not self._sections:
            self._sections = (new_section,)
            return

        stations = set(self.get_stations())
        has_up = up_station in stations
        has_down = down_station in stations

        if has_up and has_down:
            raise InvalidSectionException(
                f"상행역과 하행역이 이미 노선에 모두 등록되어 있습니다: "
                f"{up_station.name}, {down_station.name}"
            )

        if not has_up and not has_down:
            raise InvalidSectionException(
                f"상행역과 하행역 둘 중 하나는 노선에 포함되어 있어야 합니다: "
                f"{up_station.name}, {down_station.name}"
            )

        target = self._find_split_target(new_section)

        if target is None:
            # 종점 연장
            self._sections = self._sections + (new_section,)
            return

        remainder = target.split(new_section)
        self._sections = tuple(
            s for s in self._sections if s is not target
        ) + (new_section, remainder)

    def delete_section(self, station: Station) -> None:
        """
        역 제거

        - 상행/하행 종점이면 해당 구간 제거
        - 중간역이면 앞뒤 구간을 하나로 병합 (거리, 소요시간 합산)

        Raises:
            InvalidSectionException: 구간이 하나뿐이거나 노선에 없는 역일 때
        """
        if len(self._sections) <= 1:
            raise InvalidSectionException("구간이 하나인 노선은 구간을 제거할 수 없습니다")

        upper = next((s for s in self._sections if s.down_station == station), None)
        lower = next((s for s in self._sections if s.up_station == station), None)

        if upper is None and lower is None:
            raise InvalidSectionException(f"노선에 포함되지 않은 역입니다: {station.name}")

        remaining = tuple(
            s for s in self._sections if s is not upper and s is not lower
        )

        if upper is not None and lower is not None:
            remaining = remaining + (upper.merge(lower),)

        self._sections = remaining

    def get_sections(self) -> List[Section]:
        """상행 종점 -> 하행 종점 순서의 구간 목록"""
        sections = self._sections
        if not sections:
            return []

        by_up: Dict[Station, Section] = {s.up_station: s for s in sections}
        down_stations = {s.down_station for s in sections}

        # 상행 종점 => 어떤 구간의 하행역도 아닌 역
        head = next(s.up_station for s in sections if s.up_station not in down_stations)

        ordered = []
        current = by_up.get(head)
        while current is not None:
            ordered.append(current)
            current = by_up.get(current.down_station)

        return ordered

    def get_stations(self) -> List[Station]:
        """상행 종점 -> 하행 종점 순서의 역 목록"""
        ordered = self.get_sections()
        if not ordered:
            return []

        return [ordered[0].up_station] + [s.down_station for s in ordered]

    def contains(self, station: Station) -> bool:
        return any(
            station in (s.up_station, s.down_station) for s in self._sections
        )

    def _find_split_target(self, new_section: Section) -> Optional[Section]:
        """상행역 또는 하행역을 공유하는 기존 구간 (단순 경로이므로 최대 1개)"""
        return next(
            (
                s
                for s in self._sections
                if s.up_station == new_section.up_station
                or s.down_station == new_section.down_station
            ),
            None,
        )


class PathFindType(str, Enum):
    """경로 조회 기준"""

    DISTANCE = "DISTANCE"
    DURATION = "DURATION"

    def weight_of(self, section: Section) -> int:
        if self is PathFindType.DURATION:
            return section.duration
        return section.distance

    @classmethod
    def from_value(cls, value) -> "PathFindType":
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidPathFindTypeException(
                f"지원하지 않는 경로 조회 기준입니다: {value} "
                f"(지원: {', '.join(t.value for t in cls)})"
            )
