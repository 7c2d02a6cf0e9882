"""
Line 도메인 테스트 (구간 등록/삭제, 역 목록 조회)
"""

import pytest

from subway.core.exceptions import InvalidArgumentException, InvalidSectionException
from subway.models.domain import Line, Station


def assert_simple_path(line):
    """역 중복 없음 + 인접한 두 역은 거리 > 0인 구간 하나로 연결"""
    stations = line.get_stations()
    sections = line.get_sections()

    assert len(stations) == len(set(stations))
    assert len(sections) == len(line.sections) == len(stations) - 1
    for (up, down), section in zip(zip(stations, stations[1:]), sections):
        assert section.up_station == up
        assert section.down_station == down
        assert section.distance > 0


class TestRegisterSection:
    """구간을 등록할 때"""

    def test_first_section(self, line, 강남역, 양재역):
        """빈 노선에는 첫 구간이 그대로 등록됨"""
        line.register_section(강남역, 양재역, 100)

        assert line.get_stations() == [강남역, 양재역]
        assert len(line.get_sections()) == 1

    def test_append_to_tail(self, line, 강남역, 양재역, 신사역):
        """구간 목록 마지막에 새로운 구간을 등록할 경우"""
        line.register_section(강남역, 양재역, 100)
        line.register_section(양재역, 신사역, 100)

        assert line.get_stations() == [강남역, 양재역, 신사역]
        assert_simple_path(line)

    def test_prepend_to_head(self, line, 강남역, 양재역, 신사역):
        """상행 종점 앞에 새로운 구간을 등록할 경우"""
        line.register_section(강남역, 양재역, 100)
        line.register_section(신사역, 강남역, 30)

        assert line.get_stations() == [신사역, 강남역, 양재역]
        assert line.get_sections()[0].distance == 30
        assert_simple_path(line)

    def test_split_by_up_station(self, line, 강남역, 양재역, 신사역):
        """구간 목록 사이에 새로운 구간을 등록할 경우 (상행역 기준)"""
        line.register_section(강남역, 양재역, 100)
        line.register_section(강남역, 신사역, 50)

        sections = line.get_sections()
        assert line.get_stations() == [강남역, 신사역, 양재역]
        assert [s.up_station.name for s in sections] == ["강남역", "신사역"]
        assert [s.down_station.name for s in sections] == ["신사역", "양재역"]
        assert [s.distance for s in sections] == [50, 50]

    def test_split_by_down_station(self, line, 강남역, 양재역, 신사역):
        """구간 목록 사이에 새로운 구간을 등록할 경우 (하행역 기준)"""
        line.register_section(강남역, 양재역, 100)
        line.register_section(신사역, 양재역, 30)

        sections = line.get_sections()
        assert line.get_stations() == [강남역, 신사역, 양재역]
        assert [s.distance for s in sections] == [70, 30]

    def test_split_keeps_duration(self, line, 강남역, 양재역, 신사역):
        """사이 구간 등록 시 남은 구간 소요시간 = 기존 - 신규"""
        line.register_section(강남역, 양재역, 100, 10)
        line.register_section(강남역, 신사역, 40, 4)

        assert [s.duration for s in line.get_sections()] == [4, 6]

    def test_split_in_middle_of_longer_line(self, three_station_line, 강남역, 양재역, 신사역, 잠실역):
        """중간 구간 분할"""
        three_station_line.register_section(양재역, 잠실역, 40)

        assert three_station_line.get_stations() == [강남역, 양재역, 잠실역, 신사역]
        assert [s.distance for s in three_station_line.get_sections()] == [100, 40, 60]
        assert_simple_path(three_station_line)

    def test_both_stations_registered(self, line, 강남역, 양재역):
        """추가하는 구간의 상행역과 하행역이 모두 기존 노선에 포함되어 있는 경우"""
        line.register_section(강남역, 양재역, 100)

        with pytest.raises(InvalidSectionException):
            line.register_section(강남역, 양재역, 50)

        with pytest.raises(InvalidSectionException):
            line.register_section(양재역, 강남역, 50)

    def test_neither_station_registered(self, line, 강남역, 양재역, 신사역, 잠실역):
        """추가하는 구간의 상행역과 하행역이 모두 기존 노선에 포함되어 있지 않은 경우"""
        line.register_section(강남역, 양재역, 100)

        with pytest.raises(InvalidSectionException):
            line.register_section(신사역, 잠실역, 100)

    @pytest.mark.parametrize(
        "existing_distance, new_distance",
        [(100, 100), (100, 101), (100, 100000)],
    )
    def test_split_not_shorter(self, line, 강남역, 양재역, 신사역, existing_distance, new_distance):
        """사이에 등록하는 구간이 기존 구간보다 같거나 긴 경우"""
        line.register_section(강남역, 양재역, existing_distance)

        with pytest.raises(InvalidSectionException):
            line.register_section(강남역, 신사역, new_distance)

        with pytest.raises(InvalidSectionException):
            line.register_section(신사역, 양재역, new_distance)

    def test_split_with_longer_duration(self, line, 강남역, 양재역, 신사역):
        """거리는 짧지만 소요시간이 더 긴 구간은 사이에 등록 불가"""
        line.register_section(강남역, 양재역, 100, 10)

        with pytest.raises(InvalidSectionException):
            line.register_section(강남역, 신사역, 50, 11)

    def test_rejected_registration_leaves_line_unchanged(self, three_station_line, 강남역, 신사역, 잠실역):
        """등록 실패 시 노선은 변경되지 않음"""
        before_sections = three_station_line.get_sections()

        with pytest.raises(InvalidArgumentException):
            three_station_line.register_section(강남역, 잠실역, 100)
        with pytest.raises(InvalidArgumentException):
            three_station_line.register_section(강남역, 신사역, 10)

        assert three_station_line.get_sections() == before_sections

    @pytest.mark.parametrize("distance", [0, -1])
    def test_non_positive_distance(self, line, 강남역, 양재역, distance):
        with pytest.raises(InvalidSectionException):
            line.register_section(강남역, 양재역, distance)

        assert line.get_stations() == []


class TestGetStations:
    """노선에 속해있는 역 목록 조회"""

    def test_empty_line(self, line):
        assert line.get_stations() == []
        assert line.get_sections() == []

    def test_ordered_from_head_to_tail(self, line, 강남역, 양재역, 신사역, 잠실역):
        """등록 순서와 관계없이 상행 종점부터 순서대로"""
        line.register_section(양재역, 신사역, 100)
        line.register_section(강남역, 양재역, 100)
        line.register_section(신사역, 잠실역, 100)
        line.register_section(강남역, Station(5, "논현역"), 10)

        assert [s.name for s in line.get_stations()] == [
            "강남역", "논현역", "양재역", "신사역", "잠실역",
        ]
        assert_simple_path(line)

    def test_read_is_idempotent(self, three_station_line):
        assert three_station_line.get_stations() == three_station_line.get_stations()
        assert three_station_line.get_sections() == three_station_line.get_sections()


class TestDeleteSection:
    """구간을 삭제할 때"""

    def test_delete_tail(self, three_station_line, 강남역, 양재역, 신사역):
        """구간 목록에서 마지막 역 삭제"""
        three_station_line.delete_section(신사역)

        sections = three_station_line.get_sections()
        assert len(sections) == 1
        assert three_station_line.get_stations() == [강남역, 양재역]

    def test_delete_head(self, three_station_line, 강남역, 양재역, 신사역):
        """구간 목록에서 상행종점역 삭제"""
        three_station_line.delete_section(강남역)

        sections = three_station_line.get_sections()
        assert len(sections) == 1
        assert sections[0].up_station == 양재역
        assert sections[0].down_station == 신사역

    def test_delete_interior(self, three_station_line, 강남역, 양재역, 신사역):
        """구간 목록에서 가운데역 삭제 => 앞뒤 구간 병합"""
        three_station_line.delete_section(양재역)

        sections = three_station_line.get_sections()
        assert len(sections) == 1
        assert sections[0].distance == 200
        assert sections[0].duration == 30
        assert sections[0].up_station == 강남역
        assert sections[0].down_station == 신사역

    def test_single_section_line(self, line, 강남역, 양재역):
        """구간이 하나인 노선에선 구간 제거가 안된다"""
        line.register_section(강남역, 양재역, 100)

        with pytest.raises(InvalidSectionException):
            line.delete_section(양재역)
        with pytest.raises(InvalidSectionException):
            line.delete_section(강남역)

        assert line.get_stations() == [강남역, 양재역]

    def test_station_not_in_line(self, line, 강남역, 양재역, 신사역, 잠실역):
        """구간에 포함되지 않은 역은 제거가 안된다"""
        line.register_section(강남역, 양재역, 100)
        line.register_section(양재역, 잠실역, 100)

        with pytest.raises(InvalidSectionException):
            line.delete_section(신사역)

        assert line.get_stations() == [강남역, 양재역, 잠실역]

    def test_register_and_delete_sequence(self, line, 강남역, 양재역, 신사역, 잠실역):
        """등록/삭제를 반복해도 단순 경로 유지"""
        논현역 = Station(5, "논현역")
        line.register_section(강남역, 양재역, 100)
        line.register_section(양재역, 신사역, 100)
        line.register_section(강남역, 잠실역, 40)
        line.register_section(논현역, 강남역, 10)
        assert_simple_path(line)

        line.delete_section(잠실역)
        assert_simple_path(line)
        assert [s.distance for s in line.get_sections()] == [10, 100, 100]

        line.delete_section(논현역)
        line.delete_section(신사역)
        assert line.get_stations() == [강남역, 양재역]
        assert_simple_path(line)


class TestLineAttributes:
    def test_update(self, line):
        line.update("신분당선", "bg-red-600")

        assert line.name == "신분당선"
        assert line.color == "bg-red-600"

    def test_contains(self, three_station_line, 양재역, 잠실역):
        assert three_station_line.contains(양재역)
        assert not three_station_line.contains(잠실역)

    def test_sections_snapshot_not_affected_by_mutation(self, three_station_line, 양재역):
        """변경 전 snapshot은 이후 변경의 영향을 받지 않음"""
        snapshot = three_station_line.sections

        three_station_line.delete_section(양재역)

        assert len(snapshot) == 2
        assert len(three_station_line.sections) == 1
