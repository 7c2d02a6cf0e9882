"""
Pytest 설정 및 공통 Fixture
"""

import pytest
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from subway.db.repository import LineRepository, StationRepository, reset_repositories
from subway.models.domain import Line, Station
from subway.services.line_service import LineService
from subway.services.path_service import PathService
from subway.services.station_service import StationService


@pytest.fixture
def 강남역():
    return Station(1, "강남역")


@pytest.fixture
def 양재역():
    return Station(2, "양재역")


@pytest.fixture
def 신사역():
    return Station(3, "신사역")


@pytest.fixture
def 잠실역():
    return Station(4, "잠실역")


@pytest.fixture
def line():
    """구간이 없는 노선 (생성 직후)"""
    return Line(name="2호선", color="bg-green-600", id=1)


@pytest.fixture
def three_station_line(line, 강남역, 양재역, 신사역):
    """강남역 - 양재역 - 신사역 (거리 100, 100 / 소요시간 10, 20)"""
    line.register_section(강남역, 양재역, 100, 10)
    line.register_section(양재역, 신사역, 100, 20)
    return line


@pytest.fixture
def station_repository():
    return StationRepository()


@pytest.fixture
def line_repository():
    return LineRepository()


@pytest.fixture
def station_service(station_repository, line_repository):
    return StationService(station_repository, line_repository)


@pytest.fixture
def line_service(station_service, line_repository):
    return LineService(station_service, line_repository)


@pytest.fixture
def path_service(station_service, line_repository):
    return PathService(station_service, line_repository)


@pytest.fixture
def sample_network(station_service, line_service):
    """
    테스트용 샘플 노선도

    교대역 --- 2호선(10, 3) --- 강남역
      |                          |
    3호선(2, 10)             신분당선(10, 5)
      |                          |
    남부터미널역 --- 3호선(3, 10) --- 양재역

    거리 기준: 교대 → 양재 = 교대-남부터미널-양재 (5)
    시간 기준: 교대 → 양재 = 교대-강남-양재 (8)
    """
    교대역 = station_service.create_station("교대역")
    강남역 = station_service.create_station("강남역")
    양재역 = station_service.create_station("양재역")
    남부터미널역 = station_service.create_station("남부터미널역")

    이호선 = line_service.create_line("2호선", "green", 교대역.id, 강남역.id, 10, 3)
    신분당선 = line_service.create_line("신분당선", "red", 강남역.id, 양재역.id, 10, 5)
    삼호선 = line_service.create_line("3호선", "orange", 교대역.id, 남부터미널역.id, 2, 10)
    line_service.register_section(삼호선.id, 남부터미널역.id, 양재역.id, 3, 10)

    return {
        "stations": {
            "교대역": 교대역,
            "강남역": 강남역,
            "양재역": 양재역,
            "남부터미널역": 남부터미널역,
        },
        "lines": {"2호선": 이호선, "신분당선": 신분당선, "3호선": 삼호선},
    }


@pytest.fixture
def reset_global_repositories():
    """API 테스트용 전역 저장소 초기화"""
    reset_repositories()
    yield
    reset_repositories()
