from typing import List
from pydantic import BaseModel, Field

from subway.models.domain import Line, Station

# service 별 응답 구조 정의


class StationResponse(BaseModel):
    id: int = Field(..., description="역 id")
    name: str = Field(..., description="역 이름")

    @classmethod
    def of(cls, station: Station) -> "StationResponse":
        return cls(id=station.id, name=station.name)


class SectionResponse(BaseModel):
    up_station: StationResponse = Field(..., description="상행역")
    down_station: StationResponse = Field(..., description="하행역")
    distance: int = Field(..., description="구간 거리")
    duration: int = Field(..., description="구간 소요시간")


# 노선 조회 응답 => 역 목록은 상행 종점부터 순서대로
class LineResponse(BaseModel):
    id: int = Field(..., description="노선 id")
    name: str = Field(..., description="노선 이름")
    color: str = Field(..., description="노선 색상")
    stations: List[StationResponse] = Field(default_factory=list, description="역 목록")
    sections: List[SectionResponse] = Field(default_factory=list, description="구간 목록")

    @classmethod
    def of(cls, line: Line) -> "LineResponse":
        return cls(
            id=line.id,
            name=line.name,
            color=line.color,
            stations=[StationResponse.of(s) for s in line.get_stations()],
            sections=[
                SectionResponse(
                    up_station=StationResponse.of(s.up_station),
                    down_station=StationResponse.of(s.down_station),
                    distance=s.distance,
                    duration=s.duration,
                )
                for s in line.get_sections()
            ],
        )


# 최단 경로 조회 응답
class PathResponse(BaseModel):
    stations: List[StationResponse] = Field(..., description="경로상의 역 순서")
    distance: int = Field(..., description="총 거리")
    duration: int = Field(..., description="총 소요시간")

