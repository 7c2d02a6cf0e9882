"""
pydantic models for 요청, 응답, 도메인 객체
"""


from subway.models.requests import (
    StationCreateRequest,
    LineCreateRequest,
    LineUpdateRequest,
    SectionCreateRequest,
)
from subway.models.responses import (
    StationResponse,
    SectionResponse,
    LineResponse,
    PathResponse,
)
from subway.models.domain import Station, Section, Line, PathFindType

__all__ = [
    "StationCreateRequest",
    "LineCreateRequest",
    "LineUpdateRequest",
    "SectionCreateRequest",
    "StationResponse",
    "SectionResponse",
    "LineResponse",
    "PathResponse",
    "Station",
    "Section",
    "Line",
    "PathFindType",
]
