"""
Core 설정 및 utilities, 커스텀 예외
"""

from subway.core.config import settings

from subway.core.exceptions import (
    SubwayException,
    InvalidArgumentException,
    NotFoundException,
    InvalidSectionException,
    DuplicateNameException,
    StationInUseException,
    SameStationPathException,
    InvalidPathFindTypeException,
    StationNotFoundException,
    LineNotFoundException,
    PathNotFoundException,
)

__all__ = [
    "settings",
    "SubwayException",
    "InvalidArgumentException",
    "NotFoundException",
    "InvalidSectionException",
    "DuplicateNameException",
    "StationInUseException",
    "SameStationPathException",
    "InvalidPathFindTypeException",
    "StationNotFoundException",
    "LineNotFoundException",
    "PathNotFoundException",
]
