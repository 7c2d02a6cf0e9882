"""
Business logic services
"""

from subway.services.station_service import StationService
from subway.services.line_service import LineService
from subway.services.path_service import PathService

__all__ = [
    "StationService",
    "LineService",
    "PathService",
]
