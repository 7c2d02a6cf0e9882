from subway.db.repository import (
    StationRepository,
    LineRepository,
    get_station_repository,
    get_line_repository,
    reset_repositories,
)

__all__ = [
    "StationRepository",
    "LineRepository",
    "get_station_repository",
    "get_line_repository",
    "reset_repositories",
]
