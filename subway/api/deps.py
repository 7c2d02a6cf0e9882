from functools import lru_cache

from fastapi import HTTPException, status

from subway.core.exceptions import NotFoundException, SubwayException
from subway.services.line_service import LineService
from subway.services.path_service import PathService
from subway.services.station_service import StationService


# lru_cache 사용하여 싱글톤 패턴과 유사한 효과, 의존성 주입
@lru_cache()
def get_station_service() -> StationService:
    return StationService()


@lru_cache()
def get_line_service() -> LineService:
    return LineService(station_service=get_station_service())


@lru_cache()
def get_path_service() -> PathService:
    return PathService(station_service=get_station_service())


def to_http_exception(e: SubwayException) -> HTTPException:
    """
    도메인 예외 => HTTP 응답 변환
    NotFound 계열은 404, 나머지(InvalidArgument 계열)는 400
    """
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(e, NotFoundException)
        else status.HTTP_400_BAD_REQUEST
    )
    return HTTPException(
        status_code=status_code, detail={"message": e.message, "code": e.code}
    )
