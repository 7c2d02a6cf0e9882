"""
역 관리 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from subway.api.deps import get_station_service, to_http_exception
from subway.core.exceptions import SubwayException
from subway.models.requests import StationCreateRequest
from subway.models.responses import StationResponse
from subway.services.station_service import StationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=StationResponse, status_code=status.HTTP_201_CREATED)
async def create_station(
    request: StationCreateRequest,
    service: StationService = Depends(get_station_service),
):
    """
    역 등록

    Example:
        POST /v1/stations
        {"name": "강남역"}
    """
    try:
        station = service.create_station(request.name)
        return StationResponse.of(station)
    except SubwayException as e:
        logger.error(f"역 등록 실패: {e.message}")
        raise to_http_exception(e)


@router.get("", response_model=List[StationResponse])
async def get_stations(service: StationService = Depends(get_station_service)):
    """전체 역 목록 조회"""
    return [StationResponse.of(s) for s in service.get_stations()]


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_station(
    station_id: int,
    service: StationService = Depends(get_station_service),
):
    """
    역 삭제

    노선에 등록된 역은 삭제할 수 없음 (400)
    """
    try:
        service.delete_station(station_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except SubwayException as e:
        logger.error(f"역 삭제 실패: {e.message}")
        raise to_http_exception(e)
