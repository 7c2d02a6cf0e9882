"""
노선 및 구간 관리 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import List
import logging

from subway.api.deps import get_line_service, to_http_exception
from subway.core.exceptions import SubwayException
from subway.models.requests import (
    LineCreateRequest,
    LineUpdateRequest,
    SectionCreateRequest,
)
from subway.models.responses import LineResponse
from subway.services.line_service import LineService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=LineResponse, status_code=status.HTTP_201_CREATED)
async def create_line(
    request: LineCreateRequest,
    service: LineService = Depends(get_line_service),
):
    """
    노선 생성 (첫 구간 포함)

    Example:
        POST /v1/lines
        {
            "name": "신분당선",
            "color": "bg-red-600",
            "up_station_id": 1,
            "down_station_id": 2,
            "distance": 10,
            "duration": 5
        }
    """
    try:
        line = service.create_line(
            name=request.name,
            color=request.color,
            up_station_id=request.up_station_id,
            down_station_id=request.down_station_id,
            distance=request.distance,
            duration=request.duration,
        )
        return LineResponse.of(line)
    except SubwayException as e:
        logger.error(f"노선 생성 실패: {e.message}")
        raise to_http_exception(e)


@router.get("", response_model=List[LineResponse])
async def get_lines(service: LineService = Depends(get_line_service)):
    """전체 노선 목록 조회"""
    return [LineResponse.of(line) for line in service.get_lines()]


@router.get("/{line_id}", response_model=LineResponse)
async def get_line(line_id: int, service: LineService = Depends(get_line_service)):
    """노선 조회 (역 목록은 상행 종점부터)"""
    try:
        return LineResponse.of(service.find_line(line_id))
    except SubwayException as e:
        raise to_http_exception(e)


@router.put("/{line_id}", response_model=LineResponse)
async def update_line(
    line_id: int,
    request: LineUpdateRequest,
    service: LineService = Depends(get_line_service),
):
    try:
        line = service.update_line(line_id, request.name, request.color)
        return LineResponse.of(line)
    except SubwayException as e:
        logger.error(f"노선 수정 실패: {e.message}")
        raise to_http_exception(e)


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_line(line_id: int, service: LineService = Depends(get_line_service)):
    try:
        service.delete_line(line_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except SubwayException as e:
        logger.error(f"노선 삭제 실패: {e.message}")
        raise to_http_exception(e)


@router.post(
    "/{line_id}/sections",
    response_model=LineResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_section(
    line_id: int,
    request: SectionCreateRequest,
    service: LineService = Depends(get_line_service),
):
    """
    구간 등록

    - 기존 구간 사이에 등록할 경우 기존 구간보다 짧아야 함
    - 상행역/하행역 중 정확히 하나만 노선에 포함되어 있어야 함

    Example:
        POST /v1/lines/1/sections
        {"up_station_id": 2, "down_station_id": 3, "distance": 10}
    """
    try:
        line = service.register_section(
            line_id=line_id,
            up_station_id=request.up_station_id,
            down_station_id=request.down_station_id,
            distance=request.distance,
            duration=request.duration,
        )
        return LineResponse.of(line)
    except SubwayException as e:
        logger.error(f"구간 등록 실패: {e.message}")
        raise to_http_exception(e)


@router.delete("/{line_id}/sections", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section(
    line_id: int,
    station_id: int = Query(..., description="제거할 역 id"),
    service: LineService = Depends(get_line_service),
):
    """
    구간 삭제 (역 제거)

    Example:
        DELETE /v1/lines/1/sections?station_id=2
    """
    try:
        service.delete_section(line_id, station_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except SubwayException as e:
        logger.error(f"구간 삭제 실패: {e.message}")
        raise to_http_exception(e)
