"""
최단 경로 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from subway.api.deps import get_path_service, to_http_exception
from subway.core.config import DEFAULT_PATH_FIND_TYPE
from subway.core.exceptions import SubwayException
from subway.models.responses import PathResponse
from subway.services.path_service import PathService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=PathResponse)
async def find_shortest_path(
    source: int = Query(..., description="출발역 id"),
    target: int = Query(..., description="도착역 id"),
    type: str = Query(DEFAULT_PATH_FIND_TYPE, description="조회 기준 (DISTANCE/DURATION)"),
    service: PathService = Depends(get_path_service),
):
    """
    최단 경로 조회

    - **source**: 출발역 id
    - **target**: 도착역 id
    - **type**: DISTANCE(최단 거리) 또는 DURATION(최소 시간)

    Example:
        GET /v1/paths?source=1&target=3&type=DISTANCE
    """
    try:
        return service.find_shortest_path(source, target, type)
    except SubwayException as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"경로 조회 중 오류 발생: {str(e)}")
