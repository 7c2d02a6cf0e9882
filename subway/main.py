"""
Subway Map Backend - FastAPI Application

지하철 노선도 관리 및 최단 경로 조회
역/노선/구간 등록 및 거리/시간 기준 최단 경로 탐색
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from subway.core.config import PATH_FIND_TYPES, settings
from subway.api.v1.router import api_router
from subway.db.repository import get_line_repository, get_station_repository

# 성능 모니터링
from subway.middleware.performance_monitoring import (
    PerformanceMonitoringMiddleware,
    get_request_metrics,
)

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    저장소는 in-memory => 시작/종료 시 외부 자원 초기화 없음
    """
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} 시작")
    logger.info("=" * 60)

    yield

    logger.info(
        f"{settings.PROJECT_NAME} 종료: "
        f"역={len(get_station_repository().find_all())}개, "
        f"노선={len(get_line_repository().find_all())}개"
    )


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 지하철 노선도 및 최단 경로 조회

    ### 주요 기능
    - 🚉 역 등록/조회/삭제
    - 🚇 노선 생성, 구간 등록 (사이 구간 분할 포함), 구간 삭제 (병합 포함)
    - 📍 최단 경로 조회 (DISTANCE: 최단 거리, DURATION: 최소 시간)
    """,
    lifespan=lifespan,  # 생명주기 관리자 등록
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 성능 모니터링 미들웨어 추가
if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(PerformanceMonitoringMiddleware)
    logger.info("✓ 성능 모니터링 미들웨어 활성화")

# API 라우터 등록
app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "path_find_types": PATH_FIND_TYPES,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트 (로드 밸런서, 모니터링)
    """
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "components": {
            "stations": len(get_station_repository().find_all()),
            "lines": len(get_line_repository().find_all()),
        },
    }


@app.get("/v1/metrics")
async def get_metrics():
    """
    성능 메트릭 엔드포인트
    """
    if not settings.ENABLE_PERFORMANCE_MONITORING:
        return {"message": "성능 모니터링이 비활성화되어 있습니다"}

    return {
        "summary": get_request_metrics().get_summary(),
        "configuration": {
            "slow_request_threshold_ms": settings.SLOW_REQUEST_THRESHOLD_MS,
            "monitoring_enabled": settings.ENABLE_PERFORMANCE_MONITORING,
        },
    }


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "subway.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
