# 요청 처리 시간 측정 미들웨어

import time
import logging
import json
from threading import Lock
from typing import Callable, Dict
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from subway.core.config import settings

logger = logging.getLogger(__name__)

# route에 매칭되지 않은 요청 (404 등) => 하나의 key로 집계
UNMATCHED_ENDPOINT = "unmatched"


def endpoint_key(request: Request) -> str:
    """
    메트릭 집계 key

    실제 URL이 아닌 매칭된 route 템플릿(예: GET /v1/lines/{line_id}) 기준
    => id나 임의의 경로마다 key가 늘어나지 않음
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if path is None:
        return UNMATCHED_ENDPOINT
    return f"{request.method} {path}"


class RequestMetrics:
    """
    요청 메트릭 누적 (프로세스 메모리)

    엔드포인트별 요청 수, 평균 처리 시간, 느린 요청/에러 수
    """

    def __init__(self):
        self._lock = Lock()
        self.request_count = 0
        self.slow_request_count = 0
        self.error_count = 0
        self.total_elapsed_time_ms = 0.0
        self.endpoint_stats: Dict[str, Dict[str, float]] = {}

    def record(
        self, endpoint: str, status_code: int, elapsed_time_ms: float, is_slow: bool
    ) -> None:
        with self._lock:
            self.request_count += 1
            self.total_elapsed_time_ms += elapsed_time_ms
            self.slow_request_count += int(is_slow)
            self.error_count += int(status_code >= 400)

            stats = self.endpoint_stats.setdefault(
                endpoint, {"count": 0, "total_time_ms": 0.0, "error_count": 0}
            )
            stats["count"] += 1
            stats["total_time_ms"] += elapsed_time_ms
            stats["error_count"] += int(status_code >= 400)

    def get_summary(self) -> dict:
        with self._lock:
            avg_time_ms = (
                self.total_elapsed_time_ms / self.request_count
                if self.request_count > 0
                else 0
            )
            return {
                "total_requests": self.request_count,
                "average_elapsed_time_ms": round(avg_time_ms, 2),
                "slow_requests": self.slow_request_count,
                "error_requests": self.error_count,
                "endpoints": {
                    endpoint: {
                        "count": stats["count"],
                        "avg_time_ms": round(stats["total_time_ms"] / stats["count"], 2),
                        "error_count": stats["error_count"],
                    }
                    for endpoint, stats in self.endpoint_stats.items()
                },
            }


# 전역 메트릭 인스턴스
_request_metrics = RequestMetrics()


def get_request_metrics() -> RequestMetrics:
    return _request_metrics


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """
    성능 모니터링 미들웨어

    모든 HTTP 요청의 응답 시간을 측정하고 로깅합니다.
    느린 요청(threshold 초과)은 경고로 로깅됩니다.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.slow_threshold_ms = settings.SLOW_REQUEST_THRESHOLD_MS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_time_ms = (time.time() - start_time) * 1000
            logger.error(
                f"요청 처리 중 예외 발생: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms, 예외={str(e)}",
                exc_info=True,
            )
            raise

        elapsed_time_ms = (time.time() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_time_ms:.2f}"

        is_slow = elapsed_time_ms > self.slow_threshold_ms
        get_request_metrics().record(
            endpoint=endpoint_key(request),
            status_code=response.status_code,
            elapsed_time_ms=elapsed_time_ms,
            is_slow=is_slow,
        )

        metrics = {
            "event": "http_request",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_time_ms": round(elapsed_time_ms, 2),
            "slow_request": is_slow,
        }
        if request.query_params:
            metrics["query_params"] = dict(request.query_params)

        if is_slow:
            logger.warning(
                f"⚠️ 느린 요청 감지: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms (기준: {self.slow_threshold_ms}ms)"
            )

        logger.info(f"PERFORMANCE: {json.dumps(metrics, ensure_ascii=False)}")
        return response
