import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Subway Map Backend")
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8080))

    # 경로 조회 메트릭 로깅 플래그
    ENABLE_PATH_METRICS: bool = (
        os.getenv("ENABLE_PATH_METRICS", "true").lower() == "true"
    )

    # 성능 모니터링
    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: float = float(
        os.getenv("SLOW_REQUEST_THRESHOLD_MS", 500)
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# 경로 조회 기준 => PathFindType 값과 동일해야 함
PATH_FIND_TYPES = {
    "DISTANCE": "최단 거리",
    "DURATION": "최소 시간",
}

DEFAULT_PATH_FIND_TYPE = "DISTANCE"
