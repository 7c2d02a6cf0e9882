from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 역 등록
class StationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="역 이름")


# 노선 생성 => 첫 구간 함께 등록
class LineCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="노선 이름")
    color: str = Field(..., min_length=1, description="노선 색상")
    up_station_id: int = Field(..., description="상행역 id")
    down_station_id: int = Field(..., description="하행역 id")
    distance: int = Field(..., gt=0, description="구간 거리")
    duration: int = Field(default=0, ge=0, description="구간 소요시간")


# 노선 수정
class LineUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="노선 이름")
    color: str = Field(..., min_length=1, description="노선 색상")


# 구간 등록
class SectionCreateRequest(BaseModel):
    up_station_id: int = Field(..., description="상행역 id")
    down_station_id: int = Field(..., description="하행역 id")
    distance: int = Field(..., gt=0, description="구간 거리")
    duration: int = Field(default=0, ge=0, description="구간 소요시간")
