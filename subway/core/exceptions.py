# custom exception 정의 및 관리
# InvalidArgument 계열 => 400, NotFound 계열 => 404 로 변환됨


class SubwayException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidArgumentException(SubwayException):
    def __init__(self, message: str = "잘못된 요청입니다", code: str = "INVALID_ARGUMENT"):
        super().__init__(message, code=code)


class NotFoundException(SubwayException):
    def __init__(self, message: str = "대상을 찾을 수 없습니다", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class InvalidSectionException(InvalidArgumentException):
    def __init__(self, message: str = "유효하지 않은 구간입니다"):
        super().__init__(message, code="INVALID_SECTION")


class DuplicateNameException(InvalidArgumentException):
    def __init__(self, message: str = "이미 존재하는 이름입니다"):
        super().__init__(message, code="DUPLICATE_NAME")


class StationInUseException(InvalidArgumentException):
    def __init__(self, message: str = "노선에 등록된 역은 삭제할 수 없습니다"):
        super().__init__(message, code="STATION_IN_USE")


class SameStationPathException(InvalidArgumentException):
    def __init__(self, message: str = "출발역과 도착역이 같습니다"):
        super().__init__(message, code="SAME_STATION")


class InvalidPathFindTypeException(InvalidArgumentException):
    def __init__(self, message: str = "지원하지 않는 경로 조회 기준입니다"):
        super().__init__(message, code="INVALID_PATH_FIND_TYPE")


class StationNotFoundException(NotFoundException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class LineNotFoundException(NotFoundException):
    def __init__(self, message: str = "노선을 찾을 수 없습니다"):
        super().__init__(message, code="LINE_NOT_FOUND")


class PathNotFoundException(NotFoundException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="PATH_NOT_FOUND")
