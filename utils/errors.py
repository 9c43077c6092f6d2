"""
에러 분류
라우트는 에러 종류를 해석하지 않고 그대로 에러 핸들러로 넘긴다
"""
from werkzeug.exceptions import BadRequest, NotFound, ServiceUnavailable

__all__ = ['NotFound', 'ValidationFailure', 'StoreUnavailable', 'status_code_of']


class ValidationFailure(BadRequest):
    """필수 값 누락 등 저장소가 거부한 입력"""
    description = "입력값이 올바르지 않습니다."


class StoreUnavailable(ServiceUnavailable):
    """데이터베이스 연결/실행 오류"""
    description = "데이터베이스를 사용할 수 없습니다."


def status_code_of(error):
    code = getattr(error, 'code', None)
    return code if isinstance(code, int) else 500
