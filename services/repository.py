"""
공통 저장소 클래스
모델 하나에 대한 조회/추가/수정/삭제를 담당하고
SQLAlchemy 예외를 ValidationFailure / StoreUnavailable 로 변환
"""
from functools import wraps

from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError, StatementError

from models import db
from utils.errors import NotFound, ValidationFailure, StoreUnavailable


def _store_errors(f):
    """DB 예외 발생 시 롤백 후 에러 분류로 변환"""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (IntegrityError, DataError) as e:
            db.session.rollback()
            raise ValidationFailure(f"저장할 수 없는 데이터입니다: {e.orig}") from e
        except DBAPIError as e:
            # 연결 끊김, 권한, 내부 오류 등 나머지 DB 드라이버 오류
            db.session.rollback()
            raise StoreUnavailable(f"데이터베이스 오류: {e.orig}") from e
        except StatementError as e:
            # 드라이버까지 가기 전에 값 변환에서 실패한 경우
            db.session.rollback()
            raise ValidationFailure(f"저장할 수 없는 데이터입니다: {e.orig}") from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreUnavailable(f"데이터베이스 오류: {e}") from e
    return wrapper


class Repository:
    def __init__(self, model):
        self.model = model

    def _query(self, criteria, filters):
        query = self.model.query
        if criteria:
            query = query.filter(*criteria)
        if filters:
            query = query.filter_by(**filters)
        return query

    @_store_errors
    def find_many(self, *criteria, sort=None, **filters):
        query = self._query(criteria, filters)
        if sort:
            query = query.order_by(*[getattr(self.model, field).asc() for field in sort])
        return query.all()

    @_store_errors
    def find_one(self, *criteria, **filters):
        return self._query(criteria, filters).first()

    @_store_errors
    def get(self, record_id):
        return db.session.get(self.model, record_id)

    def get_or_404(self, record_id):
        record = self.get(record_id)
        if record is None:
            raise NotFound(f"{self.model.__name__} {record_id} 을(를) 찾을 수 없습니다.")
        return record

    @_store_errors
    def insert(self, **fields):
        record = self.model(**fields)
        db.session.add(record)
        db.session.commit()
        return record

    @_store_errors
    def update_one(self, filters, patch):
        """첫 번째로 일치하는 레코드를 수정, 없으면 None"""
        record = self._query((), filters).first()
        if record is None:
            return None
        for key, value in patch.items():
            setattr(record, key, value)
        db.session.commit()
        return record

    @_store_errors
    def upsert(self, key, fields):
        """key 로 찾아서 있으면 수정, 없으면 추가 (커밋은 호출하는 쪽에서)"""
        record = self._query((), key).first()
        if record is None:
            record = self.model(**key)
            db.session.add(record)
        for name, value in fields.items():
            setattr(record, name, value)
        db.session.flush()
        return record

    @_store_errors
    def commit(self):
        db.session.commit()

    @_store_errors
    def delete_one(self, **filters):
        """일치하는 첫 레코드 삭제, 삭제한 개수(0 또는 1) 반환"""
        record = self._query((), filters).first()
        if record is None:
            return 0
        db.session.delete(record)
        db.session.commit()
        return 1

    @_store_errors
    def delete_many(self, **filters):
        records = self._query((), filters).all()
        for record in records:
            db.session.delete(record)
        db.session.commit()
        return len(records)

    @_store_errors
    def count(self, *criteria, **filters):
        return self._query(criteria, filters).count()
