"""
대학 검색 서비스
"""
from models import College
from utils.constants import COLLEGE_UPSERT_KEY
from utils.helpers import contains_pattern, LIKE_ESCAPE
from .repository import Repository

colleges = Repository(College)


def by_name(name):
    """대학 이름 부분일치 검색 (대소문자 무시)"""
    return colleges.find_many(College.name.ilike(contains_pattern(name), escape=LIKE_ESCAPE), sort=('name',))


def get_college(college_id):
    return colleges.get_or_404(college_id)


def colleges_by_ids(college_ids):
    if not college_ids:
        return []
    return colleges.find_many(College.id.in_(college_ids), sort=('name',))


def upsert_colleges(records):
    """대학 데이터 일괄 upsert

    (unitID, name, state, websiteAddress, city) 가 같은 레코드가 있으면
    새로 만들지 않고 그 자리에서 갱신
    """
    for record in records:
        key = {column: record.get(field) for field, column in COLLEGE_UPSERT_KEY.items()}
        colleges.upsert(key, key)
    colleges.commit()
    return colleges.count()
