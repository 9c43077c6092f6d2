"""
관심 대학 목록 서비스 (사용자 <-> 대학)
"""
from models import SchoolList
from .repository import Repository
from .college_service import colleges_by_ids

school_lists = Repository(SchoolList)


def add_college(user_id, college_id):
    # 시간표와 같은 방식: 조회 후 없을 때만 추가
    lookup = school_lists.find_many(user_id=user_id, college_id=college_id)
    if lookup:
        return lookup[0]
    return school_lists.insert(user_id=user_id, college_id=college_id)


def remove_college(user_id, college_id):
    return school_lists.delete_many(user_id=user_id, college_id=college_id)


def listed_colleges(user_id):
    college_ids = [row.college_id for row in school_lists.find_many(user_id=user_id)]
    return colleges_by_ids(college_ids)
