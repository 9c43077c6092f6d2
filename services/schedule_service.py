"""
시간표 서비스 (사용자 <-> 강의)
"""
from models import Schedule
from .repository import Repository
from .course_service import courses_by_ids

schedules = Repository(Schedule)


def add_course(user_id, course_id):
    """이미 추가된 강의면 그대로 둠

    조회 후 추가라서 원자적이지 않다. 동시에 두 번 요청하면 중복 행이 생길 수 있음
    """
    lookup = schedules.find_many(user_id=user_id, course_id=course_id)
    if lookup:
        return lookup[0]
    return schedules.insert(user_id=user_id, course_id=course_id)


def remove_course(user_id, course_id):
    """없는 강의를 지워도 에러 아님"""
    return schedules.delete_many(user_id=user_id, course_id=course_id)


def scheduled_courses(user_id):
    """사용자 시간표 강의 목록 (학기순)"""
    course_ids = [row.course_id for row in schedules.find_many(user_id=user_id)]
    return courses_by_ids(course_ids)
