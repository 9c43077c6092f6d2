"""
강의 검색 서비스
모든 검색 결과는 학기 -> 과목번호 -> 분반 오름차순
"""
from models import Course
from utils.constants import COURSE_SORT_FIELDS, COURSE_UPSERT_KEY
from utils.helpers import parse_course_number, format_meeting_times, contains_pattern, LIKE_ESCAPE
from .repository import Repository

courses = Repository(Course)


def _search(*criteria, **filters):
    # 개인연구(independent study) 과목은 일반 검색 목록에서 제외
    return courses.find_many(*criteria, sort=COURSE_SORT_FIELDS, independent_study=False, **filters)


def by_subject(subject):
    return _search(subject=subject)


def by_word(word):
    """강의명에 단어가 포함된 강의 (대소문자 무시)"""
    return _search(Course.name.ilike(contains_pattern(word), escape=LIKE_ESCAPE))


def by_availability(subject):
    """대기자가 없는 강의"""
    return _search(subject=subject, waiting=0)


def by_coursenum(coursenum):
    return courses.find_many(sort=COURSE_SORT_FIELDS, coursenum=coursenum)


def by_instructor(email):
    return _search(instructor_email=email)


def instructor_email(handle, domain):
    return f"{handle}{domain}"


def get_course(course_id):
    return courses.get_or_404(course_id)


def courses_by_ids(course_ids):
    if not course_ids:
        return []
    return courses.find_many(Course.id.in_(course_ids), sort=COURSE_SORT_FIELDS)


def _instructor_fields(instructor):
    """데이터셋의 instructor 값은 [이름, 성, 이메일] 리스트이거나 문자열"""
    if isinstance(instructor, (list, tuple)):
        parts = [str(p) for p in instructor if p]
        email = next((p for p in parts if '@' in p), None)
        name = ' '.join(p for p in parts if p != email)
        return name, email
    if instructor and '@' in str(instructor):
        return None, str(instructor)
    return instructor, None


def course_fields(record):
    """데이터셋 레코드 하나를 Course 컬럼 값으로 변환"""
    coursenum = str(record.get('coursenum', ''))
    num, suffix = parse_course_number(coursenum)
    name, email = _instructor_fields(record.get('instructor'))
    times = record.get('times') or []
    return {
        'name': record.get('name'),
        'description': record.get('description'),
        'num': int(num) if num else 0,
        'suffix': suffix,
        'instructor': name,
        'instructor_email': email,
        'waiting': int(record.get('waiting') or 0),
        'independent_study': bool(record.get('independent_study', False)),
        'times': times,
        'str_times': format_meeting_times(times),
    }


def upsert_courses(records):
    """강의 데이터 일괄 upsert, (subject, coursenum, section, term) 기준"""
    for record in records:
        key = {field: str(record.get(field, '')) for field in COURSE_UPSERT_KEY}
        key['section'] = int(record.get('section') or 0)
        courses.upsert(key, course_fields(record))
    courses.commit()
    return courses.count()
