"""
상수 정의
"""

DEFAULT_PORT = 5000
DEFAULT_TIMEZONE = 'America/New_York'

# 강의자 이메일 검색 시 뒤에 붙이는 학교 도메인
INSTRUCTOR_EMAIL_DOMAIN = '@brandeis.edu'

# 강의 목록 정렬 순서: 학기 -> 과목번호(숫자) -> 분반
COURSE_SORT_FIELDS = ('term', 'num', 'section')

# 강의 upsert 키
COURSE_UPSERT_KEY = ('subject', 'coursenum', 'section', 'term')

# 대학 upsert 키 (데이터셋 필드명 -> 컬럼명)
COLLEGE_UPSERT_KEY = {
    'unitID': 'unit_id',
    'name': 'name',
    'state': 'state',
    'websiteAddress': 'website_address',
    'city': 'city',
}

NOT_SCHEDULED = 'not scheduled'
DEFAULT_MEETING_TYPE = 'Lecture'
