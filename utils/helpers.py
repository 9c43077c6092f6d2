"""
유틸리티 헬퍼 함수
"""
from datetime import datetime

import pytz

from .constants import NOT_SCHEDULED, DEFAULT_MEETING_TYPE

LIKE_ESCAPE = '\\'


def parse_course_number(raw):
    """과목번호를 숫자 부분과 접미사로 분리 (예: '103A' -> ('103', 'A'))"""
    raw = raw or ''
    i = 0
    while i < len(raw) and '0' <= raw[i] <= '9':
        i += 1
    return raw[:i], raw[i:]


def minutes_to_clock(minutes):
    """자정 기준 분을 'H:MM' 문자열로 변환 (605 -> '10:05')"""
    hour, minute = divmod(int(minutes), 60)
    return f"{hour}:{minute:02d}"


def format_meeting_time(time):
    """수업 시간 하나를 문자열로 (예: 'Recitation: Thu: 17:00-18:30 Volen 101')"""
    meeting_type = time.get('type') or DEFAULT_MEETING_TYPE
    location = time.get('building') or time.get('location') or ''
    days = ','.join(time.get('days') or [])
    start = minutes_to_clock(time['start'])
    end = minutes_to_clock(time['end'])
    return f"{meeting_type}: {days}: {start}-{end} {location}"


def format_meeting_times(times):
    """수업 시간 리스트를 표시용 문자열 리스트로 변환"""
    if not times:
        return [NOT_SCHEDULED]
    return [format_meeting_time(t) for t in times]


def contains_pattern(text):
    """사용자 입력을 LIKE 부분일치 패턴으로 (와일드카드 문자는 이스케이프)"""
    text = text or ''
    escaped = (text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
                   .replace('%', LIKE_ESCAPE + '%')
                   .replace('_', LIKE_ESCAPE + '_'))
    return f"%{escaped}%"


def to_local_time(value, tz_name, format='%Y-%m-%d %H:%M'):
    """UTC 시간을 지정한 시간대로 변환해서 포맷"""
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    # 시간대 정보가 없는 naive datetime이면 UTC로 가정
    if value.tzinfo is None:
        utc_dt = pytz.utc.localize(value)
    else:
        utc_dt = value.astimezone(pytz.utc)
    return utc_dt.astimezone(pytz.timezone(tz_name)).strftime(format)
