"""
시간표(사용자-강의 연결) 모델
"""
from . import db

class Schedule(db.Model):
    __tablename__ = 'schedules'

    # (user_id, course_id) 중복은 UNIQUE 제약이 아니라 추가 전 조회로 막음
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    course_id = db.Column(db.Integer, db.ForeignKey('courses.id'), nullable=False)
