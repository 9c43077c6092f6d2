"""
강의 모델
"""
from . import db

class Course(db.Model):
    __tablename__ = 'courses'

    id = db.Column(db.Integer, primary_key=True)
    subject = db.Column(db.String(20), nullable=False)
    coursenum = db.Column(db.String(20), nullable=False)
    num = db.Column(db.Integer, default=0, nullable=False)  # coursenum 앞쪽 숫자 (정렬용)
    suffix = db.Column(db.String(20), default='', nullable=False)
    section = db.Column(db.Integer, nullable=False)  # 분반 번호 (숫자 순 정렬)
    term = db.Column(db.String(10), nullable=False)
    name = db.Column(db.String(300))
    description = db.Column(db.Text)
    instructor = db.Column(db.String(200))
    instructor_email = db.Column(db.String(200))
    waiting = db.Column(db.Integer, default=0, nullable=False)
    independent_study = db.Column(db.Boolean, default=False, nullable=False)
    times = db.Column(db.JSON)
    str_times = db.Column(db.JSON)

    schedules = db.relationship('Schedule', backref='course', lazy=True, cascade="all, delete-orphan")

    @property
    def code(self):
        return f"{self.subject} {self.coursenum}-{self.section}"
