"""
관심 대학 목록(사용자-대학 연결) 모델
"""
from . import db

class SchoolList(db.Model):
    __tablename__ = 'school_lists'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    college_id = db.Column(db.Integer, db.ForeignKey('colleges.id'), nullable=False)
