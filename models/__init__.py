"""
데이터베이스 모델 패키지
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import User
from .todo import ToDoItem
from .course import Course
from .schedule import Schedule
from .college import College
from .school_list import SchoolList

__all__ = [
    'db', 'User', 'ToDoItem', 'Course',
    'Schedule', 'College', 'SchoolList'
]
