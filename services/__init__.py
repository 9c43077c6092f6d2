"""
서비스 계층 모듈
모델별 저장소와 검색/추가/삭제 로직
"""
from .repository import Repository
from .dataset_service import load_dataset
from . import todo_service, course_service, schedule_service, college_service, school_list_service

__all__ = [
    'Repository',
    'load_dataset',
    'todo_service',
    'course_service',
    'schedule_service',
    'college_service',
    'school_list_service'
]
