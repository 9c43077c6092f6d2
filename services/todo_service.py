"""
할일 서비스
"""
from datetime import datetime

from models import ToDoItem
from utils.errors import ValidationFailure
from .repository import Repository

todo_items = Repository(ToDoItem)


def list_items(user_id):
    """사용자의 할일 목록"""
    return todo_items.find_many(sort=('created_at',), user_id=user_id)


def add_item(user_id, title, description):
    """할일 추가 (created_at 은 생성 시점에 한 번만 설정)"""
    if not title or description is None:
        raise ValidationFailure("제목과 설명은 필수입니다.")
    return todo_items.insert(
        title=title,
        description=description,
        user_id=user_id,
        created_at=datetime.utcnow()
    )


def delete_item(user_id, item_id):
    """본인 할일만 삭제, 남의 것이거나 없으면 아무 일도 하지 않음"""
    return todo_items.delete_one(id=item_id, user_id=user_id)


def set_completed(user_id, item_id, completed):
    return todo_items.update_one({'id': item_id, 'user_id': user_id}, {'completed': completed})
