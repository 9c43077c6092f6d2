"""
할일 목록 라우트 (로그인 필요)
"""
from flask import Blueprint, render_template, request, redirect, url_for, g

from services import todo_service
from utils.decorators import login_required

todo_bp = Blueprint('todo', __name__)


@todo_bp.route('/todo')
@login_required
def show():
    items = todo_service.list_items(g.user.id)
    return render_template('todo.html', items=items)


@todo_bp.route('/todo/add', methods=['POST'])
@login_required
def add():
    title = request.form.get('title')
    description = request.form.get('description')
    todo_service.add_item(g.user.id, title, description)
    return redirect(url_for('todo.show'))


@todo_bp.route('/todo/delete/<int:item_id>')
@login_required
def delete(item_id):
    todo_service.delete_item(g.user.id, item_id)
    return redirect(url_for('todo.show'))


@todo_bp.route('/todo/completed/<value>/<int:item_id>')
@login_required
def completed(value, item_id):
    todo_service.set_completed(g.user.id, item_id, value == 'true')
    return redirect(url_for('todo.show'))
