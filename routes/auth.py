"""
로그인/회원가입/로그아웃
요청마다 세션의 사용자를 g.user 에 올려둔다
"""
from flask import Blueprint, render_template, request, redirect, url_for, session, flash, g
from werkzeug.security import generate_password_hash, check_password_hash

from models import User
from services import Repository
from utils.errors import ValidationFailure

auth_bp = Blueprint('auth', __name__)

users = Repository(User)


@auth_bp.before_app_request
def load_current_user():
    g.user = None
    user_id = session.get('user_id')
    if user_id is None:
        return
    g.user = users.get(user_id)
    if g.user is None:
        session.clear()  # 유효하지 않은 세션 정리


@auth_bp.app_context_processor
def inject_user():
    user = g.get('user')
    return {'user': user, 'logged_in': user is not None}


def _safe_next(next_page):
    # 같은 사이트 안의 경로로만 돌려보냄
    if next_page and next_page.startswith('/') and not next_page.startswith('//'):
        return next_page
    return None


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        user = users.find_one(username=username)

        if user and check_password_hash(user.password_hash, password):
            session.clear()
            session['user_id'] = user.id
            flash(f"{user.username}님, 환영합니다.", "success")
            next_page = _safe_next(request.args.get('next'))
            return redirect(next_page or url_for('main.index'))

        flash("아이디 또는 비밀번호가 일치하지 않습니다.", "danger")

    return render_template('login.html')


@auth_bp.route('/logout')
def logout():
    session.clear()
    flash("로그아웃 되었습니다.", "info")
    return redirect(url_for('main.index'))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')
        password_confirm = request.form.get('password_confirm', '')

        if not all([username, password, password_confirm]):
            flash("모든 필드를 입력해주세요.", "danger")
            return render_template('register.html')

        if password != password_confirm:
            flash("비밀번호가 일치하지 않습니다.", "danger")
            return render_template('register.html')

        if users.find_one(username=username):
            flash("이미 사용 중인 아이디입니다.", "danger")
            return render_template('register.html')

        try:
            users.insert(
                username=username,
                password_hash=generate_password_hash(password, method='pbkdf2:sha256')
            )
        except ValidationFailure:
            # 동시에 같은 아이디로 가입한 경우 UNIQUE 제약에 걸림
            flash("이미 사용 중인 아이디입니다.", "danger")
            return render_template('register.html')

        flash("회원가입이 완료되었습니다. 로그인해주세요.", "success")
        return redirect(url_for('auth.login'))

    return render_template('register.html')
