"""
인증 관련 데코레이터
"""
from functools import wraps
from flask import flash, redirect, url_for, g, request


def login_required(f):
    """로그인이 필요한 라우트에 적용하는 데코레이터

    g.user 는 auth 블루프린트의 before_app_request 에서 설정된다.
    로그인하지 않았으면 데이터 접근 없이 로그인 페이지로 보낸다.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if g.get('user') is None:
            flash("로그인이 필요합니다.", "warning")
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function
