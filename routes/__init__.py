"""
라우트(블루프린트) 패키지
"""
from .main import main_bp
from .auth import auth_bp
from .todo import todo_bp
from .courses import courses_bp
from .colleges import colleges_bp

BLUEPRINTS = (main_bp, auth_bp, todo_bp, courses_bp, colleges_bp)


def register_blueprints(app):
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
