# app.py - Course Finder Flask 애플리케이션
import os

from flask import Flask, render_template, current_app
from werkzeug.exceptions import HTTPException

from config import AppConfig, load_config
from models import db
from routes import register_blueprints
from services import load_dataset, college_service, course_service
from utils.errors import status_code_of
from utils.helpers import to_local_time


def create_app(config=None):
    """설정 객체를 받아 앱 생성 (설정은 이후 변경하지 않음)"""
    if config is None:
        config = load_config()
    if not isinstance(config, AppConfig):
        raise TypeError("config must be an AppConfig")

    app = Flask(__name__)
    app.config.from_mapping(config.to_flask())
    app.extensions['coursefinder_config'] = config

    # Initialize database with app
    db.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_template_filters(app, config)
    register_commands(app)
    return app


# --- 에러 처리 ---
def register_error_handlers(app):
    @app.errorhandler(Exception)
    def handle_error(e):
        """모든 에러를 하나의 에러 페이지로 (상태코드는 에러에서, 기본 500)"""
        status = status_code_of(e)
        if isinstance(e, HTTPException):
            message = e.description
        else:
            message = str(e)

        if status >= 500:
            current_app.logger.error("Unhandled error: %s", e, exc_info=e)
        else:
            current_app.logger.info("%s: %s", status, message)

        return render_template('error.html', status=status, message=message), status


# --- Jinja2 필터 ---
def register_template_filters(app, config):
    @app.template_filter('localtime')
    def format_datetime_local(value, format='%Y-%m-%d %H:%M'):
        """UTC 시간을 설정된 시간대로 변환하는 필터"""
        return to_local_time(value, config.timezone, format)


# --- Flask CLI 명령어 ---
def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Creates the database tables."""
        db.create_all()
        print("Database initialized.")

    @app.cli.command("upsert-colleges")
    def upsert_colleges_command():
        """Loads (or reloads) the college dataset."""
        config = app.extensions['coursefinder_config']
        num = college_service.upsert_colleges(load_dataset(config.college_data_path))
        print(f"--- [COURSEFINDER] colleges uploaded: {num} ---")

    @app.cli.command("upsert-courses")
    def upsert_courses_command():
        """Loads (or reloads) the course dataset."""
        config = app.extensions['coursefinder_config']
        num = course_service.upsert_courses(load_dataset(config.course_data_path))
        print(f"--- [COURSEFINDER] courses uploaded: {num} ---")


# --- 앱 실행 부분 ---
if __name__ == '__main__':
    app_config = load_config()
    app = create_app(app_config)

    with app.app_context():
        try:
            print("--- [COURSEFINDER] Checking database... ---")
            db.create_all()
            print("--- [COURSEFINDER] Database ready. ---")
        except Exception as e:
            print(f"--- [COURSEFINDER] CRITICAL: Error during DB initialization: {e} ---")
            print("--- [COURSEFINDER] Please check your .env file and ensure the database server is running. ---")
            raise

    app.run(debug=app_config.debug, host=os.environ.get("HOST", "0.0.0.0"), port=app_config.port)
