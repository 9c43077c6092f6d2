"""
애플리케이션 설정
.env / 환경변수에서 한 번 읽어서 불변 객체로 보관
"""
import os
import urllib.parse
from dataclasses import dataclass

from dotenv import load_dotenv

from utils.constants import DEFAULT_PORT, DEFAULT_TIMEZONE, INSTRUCTOR_EMAIL_DOMAIN

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, 'data')


@dataclass(frozen=True)
class AppConfig:
    secret_key: str
    database_uri: str
    port: int = DEFAULT_PORT
    timezone: str = DEFAULT_TIMEZONE
    instructor_email_domain: str = INSTRUCTOR_EMAIL_DOMAIN
    college_data_path: str = os.path.join(DATA_DIR, 'colleges.json')
    course_data_path: str = os.path.join(DATA_DIR, 'courses.json')
    debug: bool = False
    testing: bool = False

    def to_flask(self):
        """Flask app.config 에 넣을 딕셔너리"""
        return {
            'SECRET_KEY': self.secret_key,
            'SQLALCHEMY_DATABASE_URI': self.database_uri,
            'SQLALCHEMY_TRACK_MODIFICATIONS': False,
            'TESTING': self.testing,
            'DEBUG': self.debug,
        }


def _database_uri_from_env():
    """DATABASE_URL 우선, 없으면 DB_* 조합, 그것도 없으면 로컬 sqlite"""
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    db_user = os.getenv("DB_USER")
    db_password = os.getenv("DB_PASSWORD")
    db_host = os.getenv("DB_HOST")
    db_port = os.getenv("DB_PORT", "5432")
    db_name = os.getenv("DB_NAME")
    if db_user and db_password and db_host and db_name:
        encoded_password = urllib.parse.quote_plus(db_password)
        return f'postgresql://{db_user}:{encoded_password}@{db_host}:{db_port}/{db_name}'

    return 'sqlite:///' + os.path.join(BASE_DIR, 'coursefinder.db')


def load_config():
    """환경변수로부터 AppConfig 생성 (앱 생성 전에 한 번만 호출)"""
    load_dotenv()

    secret_key = os.getenv('FLASK_SECRET_KEY')
    if not secret_key:
        raise RuntimeError("FLASK_SECRET_KEY environment variable must be set for security")

    return AppConfig(
        secret_key=secret_key,
        database_uri=_database_uri_from_env(),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
        timezone=os.getenv('APP_TIMEZONE', DEFAULT_TIMEZONE),
        instructor_email_domain=os.getenv('INSTRUCTOR_EMAIL_DOMAIN', INSTRUCTOR_EMAIL_DOMAIN),
        college_data_path=os.getenv('COLLEGE_DATA_PATH', os.path.join(DATA_DIR, 'colleges.json')),
        course_data_path=os.getenv('COURSE_DATA_PATH', os.path.join(DATA_DIR, 'courses.json')),
        debug=os.getenv("FLASK_DEBUG", "False").lower() == "true",
    )


def current_config():
    """요청 처리 중 현재 앱의 AppConfig"""
    from flask import current_app
    return current_app.extensions['coursefinder_config']
