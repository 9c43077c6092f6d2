"""
pytest 공통 fixture
인메모리 SQLite 로 앱을 만들고 매 테스트마다 테이블을 새로 생성
"""
import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from config import AppConfig
from models import db, User
from services import course_service, college_service

TEST_PASSWORD = 'pw1234'

COURSE_RECORDS = [
    {"subject": "COSI", "coursenum": "103A", "section": "1", "term": "1203",
     "name": "Fundamentals of Software Engineering",
     "instructor": ["Timothy", "Hickey", "tjhickey@brandeis.edu"], "waiting": 0,
     "independent_study": False,
     "times": [{"start": 600, "end": 650, "days": ["m", "w"], "building": "Volen 101"}]},
    {"subject": "COSI", "coursenum": "21A", "section": "2", "term": "1203",
     "name": "Data Structures",
     "instructor": ["Antonella", "DiLillo", "dilant@brandeis.edu"], "waiting": 3,
     "independent_study": False, "times": []},
    {"subject": "COSI", "coursenum": "21A", "section": "1", "term": "1203",
     "name": "Data Structures",
     "instructor": ["Antonella", "DiLillo", "dilant@brandeis.edu"], "waiting": 0,
     "independent_study": False, "times": []},
    {"subject": "COSI", "coursenum": "12B", "section": "1", "term": "1193",
     "name": "Advanced Programming Techniques",
     "instructor": ["Timothy", "Hickey", "tjhickey@brandeis.edu"], "waiting": 0,
     "independent_study": False, "times": []},
    {"subject": "COSI", "coursenum": "98A", "section": "1", "term": "1203",
     "name": "Independent Study in Software",
     "instructor": ["Timothy", "Hickey", "tjhickey@brandeis.edu"], "waiting": 0,
     "independent_study": True, "times": []},
    {"subject": "MATH", "coursenum": "10A", "section": "1", "term": "1203",
     "name": "Techniques of Calculus 100%_off",
     "instructor": ["Susan", "Parker", "sparker@brandeis.edu"], "waiting": 0,
     "independent_study": False, "times": []},
]

COLLEGE_RECORDS = [
    {"unitID": 165015, "name": "Brandeis University", "state": "MA",
     "websiteAddress": "www.brandeis.edu", "city": "Waltham"},
    {"unitID": 166027, "name": "Harvard University", "state": "MA",
     "websiteAddress": "www.harvard.edu", "city": "Cambridge"},
    {"unitID": 168148, "name": "Tufts University", "state": "MA",
     "websiteAddress": "www.tufts.edu", "city": "Medford"},
]


@pytest.fixture
def config(tmp_path):
    colleges_path = tmp_path / 'colleges.json'
    colleges_path.write_text(
        '[{"unitID": 165015, "name": "Brandeis University", "state": "MA",'
        ' "websiteAddress": "www.brandeis.edu", "city": "Waltham"},'
        ' {"unitID": 166683, "name": "Massachusetts Institute of Technology", "state": "MA",'
        ' "websiteAddress": "web.mit.edu", "city": "Cambridge"}]',
        encoding='utf-8'
    )
    return AppConfig(
        secret_key='test-secret-key',
        database_uri='sqlite://',
        college_data_path=str(colleges_path),
        course_data_path=str(tmp_path / 'missing.json'),
        testing=True,
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(username):
    user = User(username=username, password_hash=generate_password_hash(TEST_PASSWORD))
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def user(app):
    return _make_user('alice')


@pytest.fixture
def other_user(app):
    return _make_user('bob')


@pytest.fixture
def login(client):
    def _login(user):
        return client.post('/login', data={'username': user.username, 'password': TEST_PASSWORD})
    return _login


@pytest.fixture
def logged_in_client(client, user, login):
    login(user)
    return client


@pytest.fixture
def courses(app):
    course_service.upsert_courses(COURSE_RECORDS)
    return course_service.courses.find_many(sort=('id',))


@pytest.fixture
def colleges(app):
    college_service.upsert_colleges(COLLEGE_RECORDS)
    return college_service.colleges.find_many(sort=('id',))
