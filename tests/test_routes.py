"""
라우트 테스트 (할일, 강의, 시간표, 대학)
"""
from sqlalchemy.exc import InterfaceError, OperationalError

from models import db, ToDoItem
from services import Repository, todo_service, schedule_service, school_list_service


class TestTodoRoutes:

    def test_add_and_show(self, logged_in_client, user):
        response = logged_in_client.post('/todo/add', data={'title': 'read', 'description': 'ch 3'})
        assert response.status_code == 302
        assert response.headers['Location'] == '/todo'
        page = logged_in_client.get('/todo')
        assert b'read' in page.data
        assert b'ch 3' in page.data

    def test_add_without_title_is_error(self, logged_in_client):
        response = logged_in_client.post('/todo/add', data={'description': 'x'})
        assert response.status_code == 400

    def test_completed_and_delete(self, logged_in_client, user):
        item = todo_service.add_item(user.id, 'read', 'ch 3')
        item_id = item.id
        logged_in_client.get(f'/todo/completed/true/{item_id}')
        db.session.expire_all()
        assert db.session.get(ToDoItem, item_id).completed is True

        logged_in_client.get(f'/todo/completed/false/{item_id}')
        db.session.expire_all()
        assert db.session.get(ToDoItem, item_id).completed is False

        response = logged_in_client.get(f'/todo/delete/{item_id}')
        assert response.status_code == 302
        db.session.expire_all()
        assert db.session.get(ToDoItem, item_id) is None

    def test_other_users_item_untouched(self, logged_in_client, other_user):
        item = todo_service.add_item(other_user.id, 'secret', 'not yours')
        item_id = item.id
        assert logged_in_client.get(f'/todo/delete/{item_id}').status_code == 302
        db.session.expire_all()
        assert db.session.get(ToDoItem, item_id) is not None
        assert b'secret' not in logged_in_client.get('/todo').data


class TestCourseRoutes:

    def test_by_subject(self, client, courses):
        page = client.post('/courses/bySubject', data={'subject': 'COSI'})
        assert page.status_code == 200
        text = page.get_data(as_text=True)
        assert 'COSI 12B-1' in text
        assert 'Independent Study' not in text
        assert text.index('COSI 12B-1') < text.index('COSI 21A-1') < text.index('COSI 103A-1')

    def test_by_word(self, client, courses):
        text = client.post('/courses/byWord', data={'word': 'software'}).get_data(as_text=True)
        assert 'COSI 103A-1' in text
        assert 'COSI 98A-1' not in text

    def test_by_availability(self, client, courses):
        text = client.post('/courses/byAvailability', data={'subject': 'COSI'}).get_data(as_text=True)
        assert 'COSI 21A-1' in text
        assert 'COSI 21A-2' not in text

    def test_by_coursenum(self, client, courses):
        text = client.post('/courses/byCoursenum', data={'coursenum': '98A'}).get_data(as_text=True)
        assert 'COSI 98A-1' in text

    def test_show(self, client, courses):
        page = client.get(f'/courses/show/{courses[0].id}')
        assert page.status_code == 200
        assert b'Lecture: m,w: 10:00-10:50 Volen 101' in page.data

    def test_show_missing(self, client, courses):
        assert client.get('/courses/show/9999').status_code == 404

    def test_by_instructor_get_and_post(self, client, courses):
        for response in (client.get('/courses/byInst/tjhickey'),
                         client.post('/courses/byInst', data={'email': 'tjhickey'})):
            text = response.get_data(as_text=True)
            assert text.index('COSI 12B-1') < text.index('COSI 103A-1')
            assert 'COSI 98A-1' not in text
            assert 'COSI 21A' not in text


class TestScheduleRoutes:

    def test_add_show_remove(self, logged_in_client, user, courses):
        course = courses[0]
        response = logged_in_client.get(f'/addCourse/{course.id}')
        assert response.headers['Location'] == '/schedule/show'
        logged_in_client.get(f'/addCourse/{course.id}')
        assert schedule_service.schedules.count(user_id=user.id) == 1

        assert b'COSI 103A-1' in logged_in_client.get('/schedule/show').data

        logged_in_client.get(f'/schedule/remove/{course.id}')
        assert schedule_service.schedules.count(user_id=user.id) == 0

    def test_remove_missing_is_noop(self, logged_in_client):
        response = logged_in_client.get('/schedule/remove/42')
        assert response.status_code == 302


class TestCollegeRoutes:

    def test_upsert_db(self, client, colleges):
        response = client.get('/upsertDB')
        assert response.get_data(as_text=True) == 'data uploaded: 4'
        # 두 번 실행해도 개수는 같음
        assert client.get('/upsertDB').get_data(as_text=True) == 'data uploaded: 4'

    def test_by_name(self, client, colleges):
        text = client.post('/colleges/byName', data={'name': 'tufts'}).get_data(as_text=True)
        assert 'Tufts University' in text
        assert 'Harvard' not in text

    def test_show_is_json(self, client, colleges):
        data = client.get(f'/colleges/show/{colleges[0].id}').get_json()
        assert data['name'] == 'Brandeis University'
        assert data['unitID'] == 165015
        assert data['websiteAddress'] == 'www.brandeis.edu'

    def test_show_missing(self, client, colleges):
        assert client.get('/colleges/show/9999').status_code == 404

    def test_school_list(self, logged_in_client, user, colleges):
        college = colleges[1]
        response = logged_in_client.get(f'/addCollege/{college.id}')
        assert response.headers['Location'] == '/schoolList/show'
        logged_in_client.get(f'/addCollege/{college.id}')
        assert school_list_service.school_lists.count(user_id=user.id) == 1
        assert b'Harvard University' in logged_in_client.get('/schoolList/show').data

        logged_in_client.get(f'/schoolList/remove/{college.id}')
        logged_in_client.get(f'/schoolList/remove/{college.id}')
        assert b'Harvard University' not in logged_in_client.get('/schoolList/show').data


class TestErrors:

    def test_unknown_route_renders_404(self, client):
        response = client.get('/no/such/page')
        assert response.status_code == 404
        assert b'404' in response.data

    def test_store_unavailable_is_503(self, client, monkeypatch):
        def broken(self, criteria, filters):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        monkeypatch.setattr(Repository, '_query', broken)
        response = client.post('/courses/bySubject', data={'subject': 'COSI'})
        assert response.status_code == 503

    def test_closed_connection_is_503(self, client, monkeypatch):
        def broken(self, criteria, filters):
            raise InterfaceError("SELECT 1", {}, Exception("connection already closed"))
        monkeypatch.setattr(Repository, '_query', broken)
        response = client.post('/courses/bySubject', data={'subject': 'COSI'})
        assert response.status_code == 503

    def test_unexpected_error_is_500(self, client, monkeypatch):
        def boom(subject):
            raise RuntimeError("boom")
        monkeypatch.setattr('services.course_service.by_subject', boom)
        response = client.post('/courses/bySubject', data={'subject': 'COSI'})
        assert response.status_code == 500
        assert b'boom' in response.data
