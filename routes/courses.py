"""
강의 검색 / 시간표 라우트
검색과 상세 조회는 공개, 시간표는 로그인 필요
"""
from flask import Blueprint, render_template, request, redirect, url_for, g

from config import current_config
from services import course_service, schedule_service
from utils.decorators import login_required

courses_bp = Blueprint('courses', __name__)


def _course_list(courses):
    return render_template('courselist.html', courses=courses)


@courses_bp.route('/courses/bySubject', methods=['POST'])
def by_subject():
    return _course_list(course_service.by_subject(request.form.get('subject')))


@courses_bp.route('/courses/byWord', methods=['POST'])
def by_word():
    return _course_list(course_service.by_word(request.form.get('word')))


@courses_bp.route('/courses/byAvailability', methods=['POST'])
def by_availability():
    return _course_list(course_service.by_availability(request.form.get('subject')))


@courses_bp.route('/courses/byCoursenum', methods=['POST'])
def by_coursenum():
    return _course_list(course_service.by_coursenum(request.form.get('coursenum')))


@courses_bp.route('/courses/show/<int:course_id>')
def show(course_id):
    course = course_service.get_course(course_id)
    return render_template('course.html', course=course)


@courses_bp.route('/courses/byInst/<email>')
def by_instructor(email):
    domain = current_config().instructor_email_domain
    return _course_list(course_service.by_instructor(course_service.instructor_email(email, domain)))


@courses_bp.route('/courses/byInst', methods=['POST'])
def by_instructor_form():
    domain = current_config().instructor_email_domain
    email = course_service.instructor_email(request.form.get('email', ''), domain)
    return _course_list(course_service.by_instructor(email))


# --- 시간표 ---
@courses_bp.route('/addCourse/<int:course_id>')
@login_required
def add_course(course_id):
    schedule_service.add_course(g.user.id, course_id)
    return redirect(url_for('courses.schedule'))


@courses_bp.route('/schedule/show')
@login_required
def schedule():
    courses = schedule_service.scheduled_courses(g.user.id)
    return render_template('schedule.html', courses=courses)


@courses_bp.route('/schedule/remove/<int:course_id>')
@login_required
def remove_course(course_id):
    schedule_service.remove_course(g.user.id, course_id)
    return redirect(url_for('courses.schedule'))
