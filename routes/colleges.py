"""
대학 검색 / 관심 대학 목록 라우트
"""
from flask import Blueprint, render_template, request, redirect, url_for, g, jsonify

from config import current_config
from services import college_service, school_list_service, load_dataset
from utils.decorators import login_required

colleges_bp = Blueprint('colleges', __name__)


@colleges_bp.route('/upsertDB')
def upsert_db():
    """정적 데이터셋으로 대학 데이터 갱신 (관리용)"""
    records = load_dataset(current_config().college_data_path)
    num = college_service.upsert_colleges(records)
    return f"data uploaded: {num}"


@colleges_bp.route('/colleges/byName', methods=['POST'])
def by_name():
    colleges = college_service.by_name(request.form.get('name'))
    return render_template('collegelist.html', colleges=colleges)


@colleges_bp.route('/collegelist/show')
def college_list():
    return render_template('collegelist.html', colleges=[])


@colleges_bp.route('/colleges/show/<int:college_id>')
def show(college_id):
    college = college_service.get_college(college_id)
    return jsonify(college.to_dict())


# --- 관심 대학 목록 ---
@colleges_bp.route('/addCollege/<int:college_id>')
@login_required
def add_college(college_id):
    school_list_service.add_college(g.user.id, college_id)
    return redirect(url_for('colleges.school_list'))


@colleges_bp.route('/schoolList/show')
@login_required
def school_list():
    colleges = school_list_service.listed_colleges(g.user.id)
    return render_template('schoollist.html', colleges=colleges)


@colleges_bp.route('/schoolList/remove/<int:college_id>')
@login_required
def remove_college(college_id):
    school_list_service.remove_college(g.user.id, college_id)
    return redirect(url_for('colleges.school_list'))
