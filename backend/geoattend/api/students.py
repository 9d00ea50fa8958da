"""Student roster API endpoints."""
from flask import Blueprint, jsonify, current_app
from geoattend import db
from geoattend.services.student_service import StudentService
from geoattend.utils.exceptions import AttendanceError
from geoattend.utils.helpers import error_response

students_bp = Blueprint('students', __name__)

@students_bp.route('', methods=['GET'])
def list_students():
    """Full roster ordered by NIM."""
    try:
        students = StudentService(db.session).list_students()
        return jsonify([student.to_dict() for student in students]), 200
        
    except Exception:
        current_app.logger.exception('[STUDENT_API_ERROR]')
        return error_response('Gagal mengambil data mahasiswa', 500)

@students_bp.route('/history/<nim>', methods=['GET'])
def student_history(nim):
    try:
        history = StudentService(db.session).get_history(nim)
        return jsonify(history), 200
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        current_app.logger.exception('[STUDENT_HISTORY_ERROR]')
        return error_response('Server error', 500)
