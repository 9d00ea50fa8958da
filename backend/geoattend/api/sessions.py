"""Session API endpoints."""
from flask import Blueprint, request, jsonify, current_app
from geoattend import db, limiter
from geoattend.services.qr_service import QRService
from geoattend.services.session_service import SessionService
from geoattend.utils.exceptions import AttendanceError
from geoattend.utils.helpers import error_response
from geoattend.utils.validators import Validator

sessions_bp = Blueprint('sessions', __name__)

@sessions_bp.route('/create', methods=['POST'])
@limiter.limit("30 per hour")
def create_session():
    """Create a new attendance session at the organizer's location."""
    try:
        data = request.get_json(silent=True)
        Validator.require_fields(data, ['title', 'latitude', 'longitude'])
        
        attendance_session = SessionService(db.session).create_session(
            title=data['title'],
            latitude=data['latitude'],
            longitude=data['longitude']
        )
        current_app.logger.info(f"Session {attendance_session.id} created")
        
        return jsonify({'sessionId': attendance_session.id}), 201
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        db.session.rollback()
        current_app.logger.exception('[SESSION_CREATE_ERROR]')
        return error_response('Failed to create session', 500)

@sessions_bp.route('/list', methods=['GET'])
def list_sessions():
    """List every session, newest first."""
    try:
        sessions = SessionService(db.session).list_sessions()
        return jsonify([s.to_dict() for s in sessions]), 200
        
    except Exception:
        current_app.logger.exception('[SESSION_LIST_ERROR]')
        return error_response('Gagal mengambil daftar sesi', 500)

@sessions_bp.route('/<session_id>', methods=['GET'])
def get_session(session_id):
    try:
        attendance_session = SessionService(db.session).get_session(session_id)
        return jsonify(attendance_session.to_dict()), 200
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        current_app.logger.exception('[SESSION_ROUTE_ERROR]')
        return error_response('Internal Server Error', 500)

@sessions_bp.route('/<session_id>/attendance', methods=['GET'])
def list_session_attendance(session_id):
    """Students checked in to a session, oldest first."""
    try:
        records = SessionService(db.session).list_attendance(session_id)
        return jsonify([record.to_dict() for record in records]), 200
        
    except Exception:
        current_app.logger.exception('[SESSION_ATTENDANCE_ERROR]')
        return error_response('Gagal mengambil data absensi', 500)

@sessions_bp.route('/<session_id>/qr', methods=['GET'])
def session_qr(session_id):
    """QR image carrying the session id."""
    try:
        attendance_session = SessionService(db.session).get_session(session_id)
        return jsonify({
            'sessionId': attendance_session.id,
            'qrImage': QRService.generate_session_qr(attendance_session.id)
        }), 200
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        current_app.logger.exception('[SESSION_QR_ERROR]')
        return error_response('Failed to generate QR code', 500)
