# File: backend/geoattend/api/attendance.py
"""Attendance API endpoints."""
from flask import Blueprint, request, jsonify, current_app
from geoattend import db, limiter
from geoattend.services.attendance_service import AttendanceService, SubmissionOutcome, BulkAction
from geoattend.utils.exceptions import AttendanceError
from geoattend.utils.helpers import success_response, error_response
from geoattend.utils.validators import Validator

attendance_bp = Blueprint('attendance', __name__)

@attendance_bp.route('/submit', methods=['POST'])
@limiter.limit("10 per minute")
def submit_attendance():
    """Self-service check-in gated by expiry, geofence and device."""
    try:
        data = request.get_json(silent=True)
        Validator.require_fields(data, ['sessionId', 'nim', 'latitude', 'longitude', 'deviceId'])
        
        outcome, _ = AttendanceService(db.session).submit_attendance(
            session_id=str(data['sessionId']),
            nim=str(data['nim']).strip(),
            latitude=Validator.coordinate(data['latitude'], 'latitude'),
            longitude=Validator.coordinate(data['longitude'], 'longitude'),
            device_id=str(data['deviceId'])
        )
        
        if outcome is SubmissionOutcome.ALREADY_ATTENDED:
            return success_response(message='Already attended')
        return success_response(message='Attendance submitted successfully')
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        db.session.rollback()
        current_app.logger.exception('[SUBMIT_ATTENDANCE_ERROR]')
        return error_response('Server error', 500)

@attendance_bp.route('/bulk-toggle', methods=['POST'])
def bulk_toggle():
    """Administrative mark/unmark of several NIMs at once."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return error_response('Missing required fields', 400)
        
        result = AttendanceService(db.session).bulk_toggle(
            session_id=data.get('sessionId'),
            nims=data.get('nims'),
            action=data.get('action')
        )
        
        status_code = 201 if data.get('action') == BulkAction.MARK.value else 200
        return jsonify(result), status_code
        
    except AttendanceError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        db.session.rollback()
        current_app.logger.exception('[BULK_TOGGLE_ATTENDANCE_ERROR]')
        return error_response('Failed to update attendance', 500)
