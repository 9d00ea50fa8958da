"""Tests for the self-service admission decision."""
from datetime import timedelta

import pytest
from geoattend import db
from geoattend.models import AttendanceRecord
from geoattend.services.attendance_service import AttendanceService, SubmissionOutcome
from geoattend.services.gps_service import GPSService
from geoattend.utils.exceptions import (
    DeviceMismatch, SessionExpired, SessionNotFound,
    StudentNotFound, TooFarFromSession
)

NEAR = (0, 0.00044)   # ~49 m from (0, 0)
FAR = (0, 0.001)      # ~111 m from (0, 0)

@pytest.fixture
def service(app):
    return AttendanceService(db.session)

def record_count():
    return db.session.query(AttendanceRecord).count()

def test_scenario_a_creates_record(service, open_session, student):
    outcome, record = service.submit_attendance(open_session.id, 'S1', *NEAR, 'd1')
    
    assert outcome is SubmissionOutcome.CREATED
    assert record.device_id == 'd1'
    assert record.manual_override is False
    assert record.student_id == student.id
    assert record_count() == 1

def test_resubmit_same_device_is_idempotent(service, open_session, student):
    service.submit_attendance(open_session.id, 'S1', *NEAR, 'd1')
    outcome, record = service.submit_attendance(open_session.id, 'S1', 0, 0, 'd1')
    
    assert outcome is SubmissionOutcome.ALREADY_ATTENDED
    assert record.device_id == 'd1'
    assert record_count() == 1

def test_scenario_b_other_device_is_rejected(service, open_session, student):
    _, original = service.submit_attendance(open_session.id, 'S1', *NEAR, 'd1')
    created_at = original.created_at
    
    with pytest.raises(DeviceMismatch) as exc:
        service.submit_attendance(open_session.id, 'S1', *NEAR, 'd2')
    
    assert exc.value.status_code == 403
    db.session.expire_all()
    stored = db.session.query(AttendanceRecord).one()
    assert stored.device_id == 'd1'
    assert stored.created_at == created_at

def test_unknown_session(service, student):
    with pytest.raises(SessionNotFound):
        service.submit_attendance('0' * 24, 'S1', 0, 0, 'd1')

def test_scenario_c_expired_wins_over_location(service, expired_session, student):
    with pytest.raises(SessionExpired):
        service.submit_attendance(expired_session.id, 'S1', *FAR, 'd1')

def test_expired_checked_before_student(service, expired_session):
    with pytest.raises(SessionExpired):
        service.submit_attendance(expired_session.id, 'nobody', 0, 0, 'd1')

def test_expiry_boundary(service, open_session, student):
    expires_at = open_session.expires_at
    
    with pytest.raises(SessionExpired):
        service.submit_attendance(open_session.id, 'S1', 0, 0, 'd1',
                                  now=expires_at + timedelta(seconds=1))
    
    outcome, _ = service.submit_attendance(open_session.id, 'S1', 0, 0, 'd1',
                                           now=expires_at - timedelta(seconds=1))
    assert outcome is SubmissionOutcome.CREATED

def test_unknown_student_checked_before_location(service, open_session):
    with pytest.raises(StudentNotFound) as exc:
        service.submit_attendance(open_session.id, 'nobody', *FAR, 'd1')
    assert exc.value.status_code == 404

def test_too_far(service, open_session, student):
    with pytest.raises(TooFarFromSession):
        service.submit_attendance(open_session.id, 'S1', *FAR, 'd1')
    assert record_count() == 0

def test_location_checked_before_device(service, open_session, student):
    service.submit_attendance(open_session.id, 'S1', *NEAR, 'd1')
    
    with pytest.raises(TooFarFromSession):
        service.submit_attendance(open_session.id, 'S1', *FAR, 'd2')

@pytest.mark.parametrize('distance, accepted', [(50.0, True), (50.0001, False)])
def test_geofence_boundary(service, open_session, student, monkeypatch, distance, accepted):
    monkeypatch.setattr(GPSService, 'calculate_distance', staticmethod(lambda *args: distance))
    
    if accepted:
        outcome, _ = service.submit_attendance(open_session.id, 'S1', 0, 0, 'd1')
        assert outcome is SubmissionOutcome.CREATED
    else:
        with pytest.raises(TooFarFromSession):
            service.submit_attendance(open_session.id, 'S1', 0, 0, 'd1')

def _lose_race_to(service, monkeypatch, student, session_id, winner_device):
    """Make the first existence check miss a record inserted by a concurrent request."""
    real_find = service._find_record
    calls = []
    
    def racing_find(sid, student_id):
        calls.append(sid)
        if len(calls) == 1:
            db.session.add(AttendanceRecord(
                session_id=session_id,
                student_id=student.id,
                device_id=winner_device
            ))
            db.session.commit()
            return None
        return real_find(sid, student_id)
    
    monkeypatch.setattr(service, '_find_record', racing_find)

def test_concurrent_insert_same_device(service, open_session, student, monkeypatch):
    _lose_race_to(service, monkeypatch, student, open_session.id, 'd1')
    
    outcome, record = service.submit_attendance(open_session.id, 'S1', *NEAR, 'd1')
    
    assert outcome is SubmissionOutcome.ALREADY_ATTENDED
    assert record_count() == 1

def test_concurrent_insert_other_device(service, open_session, student, monkeypatch):
    _lose_race_to(service, monkeypatch, student, open_session.id, 'd1')
    
    with pytest.raises(DeviceMismatch):
        service.submit_attendance(open_session.id, 'S1', *NEAR, 'd2')
    assert record_count() == 1
