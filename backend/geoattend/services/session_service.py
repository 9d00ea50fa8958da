"""Session lifecycle service."""
from typing import List

from geoattend.models.attendance import AttendanceRecord
from geoattend.models.session import AttendanceSession, SESSION_DURATION
from geoattend.utils.exceptions import SessionNotFound
from geoattend.utils.helpers import utcnow
from geoattend.utils.validators import Validator

class SessionService:
    """Creates and reads attendance sessions."""

    def __init__(self, session):
        self.session = session

    def create_session(self, title: str, latitude, longitude) -> AttendanceSession:
        """Create a session that stays open for a fixed two hours."""
        title = Validator.non_empty_string(title, 'title')
        latitude = Validator.coordinate(latitude, 'latitude')
        longitude = Validator.coordinate(longitude, 'longitude')

        now = utcnow()
        attendance_session = AttendanceSession(
            title=title,
            latitude=latitude,
            longitude=longitude,
            created_at=now,
            expires_at=now + SESSION_DURATION
        )
        self.session.add(attendance_session)
        self.session.commit()
        return attendance_session

    def get_session(self, session_id: str) -> AttendanceSession:
        attendance_session = self.session.get(AttendanceSession, session_id)
        if attendance_session is None:
            raise SessionNotFound()
        return attendance_session

    def list_sessions(self) -> List[AttendanceSession]:
        """All sessions, newest first, expired ones included."""
        return self.session.query(AttendanceSession).order_by(
            AttendanceSession.created_at.desc()
        ).all()

    def list_attendance(self, session_id: str) -> List[AttendanceRecord]:
        return self.session.query(AttendanceRecord).filter_by(
            session_id=session_id
        ).order_by(AttendanceRecord.created_at.asc(), AttendanceRecord.id.asc()).all()
