# File: backend/geoattend/services/attendance_service.py
"""Attendance admission and bulk override service."""
import enum
import logging
from datetime import datetime
from typing import Dict, List, Tuple

from sqlalchemy.exc import IntegrityError

from geoattend.models.attendance import AttendanceRecord, MANUAL_BULK_DEVICE_ID
from geoattend.models.session import AttendanceSession
from geoattend.models.student import Student
from geoattend.services.gps_service import GPSService
from geoattend.utils.exceptions import (
    DeviceMismatch, InvalidRequest, SessionExpired,
    SessionNotFound, StudentNotFound, TooFarFromSession
)
from geoattend.utils.helpers import utcnow, isoformat

logger = logging.getLogger(__name__)

class SubmissionOutcome(enum.Enum):
    """Result of an accepted self-service submission."""
    CREATED = 'created'
    ALREADY_ATTENDED = 'already_attended'

class BulkAction(enum.Enum):
    MARK = 'mark'
    UNMARK = 'unmark'

class AttendanceService:
    """Decides and records attendance against an injected SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def submit_attendance(
        self,
        session_id: str,
        nim: str,
        latitude: float,
        longitude: float,
        device_id: str,
        now: datetime = None
    ) -> Tuple[SubmissionOutcome, AttendanceRecord]:
        """
        Admit a student into a session.

        Gates run in order: session exists, session not expired, student
        exists, within the geofence, then device check on any existing record.
        Only the first failing gate is reported.
        """
        now = now or utcnow()

        attendance_session = self.session.get(AttendanceSession, session_id)
        if attendance_session is None:
            raise SessionNotFound()

        if attendance_session.is_expired(now):
            raise SessionExpired()

        student = self._find_student(nim)
        if student is None:
            raise StudentNotFound()

        location = GPSService.verify_location(latitude, longitude, attendance_session)
        if not location['is_inside']:
            logger.info("Rejected %s for session %s: %.1f m away", nim, session_id, location['distance'])
            raise TooFarFromSession()

        existing = self._find_record(session_id, student.id)
        if existing is not None:
            return self._resolve_existing(existing, device_id), existing

        record = AttendanceRecord(
            session_id=session_id,
            student_id=student.id,
            device_id=device_id,
            manual_override=False,
            created_at=now
        )
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent submit for the same pair
            self.session.rollback()
            existing = self._find_record(session_id, student.id)
            if existing is None:
                raise
            logger.info("Concurrent submit for %s in session %s resolved to existing record", nim, session_id)
            return self._resolve_existing(existing, device_id), existing

        return SubmissionOutcome.CREATED, record

    def bulk_toggle(self, session_id: str, nims: List[str], action: str) -> Dict:
        """Mark or unmark a batch of NIMs, bypassing expiry, geofence and device checks."""
        if not session_id or nims is None or not action:
            raise InvalidRequest('Missing required fields')

        if not isinstance(nims, list) or len(nims) == 0:
            raise InvalidRequest('Invalid NIMs array')

        if not all(isinstance(nim, str) for nim in nims):
            raise InvalidRequest('Invalid NIMs array')

        try:
            bulk_action = BulkAction(action)
        except ValueError:
            raise InvalidRequest('Invalid action')

        # Preserve request order, drop repeats
        unique_nims = list(dict.fromkeys(nims))

        if bulk_action is BulkAction.MARK:
            return self._mark(session_id, unique_nims)
        return self._unmark(session_id, unique_nims)

    def _mark(self, session_id: str, nims: List[str]) -> Dict:
        # SQLite does not enforce the foreign key, so guard against orphan rows
        if self.session.get(AttendanceSession, session_id) is None:
            raise SessionNotFound()

        results = []
        skipped = []

        for nim in nims:
            student = self._find_student(nim)
            if student is None:
                logger.warning("Student with NIM %s not found", nim)
                skipped.append(nim)
                continue

            if self._find_record(session_id, student.id) is not None:
                continue

            record = AttendanceRecord(
                session_id=session_id,
                student_id=student.id,
                device_id=MANUAL_BULK_DEVICE_ID,
                manual_override=True
            )
            self.session.add(record)
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                logger.info("NIM %s was marked concurrently in session %s", nim, session_id)
                continue

            results.append({
                'nim': student.nim,
                'name': student.name,
                'createdAt': isoformat(record.created_at)
            })

        return {
            'success': True,
            'created': len(results),
            'results': results,
            'skipped': skipped
        }

    def _unmark(self, session_id: str, nims: List[str]) -> Dict:
        student_ids = [
            student_id for (student_id,) in
            self.session.query(Student.id).filter(Student.nim.in_(nims)).all()
        ]

        if not student_ids:
            return {
                'success': True,
                'deleted': 0,
                'message': 'No matching students found'
            }

        deleted = self.session.query(AttendanceRecord).filter(
            AttendanceRecord.session_id == session_id,
            AttendanceRecord.student_id.in_(student_ids)
        ).delete(synchronize_session=False)
        self.session.commit()

        return {
            'success': True,
            'deleted': deleted
        }

    def _resolve_existing(self, existing: AttendanceRecord, device_id: str) -> SubmissionOutcome:
        if existing.device_id != device_id:
            logger.warning(
                "Device mismatch for student %s in session %s",
                existing.student_id, existing.session_id
            )
            raise DeviceMismatch()
        return SubmissionOutcome.ALREADY_ATTENDED

    def _find_student(self, nim: str):
        return self.session.query(Student).filter_by(nim=nim).first()

    def _find_record(self, session_id: str, student_id: int):
        return self.session.query(AttendanceRecord).filter_by(
            session_id=session_id,
            student_id=student_id
        ).first()
