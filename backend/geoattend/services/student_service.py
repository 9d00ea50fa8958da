"""Student roster service."""
from typing import Dict, List

import pandas as pd

from geoattend.models.attendance import AttendanceRecord
from geoattend.models.session import AttendanceSession
from geoattend.models.student import Student
from geoattend.utils.exceptions import InvalidRequest, StudentNotFound
from geoattend.utils.helpers import isoformat

class StudentService:
    """Service for roster lookups and imports."""

    def __init__(self, session):
        self.session = session

    def list_students(self) -> List[Student]:
        return self.session.query(Student).order_by(Student.nim.asc()).all()

    def get_history(self, nim: str) -> List[Dict]:
        """Sessions a student attended, newest check-in first."""
        student = self.session.query(Student).filter_by(nim=nim).first()
        if student is None:
            raise StudentNotFound()

        rows = self.session.query(AttendanceRecord, AttendanceSession).join(
            AttendanceSession, AttendanceRecord.session_id == AttendanceSession.id
        ).filter(
            AttendanceRecord.student_id == student.id
        ).order_by(AttendanceRecord.created_at.desc(), AttendanceRecord.id.desc()).all()

        return [
            {
                'sessionId': attendance_session.id,
                'title': attendance_session.title,
                'createdAt': isoformat(record.created_at)
            }
            for record, attendance_session in rows
        ]

    def import_roster(self, df: pd.DataFrame) -> Dict[str, int]:
        """Create students from a DataFrame with nim and name columns."""
        if 'nim' not in df.columns:
            raise InvalidRequest("Roster file must have a 'nim' column")

        df = df.copy()
        if 'name' not in df.columns:
            df['name'] = ''
        df['nim'] = df['nim'].fillna('').astype(str).str.strip()
        df['name'] = df['name'].fillna('').astype(str).str.strip()

        known = {nim for (nim,) in self.session.query(Student.nim).all()}
        created = 0
        skipped = 0

        for _, row in df.iterrows():
            nim = row['nim']
            if not nim or nim in known:
                skipped += 1
                continue
            self.session.add(Student(nim=nim, name=row['name']))
            known.add(nim)
            created += 1

        self.session.commit()
        return {'created': created, 'skipped': skipped}
