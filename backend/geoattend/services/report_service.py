"""Attendance export reports."""
import csv
import io
from typing import List, Tuple

import pandas as pd

from geoattend.models.attendance import AttendanceRecord
from geoattend.models.session import AttendanceSession
from geoattend.models.student import Student

PRESENT = 'Hadir'
ABSENT = 'Tidak Hadir'
BOM = '\ufeff'

class ReportService:
    """Builds the student x session attendance matrix."""

    def __init__(self, session):
        self.session = session

    def build_attendance_matrix(self) -> Tuple[List[str], List[List[str]]]:
        """Return (header, rows) with one row per student and one column per session."""
        students = self.session.query(Student).order_by(Student.nim.asc()).all()
        sessions = self.session.query(AttendanceSession).order_by(
            AttendanceSession.created_at.asc(), AttendanceSession.id.asc()
        ).all()

        # One pass over all records so each cell is a set lookup
        attended = {
            f"{student_id}-{session_id}"
            for student_id, session_id in self.session.query(
                AttendanceRecord.student_id, AttendanceRecord.session_id
            ).all()
        }

        header = ['NIM', 'Nama'] + [s.title for s in sessions]
        rows = []
        for student in students:
            row = [student.nim, student.name or '']
            for attendance_session in sessions:
                key = f"{student.id}-{attendance_session.id}"
                row.append(PRESENT if key in attended else ABSENT)
            rows.append(row)

        return header, rows

    def export_csv(self) -> str:
        """Render the matrix as fully quoted CSV with a UTF-8 BOM."""
        header, rows = self.build_attendance_matrix()
        df = pd.DataFrame(rows, columns=header)

        output = io.StringIO()
        df.to_csv(output, index=False, quoting=csv.QUOTE_ALL, lineterminator='\n')
        return BOM + output.getvalue()
