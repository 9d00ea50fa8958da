# backend/geoattend/models/attendance.py
"""Attendance record model."""
from geoattend import db
from geoattend.models.base import BaseModel
from geoattend.utils.helpers import isoformat

# Device id stamped on records created by the bulk toggler
MANUAL_BULK_DEVICE_ID = 'manual-bulk'

class AttendanceRecord(BaseModel):
    """One student's check-in for one session."""
    
    __tablename__ = 'attendances'
    __table_args__ = (
        db.UniqueConstraint('session_id', 'student_id', name='uq_attendance_session_student'),
    )
    
    session_id = db.Column(db.String(24), db.ForeignKey('sessions.id'), nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False, index=True)
    device_id = db.Column(db.String(255), nullable=False)
    manual_override = db.Column(db.Boolean, nullable=False, default=False)
    
    session = db.relationship('AttendanceSession')
    student = db.relationship('Student')
    
    def to_dict(self):
        return {
            'nim': self.student.nim,
            'name': self.student.name or 'Unknown',
            'createdAt': isoformat(self.created_at),
            'manualOverride': self.manual_override
        }
    
    def __repr__(self):
        return f'<AttendanceRecord {self.student_id}-{self.session_id}>'
