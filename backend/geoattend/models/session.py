"""Attendance session anchored to a GPS coordinate."""
import secrets
from datetime import datetime, timedelta
from geoattend import db
from geoattend.models.base import BaseModel
from geoattend.utils.helpers import utcnow, isoformat

# Sessions accept self-service check-ins for this long after creation
SESSION_DURATION = timedelta(hours=2)

def generate_session_id() -> str:
    """Generate an opaque 24 hex character session id."""
    return secrets.token_hex(12)

class AttendanceSession(BaseModel):
    """A time-boxed check-in window at a fixed location."""
    
    __tablename__ = 'sessions'
    
    id = db.Column(db.String(24), primary_key=True, default=generate_session_id)
    title = db.Column(db.String(255), nullable=False)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)

    def is_expired(self, now: datetime = None) -> bool:
        """A session is expired strictly after its expires_at."""
        return (now or utcnow()) > self.expires_at
    
    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'createdAt': isoformat(self.created_at),
            'expiresAt': isoformat(self.expires_at),
            'isActive': not self.is_expired()
        }
    
    def __repr__(self):
        return f'<AttendanceSession {self.id} {self.title}>'
