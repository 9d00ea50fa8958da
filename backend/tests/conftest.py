"""Shared fixtures for the test suite."""
from datetime import timedelta

import pytest
from geoattend import create_app, db
from geoattend.models import Student, AttendanceSession
from geoattend.models.session import SESSION_DURATION
from geoattend.utils.helpers import utcnow

@pytest.fixture
def app():
    """Create test app."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()

@pytest.fixture
def make_student(app):
    """Factory for roster entries."""
    def _make(nim, name=None):
        student = Student(nim=nim, name=name or f'Student {nim}')
        db.session.add(student)
        db.session.commit()
        return student
    return _make

@pytest.fixture
def make_session(app):
    """Factory for sessions; created_at defaults to now."""
    def _make(title='Kuliah', latitude=0.0, longitude=0.0, created_at=None, expires_at=None):
        created_at = created_at or utcnow()
        attendance_session = AttendanceSession(
            title=title,
            latitude=latitude,
            longitude=longitude,
            created_at=created_at,
            expires_at=expires_at or created_at + SESSION_DURATION
        )
        db.session.add(attendance_session)
        db.session.commit()
        return attendance_session
    return _make

@pytest.fixture
def student(make_student):
    return make_student('S1', 'Siti')

@pytest.fixture
def open_session(make_session):
    """Session at (0, 0) created now."""
    return make_session()

@pytest.fixture
def expired_session(make_session):
    now = utcnow()
    return make_session(
        title='Expired',
        created_at=now - timedelta(hours=2, minutes=1),
        expires_at=now - timedelta(minutes=1)
    )
