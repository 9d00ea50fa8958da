"""Domain errors raised by the attendance services."""

class AttendanceError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500
    default_message = 'Server error'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class InvalidRequest(AttendanceError):
    status_code = 400
    default_message = 'Invalid request'

class NotFoundError(AttendanceError):
    status_code = 404
    default_message = 'Not found'

class SessionNotFound(NotFoundError):
    default_message = 'Session not found'

class StudentNotFound(NotFoundError):
    default_message = 'NIM tidak ditemukan'

class SessionExpired(AttendanceError):
    status_code = 400
    default_message = 'This session has expired'

class TooFarFromSession(AttendanceError):
    status_code = 400
    default_message = 'You are too far from the session location'

class DeviceMismatch(AttendanceError):
    status_code = 403
    default_message = 'Attendance already submitted from a different device'
