"""Dashboard API endpoints."""
from flask import Blueprint, current_app
from geoattend import db
from geoattend.services.report_service import ReportService
from geoattend.utils.helpers import error_response, utcnow

dashboard_bp = Blueprint('dashboard', __name__)

@dashboard_bp.route('/export', methods=['GET'])
def export_attendance():
    """Download the student x session attendance matrix as CSV."""
    try:
        content = ReportService(db.session).export_csv()
        filename = f"absensi-{utcnow().date().isoformat()}.csv"
        
        return content, 200, {
            'Content-Type': 'text/csv; charset=utf-8',
            'Content-Disposition': f'attachment; filename="{filename}"'
        }
        
    except Exception:
        current_app.logger.exception('[EXPORT_ATTENDANCE_ERROR]')
        return error_response('Gagal mengekspor data absensi', 500)
