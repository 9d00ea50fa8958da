"""Tests for the app factory logging and response helpers."""
import logging

import pytest
from geoattend import setup_logging
from geoattend.utils.helpers import success_response

@pytest.fixture
def file_logged_app(app, tmp_path):
    """Run the non-testing logging setup against a temporary log file."""
    log_file = tmp_path / 'logs' / 'app.log'
    package_logger = logging.getLogger('geoattend')
    previous_level = package_logger.level
    previous_handlers = list(package_logger.handlers)

    app.config['TESTING'] = False
    app.config['LOG_LEVEL'] = 'INFO'
    app.config['LOG_FILE'] = str(log_file)
    setup_logging(app)
    app.config['TESTING'] = True

    yield log_file

    for handler in package_logger.handlers:
        if handler not in previous_handlers:
            handler.close()
    package_logger.handlers = previous_handlers
    package_logger.setLevel(previous_level)

def read_log(log_file):
    for handler in logging.getLogger('geoattend').handlers:
        handler.flush()
    return log_file.read_text()

def test_package_logger_level_follows_config(file_logged_app):
    assert logging.getLogger('geoattend').level == logging.INFO

def test_service_info_logs_reach_the_file_once(file_logged_app):
    logging.getLogger('geoattend.services.attendance_service').info('check-in accepted')
    logging.getLogger('geoattend.services.attendance_service').debug('noise')

    content = read_log(file_logged_app)
    assert content.count('check-in accepted') == 1
    assert 'noise' not in content
    assert 'Geo-Attend startup' in content

def test_success_response_is_plain_200(app):
    with app.test_request_context():
        response = success_response({'id': 1}, message='Done')

    assert response.status_code == 200
    assert response.get_json() == {'error': False, 'message': 'Done', 'data': {'id': 1}}

def test_success_response_omits_missing_data(app):
    with app.test_request_context():
        response = success_response()

    assert response.get_json() == {'error': False, 'message': 'Success'}
