"""Tests for roster and history queries."""
import pandas as pd
import pytest
from geoattend import db
from geoattend.models import Student
from geoattend.services.student_service import StudentService
from geoattend.utils.exceptions import InvalidRequest

def test_roster_ordered_by_nim(client, make_student):
    make_student('B2', 'Budi')
    make_student('A1', 'Ani')
    
    response = client.get('/api/student')
    
    assert response.status_code == 200
    assert response.get_json() == [
        {'nim': 'A1', 'name': 'Ani'},
        {'nim': 'B2', 'name': 'Budi'},
    ]

def test_history(client, student, make_session):
    kalkulus = make_session(title='Kalkulus')
    make_session(title='Fisika')
    client.post('/api/attendance/submit', json={
        'sessionId': kalkulus.id, 'nim': 'S1',
        'latitude': 0, 'longitude': 0, 'deviceId': 'd1'
    })
    
    response = client.get('/api/student/history/S1')
    
    assert response.status_code == 200
    data = response.get_json()
    assert len(data) == 1
    assert data[0]['sessionId'] == kalkulus.id
    assert data[0]['title'] == 'Kalkulus'
    assert data[0]['createdAt']

def test_history_unknown_student(client):
    response = client.get('/api/student/history/ghost')
    assert response.status_code == 404
    assert response.get_json()['message'] == 'NIM tidak ditemukan'

def test_import_roster(app, make_student):
    make_student('001', 'Existing')
    df = pd.DataFrame({
        'nim': ['001', ' 002 ', None, '003', '003'],
        'name': ['Again', 'Dewi', 'Blank', None, 'Duplicate']
    })
    
    summary = StudentService(db.session).import_roster(df)
    
    assert summary == {'created': 2, 'skipped': 3}
    students = {s.nim: s.name for s in db.session.query(Student).all()}
    assert students == {'001': 'Existing', '002': 'Dewi', '003': ''}

def test_import_roster_requires_nim_column(app):
    with pytest.raises(InvalidRequest):
        StudentService(db.session).import_roster(pd.DataFrame({'name': ['x']}))

def test_import_roster_command(app, tmp_path):
    roster = tmp_path / 'roster.csv'
    roster.write_text('nim,name\n0123,Rina\n0456,Tono\n')
    
    result = app.test_cli_runner().invoke(args=['import-roster', str(roster)])
    
    assert result.exit_code == 0
    assert 'Imported 2 students' in result.output
    # NIMs keep their leading zeros
    assert db.session.query(Student).filter_by(nim='0123').one().name == 'Rina'
