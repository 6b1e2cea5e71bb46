"""
Shared fixtures: a testing app on in-memory SQLite with seeded people.
"""
import pytest

from nodues import create_app
from nodues.models import db, Student, Staff, Department
from nodues.models.user import ROLE_FACULTY, ROLE_ADMIN


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def student(app):
    stu = Student(enrollment_no='0801CS201001', full_name='Asha Verma',
                  email='asha@example.edu', program='BTech CSE', batch='2020')
    db.session.add(stu)
    db.session.commit()
    return stu


@pytest.fixture
def other_student(app):
    stu = Student(enrollment_no='0801CS201002', full_name='Ravi Kumar',
                  email='ravi@example.edu', program='BTech CSE', batch='2020')
    db.session.add(stu)
    db.session.commit()
    return stu


@pytest.fixture
def staff(app):
    """One faculty member per seeded department plus an admin, keyed by department."""
    members = {}
    for key in ('library', 'accounts', 'hostel', 'department'):
        member = Staff(full_name=f'{key.title()} Officer', email=f'{key}@example.edu',
                       role=ROLE_FACULTY, department=key)
        db.session.add(member)
        members[key] = member
    members['admin'] = Staff(full_name='Dean Admin', email='admin@example.edu', role=ROLE_ADMIN)
    db.session.add(members['admin'])
    db.session.commit()
    return members


@pytest.fixture
def three_departments(app):
    """Only library, accounts and hostel are active for new requests."""
    Department.query.filter_by(key='department').update({'is_active': False})
    db.session.commit()
    return ['library', 'accounts', 'hostel']
