"""
Tests for the department registry seeded from configuration.
"""
import pytest

from nodues.models import Department
from nodues.services import DepartmentRegistry, ClearanceService
from nodues.utils.exceptions import ValidationError


def test_app_start_seeds_configured_departments(app):
    assert DepartmentRegistry.list_active_department_keys() == app.config['CLEARANCE_DEPARTMENTS']
    assert Department.query.filter_by(key='library').one().name == 'Library'


def test_seeding_is_idempotent(app):
    assert DepartmentRegistry.seed_departments(['library', 'accounts']) == 0
    assert Department.query.count() == 4


def test_seeding_adds_new_keys(app):
    created = DepartmentRegistry.seed_departments(['Library', 'sports', ' tp ', ''])
    assert created == 2
    assert {'sports', 'tp'} <= set(DepartmentRegistry.list_active_department_keys())


def test_deactivated_department_skipped_for_new_requests(student):
    DepartmentRegistry.set_active('hostel', False)

    assert 'hostel' not in DepartmentRegistry.list_active_department_keys()
    req = ClearanceService.create_request(student.id)
    assert 'hostel' not in req.department_statuses
    assert len(DepartmentRegistry.list_departments()) == 4


def test_existing_requests_keep_their_departments(student):
    req = ClearanceService.create_request(student.id)
    DepartmentRegistry.set_active('hostel', False)

    assert 'hostel' in ClearanceService.get_request(req.id).department_statuses


def test_reactivate(app):
    DepartmentRegistry.set_active('hostel', False)
    DepartmentRegistry.set_active('HOSTEL', True)
    assert 'hostel' in DepartmentRegistry.list_active_department_keys()


def test_set_active_unknown(app):
    with pytest.raises(ValidationError):
        DepartmentRegistry.set_active('canteen', False)
