"""
Tests for the audit sink and the serialized shape of stored records.
"""
from nodues.models import Notification, Department
from nodues.models.clearance import STATUS_APPROVED
from nodues.services import AuditService, ClearanceService


def test_record_returns_entry(app):
    entry = AuditService.record(7, 'CREATE_REQUEST', 42, {'note': 'manual'})

    assert entry.to_dict()['target_id'] == '42'
    assert entry.to_dict()['details'] == {'note': 'manual'}
    assert entry.target_type == 'ClearanceRequest'


def test_list_events_newest_first_and_filtered(student, staff):
    req = ClearanceService.create_request(student.id)
    ClearanceService.set_department_status(req.id, 'library', staff['library'].id, STATUS_APPROVED)
    ClearanceService.set_department_status(req.id, 'hostel', staff['hostel'].id, STATUS_APPROVED)

    everything = AuditService.list_events()
    approvals = AuditService.list_events(action='APPROVE_DEPARTMENT', page=1, page_size=1)

    assert everything['total'] == 3
    assert everything['items'][-1].action == 'CREATE_REQUEST'
    assert approvals['total'] == 2
    assert len(approvals['items']) == 1
    assert approvals['items'][0].details['department'] == 'hostel'


def test_serialized_records(student, staff):
    req = ClearanceService.create_request(student.id)
    ClearanceService.set_department_status(req.id, 'library', staff['library'].id, STATUS_APPROVED)

    assert student.to_dict()['enrollment_no'] == '0801CS201001'
    assert staff['library'].to_dict()['department'] == 'library'
    assert staff['admin'].to_dict()['role'] == 'ADMIN'
    assert Department.query.filter_by(key='hostel').one().to_dict()['is_active'] is True
    notification = Notification.query.one().to_dict()
    assert notification['phase'] == 'Library'
    entry = req.to_dict()['department_statuses']['library']
    assert entry['updated_by'] == staff['library'].id
    assert entry['updated_at'] is not None
