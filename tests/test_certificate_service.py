"""
Tests for certificate issuance behind the readiness gate.
"""
import re
from unittest.mock import patch

import pytest

from nodues.models import AuditLog, Certificate
from nodues.models.clearance import STATUS_APPROVED, STATUS_REJECTED
from nodues.services import CertificateService, ClearanceService
from nodues.services.certificate_service import generate_certificate_id, _find_certificate
from nodues.utils.exceptions import CertificateNotEligible, CertificateNotFound, RequestNotFound


@pytest.fixture
def approved_request(student, staff, three_departments):
    req = ClearanceService.create_request(student.id)
    for key in three_departments:
        ClearanceService.set_department_status(req.id, key, staff[key].id, STATUS_APPROVED)
    return req


class TestIssueCertificate:

    def test_pending_request_is_refused(self, student, staff):
        req = ClearanceService.create_request(student.id)

        with pytest.raises(CertificateNotEligible):
            CertificateService.issue_certificate(req.id, staff['admin'].id)

        assert Certificate.query.count() == 0

    def test_issue_for_approved_request(self, approved_request, staff, app):
        certificate = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)

        assert certificate.request_id == approved_request.id
        assert certificate.student_id == approved_request.student_id
        assert certificate.issued_by == staff['admin'].id
        assert certificate.pdf_path == f"{app.config['CERTIFICATE_DIR']}/{certificate.certificate_id}.pdf"
        event = AuditLog.query.filter_by(action='GENERATE_CERTIFICATE').one()
        assert event.target_type == 'Certificate'
        assert event.details['request_id'] == approved_request.id

    def test_issue_is_idempotent(self, approved_request, staff):
        first = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)
        second = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)

        assert first.certificate_id == second.certificate_id
        assert Certificate.query.count() == 1

    def test_concurrent_issue_returns_winner(self, approved_request, staff):
        winner = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)

        # The second issuer's lookup ran before the winner committed
        lookups = iter([None])
        with patch('nodues.services.certificate_service._find_certificate',
                   side_effect=lambda request_id: next(lookups, _find_certificate(request_id))):
            loser = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)

        assert loser.certificate_id == winner.certificate_id
        assert Certificate.query.count() == 1

    def test_late_rejection_closes_the_gate(self, approved_request, staff):
        ClearanceService.set_department_status(approved_request.id, 'library', staff['library'].id,
                                               STATUS_REJECTED, remarks="Lost book found on record")

        with pytest.raises(CertificateNotEligible):
            CertificateService.issue_certificate(approved_request.id, staff['admin'].id)

    def test_unknown_request(self, app, staff):
        with pytest.raises(RequestNotFound):
            CertificateService.issue_certificate(777, staff['admin'].id)

    def test_summary_counts_certificates(self, approved_request, staff):
        CertificateService.issue_certificate(approved_request.id, staff['admin'].id)
        assert ClearanceService.summarize()['certificates_issued'] == 1


class TestVerifyCertificate:

    def test_verify_known_certificate(self, approved_request, staff):
        issued = CertificateService.issue_certificate(approved_request.id, staff['admin'].id)
        found = CertificateService.verify_certificate(issued.certificate_id)
        assert found.id == issued.id
        assert found.to_dict()['request_id'] == approved_request.id

    def test_verify_unknown_certificate(self, app):
        with pytest.raises(CertificateNotFound):
            CertificateService.verify_certificate('ND-NOPE-000000')

    def test_list_student_certificates(self, approved_request, staff, student):
        CertificateService.issue_certificate(approved_request.id, staff['admin'].id)
        certificates = CertificateService.list_student_certificates(student.id)
        assert [c.request_id for c in certificates] == [approved_request.id]


def test_certificate_id_format():
    certificate_id = generate_certificate_id()
    assert re.fullmatch(r'ND-[0-9A-Z]+-[0-9A-Z]{6}', certificate_id)
    assert generate_certificate_id() != certificate_id
