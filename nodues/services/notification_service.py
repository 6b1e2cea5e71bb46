"""
Student-facing notification hooks
"""

from typing import Optional
from flask import current_app
from nodues.models import db, Notification, Staff, Student
from nodues.models.clearance import STATUS_APPROVED
from nodues.services.email_service import EmailService
from nodues.templates.email_templates import (
    get_verification_email_template, get_overall_status_email_template,
    get_certificate_email_template
)
from nodues.utils.helpers import log_info, log_error


class NotificationService:
    """Fire-and-forget side effects of lifecycle transitions"""

    @staticmethod
    def create_notification(student_id: int, actor_name: str, action: str, phase: str,
                            message: str) -> Optional[Notification]:
        """Create a notification for a student"""
        try:
            notification = Notification(
                student_id=student_id,
                actor_name=actor_name,
                action=action,
                phase=phase,
                message=message,
            )
            db.session.add(notification)
            db.session.commit()
            log_info(f"Notification created for student {student_id}: {message}")
            return notification
        except Exception as e:
            # Don't affect the main transaction if notification fails
            db.session.rollback()
            log_error("Error creating notification", e)
            return None

    @staticmethod
    def notify_department_decision(request, department_key: str, actor_id: int,
                                   decision: str, remarks: str) -> None:
        staff = db.session.get(Staff, actor_id) if actor_id is not None else None
        actor_name = staff.full_name if staff else 'Staff'
        department = department_key.replace('_', ' ').title()

        if decision == STATUS_APPROVED:
            message = f"{department} cleared your No-Dues request"
        else:
            message = f"{actor_name} ({department}) rejected your No-Dues request"
            if remarks:
                message += f" due to: {remarks}"

        NotificationService.create_notification(
            request.student_id, actor_name, decision.lower(), department, message
        )

    @staticmethod
    def send_verification_email(request) -> None:
        student = db.session.get(Student, request.student_id)
        if not student or not request.verification_token:
            return

        base_url = current_app.config.get('FRONTEND_URL', '').rstrip('/')
        link = f"{base_url}/verify-nodues?token={request.verification_token}"
        ttl_hours = current_app.config.get('VERIFICATION_TOKEN_TTL_HOURS', 24)
        html = get_verification_email_template(student.full_name, link, ttl_hours)
        NotificationService._send(student.email, "Verify Your No-Dues Request", html)

    @staticmethod
    def send_overall_status_email(request) -> None:
        student = db.session.get(Student, request.student_id)
        if not student:
            return

        html = get_overall_status_email_template(student.full_name, request.overall_status, request.id)
        NotificationService._send(student.email, f"No-Dues Request {request.overall_status.title()}", html)

    @staticmethod
    def send_certificate_email(certificate) -> None:
        student = db.session.get(Student, certificate.student_id)
        if not student:
            return

        html = get_certificate_email_template(student.full_name, certificate.certificate_id, student.enrollment_no)
        NotificationService._send(student.email, "Your No-Dues Certificate", html)

    @staticmethod
    def _send(to_email: str, subject: str, html: str) -> None:
        try:
            EmailService.send_notification_email(to_email, subject, html)
        except Exception as e:
            log_error(f"Email sending failed for {to_email}", e)
