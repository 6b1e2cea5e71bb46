"""
Email service for sending notifications
"""

import smtplib
import ssl
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
from flask import current_app
from nodues.utils.exceptions import EmailError
from nodues.utils.helpers import log_info


class EmailService:
    """Email service class"""

    @staticmethod
    def send_notification_email(to_email: str, subject: str, html_content: str) -> bool:
        """
        Send notification email

        Args:
            to_email: Recipient email
            subject: Email subject
            html_content: Rendered HTML body

        Returns:
            True if sent, False if mail is disabled
        """
        if not current_app.config.get('MAIL_ENABLED'):
            log_info(f"Mail disabled, skipping '{subject}' to {to_email}")
            return False

        try:
            return EmailService._send_email_html(to_email, subject, html_content)
        except EmailError:
            raise
        except Exception as e:
            raise EmailError(f"Failed to send notification email: {str(e)}") from e

    @staticmethod
    def _send_email_html(to_email: str, subject: str, html_content: str) -> bool:
        """Send HTML email"""
        # Get email configuration
        mail_server = current_app.config.get('MAIL_SERVER', 'smtp.gmail.com')
        mail_port = current_app.config.get('MAIL_PORT', 587)
        mail_username = current_app.config.get('MAIL_USERNAME')
        mail_password = current_app.config.get('MAIL_PASSWORD')
        sender_name = current_app.config.get('MAIL_SENDER_NAME', 'No-Dues Portal')

        if not all([mail_username, mail_password]):
            raise EmailError("Email configuration not found")

        # Create message
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = formataddr((sender_name, mail_username))
        msg['To'] = to_email

        # Add HTML content
        html_part = MIMEText(html_content, 'html')
        msg.attach(html_part)

        # Send email
        context = ssl.create_default_context()
        with smtplib.SMTP(mail_server, mail_port) as server:
            if current_app.config.get('MAIL_USE_TLS', True):
                server.starttls(context=context)
            server.login(mail_username, mail_password)
            server.send_message(msg)

        return True
