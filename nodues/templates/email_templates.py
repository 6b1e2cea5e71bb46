def _wrap(title: str, body_html: str) -> str:
    """Shared responsive layout for all portal emails."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
</head>
<body style="margin: 0; padding: 0; font-family: Arial, Helvetica, sans-serif; background-color: #f4f6fa;">
    <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="background-color: #f4f6fa;">
        <tr>
            <td align="center" style="padding: 20px 0;">
                <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="600" style="max-width: 600px; width: 100%; background-color: #ffffff; border-radius: 12px; overflow: hidden;">
                    <tr>
                        <td align="center" style="padding: 24px 20px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);">
                            <h1 style="margin: 0; font-size: 22px; color: #ffffff;">{title}</h1>
                        </td>
                    </tr>
                    <tr>
                        <td style="padding: 30px 40px; font-size: 16px; color: #555555; line-height: 1.5;">
                            {body_html}
                        </td>
                    </tr>
                    <tr>
                        <td style="padding: 20px 40px; background-color: #f8f9fa; font-size: 12px; color: #999999; text-align: center;">
                            This is an automated message from the No-Dues portal. Please do not reply.
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>
"""


def get_verification_email_template(full_name: str, link: str, ttl_hours: int) -> str:
    """
    Email sent right after a student submits a No-Dues request.
    """
    body = f"""
        <p>Hi {full_name},</p>
        <p>Your No-Dues request has been submitted. Please verify it by clicking below:</p>
        <p style="text-align: center;">
            <a href="{link}" style="display: inline-block; background-color: #4f46e5; color: #ffffff; padding: 10px 20px; text-decoration: none; border-radius: 5px;">Verify Request</a>
        </p>
        <p>This link expires in {ttl_hours} hours.</p>
    """
    return _wrap("No-Dues Request Submitted", body)


def get_overall_status_email_template(full_name: str, status: str, request_id: int) -> str:
    if status == 'APPROVED':
        title = "No-Dues Request Approved"
        message = "All departments have cleared your No-Dues request. A certificate can now be issued."
    else:
        title = "No-Dues Request Rejected"
        message = "One or more departments rejected your No-Dues request. Please contact the respective departments for clarification."

    body = f"""
        <p>Hi {full_name},</p>
        <p>{message}</p>
        <p><strong>Request #:</strong> {request_id}</p>
    """
    return _wrap(title, body)


def get_certificate_email_template(full_name: str, certificate_id: str, enrollment_no: str) -> str:
    body = f"""
        <p>Hi {full_name},</p>
        <p>Your No-Dues certificate has been generated.</p>
        <p><strong>Certificate ID:</strong> {certificate_id}</p>
        <p><strong>Enrollment No:</strong> {enrollment_no or 'N/A'}</p>
        <p>Use the certificate ID above to verify it on the portal.</p>
    """
    return _wrap("No-Dues Certificate Generated", body)
