import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr

from booklend_config.settings import Settings

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Verify your email - BookLend"

VERIFICATION_TEXT = """Hello,

Thanks for signing up for BookLend.

Open the link below to confirm your email address and finish your
registration (valid for {valid_hours} hours):
{verification_link}

If you didn't sign up, you can safely ignore this email.

-- BookLend
"""

VERIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Confirm your email</h2>
        <p style="color: #374151; line-height: 1.6;">Thanks for signing up for BookLend.</p>
        <p style="color: #374151; line-height: 1.6;">Click the button below to finish your registration. This link is valid for {valid_hours} hours.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{verification_link}" style="display: inline-block; padding: 14px 28px; background-color: #2563eb; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Verify email</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or copy and paste this link into your browser:</p>
        <p style="word-break: break-all; color: #2563eb; font-size: 14px;">{verification_link}</p>
        <p style="color: #9ca3af; font-size: 13px; margin-top: 40px;">If you didn't sign up, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService:
    """SMTP sender for the registration verification mail.

    With ``smtp_use_tls`` and without ``smtp_starttls`` the connection uses
    implicit TLS (port 465). Otherwise a plain connection is opened and
    upgraded with STARTTLS when ``smtp_starttls`` is set. Delivery errors
    propagate to the caller.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    def send_verification_email(self, to_email: str, verification_link: str) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping verification email to %s (link: %s)",
                to_email,
                verification_link,
            )
            return

        if not self._settings.smtp_host:
            logger.error("SMTP host not configured, dropping email to %s", to_email)
            return

        fields = {
            "verification_link": verification_link,
            "valid_hours": self._settings.verification_token_expire_hours,
        }
        message = EmailMessage()
        message["Subject"] = VERIFICATION_SUBJECT
        message["From"] = formataddr(
            (self._settings.smtp_from_name, self._settings.smtp_from_email),
        )
        message["To"] = to_email
        message.set_content(VERIFICATION_TEXT.format(**fields))
        message.add_alternative(VERIFICATION_HTML.format(**fields), subtype="html")

        with self._connect() as server:
            if self._settings.smtp_user:
                server.login(self._settings.smtp_user, self._smtp_password())
            server.send_message(message)

        logger.info("Verification email sent to %s", to_email)

    def _smtp_password(self) -> str:
        password = self._settings.smtp_password
        return password.get_secret_value() if password else ""

    def _connect(self) -> smtplib.SMTP:
        host, port = self._settings.smtp_host, self._settings.smtp_port

        if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
            return smtplib.SMTP_SSL(host, port, context=ssl.create_default_context())

        server = smtplib.SMTP(host, port)
        if self._settings.smtp_starttls:
            try:
                server.starttls(context=ssl.create_default_context())
            except Exception:
                server.close()
                raise
        return server
