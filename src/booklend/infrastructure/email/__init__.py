from booklend.infrastructure.email.email_service import EmailService

__all__ = ["EmailService"]
