from booklend.application.commands.auth.complete_registration_command import (
    CompleteRegistrationCommand,
)
from booklend.application.commands.auth.send_email_verification_command import (
    SendEmailVerificationCommand,
)
from booklend.application.commands.auth.verify_email_token_command import (
    VerifyEmailTokenCommand,
)

__all__ = [
    "CompleteRegistrationCommand",
    "SendEmailVerificationCommand",
    "VerifyEmailTokenCommand",
]
