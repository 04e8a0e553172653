from booklend.domain.shared.time import utc_now
from booklend.domain.user import (
    EmailVerificationService,
    EmailVerificationToken,
    InvalidVerificationTokenError,
    VerificationTokenExpiredError,
)


async def load_unexpired_token(
    verification_service: EmailVerificationService,
    token: str,
) -> EmailVerificationToken:
    """Fetch a verification token, deleting it if it has expired.

    Raises
    ------
    InvalidVerificationTokenError
        If the token does not exist
    VerificationTokenExpiredError
        If the token expired (it is deleted first)
    """
    stored = await verification_service.find_email_verification_token(token)
    if stored is None:
        raise InvalidVerificationTokenError

    if stored.is_expired(utc_now()):
        await verification_service.delete_email_verification_token(token)
        raise VerificationTokenExpiredError

    return stored
