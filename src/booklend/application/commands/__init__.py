from booklend.application.commands.auth import (
    CompleteRegistrationCommand,
    SendEmailVerificationCommand,
    VerifyEmailTokenCommand,
)
from booklend.application.commands.author import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    UpdateAuthorCommand,
)
from booklend.application.commands.book import (
    AddBookCommand,
    DeleteBookCommand,
    LendBookCommand,
    UpdateBookCommand,
)

__all__ = [
    "AddBookCommand",
    "CompleteRegistrationCommand",
    "CreateAuthorCommand",
    "DeleteAuthorCommand",
    "DeleteBookCommand",
    "LendBookCommand",
    "SendEmailVerificationCommand",
    "UpdateAuthorCommand",
    "UpdateBookCommand",
    "VerifyEmailTokenCommand",
]
