from booklend.application.commands.author.create_author_command import (
    CreateAuthorCommand,
)
from booklend.application.commands.author.delete_author_command import (
    DeleteAuthorCommand,
)
from booklend.application.commands.author.update_author_command import (
    UpdateAuthorCommand,
)

__all__ = [
    "CreateAuthorCommand",
    "DeleteAuthorCommand",
    "UpdateAuthorCommand",
]
