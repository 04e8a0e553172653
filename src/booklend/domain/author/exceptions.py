from booklend.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class AuthorNotFoundError(EntityNotFoundError):
    def __init__(self, author_id: object = None):
        super().__init__(
            "Author not found",
            ErrorCode.AUTHOR_NOT_FOUND,
            {"author_id": str(author_id)} if author_id else None,
        )
