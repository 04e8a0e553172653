"""Author catalogue endpoints.

Reads are public. Mutations need a signed-in user; the admin check itself
is part of each use case so its failure message reaches the client as is.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from booklend.application.commands.author import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    UpdateAuthorCommand,
)
from booklend.application.queries import GetAuthorByIdQuery, ListAuthorsQuery
from booklend.presentation.api.dependencies import (
    Authors,
    Crypto,
    CurrentUser,
    DBSession,
    Users,
)
from booklend.presentation.api.schemas import (
    AuthorCreateRequest,
    AuthorResponse,
    AuthorUpdateRequest,
    DataResponse,
    ListResponse,
    MessageResponse,
)
from booklend.presentation.api.unit_of_work import finish

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List authors")
async def list_authors(
    authors: Authors,
    name: str | None = Query(None, description="Substring of first or last name"),
    nationality: str | None = Query(None),
    popular: bool = Query(False, description="Only popular authors"),
) -> ListResponse[AuthorResponse]:
    result = await ListAuthorsQuery(authors).execute(
        name=name,
        nationality=nationality,
        popular=popular,
    )
    return ListResponse(
        message=result.message,
        data=[AuthorResponse.model_validate(a) for a in result.authors],
        total=result.total,
    )


@router.get(
    "/{author_id}",
    summary="Get an author",
    responses={404: {"description": "Author not found"}},
)
async def get_author(author_id: UUID, authors: Authors) -> DataResponse[AuthorResponse]:
    result = await GetAuthorByIdQuery(authors).execute(author_id)
    result.raise_for_failure()
    return DataResponse(
        message=result.message,
        data=AuthorResponse.model_validate(result.author),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an author (admin)",
    responses={
        201: {"description": "Author created"},
        400: {"description": "Missing field, bad dates or invalid email"},
        403: {"description": "Admin role required"},
    },
)
async def create_author(
    request: AuthorCreateRequest,
    current_user: CurrentUser,
    session: DBSession,
    users: Users,
    authors: Authors,
    crypto: Crypto,
) -> DataResponse[AuthorResponse]:
    command = CreateAuthorCommand(
        auth_service=users,
        author_service=authors,
        crypto_service=crypto,
    )
    result = await command.execute(
        admin_user_id=current_user.id,
        first_name=request.first_name,
        last_name=request.last_name,
        biography=request.biography,
        nationality=request.nationality,
        birth_date=request.birth_date,
        death_date=request.death_date,
        email=request.email,
        phone_number=request.phone_number,
    )
    await finish(session, result)
    return DataResponse(
        message=result.message,
        data=AuthorResponse.model_validate(result.author),
    )


@router.patch(
    "/{author_id}",
    summary="Update an author (admin)",
    responses={
        400: {"description": "Bad dates or invalid email"},
        403: {"description": "Admin role required"},
        404: {"description": "Author not found"},
    },
)
async def update_author(  # NOQA: PLR0913
    author_id: UUID,
    request: AuthorUpdateRequest,
    current_user: CurrentUser,
    session: DBSession,
    users: Users,
    authors: Authors,
) -> DataResponse[AuthorResponse]:
    # Only fields present in the body reach the command; absent ones stay UNSET.
    changes = request.model_dump(include=request.model_fields_set)

    command = UpdateAuthorCommand(auth_service=users, author_service=authors)
    result = await command.execute(
        admin_user_id=current_user.id,
        author_id=author_id,
        **changes,
    )
    await finish(session, result)
    return DataResponse(
        message=result.message,
        data=AuthorResponse.model_validate(result.author),
    )


@router.delete(
    "/{author_id}",
    summary="Delete an author (admin)",
    responses={
        403: {"description": "Admin role required"},
        404: {"description": "Author not found"},
    },
)
async def delete_author(
    author_id: UUID,
    current_user: CurrentUser,
    session: DBSession,
    users: Users,
    authors: Authors,
) -> MessageResponse:
    command = DeleteAuthorCommand(auth_service=users, author_service=authors)
    result = await command.execute(admin_user_id=current_user.id, author_id=author_id)
    await finish(session, result)
    return MessageResponse(message=result.message)
