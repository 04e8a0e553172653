from sqlalchemy.ext.asyncio import AsyncSession

from booklend.application.dtos import OperationResult
from booklend.domain.shared.exceptions import ErrorCode

# Failures whose side effects must survive: an expired token is discarded
# while the request is being rejected.
_PERSISTED_FAILURES = frozenset({ErrorCode.TOKEN_EXPIRED})


async def finish(session: AsyncSession, result: OperationResult) -> None:
    """Commit or roll back the request session, then raise if the use case failed."""
    if result.success or result.code in _PERSISTED_FAILURES:
        await session.commit()
    else:
        await session.rollback()
    result.raise_for_failure()
