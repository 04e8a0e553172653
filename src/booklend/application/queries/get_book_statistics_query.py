from booklend.application.dtos import BookStatisticsResult
from booklend.domain.book import BookService, BookStatistics


class GetBookStatisticsQuery:
    """Total number of books plus a count for every status."""

    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(self) -> BookStatisticsResult:
        counts = await self._book_service.count_by_status()
        return BookStatisticsResult.ok(
            "Book statistics retrieved successfully",
            statistics=BookStatistics.from_counts(counts),
        )
