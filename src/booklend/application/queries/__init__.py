from booklend.application.queries.get_author_by_id_query import GetAuthorByIdQuery
from booklend.application.queries.get_book_by_id_query import GetBookByIdQuery
from booklend.application.queries.get_book_statistics_query import (
    GetBookStatisticsQuery,
)
from booklend.application.queries.get_popular_books_query import GetPopularBooksQuery
from booklend.application.queries.list_authors_query import ListAuthorsQuery
from booklend.application.queries.list_books_query import ListBooksQuery

__all__ = [
    "GetAuthorByIdQuery",
    "GetBookByIdQuery",
    "GetBookStatisticsQuery",
    "GetPopularBooksQuery",
    "ListAuthorsQuery",
    "ListBooksQuery",
]
