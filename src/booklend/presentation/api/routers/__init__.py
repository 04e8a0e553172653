from booklend.presentation.api.routers.auth import router as auth_router
from booklend.presentation.api.routers.authors import router as authors_router
from booklend.presentation.api.routers.books import router as books_router

__all__ = [
    "auth_router",
    "authors_router",
    "books_router",
]
