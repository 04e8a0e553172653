from booklend.application.commands.book.add_book_command import AddBookCommand
from booklend.application.commands.book.delete_book_command import DeleteBookCommand
from booklend.application.commands.book.lend_book_command import LendBookCommand
from booklend.application.commands.book.update_book_command import UpdateBookCommand

__all__ = [
    "AddBookCommand",
    "DeleteBookCommand",
    "LendBookCommand",
    "UpdateBookCommand",
]
