from .base import Record


class Book(Record):
    fields = ("id", "name", "author_id")
