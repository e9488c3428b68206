from .base import Record


class Author(Record):
    fields = ("id", "name")
