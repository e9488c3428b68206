import bookgraph as g

from .. import database
from . import authors


Book = g.ObjectType(
    "Book",
    description="This represents a book",
    fields=lambda: (
        g.field("id", type=g.Int, description="The book ID"),
        g.field("name", type=g.String, description="The name of the book"),
        g.field("author_id", type=g.Int, description="The author ID of the book"),
        g.field("author", type=g.NullableType(authors.Author), description="The author of the book"),
    ),
)


@g.resolver(lambda: Book.fields.author)
@g.dependencies(store=database.EntityStore)
def resolve_book_author(book, args, *, store):
    return store.find_by_id(database.Author, book.author_id)


resolvers = (
    resolve_book_author,
)
