import bookgraph as g

from .. import database
from . import books


Author = g.ObjectType(
    "Author",
    description="This represents an author of books",
    fields=lambda: (
        g.field("id", type=g.Int, description="The author ID"),
        g.field("name", type=g.String, description="The name of the author"),
        g.field("books", type=g.ListType(books.Book), description="The books written by the author"),
    ),
)


@g.resolver(lambda: Author.fields.books)
@g.dependencies(store=database.EntityStore)
def resolve_author_books(author, args, *, store):
    return store.filter(database.Book, lambda book: book.author_id == author.id)


resolvers = (
    resolve_author_books,
)
