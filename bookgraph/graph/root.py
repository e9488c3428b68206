import bookgraph as g

from .. import database
from . import authors, books


Query = g.ObjectType(
    "Query",
    description="Root Query",
    fields=(
        g.field(
            "book",
            type=g.NullableType(books.Book),
            params=(
                g.param("id", type=g.Int, description="The book ID"),
            ),
            description="A single Book",
        ),
        g.field(
            "author",
            type=g.NullableType(authors.Author),
            params=(
                g.param("id", type=g.Int, description="The author ID"),
            ),
            description="A single Author",
        ),
        g.field("books", type=g.ListType(books.Book), description="List of books"),
        g.field("authors", type=g.ListType(authors.Author), description="List of Authors"),
    ),
)


@g.resolver(Query.fields.book)
@g.dependencies(store=database.EntityStore)
def resolve_book(root, args, *, store):
    return store.find_by_id(database.Book, args.id)


@g.resolver(Query.fields.author)
@g.dependencies(store=database.EntityStore)
def resolve_author(root, args, *, store):
    return store.find_by_id(database.Author, args.id)


@g.resolver(Query.fields.books)
@g.dependencies(store=database.EntityStore)
def resolve_books(root, args, *, store):
    return store.all(database.Book)


@g.resolver(Query.fields.authors)
@g.dependencies(store=database.EntityStore)
def resolve_authors(root, args, *, store):
    return store.all(database.Author)


resolvers = (
    resolve_book,
    resolve_author,
    resolve_books,
    resolve_authors,
)
