import logging

import bookgraph as g

from .. import database
from . import authors, books


logger = logging.getLogger(__name__)


Mutation = g.ObjectType(
    "Mutation",
    description="Root Mutation",
    fields=(
        g.field(
            "add_book",
            type=g.NullableType(books.Book),
            params=(
                g.param("name", type=g.String, description="The name of the book"),
                g.param("author_id", type=g.Int, description="The author ID of the book"),
            ),
            description="Add a book",
        ),
        g.field(
            "add_author",
            type=g.NullableType(authors.Author),
            params=(
                g.param("name", type=g.String, description="The name of the author"),
            ),
            description="Add an author",
        ),
        g.field(
            "delete_book",
            type=g.NullableType(books.Book),
            params=(
                g.param("id", type=g.Int, description="The book ID"),
            ),
            description="Delete a book",
        ),
        g.field(
            "delete_author",
            type=g.NullableType(authors.Author),
            params=(
                g.param("id", type=g.Int, description="The author ID"),
            ),
            description="Delete an author",
        ),
        g.field(
            "update_book",
            type=g.NullableType(books.Book),
            params=(
                g.param("id", type=g.Int, description="The book ID"),
                g.param("name", type=g.String, description="The name of the book"),
                g.param("author_id", type=g.Int, description="The author ID of the book"),
            ),
            description="Update a book",
        ),
        g.field(
            "update_author",
            type=g.NullableType(authors.Author),
            params=(
                g.param("id", type=g.Int, description="The author ID"),
                g.param("name", type=g.String, description="The name of the author"),
            ),
            description="Update an author",
        ),
    ),
)


@g.resolver(Mutation.fields.add_book)
@g.dependencies(store=database.EntityStore)
def resolve_add_book(root, args, *, store):
    book = database.Book(
        id=store.next_id(database.Book),
        name=args.name,
        author_id=args.author_id,
    )
    store.append(database.Book, book)
    logger.info("added book %s by author %s", book.id, book.author_id)
    return book


@g.resolver(Mutation.fields.add_author)
@g.dependencies(store=database.EntityStore)
def resolve_add_author(root, args, *, store):
    author = database.Author(
        id=store.next_id(database.Author),
        name=args.name,
    )
    store.append(database.Author, author)
    logger.info("added author %s", author.id)
    return author


@g.resolver(Mutation.fields.delete_book)
@g.dependencies(store=database.EntityStore)
def resolve_delete_book(root, args, *, store):
    book = store.remove_first_matching(database.Book, args.id)
    _check_found(book, "Book", args.id)
    logger.info("deleted book %s", book.id)
    return book


@g.resolver(Mutation.fields.delete_author)
@g.dependencies(store=database.EntityStore)
def resolve_delete_author(root, args, *, store):
    author = store.remove_first_matching(database.Author, args.id)
    _check_found(author, "Author", args.id)
    logger.info("deleted author %s", author.id)
    return author


@g.resolver(Mutation.fields.update_book)
@g.dependencies(store=database.EntityStore)
def resolve_update_book(root, args, *, store):
    book = store.update(database.Book, args.id, name=args.name, author_id=args.author_id)
    _check_found(book, "Book", args.id)
    logger.info("updated book %s", book.id)
    return book


@g.resolver(Mutation.fields.update_author)
@g.dependencies(store=database.EntityStore)
def resolve_update_author(root, args, *, store):
    author = store.update(database.Author, args.id, name=args.name)
    _check_found(author, "Author", args.id)
    logger.info("updated author %s", author.id)
    return author


def _check_found(entity, kind, id):
    if entity is None:
        logger.warning("%s %s not found", kind, id)
        raise g.NotFoundError(kind, id)


resolvers = (
    resolve_add_book,
    resolve_add_author,
    resolve_delete_book,
    resolve_delete_author,
    resolve_update_book,
    resolve_update_author,
)
