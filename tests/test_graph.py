import logging

from graphql import GraphQLError
from precisely import assert_that, contains_exactly, equal_to, has_attrs, is_instance
import pytest

import bookgraph as g
from bookgraph import database
from bookgraph.graph import Author, Book, create_graph, execute, Mutation, Query


@pytest.fixture
def store():
    return database.create_store()


def run(store, document_text, variables=None):
    return execute(document_text, graph=create_graph(store=store), variables=variables)


def test_book_is_fetched_by_id(store):
    result = run(store, """
        query {
            book(id: 4) { id name authorId }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "book": {"id": 4, "name": "The Fellowship of the Ring", "authorId": 2},
    })))


def test_author_is_fetched_by_id(store):
    result = run(store, """
        query {
            author(id: 3) { id name }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "author": {"id": 3, "name": "Brent Weeks"},
    })))


def test_when_no_entity_has_id_then_lookup_is_null(store):
    result = run(store, """
        query {
            book(id: 99) { name }
            author(id: 99) { name }
        }
    """)

    assert_that(result, is_success(data=equal_to({"book": None, "author": None})))


def test_when_id_is_missing_from_lookup_then_result_is_invalid(store):
    result = run(store, """
        query {
            book { name }
        }
    """)

    assert_that(result, has_attrs(data=None, errors=contains_exactly(anything_graphql_error())))


def test_books_lists_all_books_in_store_order(store):
    result = run(store, """
        query {
            books { id }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "books": [{"id": book_id} for book_id in range(1, 9)],
    })))


def test_authors_lists_all_authors_in_store_order(store):
    result = run(store, """
        query {
            authors { name }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "authors": [
            {"name": "J. K. Rowling"},
            {"name": "J. R. R. Tolkien"},
            {"name": "Brent Weeks"},
        ],
    })))


def test_book_author_is_author_with_id_of_book_author_id(store):
    result = run(store, """
        query {
            books { id author { id } authorId }
        }
    """)

    for book in result.data["books"]:
        assert_that(book["author"], equal_to({"id": book["authorId"]}))


def test_book_author_is_null_when_no_author_has_id(store):
    store.append(database.Book, database.Book(id=9, name="Orphan", author_id=42))

    result = run(store, """
        query {
            book(id: 9) { name author { name } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "book": {"name": "Orphan", "author": None},
    })))


def test_author_books_are_books_with_author_id_in_store_order(store):
    result = run(store, """
        query {
            authors {
                id
                books { id authorId }
            }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "authors": [
            {"id": 1, "books": [{"id": 1, "authorId": 1}, {"id": 2, "authorId": 1}, {"id": 3, "authorId": 1}]},
            {"id": 2, "books": [{"id": 4, "authorId": 2}, {"id": 5, "authorId": 2}, {"id": 6, "authorId": 2}]},
            {"id": 3, "books": [{"id": 7, "authorId": 3}, {"id": 8, "authorId": 3}]},
        ],
    })))


def test_author_books_is_empty_when_author_has_no_books(store):
    run(store, """
        mutation {
            addAuthor(name: "Ursula K. Le Guin") { id }
        }
    """)

    result = run(store, """
        query {
            author(id: 4) { name books { id } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "author": {"name": "Ursula K. Le Guin", "books": []},
    })))


def test_relationships_reflect_current_state_of_store(store):
    graph = create_graph(store=store)
    book = store.find_by_id(database.Book, 1)

    assert_that(graph.resolve(Book.fields.author, book), has_attrs(name="J. K. Rowling"))

    store.update(database.Author, 1, name="Joanne Rowling")
    store.update(database.Book, 1, name=book.name, author_id=2)

    assert_that(graph.resolve(Book.fields.author, book), has_attrs(name="J. R. R. Tolkien"))
    assert_that(
        [book.id for book in graph.resolve(Author.fields.books, store.find_by_id(database.Author, 1))],
        equal_to([2, 3]),
    )


def test_add_book_appends_book_with_id_from_collection_length(store):
    result = run(store, """
        mutation {
            addBook(name: "X", authorId: 2) { id name authorId author { name } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "addBook": {"id": 9, "name": "X", "authorId": 2, "author": {"name": "J. R. R. Tolkien"}},
    })))

    books = run(store, "query { books { id name authorId } }").data["books"]
    assert_that(books[-1], equal_to({"id": 9, "name": "X", "authorId": 2}))
    assert_that(len(books), equal_to(9))


def test_add_book_does_not_check_author_exists(store):
    result = run(store, """
        mutation {
            addBook(name: "Orphan", authorId: 42) { id author { name } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "addBook": {"id": 9, "author": None},
    })))


def test_add_author_appends_author_with_id_from_collection_length(store):
    result = run(store, """
        mutation {
            addAuthor(name: "Ursula K. Le Guin") { id name books { id } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "addAuthor": {"id": 4, "name": "Ursula K. Le Guin", "books": []},
    })))
    assert_that(store.find_by_id(database.Author, 4), has_attrs(name="Ursula K. Le Guin"))


def test_add_after_delete_can_reuse_id_still_held_by_another_entity(store):
    run(store, "mutation { deleteBook(id: 2) { id } }")

    result = run(store, """
        mutation {
            addBook(name: "Duplicate", authorId: 1) { id }
        }
    """)

    assert_that(result, is_success(data=equal_to({"addBook": {"id": 8}})))
    assert_that(
        [book.id for book in store.all(database.Book)],
        equal_to([1, 3, 4, 5, 6, 7, 8, 8]),
    )


def test_delete_book_returns_removed_book_and_book_is_no_longer_found(store):
    result = run(store, """
        mutation {
            deleteBook(id: 5) { id name authorId }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "deleteBook": {"id": 5, "name": "The Two Towers", "authorId": 2},
    })))

    lookup = run(store, "query { book(id: 5) { id } }")
    assert_that(lookup, is_success(data=equal_to({"book": None})))
    assert_that(
        [book.id for book in store.all(database.Book)],
        equal_to([1, 2, 3, 4, 6, 7, 8]),
    )


def test_delete_author_returns_removed_author_and_leaves_books(store):
    result = run(store, """
        mutation {
            deleteAuthor(id: 3) { id name }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "deleteAuthor": {"id": 3, "name": "Brent Weeks"},
    })))
    assert_that(store.find_by_id(database.Author, 3), equal_to(None))

    orphans = run(store, "query { book(id: 7) { authorId author { name } } }")
    assert_that(orphans, is_success(data=equal_to({
        "book": {"authorId": 3, "author": None},
    })))


def test_delete_author_with_unknown_id_fails_with_not_found_and_leaves_store_unchanged(store):
    result = run(store, """
        mutation {
            deleteAuthor(id: 99) { id name }
        }
    """)

    assert_that(result, has_attrs(
        data=equal_to({"deleteAuthor": None}),
        errors=contains_exactly(is_not_found_error(path=["deleteAuthor"])),
    ))
    assert_that([author.id for author in store.all(database.Author)], equal_to([1, 2, 3]))


def test_delete_book_with_unknown_id_fails_with_not_found(store):
    result = run(store, "mutation { deleteBook(id: 99) { id } }")

    assert_that(result, has_attrs(
        data=equal_to({"deleteBook": None}),
        errors=contains_exactly(is_not_found_error(path=["deleteBook"])),
    ))
    assert_that(store.count(database.Book), equal_to(8))


def test_update_author_overwrites_name_and_is_seen_through_book_author(store):
    result = run(store, """
        mutation {
            updateAuthor(id: 1, name: "Joanne Rowling") { id name }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "updateAuthor": {"id": 1, "name": "Joanne Rowling"},
    })))

    lookup = run(store, "query { book(id: 1) { author { name } } }")
    assert_that(lookup, is_success(data=equal_to({
        "book": {"author": {"name": "Joanne Rowling"}},
    })))


def test_update_book_overwrites_name_and_author_id(store):
    result = run(store, """
        mutation {
            updateBook(id: 1, name: "The Hobbit", authorId: 2) { id name authorId author { name } }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "updateBook": {"id": 1, "name": "The Hobbit", "authorId": 2, "author": {"name": "J. R. R. Tolkien"}},
    })))

    lookup = run(store, "query { author(id: 1) { books { id } } }")
    assert_that(lookup, is_success(data=equal_to({
        "author": {"books": [{"id": 2}, {"id": 3}]},
    })))


def test_update_with_unknown_id_fails_with_not_found(store):
    result = run(store, """
        mutation {
            updateBook(id: 99, name: "Nothing", authorId: 1) { id }
            updateAuthor(id: 99, name: "Nobody") { id }
        }
    """)

    assert_that(result, has_attrs(
        data=equal_to({"updateBook": None, "updateAuthor": None}),
        errors=contains_exactly(
            is_not_found_error(path=["updateBook"]),
            is_not_found_error(path=["updateAuthor"]),
        ),
    ))


def test_failed_mutation_does_not_abort_sibling_mutations(store):
    result = run(store, """
        mutation {
            missing: deleteBook(id: 99) { id }
            added: addAuthor(name: "Ursula K. Le Guin") { id }
        }
    """)

    assert_that(result, has_attrs(
        data=equal_to({"missing": None, "added": {"id": 4}}),
        errors=contains_exactly(is_not_found_error(path=["missing"])),
    ))


def test_mutation_without_required_arg_is_invalid_and_leaves_store_unchanged(store):
    result = run(store, """
        mutation {
            deleteBook { id }
        }
    """)

    assert_that(result, has_attrs(data=None, errors=contains_exactly(anything_graphql_error())))
    assert_that(store.count(database.Book), equal_to(8))


def test_mutation_args_can_be_passed_as_variables(store):
    result = run(
        store,
        """
            mutation ($name: String!, $authorId: Int!) {
                addBook(name: $name, authorId: $authorId) { id name authorId }
            }
        """,
        variables={"name": "Shadow's Edge", "authorId": 3},
    )

    assert_that(result, is_success(data=equal_to({
        "addBook": {"id": 9, "name": "Shadow's Edge", "authorId": 3},
    })))


def test_variables_of_wrong_type_are_rejected(store):
    result = run(
        store,
        """
            mutation ($id: Int!) {
                deleteBook(id: $id) { id }
            }
        """,
        variables={"id": "one"},
    )

    assert_that(result, has_attrs(data=None, errors=contains_exactly(anything_graphql_error())))
    assert_that(store.count(database.Book), equal_to(8))


def test_resolving_root_fields_directly_with_graph(store):
    graph = create_graph(store=store)

    author = graph.resolve(Mutation.fields.add_author, None, {"name": "Ursula K. Le Guin"})

    assert_that(author, has_attrs(id=4, name="Ursula K. Le Guin"))
    assert_that(graph.resolve(Query.fields.author, None, {"id": 4}), equal_to(author))
    pytest.raises(g.ValidationError, lambda: graph.resolve(Query.fields.book, None, {}))
    pytest.raises(g.NotFoundError, lambda: graph.resolve(Mutation.fields.delete_book, None, {"id": 99}))


def test_schema_descriptions_are_available_through_introspection(store):
    result = run(store, """
        query {
            __type(name: "Book") {
                description
                fields { name description }
            }
        }
    """)

    assert_that(result, is_success(data=equal_to({
        "__type": {
            "description": "This represents a book",
            "fields": [
                {"name": "id", "description": "The book ID"},
                {"name": "name", "description": "The name of the book"},
                {"name": "authorId", "description": "The author ID of the book"},
                {"name": "author", "description": "The author of the book"},
            ],
        },
    })))


def test_mutations_are_logged(store, caplog):
    with caplog.at_level(logging.INFO, logger="bookgraph.graph.mutations"):
        run(store, """
            mutation {
                addAuthor(name: "Ursula K. Le Guin") { id }
                deleteBook(id: 99) { id }
            }
        """)

    assert_that(caplog.messages, contains_exactly("added author 4", "Book 99 not found"))


def is_success(*, data):
    return has_attrs(
        data=data,
        errors=None,
    )


def is_not_found_error(*, path):
    return has_attrs(
        original_error=is_instance(g.NotFoundError),
        path=path,
    )


def anything_graphql_error():
    return is_instance(GraphQLError)
