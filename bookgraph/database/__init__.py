from .authors import Author
from .books import Book
from .store import EntityStore


def create_store(*, seed=True):
    store = EntityStore()
    if seed:
        setup(store)
    return store


def setup(store):
    authors = (
        Author(id=1, name="J. K. Rowling"),
        Author(id=2, name="J. R. R. Tolkien"),
        Author(id=3, name="Brent Weeks"),
    )
    for author in authors:
        store.append(Author, author)

    books = (
        Book(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1),
        Book(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1),
        Book(id=3, name="Harry Potter and the Goblet of Fire", author_id=1),
        Book(id=4, name="The Fellowship of the Ring", author_id=2),
        Book(id=5, name="The Two Towers", author_id=2),
        Book(id=6, name="The Return of the King", author_id=2),
        Book(id=7, name="The Way of Shadows", author_id=3),
        Book(id=8, name="Beyond the Shadows", author_id=3),
    )
    for book in books:
        store.append(Book, book)
