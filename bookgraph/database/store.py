import threading

from .. import iterables
from .authors import Author
from .books import Book


class EntityStore(object):
    """
    Ordered in-memory collections of entities, one per kind.

    Collections keep insertion order. Removing an entity leaves the order of
    the others unchanged. The store does no locking of its own: callers that
    share a store between threads hold ``lock`` for the duration of each
    request.
    """

    def __init__(self, kinds=(Author, Book)):
        self._collections = iterables.to_dict(
            (kind, [])
            for kind in kinds
        )
        self.lock = threading.RLock()

    def find_by_id(self, kind, id):
        return iterables.find(lambda entity: entity.id == id, self._collection(kind), default=None)

    def all(self, kind):
        return list(self._collection(kind))

    def filter(self, kind, predicate):
        return [
            entity
            for entity in self._collection(kind)
            if predicate(entity)
        ]

    def count(self, kind):
        return len(self._collection(kind))

    def next_id(self, kind):
        # Ids come from the collection length, so an insert following a
        # delete can reuse an id that is still held by another entity.
        return self.count(kind) + 1

    def append(self, kind, entity):
        if not isinstance(entity, kind):
            raise TypeError("expected {} but was {}".format(kind.__name__, type(entity).__name__))

        self._collection(kind).append(entity)
        return entity

    def update(self, kind, id, **values):
        for name in values:
            if name == "id" or name not in kind.fields:
                raise TypeError("cannot update {} of {}".format(name, kind.__name__))

        entity = self.find_by_id(kind, id)
        if entity is None:
            return None

        for name, value in values.items():
            setattr(entity, name, value)

        return entity

    def remove_first_matching(self, kind, id):
        collection = self._collection(kind)
        index = iterables.find_index(lambda entity: entity.id == id, collection)
        if index is None:
            return None
        else:
            return collection.pop(index)

    def _collection(self, kind):
        collection = self._collections.get(kind)
        if collection is None:
            raise ValueError("unknown entity kind: {!r}".format(kind))
        else:
            return collection
