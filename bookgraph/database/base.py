class Record(object):
    """
    Base class for entities held in an ``EntityStore``.

    Subclasses list their stored attributes in ``fields``. Records are
    mutable so that updates can be applied in place.
    """

    fields = ()

    def __init__(self, **values):
        missing = [name for name in self.fields if name not in values]
        if missing:
            raise TypeError("{} is missing {}".format(type(self).__name__, ", ".join(missing)))

        unexpected = [name for name in values if name not in self.fields]
        if unexpected:
            raise TypeError("{} has no attribute {}".format(type(self).__name__, ", ".join(unexpected)))

        for name in self.fields:
            setattr(self, name, values[name])

    def __eq__(self, other):
        if type(self) is type(other):
            return self._values() == other._values()
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, ", ".join(
            "{}={!r}".format(name, value)
            for name, value in self._values()
        ))

    def _values(self):
        return tuple(
            (name, getattr(self, name))
            for name in self.fields
        )
