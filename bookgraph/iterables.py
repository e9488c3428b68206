_undefined = object()


def find(predicate, iterable, default=_undefined):
    for element in iterable:
        if predicate(element):
            return element

    if default is _undefined:
        raise ValueError("could not find matching element")
    else:
        return default


def find_index(predicate, sequence):
    for index, element in enumerate(sequence):
        if predicate(element):
            return index

    return None


def flatten(value):
    if isinstance(value, (list, tuple)):
        return [
            subelement
            for element in value
            for subelement in flatten(element)
        ]
    else:
        return [value]


def to_dict(iterable):
    result = {}

    for key, value in iterable:
        if key in result:
            raise KeyError("key is already in dict: {!r}".format(key))

        result[key] = value

    return result
