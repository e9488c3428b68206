from . import iterables


def create_graph(resolvers, dependencies=None):
    if dependencies is None:
        dependencies = {}
    return define_graph(resolvers).create_graph(dependencies)


def define_graph(resolvers):
    return GraphDefinition(resolvers)


class GraphDefinition(object):
    def __init__(self, resolvers):
        self._resolvers = iterables.to_dict(
            (_field_reference(resolver.field), resolver)
            for resolver in iterables.flatten(resolvers)
        )

    def create_graph(self, dependencies):
        return Graph(self._resolvers, dependencies)


class Graph(object):
    def __init__(self, resolvers, dependencies):
        self._resolvers = resolvers
        self._injector = Injector(dependencies)

    def resolve(self, field, parent=None, args=None):
        """
        Resolve ``field`` on ``parent``.

        Fields with a registered resolver are passed the parent, the bound
        arguments and any declared dependencies. Other fields read the
        attribute of the parent with the same name.
        """
        if args is None:
            args = {}

        bound_args = field.bind_args(args)
        resolver = self._resolvers.get(field)

        if resolver is None:
            value = _read_attribute(field, parent)
        else:
            value = self._injector.call_with_dependencies(resolver, parent, bound_args)

        if value is None and not field.is_nullable:
            raise NullabilityError("{} is non-null but resolved to null".format(field.qualified_name))

        return value


def _read_attribute(field, parent):
    if parent is None or not hasattr(parent, field.name):
        raise GraphError("Resolver missing for field {}".format(field.qualified_name))
    else:
        return getattr(parent, field.name)


class Injector(object):
    def __init__(self, dependencies):
        self._dependencies = dependencies.copy()
        self._dependencies[Injector] = self

    def get(self, key):
        try:
            return self._dependencies[key]
        except KeyError:
            raise GraphError("missing dependency: {!r}".format(key))

    def call_with_dependencies(self, func, *args, **kwargs):
        dependencies = getattr(func, "dependencies", dict())
        dependency_kwargs = iterables.to_dict(
            (arg_name, self.get(dependency_key))
            for arg_name, dependency_key in dependencies.items()
        )
        return func(*args, **kwargs, **dependency_kwargs)


def _field_reference(field):
    if callable(field):
        return field()
    else:
        return field


def resolver(field):
    """
    Register the decorated function as the resolver for ``field``.

    ``field`` may be a callable returning the field, which is called when the
    graph is defined. Use this when the field belongs to a type whose fields
    refer to a type that has not been defined yet.
    """
    def register_resolver(func):
        func.field = field
        return func

    return register_resolver


def dependencies(**kwargs):
    def register_dependency(func):
        func.dependencies = kwargs
        return func

    return register_dependency


class GraphError(Exception):
    code = "GRAPH_ERROR"


class ValidationError(GraphError):
    code = "VALIDATION_ERROR"


class NullabilityError(GraphError):
    code = "NULLABILITY_VIOLATION"


class NotFoundError(GraphError):
    code = "NOT_FOUND"

    def __init__(self, kind, id):
        super().__init__("could not find {} with id {}".format(kind, id))
        self.kind = kind
        self.id = id
