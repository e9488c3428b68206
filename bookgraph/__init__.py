from .core import (
    create_graph,
    define_graph,
    dependencies,
    GraphError,
    NotFoundError,
    NullabilityError,
    resolver,
    ValidationError,
)
from .schema import (
    Boolean,
    field,
    Int,
    ListType,
    NullableType,
    ObjectType,
    param,
    String,
)


__all__ = [
    "create_graph",
    "define_graph",
    "dependencies",
    "resolver",

    "GraphError",
    "NotFoundError",
    "NullabilityError",
    "ValidationError",

    "Boolean",
    "field",
    "Int",
    "ListType",
    "NullableType",
    "ObjectType",
    "param",
    "String",
]
