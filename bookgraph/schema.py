from . import iterables
from .core import GraphError, ValidationError


_undefined = object()


def _memoize(func):
    if not callable(func):
        func = _constant(func)

    result = []

    def get():
        if len(result) == 0:
            result.append(func())

        return result[0]

    return get


def _constant(value):
    return lambda: value


class ScalarType(object):
    def __init__(self, name, coerce):
        self.name = name
        self._coerce = coerce

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def __str__(self):
        return self.name

    def coerce(self, value):
        return self._coerce(value)


def _coerce_boolean(value):
    if isinstance(value, bool):
        return value
    else:
        raise _coercion_error(value, Boolean)


Boolean = ScalarType("Boolean", coerce=_coerce_boolean)


def _coerce_int(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    else:
        raise _coercion_error(value, Int)


Int = ScalarType("Int", coerce=_coerce_int)


def _coerce_string(value):
    if isinstance(value, str):
        return value
    else:
        raise _coercion_error(value, String)


String = ScalarType("String", coerce=_coerce_string)


class ListType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, ListType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(("list", self.element_type))

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "List({})".format(self.element_type)

    def coerce(self, value):
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            raise _coercion_error(value, self)

        return [
            self.element_type.coerce(element)
            for element in value
        ]


class NullableType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, NullableType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(("nullable", self.element_type))

    def __repr__(self):
        return "NullableType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "Nullable({})".format(self.element_type)

    def coerce(self, value):
        if value is None:
            return None
        else:
            return self.element_type.coerce(value)


class ObjectType(object):
    """
    An object type with named fields.

    ``fields`` may be a callable returning the fields, in which case it isn't
    called until the fields are first needed. This allows two object types to
    refer to each other regardless of which is defined first.
    """

    def __init__(self, name, fields, description=None):
        self.name = name
        self.description = description
        fields = _memoize(fields)

        def owned_fields():
            return tuple(
                field.with_owner_type(self)
                for field in fields()
            )

        self.fields = Fields(name, owned_fields)

    def __repr__(self):
        return "ObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class Fields(object):
    def __init__(self, type_name, fields):
        self._type_name = type_name
        self._fields = _memoize(fields)

    def __iter__(self):
        return iter(self._fields())

    def __getattr__(self, field_name):
        if field_name.startswith("__"):
            raise AttributeError(field_name)

        field = self._find_field(field_name)

        if field is None and field_name.endswith("_"):
            field = self._find_field(field_name[:-1])

        if field is None:
            raise GraphError("{} has no field {}".format(self._type_name, field_name))
        else:
            return field

    def _find_field(self, field_name):
        return iterables.find(lambda field: field.name == field_name, self._fields(), default=None)


def field(name, type, params=None, description=None):
    if params is None:
        params = ()
    return Field(owner_type=None, name=name, type=type, params=params, description=description)


class Field(object):
    def __init__(self, owner_type, name, type, params, description):
        self.owner_type = owner_type
        self.name = name
        self.type = type
        self.params = params if isinstance(params, Params) else Params(name, params)
        self.description = description

    def with_owner_type(self, owner_type):
        return Field(
            owner_type=owner_type,
            name=self.name,
            type=self.type,
            params=self.params,
            description=self.description,
        )

    @property
    def qualified_name(self):
        if self.owner_type is None:
            return self.name
        else:
            return "{}.{}".format(self.owner_type.name, self.name)

    @property
    def is_nullable(self):
        return isinstance(self.type, NullableType)

    def bind_args(self, values):
        values = dict(values)

        def get_arg(param):
            value = values.pop(param.name, param.default)

            if value is _undefined:
                raise ValidationError("field {} is missing required argument {}".format(self.name, param.name))
            else:
                return param.coerce(value)

        args = Args(iterables.to_dict(
            (param.name, get_arg(param))
            for param in self.params
        ))

        if values:
            raise ValidationError("field {} has no param {}".format(self.name, next(iter(values))))

        return args

    def __repr__(self):
        return "Field(name={!r}, type={!r})".format(self.name, self.type)


class Params(object):
    def __init__(self, field_name, params):
        self._field_name = field_name
        self._params = tuple(params)

    def __iter__(self):
        return iter(self._params)

    def __getattr__(self, param_name):
        if param_name.startswith("__"):
            raise AttributeError(param_name)

        param = self._find_param(param_name)

        if param is None and param_name.endswith("_"):
            param = self._find_param(param_name[:-1])

        if param is None:
            raise GraphError("{} has no param {}".format(self._field_name, param_name))
        else:
            return param

    def _find_param(self, param_name):
        return iterables.find(lambda param: param.name == param_name, self._params, default=None)


def param(name, type, default=_undefined, description=None):
    return Parameter(name=name, type=type, default=default, description=description)


class Parameter(object):
    def __init__(self, name, type, default, description):
        self.name = name
        self.type = type
        self.default = default
        self.description = description

    @property
    def has_default(self):
        return self.default is not _undefined

    def coerce(self, value):
        return self.type.coerce(value)

    def __repr__(self):
        return "Parameter(name={!r}, type={!r})".format(self.name, self.type)


class Args(object):
    def __init__(self, values):
        self._values = values
        for key in values:
            setattr(self, key, values[key])

    def __eq__(self, other):
        if isinstance(other, Args):
            return self._values == other._values
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "Args({})".format(", ".join(
            "{}={!r}".format(key, value)
            for key, value in self._values.items()
        ))


def _coercion_error(value, target_type):
    return ValidationError("cannot coerce {!r} to {}".format(value, target_type))
