import re

import graphql

from .. import iterables, schema


class Schema(object):
    def __init__(self, query_type, mutation_type, graphql_schema):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.graphql_schema = graphql_schema


def create_graphql_schema(query_type, mutation_type=None):
    """
    Convert graph types into a graphql-core schema.

    Each GraphQL field resolves by calling ``resolve`` on the graph passed
    as the execution context, so the schema can be built once and executed
    against a fresh graph for each request.
    """
    graphql_types = {}

    def to_graphql_type(graph_type):
        if graph_type not in graphql_types:
            graphql_types[graph_type] = generate_graphql_type(graph_type)

        return graphql_types[graph_type]

    def generate_graphql_type(graph_type):
        if graph_type == schema.Boolean:
            return graphql.GraphQLNonNull(graphql.GraphQLBoolean)
        elif graph_type == schema.Int:
            return graphql.GraphQLNonNull(graphql.GraphQLInt)
        elif graph_type == schema.String:
            return graphql.GraphQLNonNull(graphql.GraphQLString)

        elif isinstance(graph_type, schema.ListType):
            return graphql.GraphQLNonNull(graphql.GraphQLList(to_graphql_type(graph_type.element_type)))

        elif isinstance(graph_type, schema.NullableType):
            return to_graphql_type(graph_type.element_type).of_type

        elif isinstance(graph_type, schema.ObjectType):
            return graphql.GraphQLNonNull(graphql.GraphQLObjectType(
                name=graph_type.name,
                fields=to_graphql_fields(graph_type.fields),
                description=graph_type.description,
            ))

        else:
            raise ValueError("unsupported type: {}".format(graph_type))

    def to_graphql_fields(graph_fields):
        return lambda: iterables.to_dict(
            (snake_case_to_camel_case(field.name), to_graphql_field(field))
            for field in graph_fields
        )

    def to_graphql_field(graph_field):
        return graphql.GraphQLField(
            type_=to_graphql_type(graph_field.type),
            args=iterables.to_dict(
                (snake_case_to_camel_case(param.name), to_graphql_argument(param))
                for param in graph_field.params
            ),
            resolve=_field_resolver(graph_field),
            description=graph_field.description,
        )

    def to_graphql_argument(param):
        graphql_type = to_graphql_type(param.type)

        if param.has_default and isinstance(graphql_type, graphql.GraphQLNonNull):
            graphql_type = graphql_type.of_type

        return graphql.GraphQLArgument(
            type_=graphql_type,
            default_value=param.default if param.has_default else graphql.Undefined,
            description=param.description,
            out_name=param.name,
        )

    graphql_query_type = to_graphql_type(query_type).of_type
    if mutation_type is None:
        graphql_mutation_type = None
    else:
        graphql_mutation_type = to_graphql_type(mutation_type).of_type

    return Schema(
        query_type=query_type,
        mutation_type=mutation_type,
        graphql_schema=graphql.GraphQLSchema(
            query=graphql_query_type,
            mutation=graphql_mutation_type,
            types=tuple(
                graphql.get_named_type(graphql_type)
                for graphql_type in graphql_types.values()
            ),
        ),
    )


def _field_resolver(graph_field):
    def resolve(parent, info, **args):
        return info.context.resolve(graph_field, parent, args)

    return resolve


def snake_case_to_camel_case(value):
    return value[0].lower() + re.sub(r"_(.)", lambda match: match.group(1).upper(), value[1:]).rstrip("_")
