import logging

import graphql

from ..core import GraphError
from .schema import create_graphql_schema


logger = logging.getLogger(__name__)


def execute(document_text, *, graph, query_type, mutation_type=None, variables=None, operation_name=None):
    return executor(
        query_type=query_type,
        mutation_type=mutation_type,
    )(document_text, graph=graph, variables=variables, operation_name=operation_name)


def executor(*, query_type, mutation_type=None):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type)

    def execute(document_text, *, graph, variables=None, operation_name=None):
        result = graphql.graphql_sync(
            graphql_schema.graphql_schema,
            document_text,
            context_value=graph,
            variable_values=variables,
            operation_name=operation_name,
        )
        if result.errors:
            logger.debug("execution finished with %d error(s)", len(result.errors))
        return result

    return execute


def format_error(error):
    formatted = dict(error.formatted)
    original_error = getattr(error, "original_error", None)

    if isinstance(original_error, GraphError):
        extensions = dict(formatted.get("extensions") or {})
        extensions["code"] = original_error.code
        formatted["extensions"] = extensions

    return formatted


def format_result(result):
    response = {"data": result.data}
    if result.errors:
        response["errors"] = [format_error(error) for error in result.errors]
    return response
