import json
import logging

import flask
import graphql

from . import database
from .config import Settings
from .graph import create_graph, execute
from .graphql import format_result


logger = logging.getLogger(__name__)


def create_app(settings=None, store=None):
    if settings is None:
        settings = Settings()
    if store is None:
        store = database.create_store(seed=settings.seed)

    app = flask.Flask(__name__)
    app.config["DEBUG"] = settings.debug

    @app.route("/graphql", methods=["GET", "POST"])
    def graphql_endpoint():
        if flask.request.method == "GET":
            if not settings.allow_get:
                return _error_response("GET requests are not allowed.", 405, allow="POST")
            params = flask.request.args
        else:
            params = flask.request.get_json(silent=True)
            if params is None:
                params = {}
            elif not isinstance(params, dict):
                return _error_response("POST body must be a JSON object.", 400)

        query = params.get("query")
        if not query or not isinstance(query, str):
            return _error_response("Must provide query string.", 400)

        try:
            variables = _read_variables(params.get("variables"))
        except ValueError:
            return _error_response("Variables are invalid JSON.", 400)

        operation_name = params.get("operationName")

        if flask.request.method == "GET" and _is_mutation(query, operation_name):
            return _error_response("Can only perform a mutation operation from a POST request.", 405, allow="POST")

        logger.debug("executing operation %s", operation_name or "<anonymous>")
        with store.lock:
            result = execute(
                query,
                graph=create_graph(store=store),
                variables=variables,
                operation_name=operation_name,
            )

        status = 400 if result.data is None and result.errors else 200
        return flask.jsonify(format_result(result)), status

    return app


def _read_variables(variables):
    if variables is None or variables == "":
        return None
    elif isinstance(variables, str):
        variables = json.loads(variables)

    if variables is not None and not isinstance(variables, dict):
        raise ValueError("variables must be an object")

    return variables


def _is_mutation(query, operation_name):
    try:
        document = graphql.parse(query)
    except graphql.GraphQLError:
        # Execution reports the syntax error
        return False

    operation = graphql.get_operation_ast(document, operation_name)
    return operation is not None and operation.operation == graphql.OperationType.MUTATION


def _error_response(message, status, allow=None):
    response = flask.jsonify({"errors": [{"message": message}]})
    response.status_code = status
    if allow is not None:
        response.headers["Allow"] = allow
    return response


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = create_app(settings=settings)
    logger.info("serving GraphQL at http://%s:%s/graphql", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
