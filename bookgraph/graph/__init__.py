import bookgraph as g

from .. import database
from ..graphql import executor
from . import authors, books, mutations, root


resolvers = (
    authors.resolvers,
    books.resolvers,
    root.resolvers,
    mutations.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store):
    return _graph_definition.create_graph(
        {
            database.EntityStore: store,
        }
    )


Author = authors.Author
Book = books.Book
Mutation = mutations.Mutation
Query = root.Query


execute = executor(query_type=Query, mutation_type=Mutation)
