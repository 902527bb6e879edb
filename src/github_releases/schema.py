"""Local cache of the GitHub GraphQL schema and query validation against it."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from graphql import GraphQLError, GraphQLSchema, build_client_schema, parse, validate

from .errors import SchemaError
from .pagination import QueryTransport, execute_query
from .queries import INTROSPECTION_QUERY

logger = logging.getLogger(__name__)


def dump_schema(client: QueryTransport, path: Path) -> Dict[str, Any]:
    """Run the introspection query and write the result to ``path``."""
    data = execute_query(client, INTROSPECTION_QUERY)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"data": data}, indent=2), encoding="utf-8")
    return data


def load_schema(path: Path) -> Dict[str, Any]:
    """Load introspection data previously written by dump_schema."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)["data"]


def ensure_schema(client: QueryTransport, path: Path, replace: bool = False) -> GraphQLSchema:
    """
    Return the cached schema, querying the API first if needed.

    Args:
        client: Transport used for the introspection query
        path: Cache file location
        replace: Re-query even if the cache file exists

    Returns:
        Client-side GraphQLSchema built from the introspection data
    """
    if replace or not path.exists():
        logger.info("Querying and saving github graphql schema data to %s", path)
        data = dump_schema(client, path)
    else:
        data = load_schema(path)
    return build_client_schema(data)


def check_query(schema: GraphQLSchema, query: str) -> None:
    """
    Validate a query document against the schema.

    Raises:
        SchemaError: If the document does not parse or does not validate
    """
    try:
        document = parse(query)
    except GraphQLError as e:
        raise SchemaError([e.message]) from e

    errors = validate(schema, document)
    if errors:
        raise SchemaError([error.message for error in errors])
