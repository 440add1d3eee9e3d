"""Shared connection arguments for gene resolvers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from graphql.execution.values import get_argument_values

if TYPE_CHECKING:
    from strawberry.types import Info

# Type aliases for annotated arguments
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)")
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)")
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)")
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start before (backward pagination)")
]


def graphql_arguments(info: Info) -> dict[str, Any]:
    """Arguments of the field being resolved, keyed by their GraphQL names.

    Values are input-coerced the way graphql-core coerces resolver kwargs:
    variables are substituted and a single value sent for a list argument
    becomes a one-item list. Only arguments the client actually passed are
    present.
    """
    raw = info._raw_info
    if not raw.field_nodes:
        return {}
    field_node = raw.field_nodes[0]
    field_def = raw.parent_type.fields[raw.field_name]
    coerced = get_argument_values(field_def, field_node, raw.variable_values)
    passed = {argument.name.value for argument in field_node.arguments or ()}
    return {name: value for name, value in coerced.items() if name in passed}


__all__ = ["AfterArg", "BeforeArg", "FirstArg", "LastArg", "graphql_arguments"]
