"""
Collect documentation metadata for HTTP route handlers

Copyright 2022-2025, Levente Hunyadi
"""

from typing import Any, Callable, Optional, TypeVar

from .metadata import RouteDocumentation
from .options import HTTPStatusCode

F = TypeVar("F", bound=Callable[..., Any])


def apidoc(
    resource: bool = False,
    description: Optional[str] = None,
    input: Optional[str] = None,
    filters: Optional[list[dict[str, Any]]] = None,
    output: Optional[str] = None,
    status_codes: Optional[dict[HTTPStatusCode, Any]] = None,
    authentication: Optional[bool] = None,
    section: Optional[str] = None,
) -> Callable[[F], F]:
    """
    Decorator that attaches documentation metadata to a route handler function.

    :param resource: True if the route is the root of a primary collection or entity.
    :param description: A single line of text describing the action.
    :param input: Identifies the type of data the action consumes. Filters are disregarded if set.
    :param filters: Optional query string parameters. Each item must have a `name` key.
    :param output: Identifies the type of data the action produces.
    :param status_codes: Maps HTTP status codes to a description or a list of descriptions.
    :param authentication: True if the action requires the client to authenticate.
    :param section: Section to group actions together.
    """

    def wrap(func: F) -> F:
        func.__apidoc__ = RouteDocumentation(  # type: ignore[attr-defined]
            {
                "resource": resource,
                "description": description,
                "input": input,
                "filters": filters,
                "output": output,
                "statusCodes": status_codes,
                "authentication": authentication,
                "section": section,
            }
        )
        return func

    return wrap


def get_route_documentation(func: Callable[..., Any]) -> Optional[RouteDocumentation]:
    "Returns the documentation attached to a route handler, if any."

    return getattr(func, "__apidoc__", None)
