"""
Collect documentation metadata for HTTP route handlers

Copyright 2022-2025, Levente Hunyadi
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional, Protocol


class RouteLike(Protocol):
    "The capabilities of a routing framework's route object that documentation relies on."

    def path_pattern(self) -> str:
        "The URL path pattern of the route, e.g. `/students/{id}`."
        ...

    def method_constraint(self) -> Optional[str]:
        "The HTTP method(s) the route accepts, e.g. `GET` or `GET|POST`, or `None` if unconstrained."
        ...


@dataclass
class Route:
    """
    A route bound to a handler.

    :param pattern: The URL path pattern which path parameters are substituted into.
    :param requirements: Constraints on the route. The key `_method` restricts accepted HTTP methods.
    """

    pattern: str
    requirements: dict[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("route pattern must not be empty")

    def path_pattern(self) -> str:
        return self.pattern

    def method_constraint(self) -> Optional[str]:
        return self.requirements.get("_method") or None
