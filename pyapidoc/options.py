"""
Collect documentation metadata for HTTP route handlers

Copyright 2022-2025, Levente Hunyadi
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar, Optional, Union

HTTPStatusCode = Union[HTTPStatus, int, str]

logger = logging.getLogger(__name__)


@dataclass
class ApiDocOptions:
    """
    Documentation options attached to a single route handler.

    :param resource: True if the route is the root of a primary collection or entity.
    :param description: Most of the time, a single line of text describing the action.
    :param input: Identifies the type of data the action consumes. When set, `filters` is disregarded.
    :param filters: Optional query string parameters. Each item must have a `name` key.
    :param output: Identifies the type of data the action produces.
    :param status_codes: Maps HTTP status codes to a description or a list of descriptions.
    :param authentication: True if the action requires the client to authenticate.
    :param section: Section to group actions together.
    """

    resource: bool = False
    description: Optional[str] = None
    input: Optional[str] = None
    filters: Optional[list[dict[str, Any]]] = None
    output: Optional[str] = None
    status_codes: Optional[dict[HTTPStatusCode, Any]] = None
    authentication: Optional[bool] = None
    section: Optional[str] = None

    # maps raw option names to field names
    option_names: ClassVar[dict[str, str]] = {
        "resource": "resource",
        "description": "description",
        "input": "input",
        "filters": "filters",
        "output": "output",
        "statusCodes": "status_codes",
        "authentication": "authentication",
        "section": "section",
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ApiDocOptions":
        """
        Creates options from a raw mapping of option names to values, e.g. the arguments of an annotation.

        Keys with a value of `None` count as absent. Unrecognized keys are ignored.
        """

        fields: dict[str, Any] = {}
        for key, value in data.items():
            name = cls.option_names.get(key)
            if name is None:
                logger.debug("ignoring unrecognized documentation option: %s", key)
                continue
            if value is None:
                continue
            fields[name] = value

        if "resource" in fields:
            fields["resource"] = bool(fields["resource"])
        if "authentication" in fields:
            fields["authentication"] = bool(fields["authentication"])

        filters = fields.get("filters")
        if filters is not None and not isinstance(filters, (list, tuple)):
            raise TypeError(f"expected a list of filters but got: {type(filters)}")
        status_codes = fields.get("status_codes")
        if status_codes is not None and not isinstance(status_codes, Mapping):
            raise TypeError(f"expected a mapping of status codes but got: {type(status_codes)}")

        return cls(**fields)
