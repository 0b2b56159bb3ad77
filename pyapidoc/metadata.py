"""
Collect documentation metadata for HTTP route handlers

Copyright 2022-2025, Levente Hunyadi
"""

import copy
import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Optional, Union

from strong_typing.core import JsonType
from strong_typing.serialization import object_to_json

from .exceptions import ConfigurationError
from .options import ApiDocOptions, HTTPStatusCode
from .routing import RouteLike

logger = logging.getLogger(__name__)

# a filter, parameter, requirement or response field descriptor
Descriptor = dict[str, Any]


class RouteDocumentation:
    """
    Documentation metadata attached to a single route handler.

    :param requirements: Requirements are mandatory parameters in a route.
    :param filters: Filters are optional parameters in the query string.
    :param parameters: Parameters are data a client can send.
    :param response: Response data as processed by parsers, in the same format as parameters.
    :param description: Most of the time, a single line of text describing the action.
    :param section: Section to group actions together.
    :param documentation: Extended documentation.
    :param https: True if the route is only served over HTTPS.
    :param authentication: True if the action requires the client to authenticate.
    :param status_codes: Maps HTTP status codes to a list of descriptions.
    """

    requirements: dict[str, Descriptor]
    filters: dict[str, Descriptor]
    parameters: dict[str, Descriptor]
    response: dict[str, Descriptor]
    description: Optional[str]
    section: Optional[str]
    documentation: Optional[str]
    https: bool
    authentication: bool
    status_codes: dict[Union[int, str], list[Any]]

    _input: Optional[str]
    _output: Optional[str]
    _is_resource: bool
    _method: Optional[str]
    _uri: Optional[str]
    _route: Optional[RouteLike]

    def __init__(self, data: Union[Mapping[str, Any], ApiDocOptions, None] = None) -> None:
        if data is None:
            options = ApiDocOptions()
        elif isinstance(data, ApiDocOptions):
            options = data
        elif isinstance(data, Mapping):
            options = ApiDocOptions.from_mapping(data)
        else:
            raise TypeError(f"expected a mapping or documentation options but got: {type(data)}")

        self.requirements = {}
        self.filters = {}
        self.parameters = {}
        self.response = {}
        self.description = options.description
        self.section = options.section
        self.documentation = None
        self.https = False
        self.authentication = False
        self.status_codes = {}

        self._input = None
        self._output = options.output
        self._is_resource = bool(options.resource)
        self._method = None
        self._uri = None
        self._route = None

        if options.input is not None:
            self._input = options.input
        elif options.filters is not None:
            for item in options.filters:
                if item.get("name") is None:
                    raise ConfigurationError('a "filter" element has to contain a "name" attribute')

                descriptor = dict(item)
                name = descriptor.pop("name")
                self.add_filter(name, descriptor)

        if options.status_codes is not None:
            for status_code, description in options.status_codes.items():
                self.add_status_code(status_code, description)

        if options.authentication is not None:
            self.authentication = bool(options.authentication)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(method={self._method!r}, uri={self._uri!r})"

    @property
    def input(self) -> Optional[str]:
        return self._input

    @property
    def output(self) -> Optional[str]:
        return self._output

    @property
    def is_resource(self) -> bool:
        return self._is_resource

    @property
    def method(self) -> Optional[str]:
        "HTTP method(s) accepted by the bound route, or `ANY` if the route imposes no constraint."

        return self._method

    @property
    def uri(self) -> Optional[str]:
        return self._uri

    @property
    def route(self) -> Optional[RouteLike]:
        return self._route

    def add_filter(self, name: str, filter: Descriptor) -> None:
        self.filters[_check_name(name, "filter")] = filter

    def add_requirement(self, name: str, requirement: Descriptor) -> None:
        self.requirements[_check_name(name, "requirement")] = requirement

    def add_parameter(self, name: str, parameter: Descriptor) -> None:
        self.parameters[_check_name(name, "parameter")] = parameter

    def add_status_code(self, status_code: HTTPStatusCode, description: Any) -> None:
        """
        Associates a list of descriptions with an HTTP status code, replacing any earlier descriptions.

        :param status_code: The HTTP status code, e.g. `HTTPStatus.NOT_FOUND`, `404` or `"404"`.
        :param description: A single description or a list of descriptions.
        """

        if status_code is None or status_code == "":
            raise ConfigurationError("status code must not be empty")
        if isinstance(status_code, HTTPStatus):
            status_code = status_code.value
        elif isinstance(status_code, str) and status_code.isdecimal():
            status_code = int(status_code)

        if isinstance(description, (list, tuple)):
            self.status_codes[status_code] = list(description)
        else:
            self.status_codes[status_code] = [description]

    def set_requirements(self, requirements: Mapping[str, Descriptor]) -> None:
        "Merges requirements into those already present. New entries take precedence."

        self.requirements.update(requirements)

    def set_parameters(self, parameters: Mapping[str, Descriptor]) -> None:
        self.parameters = dict(parameters)

    def set_response(self, response: Mapping[str, Descriptor]) -> None:
        "Sets the response data as processed by parsers, in the same format as parameters."

        self.response = dict(response)

    def bind_route(self, route: RouteLike) -> None:
        "Associates the documentation with the route it describes."

        self._route = route
        self._uri = route.path_pattern()
        self._method = route.method_constraint() or "ANY"
        logger.debug("documentation bound to route: %s %s", self._method, self._uri)

    def to_dict(self) -> dict[str, Any]:
        """
        Exports documentation as a structured mapping for renderers.

        Empty attributes are omitted, except for `method`, `uri`, `https` and `authentication`.
        """

        data: dict[str, Any] = {
            "method": self._method,
            "uri": self._uri,
        }

        if self.description:
            data["description"] = self.description
        if self.documentation:
            data["documentation"] = self.documentation
        if self.filters:
            data["filters"] = copy.deepcopy(self.filters)
        if self.parameters:
            data["parameters"] = copy.deepcopy(self.parameters)
        if self.requirements:
            data["requirements"] = copy.deepcopy(self.requirements)
        if self.response:
            data["response"] = copy.deepcopy(self.response)
        if self.status_codes:
            data["statusCodes"] = copy.deepcopy(self.status_codes)
        if self.section:
            data["section"] = self.section

        data["https"] = self.https
        data["authentication"] = self.authentication
        return data

    def to_json(self) -> JsonType:
        "Exports documentation as a JSON-compatible object tree."

        data = self.to_dict()
        if "statusCodes" in data:
            # JSON object keys are strings
            data["statusCodes"] = {str(code): descriptions for code, descriptions in data["statusCodes"].items()}
        return object_to_json(data)


def _check_name(name: str, kind: str) -> str:
    if name is None or name == "":
        raise ConfigurationError(f"{kind} name must not be empty")
    return name
