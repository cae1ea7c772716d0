# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Outbound ports — what the locale resolver needs from the host framework.

Uses plain Python types so that vendor-specific request, session and router
objects stay confined to the adapter layer.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionAccessor(Protocol):
    """Read/write access to the server-side session of the current request."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: str) -> None: ...


@runtime_checkable
class CookieAccessor(Protocol):
    """Reads request cookies and queues response cookies."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str, max_age: int, options: Mapping[str, Any]) -> None: ...


@runtime_checkable
class LocaleRequest(Protocol):
    """The parts of an HTTP request the resolver reads or rewrites.

    Attributes:
        path_info: Path below the base URL, without leading slash
            (``"de/site/page"``). Writable: the resolver strips the language.
        url: Request URI below the host, including base URL and query string.
        query_params: Decoded query parameters.
        acceptable_languages: Browser languages, most preferred first.
        session: Session store, ``None`` when the host has no session.
        cookies: Cookie store.
    """

    path_info: str
    url: str
    query_params: Mapping[str, Any]
    acceptable_languages: Sequence[str]
    session: SessionAccessor | None
    cookies: CookieAccessor

    def server_variable(self, name: str) -> str | None:
        """CGI-style server variable such as ``HTTP_X_GEO_COUNTRY``."""
        ...


@dataclass(frozen=True)
class ParsedRoute:
    """A path resolved by the host router.

    Attributes:
        route: Route identifier (``""`` is the home route).
        params: Parameters captured from the path.
        normalized: The host corrected the path (e.g. a trailing slash) to find
            the route, so the request URL is not canonical.
    """

    route: str
    params: dict[str, Any] = field(default_factory=dict)
    normalized: bool = False


@runtime_checkable
class RouteBuilder(Protocol):
    """The host's URL rule system.

    Attributes:
        base_url: URL prefix of the application (``""`` or ``"/base"``).
        script_url: Prefix including the entry script (``"/base/app"``).
        show_script_name: Whether generated URLs carry ``script_url``.
        suffix: Global URL suffix (``"/"`` for trailing-slash URLs).
        host_info: Scheme and host used for absolute URLs
            (``"http://www.example.com"``).
    """

    base_url: str
    script_url: str
    show_script_name: bool
    suffix: str
    host_info: str

    def create_url(self, route: str, params: Mapping[str, Any]) -> str:
        """Build a URL for *route*; params the route does not consume go to the query string.

        Routes bound to a host produce ``scheme://host/...`` URLs.
        """
        ...

    def parse_request(self, path_info: str) -> ParsedRoute | None:
        """Resolve *path_info* to a route, or ``None`` when nothing matches."""
        ...
