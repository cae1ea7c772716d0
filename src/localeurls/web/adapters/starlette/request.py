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
"""Starlette request adapter — LocaleRequest over a Starlette request."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

import structlog
from starlette.requests import Request
from starlette.responses import Response

from localeurls.i18n.locale import parse_accept_language

logger = structlog.get_logger("localeurls.web.starlette")

# Keyword arguments accepted by Response.set_cookie(), keyed by normalized name.
_COOKIE_OPTIONS = {
    "path": "path",
    "domain": "domain",
    "secure": "secure",
    "httponly": "httponly",
    "samesite": "samesite",
    "expires": "expires",
}


class StarletteSessionAccessor:
    """Session access through the dict installed by ``SessionMiddleware``."""

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    def get(self, key: str) -> Any:
        return self._session.get(key)

    def set(self, key: str, value: str) -> None:
        self._session[key] = value


class StarletteCookieJar:
    """Request cookies plus the cookies queued for the response.

    Queued values shadow the request cookie of the same name, so a value
    written earlier in the request is what later reads see.
    """

    def __init__(self, cookies: Mapping[str, str]) -> None:
        self._cookies = cookies
        self._pending: dict[str, tuple[str, int, dict[str, Any]]] = {}

    @property
    def pending(self) -> dict[str, tuple[str, int, dict[str, Any]]]:
        return dict(self._pending)

    def get(self, name: str) -> str | None:
        if name in self._pending:
            return self._pending[name][0]
        return self._cookies.get(name)

    def set(self, name: str, value: str, max_age: int, options: Mapping[str, Any]) -> None:
        self._pending[name] = (value, max_age, dict(options))

    def apply(self, response: Response) -> None:
        """Write the queued cookies as ``Set-Cookie`` headers of *response*."""
        for name, (value, max_age, options) in self._pending.items():
            response.set_cookie(name, value, max_age=max_age, **_cookie_kwargs(options))


def _cookie_kwargs(options: Mapping[str, Any]) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        name = _COOKIE_OPTIONS.get(key.lower().replace("_", ""))
        if name is None:
            logger.debug("cookie_option_ignored", option=key)
            continue
        if name == "samesite" and isinstance(value, str):
            value = value.lower()
        kwargs[name] = value
    return kwargs


class StarletteLocaleRequest:
    """Adapts a Starlette request to :class:`~localeurls.i18n.ports.LocaleRequest`.

    Setting :attr:`path_info` rewrites ``scope["path"]`` so the router
    dispatches on the path without its language code. :attr:`url` keeps
    the URI as it was received.
    """

    def __init__(self, request: Request) -> None:
        self._request = request
        scope = request.scope
        root_path: str = scope.get("root_path", "")
        path: str = scope["path"]
        if root_path and path.startswith(root_path):
            # the server includes the mount point in the path
            self._prefix = root_path
            path = path[len(root_path) :]
        else:
            self._prefix = ""

        self._path_info = path[1:] if path.startswith("/") else path
        query = scope.get("query_string", b"").decode("latin-1")
        full_path = root_path + path
        self.url = f"{full_path}?{query}" if query else full_path
        self.query_params: dict[str, Any] = dict(request.query_params)
        self.acceptable_languages = parse_accept_language(request.headers.get("accept-language"))
        self.session = StarletteSessionAccessor(request.session) if "session" in scope else None
        self.cookies = StarletteCookieJar(request.cookies)

    @property
    def request(self) -> Request:
        return self._request

    @property
    def path_info(self) -> str:
        return self._path_info

    @path_info.setter
    def path_info(self, value: str) -> None:
        self._path_info = value
        path = self._prefix + "/" + value
        scope = self._request.scope
        scope["path"] = path
        scope["raw_path"] = path.encode("utf-8")

    def server_variable(self, name: str) -> str | None:
        """CGI-style variables: ``HTTP_*`` map to request headers."""
        if name.startswith("HTTP_"):
            return self._request.headers.get(name[5:].replace("_", "-"))
        if name == "REMOTE_ADDR":
            client = self._request.client
            return client.host if client is not None else None
        if name == "REQUEST_METHOD":
            return self._request.method
        if name == "QUERY_STRING":
            return self._request.url.query
        return None
