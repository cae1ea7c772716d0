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
"""Starlette route builder — URL creation and path parsing over a Router."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode, urlsplit

from starlette.routing import BaseRoute, Host, Match, Mount, Router
from starlette.types import Scope

from localeurls.i18n.ports.outbound import ParsedRoute


class StarletteRouteBuilder:
    """:class:`~localeurls.i18n.ports.RouteBuilder` backed by a Starlette router.

    Routes are addressed by name, nested names use Starlette's
    ``"mount:route"`` form and ``""`` is the home page ``/``. Parameters a
    route does not declare in its path are appended as query string.

    Args:
        router: The application router (``app.router``).
        base_url: Prefix of every generated URL (the ASGI ``root_path``).
        script_url: Prefix used instead of *base_url* when
            *show_script_name* is set; defaults to *base_url*.
        show_script_name: Whether URLs carry *script_url*.
        suffix: Global suffix appended to route paths (``"/"``).
        host_info: Scheme and host for absolute URLs and host routes.
    """

    def __init__(
        self,
        router: Router,
        *,
        base_url: str = "",
        script_url: str | None = None,
        show_script_name: bool = False,
        suffix: str = "",
        host_info: str = "http://localhost",
    ) -> None:
        self._router = router
        self.base_url = base_url.rstrip("/")
        self.script_url = script_url if script_url is not None else self.base_url
        self.show_script_name = show_script_name
        self.suffix = suffix
        self.host_info = host_info.rstrip("/")

    def create_url(self, route: str, params: Mapping[str, Any]) -> str:
        query = dict(params)
        host = ""
        if route == "":
            path = "/"
        else:
            names = _path_param_names(self._router.routes, route) or set()
            path_params = {name: query.pop(name) for name in names if name in query}
            url_path = self._router.url_path_for(route, **path_params)
            path = str(url_path)
            host = url_path.host
            if self.suffix and path != "/" and not path.endswith(self.suffix):
                path += self.suffix

        prefix = self.script_url if self.show_script_name else self.base_url
        url = prefix + path
        if host:
            url = f"{urlsplit(self.host_info).scheme or 'http'}://{host}{url}"
        if query:
            url += "?" + urlencode(query, doseq=True)
        return url

    def parse_request(self, path_info: str) -> ParsedRoute | None:
        """Match ``/`` + *path_info*, retrying with the trailing slash toggled.

        A match found only after toggling the slash is reported as normalized.
        """
        if path_info == "":
            return ParsedRoute("")

        path = "/" + path_info
        parsed = self._match(path)
        if parsed is not None:
            return parsed

        if self._router.redirect_slashes:
            other = path.rstrip("/") if path.endswith("/") else path + "/"
            if other == "/":
                return ParsedRoute("", normalized=True)
            parsed = self._match(other)
            if parsed is not None:
                return ParsedRoute(parsed.route, parsed.params, normalized=True)
        return None

    def _match(self, path: str) -> ParsedRoute | None:
        scope: Scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": [(b"host", urlsplit(self.host_info).netloc.encode("latin-1"))],
        }
        return _match_routes(self._router.routes, scope, "")


def _match_routes(routes: Sequence[BaseRoute], scope: Scope, name_prefix: str) -> ParsedRoute | None:
    for route in routes:
        match, child_scope = route.matches(scope)
        if match == Match.NONE:
            continue
        if isinstance(route, (Mount, Host)):
            prefix = name_prefix + (f"{route.name}:" if route.name else "")
            found = _match_routes(route.routes, {**scope, **child_scope}, prefix)
            if found is not None:
                return found
            continue
        name = getattr(route, "name", None) or ""
        return ParsedRoute(name_prefix + name, dict(child_scope.get("path_params", {})))
    return None


def _path_param_names(routes: Sequence[BaseRoute], name: str) -> set[str] | None:
    for route in routes:
        if isinstance(route, (Mount, Host)):
            child_name = name
            if route.name is not None:
                if not name.startswith(route.name + ":"):
                    continue
                child_name = name[len(route.name) + 1 :]
            found = _path_param_names(route.routes, child_name)
            if found is not None:
                return found | set(route.param_convertors)
        elif getattr(route, "name", None) == name:
            return set(getattr(route, "param_convertors", {}))
    return None
