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
"""Shared fakes for the framework-independent locale tests."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlencode

import pytest

from localeurls.i18n.context import LocaleContext
from localeurls.i18n.events import LanguageChangeNotifier
from localeurls.i18n.ports.outbound import ParsedRoute
from localeurls.i18n.properties import LocaleUrlProperties
from localeurls.i18n.resolver import LocaleUrlResolver


class FakeSession:
    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = dict(data or {})

    def get(self, key: str) -> Any:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class FakeCookies:
    def __init__(self, cookies: Mapping[str, str] | None = None) -> None:
        self.request_cookies = dict(cookies or {})
        self.written: dict[str, tuple[str, int, dict[str, Any]]] = {}

    def get(self, name: str) -> str | None:
        if name in self.written:
            return self.written[name][0]
        return self.request_cookies.get(name)

    def set(self, name: str, value: str, max_age: int, options: Mapping[str, Any]) -> None:
        self.written[name] = (value, max_age, dict(options))


class FakeRequest:
    def __init__(
        self,
        path_info: str = "",
        *,
        query_params: Mapping[str, Any] | None = None,
        acceptable_languages: list[str] | None = None,
        session: dict[str, Any] | None = None,
        has_session: bool = True,
        cookies: Mapping[str, str] | None = None,
        server: Mapping[str, str] | None = None,
        base_url: str = "",
    ) -> None:
        self.path_info = path_info
        self.query_params = dict(query_params or {})
        self.url = f"{base_url}/{path_info}"
        if self.query_params:
            self.url += "?" + urlencode(self.query_params)
        self.acceptable_languages = list(acceptable_languages or [])
        self.session = FakeSession(session) if has_session else None
        self.cookies = FakeCookies(cookies)
        self._server = dict(server or {})

    def server_variable(self, name: str) -> str | None:
        return self._server.get(name)


class FakeRouteBuilder:
    """Routes are addressed by their path (``"site/page"``), ``""`` is home."""

    def __init__(
        self,
        routes: tuple[str, ...] = ("site/page", "site/login", "site/other"),
        *,
        base_url: str = "",
        script_url: str | None = None,
        show_script_name: bool = False,
        suffix: str = "",
        host_info: str = "http://localhost",
        host_routes: Mapping[str, str] | None = None,
    ) -> None:
        self.routes = set(routes)
        self.base_url = base_url
        self.script_url = script_url if script_url is not None else base_url
        self.show_script_name = show_script_name
        self.suffix = suffix
        self.host_info = host_info
        self.host_routes = dict(host_routes or {})

    def create_url(self, route: str, params: Mapping[str, Any]) -> str:
        path = "/" if route == "" else f"/{route}{self.suffix}"
        url = (self.script_url if self.show_script_name else self.base_url) + path
        if route in self.host_routes:
            url = self.host_routes[route] + url
        if params:
            url += "?" + urlencode(dict(params))
        return url

    def parse_request(self, path_info: str) -> ParsedRoute | None:
        if path_info == "":
            return ParsedRoute("")
        if self.suffix == "/":
            normalized = not path_info.endswith("/")
            route = path_info.rstrip("/")
        else:
            normalized = path_info.endswith("/")
            route = path_info.rstrip("/")
        if route in self.routes:
            return ParsedRoute(route, normalized=normalized)
        return None


@pytest.fixture(autouse=True)
def locale_context() -> Iterator[LocaleContext]:
    ctx, token = LocaleContext.init()
    yield ctx
    LocaleContext.reset(token)


@pytest.fixture
def make_request():
    return FakeRequest


@pytest.fixture
def make_builder():
    return FakeRouteBuilder


@pytest.fixture
def make_resolver():
    def _make(
        builder: FakeRouteBuilder | None = None,
        notifier: LanguageChangeNotifier | None = None,
        **settings: Any,
    ) -> LocaleUrlResolver:
        settings.setdefault("languages", ["en", "de", "fr"])
        return LocaleUrlResolver(LocaleUrlProperties(**settings), builder or FakeRouteBuilder(), notifier)

    return _make
