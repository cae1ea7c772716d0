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
"""Tests for the Starlette request, session and cookie adapters."""

from starlette.requests import Request
from starlette.responses import Response

from localeurls.i18n.ports.outbound import CookieAccessor, LocaleRequest, SessionAccessor
from localeurls.web.adapters.starlette.request import (
    StarletteCookieJar,
    StarletteLocaleRequest,
    StarletteSessionAccessor,
)


def _request(
    path: str = "/de/site/page",
    *,
    query: bytes = b"",
    headers: dict[str, str] | None = None,
    root_path: str = "",
    session: dict | None = None,
    client: tuple[str, int] | None = None,
) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "raw_path": path.encode(),
        "root_path": root_path,
        "query_string": query,
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    if session is not None:
        scope["session"] = session
    return Request(scope)


class TestStarletteLocaleRequest:
    def test_implements_port(self):
        assert isinstance(StarletteLocaleRequest(_request()), LocaleRequest)

    def test_path_info_and_url(self):
        locale_request = StarletteLocaleRequest(_request(query=b"x=1"))
        assert locale_request.path_info == "de/site/page"
        assert locale_request.url == "/de/site/page?x=1"
        assert locale_request.query_params == {"x": "1"}

    def test_home_path_info(self):
        assert StarletteLocaleRequest(_request("/")).path_info == ""

    def test_setting_path_info_rewrites_scope(self):
        request = _request()
        locale_request = StarletteLocaleRequest(request)
        locale_request.path_info = "site/page"

        assert request.scope["path"] == "/site/page"
        assert request.scope["raw_path"] == b"/site/page"
        assert locale_request.url == "/de/site/page"

    def test_root_path_included_in_path(self):
        request = _request("/base/de/page", root_path="/base")
        locale_request = StarletteLocaleRequest(request)
        assert locale_request.path_info == "de/page"
        assert locale_request.url == "/base/de/page"

        locale_request.path_info = "page"
        assert request.scope["path"] == "/base/page"

    def test_root_path_outside_path(self):
        request = _request("/de/page", root_path="/base")
        locale_request = StarletteLocaleRequest(request)
        assert locale_request.path_info == "de/page"
        assert locale_request.url == "/base/de/page"

        locale_request.path_info = "page"
        assert request.scope["path"] == "/page"

    def test_acceptable_languages(self):
        request = _request(headers={"Accept-Language": "fr;q=0.5, de-AT"})
        assert StarletteLocaleRequest(request).acceptable_languages == ["de-AT", "fr"]

    def test_server_variables(self):
        request = _request(headers={"X-Geo-Country": "DEU"}, client=("10.0.0.1", 5000))
        locale_request = StarletteLocaleRequest(request)
        assert locale_request.server_variable("HTTP_X_GEO_COUNTRY") == "DEU"
        assert locale_request.server_variable("REMOTE_ADDR") == "10.0.0.1"
        assert locale_request.server_variable("REQUEST_METHOD") == "GET"
        assert locale_request.server_variable("HTTP_X_MISSING") is None
        assert locale_request.server_variable("SERVER_SOFTWARE") is None

    def test_without_session_middleware(self):
        assert StarletteLocaleRequest(_request()).session is None

    def test_with_session(self):
        session: dict = {"_language": "de"}
        locale_request = StarletteLocaleRequest(_request(session=session))
        assert locale_request.session.get("_language") == "de"
        locale_request.session.set("_language", "fr")
        assert session == {"_language": "fr"}


class TestStarletteSessionAccessor:
    def test_implements_port(self):
        assert isinstance(StarletteSessionAccessor({}), SessionAccessor)

    def test_missing_key(self):
        assert StarletteSessionAccessor({}).get("_language") is None


class TestStarletteCookieJar:
    def test_implements_port(self):
        assert isinstance(StarletteCookieJar({}), CookieAccessor)

    def test_reads_request_cookies(self):
        request = _request(headers={"Cookie": "_language=de"})
        assert StarletteLocaleRequest(request).cookies.get("_language") == "de"

    def test_queued_value_shadows_request_cookie(self):
        jar = StarletteCookieJar({"_language": "de"})
        jar.set("_language", "fr", 60, {})
        assert jar.get("_language") == "fr"
        assert jar.pending == {"_language": ("fr", 60, {})}

    def test_apply_sets_cookie_headers(self):
        jar = StarletteCookieJar({})
        jar.set("_language", "fr", 60, {"httponly": True, "sameSite": "Strict", "unknown": 1})
        response = Response()
        jar.apply(response)

        header = response.headers["set-cookie"]
        assert "_language=fr" in header
        assert "Max-Age=60" in header
        assert "HttpOnly" in header
        assert "SameSite=strict" in header

    def test_apply_without_pending_cookies(self):
        response = Response()
        StarletteCookieJar({}).apply(response)
        assert "set-cookie" not in response.headers
