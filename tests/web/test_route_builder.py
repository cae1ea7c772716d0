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
"""Tests for StarletteRouteBuilder — URL creation and path parsing over a Router."""

import pytest
from starlette.responses import PlainTextResponse
from starlette.routing import Host, Mount, NoMatchFound, Route, Router

from localeurls.i18n.ports.outbound import ParsedRoute, RouteBuilder
from localeurls.web.adapters.starlette.routing import StarletteRouteBuilder


async def _endpoint(request):
    return PlainTextResponse("OK")


@pytest.fixture
def router() -> Router:
    return Router(
        routes=[
            Route("/", _endpoint, name="home"),
            Route("/site/page", _endpoint, name="page"),
            Route("/items/{item_id:int}", _endpoint, name="item"),
            Mount("/admin", routes=[Route("/users/{name}", _endpoint, name="user")], name="admin"),
            Host("api.example.com", Router(routes=[Route("/status", _endpoint, name="status")]), name="api"),
        ]
    )


class TestCreateUrl:
    def test_implements_port(self, router):
        assert isinstance(StarletteRouteBuilder(router), RouteBuilder)

    def test_home(self, router):
        assert StarletteRouteBuilder(router).create_url("", {}) == "/"

    def test_named_route(self, router):
        assert StarletteRouteBuilder(router).create_url("page", {}) == "/site/page"

    def test_extra_params_become_query(self, router):
        builder = StarletteRouteBuilder(router)
        assert builder.create_url("page", {"x": "y", "tags": ["a", "b"]}) == "/site/page?x=y&tags=a&tags=b"
        assert builder.create_url("", {"x": "y"}) == "/?x=y"

    def test_path_params(self, router):
        builder = StarletteRouteBuilder(router)
        assert builder.create_url("item", {"item_id": 5, "x": "1"}) == "/items/5?x=1"

    def test_mounted_route(self, router):
        builder = StarletteRouteBuilder(router)
        assert builder.create_url("admin:user", {"name": "bob"}) == "/admin/users/bob"

    def test_host_route_is_absolute(self, router):
        builder = StarletteRouteBuilder(router, host_info="https://www.example.com")
        assert builder.create_url("api:status", {}) == "https://api.example.com/status"

    def test_suffix(self, router):
        builder = StarletteRouteBuilder(router, suffix="/")
        assert builder.create_url("page", {}) == "/site/page/"
        assert builder.create_url("", {}) == "/"

    def test_base_url(self, router):
        builder = StarletteRouteBuilder(router, base_url="/base/")
        assert builder.base_url == "/base"
        assert builder.create_url("page", {}) == "/base/site/page"
        assert builder.create_url("", {}) == "/base/"

    def test_script_url(self, router):
        builder = StarletteRouteBuilder(
            router, base_url="/base", script_url="/base/app", show_script_name=True
        )
        assert builder.create_url("page", {}) == "/base/app/site/page"

    def test_unknown_route(self, router):
        with pytest.raises(NoMatchFound):
            StarletteRouteBuilder(router).create_url("missing", {})


class TestParseRequest:
    def test_home(self, router):
        assert StarletteRouteBuilder(router).parse_request("") == ParsedRoute("")

    def test_named_route(self, router):
        assert StarletteRouteBuilder(router).parse_request("site/page") == ParsedRoute("page")

    def test_path_params(self, router):
        parsed = StarletteRouteBuilder(router).parse_request("items/5")
        assert parsed == ParsedRoute("item", {"item_id": 5})

    def test_mounted_route(self, router):
        parsed = StarletteRouteBuilder(router).parse_request("admin/users/bob")
        assert parsed == ParsedRoute("admin:user", {"name": "bob"})

    def test_trailing_slash_is_normalized(self, router):
        parsed = StarletteRouteBuilder(router).parse_request("site/page/")
        assert parsed == ParsedRoute("page", {}, normalized=True)

    def test_no_normalization_without_redirect_slashes(self, router):
        router.redirect_slashes = False
        assert StarletteRouteBuilder(router).parse_request("site/page/") is None

    def test_unknown_path(self, router):
        assert StarletteRouteBuilder(router).parse_request("missing") is None
