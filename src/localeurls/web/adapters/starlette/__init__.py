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
"""Starlette adapter — filter chain, request/route adapters and app wiring."""

from localeurls.web.adapters.starlette.app import install_locale_urls, locale_url_for
from localeurls.web.adapters.starlette.errors import locale_exception_handler
from localeurls.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from localeurls.web.adapters.starlette.locale_filter import LocaleUrlFilter
from localeurls.web.adapters.starlette.request import (
    StarletteCookieJar,
    StarletteLocaleRequest,
    StarletteSessionAccessor,
)
from localeurls.web.adapters.starlette.routing import StarletteRouteBuilder

__all__ = [
    "LocaleUrlFilter",
    "StarletteCookieJar",
    "StarletteLocaleRequest",
    "StarletteRouteBuilder",
    "StarletteSessionAccessor",
    "WebFilterChainMiddleware",
    "install_locale_urls",
    "locale_exception_handler",
    "locale_url_for",
]
