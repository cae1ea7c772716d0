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
"""Wiring of locale URLs into a Starlette application."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from starlette.applications import Starlette
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request

from localeurls.core.config import Config
from localeurls.i18n.events import LanguageChangeNotifier
from localeurls.i18n.ports.outbound import RouteBuilder
from localeurls.i18n.properties import LocaleUrlProperties
from localeurls.i18n.resolver import LocaleUrlResolver
from localeurls.kernel.exceptions import LocaleUrlsException
from localeurls.logging.structlog_adapter import LOGGING_PREFIX, StructlogAdapter
from localeurls.web.adapters.starlette.errors import locale_exception_handler
from localeurls.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from localeurls.web.adapters.starlette.locale_filter import LocaleUrlFilter
from localeurls.web.adapters.starlette.routing import StarletteRouteBuilder
from localeurls.web.ports.filter import WebFilter

logger = structlog.get_logger("localeurls.web.starlette")


def install_locale_urls(
    app: Starlette,
    properties: LocaleUrlProperties | None = None,
    *,
    config: Config | None = None,
    notifier: LanguageChangeNotifier | None = None,
    route_builder: RouteBuilder | None = None,
    base_url: str = "",
    suffix: str = "",
    host_info: str = "http://localhost",
    session_secret_key: str | None = None,
    filters: Sequence[WebFilter] = (),
    exclude_patterns: Sequence[str] = (),
) -> LocaleUrlResolver:
    """Add locale URL handling to *app* and return the resolver.

    Properties come from *properties*, else from binding *config* (or an
    empty :class:`Config`, which still honours ``LOCALEURLS_*`` environment
    variables). A ``localeurls.logging`` section in *config* configures
    structlog. The resolver is stored as ``app.state.locale_urls``.

    With *session_secret_key* a ``SessionMiddleware`` is added around the
    filter chain so the language can be persisted in the session. Call this
    before adding other session middleware yourself for the same effect.

    Raises:
        InvalidConfigurationException: The properties cannot be used.
    """
    if config is not None and config.get_section(LOGGING_PREFIX):
        StructlogAdapter().configure(config)

    if properties is None:
        properties = (config if config is not None else Config()).bind(LocaleUrlProperties)

    if route_builder is None:
        route_builder = StarletteRouteBuilder(
            app.router, base_url=base_url, suffix=suffix, host_info=host_info
        )

    resolver = LocaleUrlResolver(properties, route_builder, notifier)
    app.state.locale_urls = resolver

    app.add_exception_handler(LocaleUrlsException, locale_exception_handler)
    app.add_middleware(
        WebFilterChainMiddleware,
        filters=[LocaleUrlFilter(resolver, exclude_patterns=exclude_patterns), *filters],
    )
    if session_secret_key is not None:
        app.add_middleware(SessionMiddleware, secret_key=session_secret_key)

    logger.info(
        "locale_urls_installed",
        languages=list(resolver.table.languages),
        default_language=resolver.default_language,
        enabled=resolver.enabled,
    )
    return resolver


def locale_url_for(request: Request, route: str, **params: Any) -> str:
    """Language-aware URL for *route*, for use in endpoints and templates."""
    resolver: LocaleUrlResolver = request.app.state.locale_urls
    return resolver.create_url(route, params)
