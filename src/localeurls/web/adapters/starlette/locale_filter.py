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
"""Locale URL filter — selects the request language before routing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

import structlog
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from localeurls.i18n.actions import Redirect
from localeurls.i18n.context import LocaleContext
from localeurls.i18n.resolver import LocaleUrlResolver
from localeurls.kernel.exceptions import ResourceNotFoundException
from localeurls.kernel.ordering import HIGHEST_PRECEDENCE, order
from localeurls.web.adapters.starlette.errors import locale_exception_handler
from localeurls.web.adapters.starlette.request import StarletteLocaleRequest
from localeurls.web.filters import OncePerRequestFilter
from localeurls.web.ports.filter import CallNext

logger = structlog.get_logger("localeurls.web.starlette")


@order(HIGHEST_PRECEDENCE + 200)
class LocaleUrlFilter(OncePerRequestFilter):
    """Runs :meth:`LocaleUrlResolver.process_request` for every HTTP request.

    The language code is stripped from ``scope["path"]`` before the router
    sees it; redirects are answered without calling the app. The selected
    language is exposed as ``request.state.language`` and through
    :class:`LocaleContext` while the request is handled.
    """

    def __init__(self, resolver: LocaleUrlResolver, exclude_patterns: Sequence[str] = ()) -> None:
        self._resolver = resolver
        self.exclude_patterns = list(exclude_patterns)

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        locale_request = StarletteLocaleRequest(request)
        ctx, token = LocaleContext.init(path_info=locale_request.path_info)
        try:
            try:
                action = self._resolver.process_request(locale_request, ctx)
            except ResourceNotFoundException as exc:
                logger.info("locale_route_not_found", path=request.url.path)
                return await locale_exception_handler(request, exc)

            request.state.language = self._resolver.current_language()
            if isinstance(action, Redirect):
                response: Response = RedirectResponse(action.url, status_code=action.status_code)
            else:
                response = cast(Response, await call_next(request))
            locale_request.cookies.apply(response)
            return response
        finally:
            LocaleContext.reset(token)
