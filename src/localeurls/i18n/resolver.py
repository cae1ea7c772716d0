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
"""Locale URL resolver — language selection for requests and language-aware URLs.

The resolver is framework independent. It reads and rewrites requests through
:class:`~localeurls.i18n.ports.LocaleRequest` and builds URLs through the
host's :class:`~localeurls.i18n.ports.RouteBuilder`; adapters turn the
returned :data:`~localeurls.i18n.actions.LocaleAction` into a response.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import structlog

from localeurls.i18n.actions import NO_OP, Continue, LocaleAction, Redirect
from localeurls.i18n.context import LocaleContext
from localeurls.i18n.detection import LanguageDetector
from localeurls.i18n.events import LanguageChangeNotifier
from localeurls.i18n.language_table import LanguageTable
from localeurls.i18n.persistence import LanguagePersistence
from localeurls.i18n.ports.outbound import LocaleRequest, RouteBuilder
from localeurls.i18n.properties import LocaleUrlProperties
from localeurls.kernel.exceptions import InvalidConfigurationException, ResourceNotFoundException

logger = structlog.get_logger("localeurls.i18n.resolver")


class LocaleUrlResolver:
    """Selects the request language and generates URLs carrying a language code.

    Args:
        properties: Bound ``localeurls.*`` settings.
        route_builder: The host router's URL creation and path parsing.
        notifier: Receives :class:`~localeurls.i18n.events.LanguageChanged`
            events when a persisted language is replaced.

    Raises:
        InvalidConfigurationException: Locale URLs are enabled with a
            non-empty language table while pretty URLs are off.
    """

    def __init__(
        self,
        properties: LocaleUrlProperties,
        route_builder: RouteBuilder,
        notifier: LanguageChangeNotifier | None = None,
    ) -> None:
        self._props = properties
        self._table = LanguageTable.from_config(properties.languages)
        if properties.enable_locale_urls and len(self._table) > 0 and not properties.enable_pretty_url:
            raise InvalidConfigurationException(
                "Locale URL support requires enable_pretty_url to be set to true.",
                code="LOCALE_PRETTY_URL",
            )
        self._builder = route_builder
        self._notifier = notifier if notifier is not None else LanguageChangeNotifier()
        self._persistence = LanguagePersistence.from_properties(properties, self._notifier)
        self._detector = LanguageDetector(
            self._table,
            enabled=properties.enable_language_detection,
            geo_ip_language_countries=properties.geo_ip_language_countries,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def properties(self) -> LocaleUrlProperties:
        return self._props

    @property
    def table(self) -> LanguageTable:
        return self._table

    @property
    def notifier(self) -> LanguageChangeNotifier:
        return self._notifier

    @property
    def route_builder(self) -> RouteBuilder:
        return self._builder

    @property
    def default_language(self) -> str:
        return self._props.default_language

    @property
    def enabled(self) -> bool:
        """Locale URLs are switched on and at least one language is configured."""
        return self._props.enable_locale_urls and len(self._table) > 0

    def current_language(self) -> str:
        """Language selected for the current request, or the default language."""
        ctx = LocaleContext.current()
        if ctx is not None and ctx.language:
            return ctx.language
        return self.default_language

    # ------------------------------------------------------------------
    # Request phase
    # ------------------------------------------------------------------

    def process_request(
        self,
        request: LocaleRequest,
        context: LocaleContext | None = None,
        *,
        normalized: bool | None = None,
    ) -> LocaleAction:
        """Select the language for *request* and decide how it continues.

        With a language code at the start of the path the code is stripped,
        the language becomes active and is persisted. Without one, the
        persisted or detected language leads to a redirect to the prefixed URL.

        Args:
            request: The incoming request.
            context: Request-scoped state; defaults to the current
                :class:`LocaleContext`. Processing happens once per context.
            normalized: Whether the host router had to correct the path. When
                ``None`` the route builder is asked.

        Raises:
            ResourceNotFoundException: A redirect is due but the path
                matches no route.
        """
        if not self.enabled:
            return NO_OP

        path_info = request.path_info
        for url_pattern in self._props.ignore_language_url_patterns.values():
            if re.search(url_pattern, path_info):
                logger.debug("ignore_pattern_matched", pattern=url_pattern, path_info=path_info)
                return NO_OP

        ctx = context if context is not None else LocaleContext.current()
        if ctx is None:
            ctx = LocaleContext(path_info=path_info)
        if ctx.processed:
            return NO_OP
        ctx.processed = True
        ctx.path_info = path_info

        # URL creation reads the active language from the installed context
        token = LocaleContext.activate(ctx) if LocaleContext.current() is not ctx else None
        try:
            matched = self._table.match_prefix(path_info)
            if matched is not None:
                code, remaining = matched
                return self._process_url_code(request, ctx, code, remaining, normalized)
            return self._process_missing_code(request, ctx)
        finally:
            if token is not None:
                LocaleContext.reset(token)

    def _process_url_code(
        self,
        request: LocaleRequest,
        ctx: LocaleContext,
        code: str,
        remaining: str,
        normalized: bool | None,
    ) -> LocaleAction:
        request.path_info = remaining
        ctx.path_info = remaining

        language = self._table.resolve_alias(code)
        if language is None:
            resolved = self._table.match_code(code)
            if resolved.country is not None:
                canonical = f"{resolved.language}-{resolved.country}"
                if code == canonical and not self._props.keep_uppercase_language_code:
                    # mixed-case codes always move to their lowercase URL
                    redirect = self._redirect(request, ctx, code)
                    if redirect is not None:
                        return redirect
                    language = resolved.language or code
                else:
                    language = canonical
            else:
                language = resolved.language if resolved.language is not None else code

        ctx.language = language
        logger.debug("language_found_in_url", language=language, code=code)
        if self._props.enable_language_persistence:
            self._persistence.persist(request, language)

        reset = not self._props.enable_default_language_url_code and language == self.default_language
        if not reset and normalized is None:
            normalized = self._is_normalized(remaining)
        if reset or normalized:
            redirect = self._redirect(request, ctx, "")
            if redirect is not None:
                return redirect
        return Continue(remaining)

    def _process_missing_code(self, request: LocaleRequest, ctx: LocaleContext) -> LocaleAction:
        language: str | None = None
        if self._props.enable_language_persistence:
            language = self._persistence.load(request)
        if language is None:
            language = self._detector.detect(
                request.acceptable_languages,
                request.server_variable(self._props.geo_ip_server_var),
            )

        if language is None or language == self.default_language:
            if not self._props.enable_default_language_url_code:
                return NO_OP
            language = self.default_language

        if not self._table.match_code(language).matched:
            return NO_OP

        redirect = self._redirect(request, ctx, self._table.url_code_for(language))
        return redirect if redirect is not None else NO_OP

    def _is_normalized(self, path_info: str) -> bool:
        parsed = self._builder.parse_request(path_info)
        return parsed is not None and parsed.normalized

    def _redirect(self, request: LocaleRequest, ctx: LocaleContext, language: str) -> Redirect | None:
        """Build the redirect to the current route in *language*.

        ``""`` targets the active language without forcing a code. Returns
        ``None`` when the target equals the requested URL.
        """
        parsed = self._builder.parse_request(ctx.path_info)
        if parsed is None:
            raise ResourceNotFoundException(
                "Page not found.",
                code="LOCALE_ROUTE_NOT_FOUND",
                context={"path_info": ctx.path_info},
            )

        params: dict[str, Any] = dict(parsed.params)
        if language:
            params[self._props.language_param] = language
        for key, value in request.query_params.items():
            params.setdefault(key, value)

        url = self.create_url(parsed.route, params)
        if parsed.route == "" and not params:
            # the home URL always ends in a slash
            url = url.rstrip("/") + "/"

        if url == request.url:
            logger.debug("language_redirect_suppressed", url=url, language=language)
            return None

        logger.info("language_redirect", url=url, language=language, status=self._props.language_redirect_code)
        return Redirect(language=language, url=url, status_code=self._props.language_redirect_code)

    # ------------------------------------------------------------------
    # URL creation
    # ------------------------------------------------------------------

    def create_url(self, route: str, params: Mapping[str, Any] | None = None) -> str:
        """Create a URL for *route* with the language code injected.

        The ``language_param`` entry of *params* selects the language;
        without it the current language is used. The default language gets
        no code unless ``enable_default_language_url_code`` is set or it was
        requested explicitly while persistence or detection is on.
        """
        route = route.strip("/")
        params = dict(params or {})

        for route_pattern in self._props.ignore_language_url_patterns:
            if re.search(route_pattern, route):
                return self._builder.create_url(route, params)

        if not self.enabled:
            return self._builder.create_url(route, params)

        language = params.pop(self._props.language_param, None)
        language_given = language is not None
        if language is None:
            language = self.current_language()
        language = str(language)

        url = self._builder.create_url(route, params)
        if language == "":
            return url

        is_default = language == self.default_language
        inject = (
            not is_default
            or self._props.enable_default_language_url_code
            or (
                language_given
                and (self._props.enable_language_persistence or self._props.enable_language_detection)
            )
        )
        if not inject:
            return url

        code = self._table.url_code_for(language)
        if not self._props.keep_uppercase_language_code:
            code = code.lower()
        return self._insert_code(url, code, has_params=bool(params))

    def create_absolute_url(
        self, route: str, params: Mapping[str, Any] | None = None, scheme: str | None = None
    ) -> str:
        """Like :meth:`create_url`, prefixed with the host info.

        *scheme* replaces the scheme of the result (``"https"``), or makes a
        protocol-relative URL when ``""``.
        """
        url = self.create_url(route, params)
        if "://" not in url:
            host_info = self._builder.host_info
            if url.startswith("//"):
                url = host_info[: host_info.index("://")] + ":" + url
            else:
                url = host_info + url
        return _ensure_scheme(url, scheme)

    def _insert_code(self, url: str, code: str, *, has_params: bool) -> str:
        builder = self._builder
        prefix = builder.script_url if builder.show_script_name else builder.base_url
        insert_pos = len(prefix)

        if builder.suffix != "/":
            if not has_params:
                # "/base/" becomes "/base/de" rather than "/base/de/"
                if url == prefix + "/":
                    url = url.rstrip("/")
            elif url.startswith(prefix + "/?"):
                # "/base/?x=y" becomes "/base/de?x=y"
                url = url[:insert_pos] + url[insert_pos + 1 :]

        if "://" in url:
            # host-bound routes: insert after the host part
            pos = url.find("/", 8)
            if pos == -1:
                pos = url.find("?", 8)
            insert_pos += pos if pos != -1 else len(url)

        if insert_pos > 0:
            return url[:insert_pos] + "/" + code + url[insert_pos:]
        return "/" + code + url


def _ensure_scheme(url: str, scheme: str | None) -> str:
    if scheme is None:
        return url
    if url.startswith("//"):
        return url if scheme == "" else f"{scheme}:{url}"
    pos = url.find("://")
    if pos == -1:
        return url
    return url[pos + 1 :] if scheme == "" else scheme + url[pos:]
