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
"""Locale resolution — protocol, built-in resolvers and Accept-Language parsing."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from localeurls.i18n.context import LocaleContext


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale of an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class UrlLocaleResolver:
    """Returns the language selected for the current request by the locale filter.

    Falls back to *default_locale* outside a request or before the filter
    has run.
    """

    def __init__(self, default_locale: str = "en") -> None:
        self._default = default_locale

    def resolve_locale(self, request: Any) -> str:
        state = getattr(request, "state", None)
        language = getattr(state, "language", None) if state is not None else None
        if language:
            return str(language)

        ctx = LocaleContext.current()
        if ctx is not None and ctx.language:
            return ctx.language
        return self._default


def parse_accept_language(header: str | None) -> list[str]:
    """Return the language tags of an ``Accept-Language`` header, best first.

    Tags keep the spelling sent by the client. Entries are ordered by
    descending *q* value; ties keep header order. The ``*`` range, entries
    with ``q=0`` and entries with an unparsable *q* are dropped.

    >>> parse_accept_language("fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5")
    ['fr-CH', 'fr', 'en']
    """
    if not header:
        return []

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue

        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((quality, tag))

    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]
