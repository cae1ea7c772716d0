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
"""Language persistence in the session and a cookie."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from localeurls.i18n.events import LanguageChangeNotifier
from localeurls.i18n.ports.outbound import LocaleRequest
from localeurls.i18n.properties import LocaleUrlProperties

logger = structlog.get_logger("localeurls.i18n.persistence")


class LanguagePersistence:
    """Stores the selected language so later requests without a URL code reuse it.

    The session and the cookie are independent: a ``None`` session key or a
    zero cookie duration switches the respective store off for writing.
    Reading consults the session first, then the request cookie.
    """

    def __init__(
        self,
        session_key: str | None = "_language",
        cookie_name: str = "_language",
        cookie_duration: int = 0,
        cookie_options: Mapping[str, Any] | None = None,
        notifier: LanguageChangeNotifier | None = None,
    ) -> None:
        self._session_key = session_key
        self._cookie_name = cookie_name
        self._cookie_duration = cookie_duration
        self._cookie_options: dict[str, Any] = {"httponly": True, **(cookie_options or {})}
        self._notifier = notifier

    @classmethod
    def from_properties(
        cls, properties: LocaleUrlProperties, notifier: LanguageChangeNotifier | None = None
    ) -> LanguagePersistence:
        return cls(
            session_key=properties.language_session_key,
            cookie_name=properties.language_cookie_name,
            cookie_duration=properties.language_cookie_duration,
            cookie_options=properties.language_cookie_options,
            notifier=notifier,
        )

    def load(self, request: LocaleRequest) -> str | None:
        """Return the persisted language, or ``None`` if neither store holds one."""
        if self._session_key is not None and request.session is not None:
            language = request.session.get(self._session_key)
            if isinstance(language, str):
                logger.debug("persisted_language_found", source="session", language=language)
                return language

        language = request.cookies.get(self._cookie_name)
        if isinstance(language, str):
            logger.debug("persisted_language_found", source="cookie", language=language)
            return language

        return None

    def persist(self, request: LocaleRequest, language: str) -> None:
        """Write *language* to the enabled stores, notifying listeners of a change."""
        if self._notifier is not None and self._notifier.has_listeners:
            self._notifier.notify(self.load(request), language)

        if self._session_key is not None and request.session is not None:
            request.session.set(self._session_key, language)
            logger.debug("language_persisted_in_session", language=language)

        if self._cookie_duration > 0:
            request.cookies.set(self._cookie_name, language, self._cookie_duration, self._cookie_options)
            logger.debug("language_persisted_in_cookie", language=language)
