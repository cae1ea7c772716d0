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
"""Language change notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

logger = structlog.get_logger("localeurls.i18n.events")


@dataclass(frozen=True)
class LanguageChanged:
    """A persisted language was replaced.

    Attributes:
        old_language: Previously persisted language, ``None`` if there was none.
        language: The newly persisted language.
    """

    old_language: str | None
    language: str


LanguageChangeListener = Callable[[LanguageChanged], None]


class LanguageChangeNotifier:
    """Synchronous in-process listener registry for :class:`LanguageChanged`."""

    def __init__(self) -> None:
        self._listeners: list[LanguageChangeListener] = []

    def subscribe(self, listener: LanguageChangeListener) -> LanguageChangeListener:
        """Register *listener*; returns it so the method also works as a decorator."""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: LanguageChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def notify(self, old_language: str | None, language: str) -> LanguageChanged | None:
        """Publish a change to every listener unless the language stayed the same."""
        if old_language == language:
            return None

        event = LanguageChanged(old_language=old_language, language=language)
        logger.debug("language_changed", old_language=old_language, language=language)
        for listener in list(self._listeners):
            listener(event)
        return event
