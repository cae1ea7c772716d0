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
"""Language detection from browser preferences and GeoIP data."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import structlog

from localeurls.i18n.language_table import LanguageTable

logger = structlog.get_logger("localeurls.i18n.detection")


class LanguageDetector:
    """Picks a language for requests that carry no URL code and nothing persisted.

    Browser languages are only consulted when *enabled*; the GeoIP lookup
    runs whenever a country value is available.

    Args:
        table: The configured language table.
        enabled: Whether Accept-Language based detection is active.
        geo_ip_language_countries: Ordered ``language -> country codes`` map.
    """

    def __init__(
        self,
        table: LanguageTable,
        enabled: bool = True,
        geo_ip_language_countries: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._table = table
        self._enabled = enabled
        self._geo_ip = dict(geo_ip_language_countries or {})

    def detect(self, acceptable_languages: Iterable[str], geo_country: str | None = None) -> str | None:
        if self._enabled:
            for acceptable in acceptable_languages:
                language = self._table.match_code(acceptable).to_code()
                if language is not None:
                    logger.debug("browser_language_detected", language=language, acceptable=acceptable)
                    return language

        if geo_country is not None:
            for language, countries in self._geo_ip.items():
                if geo_country in countries:
                    logger.debug("geo_ip_language_detected", language=language, country=geo_country)
                    return language

        return None
