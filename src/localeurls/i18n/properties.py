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
"""Locale URL configuration properties (``localeurls.*``)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from localeurls.core.config import config_properties

DEFAULT_COOKIE_DURATION = 2592000  # 30 days


@config_properties(prefix="localeurls")
class LocaleUrlProperties(BaseModel):
    """Immutable settings for language detection and locale-aware URLs.

    ``languages`` is an ordered table. Each item is either a language code
    (``"en"``, ``"sr-Latn"``), a wildcard (``"es-*"``), or a one-key mapping
    from a custom URL code to a language (``{"deutsch": "de"}``).

    ``ignore_language_url_patterns`` maps a route regex (checked when URLs are
    created) to a URL regex (checked against incoming paths).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    languages: list[str | dict[str, str]] = Field(default_factory=list)
    default_language: str = "en"

    enable_locale_urls: bool = True
    enable_default_language_url_code: bool = False
    enable_language_detection: bool = True
    enable_language_persistence: bool = True
    keep_uppercase_language_code: bool = False
    enable_pretty_url: bool = True

    language_session_key: str | None = "_language"
    language_cookie_name: str = "_language"
    language_cookie_duration: int = Field(default=DEFAULT_COOKIE_DURATION, ge=0)
    language_cookie_options: dict[str, Any] = Field(default_factory=dict)

    ignore_language_url_patterns: dict[str, str] = Field(default_factory=dict)
    language_param: str = "language"

    geo_ip_server_var: str = "HTTP_X_GEO_COUNTRY"
    geo_ip_language_countries: dict[str, list[str]] = Field(default_factory=dict)

    language_redirect_code: int = Field(default=302, ge=300, le=399)

    @field_validator("language_session_key", mode="before")
    @classmethod
    def _session_key_disabled(cls, value: Any) -> Any:
        # ``false`` in YAML switches the session store off
        return None if value is False or value == "" else value

    @field_validator("language_cookie_duration", mode="before")
    @classmethod
    def _cookie_disabled(cls, value: Any) -> Any:
        return 0 if value is False or value is None else value

    @field_validator("languages", mode="before")
    @classmethod
    def _languages_as_list(cls, value: Any) -> Any:
        # a plain mapping is accepted as a table made only of aliases
        if isinstance(value, dict):
            return [{key: code} for key, code in value.items()]
        return value

    @property
    def session_enabled(self) -> bool:
        return self.language_session_key is not None

    @property
    def cookie_enabled(self) -> bool:
        return self.language_cookie_duration > 0
