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
"""Locale-aware URLs — language tables, request processing and URL creation.

Import the Starlette integration from the adapter package::

    from localeurls.web.adapters.starlette import install_locale_urls
"""

from localeurls.i18n.actions import NO_OP, Continue, LocaleAction, NoOp, Redirect
from localeurls.i18n.context import LocaleContext
from localeurls.i18n.detection import LanguageDetector
from localeurls.i18n.events import LanguageChanged, LanguageChangeListener, LanguageChangeNotifier
from localeurls.i18n.language_table import LanguageEntry, LanguageTable, ResolvedLanguage
from localeurls.i18n.locale import (
    LocaleResolver,
    UrlLocaleResolver,
    parse_accept_language,
)
from localeurls.i18n.persistence import LanguagePersistence
from localeurls.i18n.properties import LocaleUrlProperties
from localeurls.i18n.resolver import LocaleUrlResolver

__all__ = [
    "NO_OP",
    "Continue",
    "LanguageChangeListener",
    "LanguageChangeNotifier",
    "LanguageChanged",
    "LanguageDetector",
    "LanguageEntry",
    "LanguagePersistence",
    "LanguageTable",
    "LocaleAction",
    "LocaleContext",
    "LocaleResolver",
    "LocaleUrlProperties",
    "LocaleUrlResolver",
    "NoOp",
    "Redirect",
    "ResolvedLanguage",
    "UrlLocaleResolver",
    "parse_accept_language",
]
