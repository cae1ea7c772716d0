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
"""Language table — configured codes, aliases, wildcards and code matching."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import NamedTuple

from localeurls.kernel.exceptions import InvalidConfigurationException

WILDCARD_SUFFIX = "-*"

# Country or script suffix accepted after a wildcard language in the URL.
_WILDCARD_REGION = r"\-[a-z]{2,3}"


@dataclass(frozen=True)
class LanguageEntry:
    """One row of the language table.

    Attributes:
        language: Canonical language code (``"de"``, ``"es-*"``).
        url_code: Custom URL segment for aliases (``"deutsch"``), else ``None``.
    """

    language: str
    url_code: str | None = None

    @property
    def key(self) -> str:
        """The code as it appears in URLs."""
        return self.url_code if self.url_code is not None else self.language

    @property
    def is_alias(self) -> bool:
        return self.url_code is not None

    @property
    def is_wildcard(self) -> bool:
        return self.key.endswith(WILDCARD_SUFFIX)


class ResolvedLanguage(NamedTuple):
    """Outcome of matching a code against the table.

    Both fields ``None`` means no match.
    """

    language: str | None
    country: str | None = None

    @property
    def matched(self) -> bool:
        return self.language is not None

    def to_code(self) -> str | None:
        """``language-COUNTRY``, bare ``language``, or ``None`` without a match."""
        if self.language is None:
            return None
        if self.country is None:
            return self.language
        return f"{self.language}-{self.country}"


NO_MATCH = ResolvedLanguage(None, None)


class LanguageTable:
    """Ordered language table with alias lookups and prefix matching.

    The table keeps the insertion order of the configuration; the prefix
    regex tries longer alternatives first so that ``en-GB`` is never
    swallowed by ``en``.
    """

    def __init__(self, entries: Iterable[LanguageEntry] = ()) -> None:
        self._entries: tuple[LanguageEntry, ...] = tuple(entries)
        self._languages: tuple[str, ...] = tuple(e.language for e in self._entries)
        self._lowercase: tuple[str, ...] = tuple(lang.lower() for lang in self._languages)
        self._aliases: dict[str, str] = {}
        for entry in self._entries:
            if entry.url_code is not None:
                self._aliases.setdefault(entry.url_code, entry.language)
        self._prefix_re = self._compile_prefix_pattern() if self._entries else None

    @classmethod
    def from_config(cls, languages: Iterable[str | Mapping[str, str]]) -> LanguageTable:
        """Build a table from configuration items.

        Items are plain codes or one-key ``{url_code: language}`` mappings.
        """
        entries: list[LanguageEntry] = []
        for item in languages:
            if isinstance(item, str):
                entries.append(LanguageEntry(item))
            elif isinstance(item, Mapping):
                entries.extend(LanguageEntry(str(code), str(alias)) for alias, code in item.items())
            else:
                raise InvalidConfigurationException(
                    f"Unsupported language table entry: {item!r}",
                    code="LOCALE_LANGUAGES",
                )
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    @property
    def languages(self) -> tuple[str, ...]:
        """Canonical codes in table order (aliases resolved to their target)."""
        return self._languages

    def contains(self, language: str) -> bool:
        """Whether *language* is a canonical code of the table (case-sensitive)."""
        return language in self._languages

    def resolve_alias(self, url_code: str) -> str | None:
        """Language for a custom URL code, or ``None`` if it is not an alias."""
        return self._aliases.get(url_code)

    def url_code_for(self, language: str) -> str:
        """URL segment for *language*: its alias when the first row naming it is one."""
        for entry in self._entries:
            if entry.language == language:
                return entry.key
        return language

    def match_prefix(self, path_info: str) -> tuple[str, str] | None:
        """Match a language code at the start of *path_info*.

        Returns:
            ``(code, remaining_path)`` with the code and one optional slash
            stripped, or ``None`` when the path carries no known code.
        """
        if self._prefix_re is None:
            return None
        m = self._prefix_re.match(path_info)
        if m is None:
            return None
        code = m.group(1)
        return code, path_info[len(code) + len(m.group(2)) :]

    def match_code(self, code: str) -> ResolvedLanguage:
        """Match a code like ``de``, ``es-BO`` or ``sr-latn`` against the table.

        1. A case-insensitive hit on a canonical code returns that code, split
           at its first dash into language and country.
        2. Otherwise a declared wildcard ``<language>-*`` accepts any country,
           which is uppercased.
        3. Otherwise ``<language>-<country>`` degrades to a configured bare
           ``<language>``.

        Only the first dash splits, so ``en-US-x`` keeps ``US-x`` as country.
        """
        lowered = code.lower()
        if lowered in self._lowercase:
            language, _, country = self._languages[self._lowercase.index(lowered)].partition("-")
            return ResolvedLanguage(language, country if "-" in code else None)

        has_dash = "-" in code
        language, _, country = code.partition("-")

        if self.contains(language + WILDCARD_SUFFIX):
            return ResolvedLanguage(language, country.upper() if has_dash else None)

        if has_dash and self.contains(language):
            return ResolvedLanguage(language, None)

        return NO_MATCH

    def _compile_prefix_pattern(self) -> re.Pattern[str]:
        # (length used for ordering, regex alternative)
        alternatives: list[tuple[int, str]] = []
        for entry in self._entries:
            key = entry.key
            if entry.is_wildcard:
                base = key[: -len(WILDCARD_SUFFIX)]
                alternatives.append((len(base) + len(_WILDCARD_REGION), re.escape(base) + _WILDCARD_REGION))
                alternatives.append((len(base), re.escape(base)))
            else:
                alternatives.append((len(key), re.escape(key)))

        alternatives.sort(key=lambda alt: alt[0], reverse=True)
        pattern = "|".join(regex for _, regex in alternatives)
        return re.compile(rf"^({pattern})\b(/?)", re.IGNORECASE)
