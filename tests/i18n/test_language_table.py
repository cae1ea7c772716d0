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
"""Tests for LanguageTable — configuration, prefix matching and code matching."""

import pytest

from localeurls.i18n.language_table import LanguageEntry, LanguageTable, ResolvedLanguage
from localeurls.kernel.exceptions import InvalidConfigurationException


class TestFromConfig:
    def test_plain_codes_keep_order(self):
        table = LanguageTable.from_config(["en", "de", "fr"])
        assert table.languages == ("en", "de", "fr")
        assert len(table) == 3

    def test_alias_mapping_becomes_entry(self):
        table = LanguageTable.from_config(["en", {"deutsch": "de"}])
        entries = list(table)
        assert entries[1] == LanguageEntry("de", "deutsch")
        assert entries[1].is_alias
        assert entries[1].key == "deutsch"
        assert table.resolve_alias("deutsch") == "de"
        assert table.resolve_alias("de") is None

    def test_wildcard_entry(self):
        table = LanguageTable.from_config(["es-*", {"wc-*": "wc-*"}])
        assert all(entry.is_wildcard for entry in table)

    def test_rejects_unsupported_items(self):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            LanguageTable.from_config(["en", 42])
        assert exc_info.value.code == "LOCALE_LANGUAGES"


class TestUrlCodeFor:
    def test_alias_key_is_preferred(self):
        table = LanguageTable.from_config(["en", {"at": "de-AT"}, "de-AT"])
        assert table.url_code_for("de-AT") == "at"

    def test_plain_code(self):
        table = LanguageTable.from_config(["en", "de"])
        assert table.url_code_for("de") == "de"

    def test_unknown_language_is_returned_unchanged(self):
        table = LanguageTable.from_config(["en"])
        assert table.url_code_for("es-BO") == "es-BO"


class TestMatchPrefix:
    def test_strips_code_and_slash(self):
        table = LanguageTable.from_config(["en", "de"])
        assert table.match_prefix("de/site/page") == ("de", "site/page")

    def test_bare_code(self):
        table = LanguageTable.from_config(["en", "de"])
        assert table.match_prefix("de") == ("de", "")

    def test_no_match_without_word_boundary(self):
        table = LanguageTable.from_config(["en", "de"])
        assert table.match_prefix("designer/page") is None

    def test_longer_code_wins(self):
        table = LanguageTable.from_config(["en", "en-US"])
        assert table.match_prefix("en-us/page") == ("en-us", "page")

    def test_case_insensitive(self):
        table = LanguageTable.from_config(["en", "de"])
        assert table.match_prefix("DE/page") == ("DE", "page")

    def test_wildcard_matches_country_and_bare_language(self):
        table = LanguageTable.from_config(["en", "es-*"])
        assert table.match_prefix("es-bo/page") == ("es-bo", "page")
        assert table.match_prefix("es/page") == ("es", "page")

    def test_alias_key(self):
        table = LanguageTable.from_config(["en", {"deutsch": "de"}])
        assert table.match_prefix("deutsch/site/page") == ("deutsch", "site/page")
        assert table.match_prefix("de/site/page") is None

    def test_empty_table(self):
        assert LanguageTable().match_prefix("en/page") is None

    def test_stripped_path_has_no_further_code(self):
        table = LanguageTable.from_config(["en", "en-US", "de", "es-*"])
        for path in ("en-US/page", "de/page", "es-ar/page", "en/page"):
            _, remaining = table.match_prefix(path)
            assert table.match_prefix(remaining) is None


class TestMatchCode:
    def test_wildcard_with_country(self):
        table = LanguageTable.from_config(["en-*"])
        assert table.match_code("en-GB") == ResolvedLanguage("en", "GB")

    def test_wildcard_bare_language(self):
        table = LanguageTable.from_config(["en-*"])
        assert table.match_code("en") == ResolvedLanguage("en", None)

    def test_wildcard_unknown_language(self):
        table = LanguageTable.from_config(["en-*"])
        assert table.match_code("fr") == ResolvedLanguage(None, None)
        assert not table.match_code("fr").matched

    def test_wildcard_uppercases_country(self):
        table = LanguageTable.from_config(["es-*"])
        assert table.match_code("es-bo") == ResolvedLanguage("es", "BO")

    def test_exact_code_ignores_case(self):
        table = LanguageTable.from_config(["en", "en-US"])
        assert table.match_code("en-us") == ResolvedLanguage("en", "US")
        assert table.match_code("EN") == ResolvedLanguage("en", None)

    def test_script_code(self):
        table = LanguageTable.from_config(["sr-Latn"])
        assert table.match_code("sr-latn").to_code() == "sr-Latn"

    def test_country_degrades_to_language(self):
        table = LanguageTable.from_config(["en", "pt"])
        assert table.match_code("pt-br") == ResolvedLanguage("pt", None)

    def test_bare_language_without_entry(self):
        table = LanguageTable.from_config(["pt-BR"])
        assert not table.match_code("pt").matched

    def test_multi_dash_keeps_remainder_as_country(self):
        table = LanguageTable.from_config(["en-*"])
        assert table.match_code("en-us-variant") == ResolvedLanguage("en", "US-VARIANT")


class TestResolvedLanguage:
    def test_to_code(self):
        assert ResolvedLanguage("de", "AT").to_code() == "de-AT"
        assert ResolvedLanguage("de").to_code() == "de"
        assert ResolvedLanguage(None).to_code() is None
