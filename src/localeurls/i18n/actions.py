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
"""Outcomes of request-phase locale processing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Continue:
    """Dispatch the request with the language prefix removed from the path."""

    path_info: str


@dataclass(frozen=True)
class Redirect:
    """Answer with a redirect to the same route in *language*.

    ``language`` is the URL code of the target (``""`` for the unprefixed
    default language); ``url`` is the computed location.
    """

    language: str
    url: str
    status_code: int = 302


@dataclass(frozen=True)
class NoOp:
    """Leave the request untouched."""


NO_OP = NoOp()

LocaleAction = Continue | Redirect | NoOp
