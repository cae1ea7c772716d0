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
"""Exception hierarchy for localeurls.

All errors raised by the package inherit from :class:`LocaleUrlsException`,
so callers can catch the base class for unified handling or a subclass for
targeted handling.

Categories:
- InvalidConfigurationException: detected eagerly while building components
- ResourceNotFoundException: the current path cannot be resolved to a route
"""

from __future__ import annotations


class LocaleUrlsException(Exception):
    """Base exception for all localeurls errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"LOCALE_CONFIG"``).
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class InvalidConfigurationException(LocaleUrlsException):
    """The supplied configuration cannot be used."""


class ResourceNotFoundException(LocaleUrlsException):
    """No route matches the requested path."""
