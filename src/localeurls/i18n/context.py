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
"""Request-scoped locale state backed by contextvars.

Each HTTP request gets a fresh LocaleContext from the locale filter. It holds
the active language, the path-info after language stripping, and the guard
flag that keeps locale processing to once per request.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

_locale_context_var: ContextVar[LocaleContext | None] = ContextVar(
    "localeurls_locale_context", default=None
)


class LocaleContext:
    """Per-request locale state.

    Use ``LocaleContext.init()`` at request start and
    ``LocaleContext.reset()`` with the returned token at request end.
    """

    __slots__ = ("language", "path_info", "processed")

    def __init__(self, language: str | None = None, path_info: str = "") -> None:
        self.language = language
        self.path_info = path_info
        self.processed = False

    def __repr__(self) -> str:
        return (
            f"LocaleContext(language={self.language!r}, path_info={self.path_info!r}, "
            f"processed={self.processed})"
        )

    @classmethod
    def init(
        cls, language: str | None = None, path_info: str = ""
    ) -> tuple[LocaleContext, Token[LocaleContext | None]]:
        """Create a context for the current task and return it with its reset token."""
        ctx = cls(language=language, path_info=path_info)
        token = _locale_context_var.set(ctx)
        return ctx, token

    @classmethod
    def activate(cls, ctx: LocaleContext | None) -> Token[LocaleContext | None]:
        """Install an existing context for the current task."""
        return _locale_context_var.set(ctx)

    @classmethod
    def current(cls) -> LocaleContext | None:
        return _locale_context_var.get()

    @classmethod
    def reset(cls, token: Token[LocaleContext | None]) -> None:
        _locale_context_var.reset(token)
