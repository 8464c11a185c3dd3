"""Translation adapters with ``{param}`` substitution."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from stepforms.core.errors import AdapterConfigurationError, TranslationProviderMissingError

logger = logging.getLogger(__name__)

TranslationParams = Mapping[str, Any]
LookupProvider = Callable[[str], "str | None"]

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


@runtime_checkable
class TranslationAdapter(Protocol):
    """Resolves a translation key to display text."""

    def translate(self, key: str, params: TranslationParams | None = None) -> str: ...


@runtime_checkable
class GettextLike(Protocol):
    """Subset of :class:`gettext.NullTranslations` used as a host provider."""

    def gettext(self, message: str) -> str: ...


def format_template(template: str, params: TranslationParams | None = None) -> str:
    """Substitute ``{name}`` placeholders from ``params``.

    Placeholders without a matching, non-``None`` parameter are kept
    verbatim. Literal braces that do not wrap an identifier are untouched.
    """

    if not params:
        return template

    def _replace(match: re.Match[str]) -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return _PLACEHOLDER_RE.sub(_replace, template)


class BasicTranslationAdapter:
    """Looks keys up in an injected mapping and falls back to the key itself."""

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages: Mapping[str, str] = dict(messages or {})

    def translate(self, key: str, params: TranslationParams | None = None) -> str:
        template = self._messages.get(key, key)
        return format_template(template, params)

    def __call__(self, key: str, params: TranslationParams | None = None) -> str:
        return self.translate(key, params)


class HostTranslationAdapter:
    """Defers lookups to a host provider with a basic fallback per key.

    The provider is either a callable returning the template for a key (or
    ``None`` when unknown) or a ``gettext``-style object. A provider that
    echoes the key back counts as "unknown", matching gettext semantics.
    """

    def __init__(self, provider: LookupProvider | GettextLike) -> None:
        if provider is None:
            raise TranslationProviderMissingError()
        if isinstance(provider, GettextLike):
            self._lookup: LookupProvider = provider.gettext
        elif callable(provider):
            self._lookup = provider
        else:
            raise AdapterConfigurationError(
                f"Unsupported translation provider {type(provider).__name__!r}; "
                "expected a callable or an object with a gettext() method."
            )

    def translate(self, key: str, params: TranslationParams | None = None) -> str:
        template = self._lookup(key)
        if not template:
            logger.debug("No host translation for %r; using key as text", key)
            template = key
        return format_template(template, params)

    def __call__(self, key: str, params: TranslationParams | None = None) -> str:
        return self.translate(key, params)


def create_basic_translation_adapter(messages: Mapping[str, str] | None = None) -> BasicTranslationAdapter:
    """Return an adapter that treats unknown keys as already-resolved text."""

    return BasicTranslationAdapter(messages)


def create_host_translation_adapter(provider: LookupProvider | GettextLike | None) -> HostTranslationAdapter:
    """Return an adapter backed by a host translation provider.

    Raises:
        TranslationProviderMissingError: when ``provider`` is ``None``.
        AdapterConfigurationError: when ``provider`` is neither callable nor
            gettext-like.
    """

    if provider is None:
        raise TranslationProviderMissingError()
    return HostTranslationAdapter(provider)


__all__ = [
    "BasicTranslationAdapter",
    "GettextLike",
    "HostTranslationAdapter",
    "TranslationAdapter",
    "TranslationParams",
    "create_basic_translation_adapter",
    "create_host_translation_adapter",
    "format_template",
]
