"""Locale resolution for incoming page requests.

Picks the active locale from the URL path prefix (``/en/...``), an explicit
string, or an Accept-Language header, falling back to the default locale.
"""

from typing import Iterable, List, Optional, Tuple

import structlog
from infrastructure.i18n.models import DEFAULT_LOCALE, Locale

logger = structlog.get_logger().bind(component="i18n.resolver")


def parse_accept_language(accept_language: str) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (range, quality) pairs.

    "nl-BE,nl;q=0.9,en;q=0.8" -> [("nl-BE", 1.0), ("nl", 0.9), ("en", 0.8)]

    Pairs are sorted by quality, highest first; equal qualities keep header
    order. An unparseable quality counts as 1.0. Ranges with q=0 (or below)
    are "not acceptable" and left out.
    """
    preferences = []
    for part in accept_language.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range:
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue

        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda x: x[1], reverse=True)


class LocaleResolver:
    """Resolves the request locale from various sources.

    Attributes:
        default_locale: Locale used when nothing else matches.
        supported_locales: Locales the site serves.
    """

    def __init__(
        self,
        default_locale: Locale = DEFAULT_LOCALE,
        supported_locales: Optional[Iterable[Locale]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales or Locale)
        self.log = logger.bind(default_locale=default_locale.value)

    def is_supported(self, value: str) -> bool:
        return any(locale.value == value for locale in self.supported_locales)

    def _locale_from_path(self, path: Optional[str]) -> Optional[Locale]:
        if not path:
            return None
        first = path.lstrip("/").split("/", 1)[0]
        return Locale(first) if self.is_supported(first) else None

    def resolve_from_path(self, path: Optional[str]) -> Locale:
        """Resolve locale from the first segment of a URL path.

        "/en/about" -> en. A missing or unsupported prefix gives the default.
        """
        locale = self._locale_from_path(path)
        if locale is not None:
            return locale

        self.log.debug("no_locale_in_path", path=path)
        return self.default_locale

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from an Accept-Language header.

        Tries each language range by quality: exact match first, then the
        primary language subtag ("fr-BE" matches "fr"). Wildcards are ignored.

        Returns:
            Resolved Locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        for lang_range, _ in parse_accept_language(accept_language):
            if lang_range == "*":
                continue

            candidate = lang_range.lower()
            if self.is_supported(candidate):
                self.log.info("resolved_from_header", locale=candidate)
                return Locale(candidate)

            lang_code = candidate.split("-")[0]
            if self.is_supported(lang_code):
                self.log.info("resolved_from_header", locale=lang_code)
                return Locale(lang_code)

        self.log.info("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate a locale string.

        Raises:
            ValueError: If locale_str is not a supported locale.
        """
        if not self.is_supported(locale_str):
            self.log.warning("invalid_locale_string", locale_str=locale_str)
            raise ValueError(f"Unsupported locale: {locale_str}")
        return Locale(locale_str)

    def resolve(
        self,
        path: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> Locale:
        """Resolve locale from the path prefix, then the header, then default."""
        locale = self._locale_from_path(path)
        if locale is not None:
            return locale
        return self.resolve_from_header(accept_language)
