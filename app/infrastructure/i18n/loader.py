"""Message loading interface and implementations.

Defines the contract for loading per-locale message tables and provides
JSON- and YAML-based loaders. Each locale lives in one file named after it
(``nl.json``, ``en.yml``, ...) holding a nested object of namespaces.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Tuple

import structlog
import yaml

from infrastructure.i18n.models import Group, Locale, build_message_node

logger = structlog.get_logger()


class MessageLoader(ABC):
    """Abstract base for message loaders."""

    @abstractmethod
    def load(self, locale: Locale) -> Group:
        """Load the message table for a specific locale.

        Args:
            locale: Locale to load messages for.

        Returns:
            The locale's message table.

        Raises:
            FileNotFoundError: If message files not found.
            ValueError: If message format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, Group]:
        """Load message tables for all available locales."""

    def clear_cache(self) -> None:
        """Forget any cached tables. Loaders without a cache do nothing."""


class FileMessageLoader(MessageLoader):
    """Loader for one message file per locale in a directory.

    Subclasses set ``extensions`` and implement ``_parse``.

    Attributes:
        messages_dir: Directory containing the message files.
        use_cache: Whether loaded tables are kept in memory.
        cache: Loaded tables by locale.
    """

    extensions: Tuple[str, ...] = ()
    format_name = "file"

    def __init__(self, messages_dir: Path, use_cache: bool = True):
        self.messages_dir = Path(messages_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, Group] = {}

        if not self.messages_dir.is_dir():
            raise ValueError(f"Messages directory not found: {self.messages_dir}")

        logger.info(
            "initialized_message_loader",
            format=self.format_name,
            messages_dir=str(self.messages_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: Locale) -> List[Path]:
        return [
            self.messages_dir / f"{locale.value}{ext}"
            for ext in self.extensions
            if (self.messages_dir / f"{locale.value}{ext}").is_file()
        ]

    @abstractmethod
    def _parse(self, handle) -> Any:
        """Parse an open file into plain Python data."""

    def load(self, locale: Locale) -> Group:
        """Load the message table for a locale.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            ValueError: If the file cannot be parsed or is not a mapping.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        files = self._files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No message file found for locale {locale.value} in {self.messages_dir}"
            )
        if len(files) > 1:
            logger.warning(
                "multiple_message_files",
                locale=locale.value,
                files=[str(f) for f in files],
                used=str(files[0]),
            )

        source_file = files[0]
        try:
            with open(source_file, "r", encoding="utf-8") as f:
                data = self._parse(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("message_parse_error", file=str(source_file), error=str(e))
            raise ValueError(f"Failed to parse {source_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error(
                "invalid_message_format", file=str(source_file), expected="dict"
            )
            raise ValueError(f"Message file {source_file} must contain an object")

        table = build_message_node(data)
        logger.info(
            "loaded_messages",
            locale=locale.value,
            file=str(source_file),
            namespace_count=len(table),
        )

        if self.use_cache:
            self.cache[locale] = table

        return table

    def load_all(self) -> Dict[Locale, Group]:
        """Load every supported locale that has a file in the directory.

        Files named after an unsupported locale are skipped.

        Raises:
            ValueError: If no message files are found at all.
        """
        locales_found = set()
        for ext in self.extensions:
            for path in self.messages_dir.glob(f"*{ext}"):
                try:
                    locales_found.add(Locale.from_string(path.stem))
                except ValueError:
                    logger.info("skipped_message_file", file=str(path))

        if not locales_found:
            raise ValueError(f"No message files found in {self.messages_dir}")

        return {
            locale: self.load(locale)
            for locale in sorted(locales_found, key=lambda loc: loc.value)
        }

    def clear_cache(self) -> None:
        """Clear all cached tables."""
        self.cache.clear()
        logger.info("cleared_message_cache")


class JSONMessageLoader(FileMessageLoader):
    """Loader for ``<locale>.json`` message files."""

    extensions = (".json",)
    format_name = "json"

    def _parse(self, handle) -> Any:
        return json.load(handle)


class YAMLMessageLoader(FileMessageLoader):
    """Loader for ``<locale>.yml`` / ``<locale>.yaml`` message files."""

    extensions = (".yml", ".yaml")
    format_name = "yaml"

    def _parse(self, handle) -> Any:
        return yaml.safe_load(handle)
