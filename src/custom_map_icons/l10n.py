"""
Localization provider for target and display names.

Internal names are tokens prefixed with ``$`` (host strings) or ``@``
(extension strings), e.g. ``$piece_deposit_copper``. Everything else is
treated as an already human-readable display string.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import orjson

INTERNAL_NAME_PREFIXES = ("$", "@")


class Localization:
    """Dictionary-backed translator.

    Translations are keyed without the internal-name prefix, so both
    ``$item_wood`` and ``@item_wood`` look up ``item_wood``.
    """

    def __init__(self, translations: Optional[Mapping[str, str]] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.translations: dict[str, str] = dict(translations or {})

    def load_file(self, path: str | Path) -> int:
        """Merge translations from a flat JSON object file.

        Returns:
            Number of translations read

        Raises:
            OSError: If the file cannot be read
            orjson.JSONDecodeError: If the file is not valid JSON
        """
        path = Path(path)
        with path.open("rb") as f:
            data: Any = orjson.loads(f.read())

        if not isinstance(data, dict):
            raise ValueError(f"Translation file must hold a JSON object: {path}")

        count = 0
        for key, value in data.items():
            if isinstance(value, str):
                self.translations[str(key).lstrip("$@")] = value
                count += 1

        self.logger.info(f"Loaded {count} translations from {path}")
        return count

    @staticmethod
    def is_internal_name(text: str) -> bool:
        """Check whether text is an internal-form name rather than display text."""
        if not text or not text.startswith(INTERNAL_NAME_PREFIXES):
            return False
        return len(text) > 1 and not any(ch.isspace() for ch in text)

    def translate(self, key: str) -> str:
        """Translate a key. Unknown keys are returned unchanged."""
        word = key.lstrip("$@") if self.is_internal_name(key) else key
        return self.translations.get(word, key)

    def localize(self, key: str, *args: Any) -> str:
        """Translate a key and fill its ``{0}``, ``{1}``... placeholders."""
        text = self.translate(key)
        if not args:
            return text
        try:
            return text.format(*args)
        except (IndexError, KeyError, ValueError):
            self.logger.warning(f"Bad placeholders in translation for {key}: {text!r}")
            return text

    def translate_internal_name_only(self, text: str) -> str:
        """Translate text only when it is an internal name."""
        if self.is_internal_name(text):
            return self.translate(text)
        return text
