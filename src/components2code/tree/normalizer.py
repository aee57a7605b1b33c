"""NameNormalizer: turns design-tool layer names into markup identifiers.

Handles the naming styles designers actually use for layers:
- Free text with symbols (e.g. "Button / Primary" -> "ButtonPrimary")
- camelCase (e.g. "iconButton" -> "IconButton")
- PascalCase (e.g. "NavBar" -> "NavBar")
- snake_case and kebab-case (e.g. "nav_bar", "nav-bar" -> "NavBar")

Also strips the ``#<id>`` disambiguation suffix the host appends to
component property keys (``"Show icon#12:3"`` -> ``"Show icon"``).
"""

from __future__ import annotations

import re

# Compiled regex patterns (module-level, compiled once)

# Matches any run of characters that cannot appear in a tag name
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")

# Matches camelCase boundary: lowercase letter followed by uppercase letter
# e.g. "iconButton" -> "icon Button" via "\1 \2"
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")

# Token separators left after the passes above
_SEP = re.compile(r"[\s_\-]+")


class NameNormalizer:
    """Normalizes layer names and property keys.

    Example usage:
        normalizer = NameNormalizer()
        normalizer.to_pascal_case("icon-button")      # "IconButton"
        normalizer.tag_name("Button", "U")            # "UButton"
        normalizer.strip_key_suffix("Size#1:2")       # "Size"
    """

    def to_pascal_case(self, name: str) -> str:
        """Transliterate ``name`` to PascalCase.

        Processing pipeline (applied in order):
        1. Replace each run of non-alphanumeric characters with one space.
        2. Insert a space at lowercase->uppercase boundaries.
        3. Split on whitespace, hyphens and underscores; drop empty tokens.
        4. Upper-case each token's first character, lower-case the rest.
        5. Join with no separator.

        Args:
            name: The raw layer name.

        Returns:
            The PascalCase identifier, or ``""`` when nothing alphanumeric
            remains.
        """
        s = _NON_ALNUM.sub(" ", name)
        s = _LOWER_UPPER.sub(r"\1 \2", s)
        tokens = [token for token in _SEP.split(s) if token]
        return "".join(token[0].upper() + token[1:].lower() for token in tokens)

    def tag_name(self, name: str, prefix: str) -> str:
        """Return the component tag for ``name``, prefixed unless it already is.

        The prefix test is case-insensitive, so "uButton" stays "UButton"
        rather than becoming "UUButton".
        """
        pascal = self.to_pascal_case(name)
        if pascal.lower().startswith(prefix.lower()):
            return pascal
        return prefix + pascal

    def strip_key_suffix(self, key: str) -> str:
        """Drop the ``#...`` disambiguation suffix from a property key."""
        return str(key).split("#", 1)[0]

    def is_private(self, name: str, prefixes: tuple[str, ...]) -> bool:
        """True when ``name`` starts with one of the private markers."""
        return any(marker and name.startswith(marker) for marker in prefixes)
