"""Case converter for string naming conventions.

Every function takes a ``str`` and returns a new ``str``; anything else is
rejected with ``InvalidInputError``. Case folding relies on ``str.lower`` and
``str.upper``, so it is locale independent and Unicode aware.

Two snake-case rules live here and they are intentionally different:

* ``to_snake_case`` splits before every ``[A-Z][a-z]`` pair, so runs of
  capitals stay together as one word: ``CMSCategories`` -> ``cms_categories``.
* ``name_change(..., to_camel=False)`` splits only at a lowercase->uppercase
  boundary: ``ABCName`` -> ``abcname``.
"""

import re

from ..exceptions import InvalidInputError

NEWLINE_TAG = "<br />"

_UNDERSCORE_RUN_PATTERN = re.compile(r"_+([a-z])")
_WORD_START_PATTERN = re.compile(r"([A-Z][a-z])")
_LOWER_UPPER_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z])(?=[A-Z])")
_WORD_PATTERN = re.compile(r"\S+")
_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def _ensure_str(func_name: str, value) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(func_name, value)
    return value


def to_lower(content: str) -> str:
    return _ensure_str("to_lower", content).lower()


def to_upper(content: str) -> str:
    return _ensure_str("to_upper", content).upper()


def upper_first(content: str) -> str:
    """Uppercase the first character only; the rest is left untouched.

    Examples:
        >>> upper_first("éclair au café")
        'Éclair au café'
    """
    content = _ensure_str("upper_first", content)
    return content[:1].upper() + content[1:]


def title_case(content: str) -> str:
    """Lowercase the string, then uppercase the first letter of each word.

    Words are separated by whitespace only, and the whitespace itself is kept
    as is. Unlike ``str.title`` an apostrophe does not start a new word.

    Examples:
        >>> title_case("hello WORLD, it's me")
        "Hello World, It's Me"
    """
    content = to_lower(_ensure_str("title_case", content))
    return _WORD_PATTERN.sub(lambda m: upper_first(m.group(0)), content)


def to_camel_case(content: str, upper_first_char: bool = False) -> str:
    """Translate an underscored string into camel case.

    The whole string is lowercased first, then every run of underscores
    followed by a lowercase ascii letter collapses into that letter uppercased.

    Examples:
        >>> to_camel_case("first_name")
        'firstName'
        >>> to_camel_case("first__name", True)
        'FirstName'
        >>> to_camel_case("_first_name")
        'FirstName'
    """
    content = to_lower(_ensure_str("to_camel_case", content))

    if upper_first_char:
        content = upper_first(content)

    return _UNDERSCORE_RUN_PATTERN.sub(lambda m: m.group(1).upper(), content)


def camel_case(name: str, upper_first_char: bool = False) -> str:
    """Convert a dash-separated name into camel case.

    Leading and trailing ``-``/``_`` are trimmed. Only ``-`` splits words;
    the letters after the first of each word keep their case. A name without
    a dash is returned trimmed but otherwise unchanged.

    Examples:
        >>> camel_case("first-second")
        'firstSecond'
        >>> camel_case("-first-second-", True)
        'FirstSecond'
        >>> camel_case("first_second")
        'first_second'
    """
    name = _ensure_str("camel_case", name).strip("-_")

    if "-" in name:
        words = name.replace("-", " ").split(" ")
        name = "".join(upper_first(word) for word in words)
        name = name[:1].lower() + name[1:]

    return upper_first(name) if upper_first_char else name


def to_snake_case(content: str, sep: str = "_") -> str:
    """Transform a CamelCase string into a ``sep`` separated lowercase string.

    Examples:
        >>> to_snake_case("CMSCategories")
        'cms_categories'
        >>> to_snake_case("RangePrice", "-")
        'range-price'
    """
    content = _ensure_str("to_snake_case", content)
    content = _WORD_START_PATTERN.sub(lambda m: sep + m.group(1), content)
    return to_lower(content.strip(sep))


def name_change(content: str, to_camel: bool = True) -> str:
    """Switch a name between snake_case and camelCase.

    Args:
        content: The name; surrounding whitespace is ignored.
        to_camel: ``True`` converts snake -> camel, ``False`` camel -> snake.

    Examples:
        >>> name_change("first_name")
        'firstName'
        >>> name_change("firstName", False)
        'first_name'
    """
    content = _ensure_str("name_change", content).strip()

    if to_camel:
        if "_" not in content:
            return content

        first, *rest = content.lower().split("_")
        return first + "".join(upper_first(piece) for piece in rest)

    return _LOWER_UPPER_BOUNDARY_PATTERN.sub("_", content).lower()


def nl2br(content: str) -> str:
    """Replace ``\\r\\n``, ``\\r`` and ``\\n`` with ``<br />``."""
    return _NEWLINE_PATTERN.sub(NEWLINE_TAG, _ensure_str("nl2br", content))


class CaseConverter:
    """Namespace grouping the case helpers, including the short aliases."""

    lower = strtolower = to_lower = staticmethod(to_lower)
    upper = strtoupper = to_upper = staticmethod(to_upper)
    ucfirst = upper_first = staticmethod(upper_first)
    ucwords = title_case = staticmethod(title_case)
    camel = to_camel = to_camel_case = staticmethod(to_camel_case)
    camel_case = staticmethod(camel_case)
    snake = to_snake = to_snake_case = staticmethod(to_snake_case)
    name_change = staticmethod(name_change)
    nl2br = staticmethod(nl2br)
