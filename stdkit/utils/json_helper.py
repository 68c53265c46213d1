"""JSON helpers: lenient parsing of JSON with comments, formatting and encoding.

Comments are removed before decoding. Two strippers are available:

* ``strip_comments`` scans the text and leaves string literals alone, so a
  value such as ``"http://example.com"`` survives.
* ``strip_comments_heuristic`` applies blind regex passes. It does not know
  about string literals and will cut ``"http://example.com"`` short; this is
  a known limitation kept for ``format`` and for callers that ask for it.

``parse_string`` uses the scanner unless told otherwise (see
``JsonConfig.string_aware_comments``).
"""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger

from ..context import BaseContext, C
from ..exceptions import JsonFileNotFoundError, JsonParseError, OutputDirNotFoundError
from ..schema import JsonFormatOptions

_BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/\s*", re.S)
_LINE_COMMENT_PATTERN = re.compile(r"//[^\r\n]*(?:\r\n|\r|\n|$)")
_BLANK_LINES_PATTERN = re.compile(r"(?:\r?\n[ \t]*)+(?=\r?\n)")
_WHITESPACE = " \t\r\n"


def strip_comments(text: str) -> str:
    """Remove ``/* */`` and ``//`` comments that are outside string literals.

    A block comment takes the whitespace that follows it along, a line
    comment takes its line break. An unterminated block comment runs to the
    end of the text.
    """
    out = []
    i = 0
    n = len(text)
    start = 0

    while i < n:
        c = text[i]

        if c == '"':
            i += 1
            while i < n and text[i] != '"':
                i += 2 if text[i] == "\\" else 1
            i += 1
            continue

        if c == "/" and i + 1 < n and text[i + 1] in "*/":
            out.append(text[start:i])

            if text[i + 1] == "*":
                end = text.find("*/", i + 2)
                i = n if end < 0 else end + 2
                while i < n and text[i] in _WHITESPACE:
                    i += 1

            else:
                while i < n and text[i] not in "\r\n":
                    i += 1
                if text.startswith("\r\n", i):
                    i += 2
                elif i < n:
                    i += 1

            start = i
            continue

        i += 1

    out.append(text[start:])
    return "".join(out)


def strip_comments_heuristic(text: str, collapse_blank_lines: bool = False) -> str:
    """Regex based comment removal; corrupts literals containing ``//`` or ``/*``."""
    text = _BLOCK_COMMENT_PATTERN.sub("", text)
    text = _LINE_COMMENT_PATTERN.sub("", text)
    if collapse_blank_lines:
        text = _BLANK_LINES_PATTERN.sub("", text)
    return text


def _check_depth(data: Any, depth: int):
    stack = [(data, 1)]
    while stack:
        value, level = stack.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, list):
            children = value
        else:
            continue

        if level > depth:
            raise JsonParseError("Maximum stack depth exceeded", JsonParseError.JSON_ERROR_DEPTH)
        stack.extend((child, level + 1) for child in children)


def decode(text: str, as_map: bool = False, depth: int | None = None) -> Any:
    """Decode JSON text.

    Args:
        text: The JSON document.
        as_map: ``True`` decodes objects as ``dict``, ``False`` as
            ``BaseContext`` (attribute access).
        depth: Maximum nesting of arrays/objects, ``C.config.json_config.depth``
            when omitted.

    Raises:
        JsonParseError: Malformed text or nesting deeper than ``depth``.
    """
    if depth is None:
        depth = C.config.json_config.depth

    try:
        data = json.loads(text, object_hook=None if as_map else BaseContext)
    except json.JSONDecodeError as e:
        raise JsonParseError(e.msg, JsonParseError.JSON_ERROR_SYNTAX, e.pos) from e
    except RecursionError as e:
        raise JsonParseError("Maximum stack depth exceeded", JsonParseError.JSON_ERROR_DEPTH) from e

    _check_depth(data, depth)
    return data


def encode(data: Any, indent: int | None = None, ensure_ascii: bool = True, depth: int | None = None) -> str:
    if depth is not None:
        _check_depth(data, depth)
    return json.dumps(data, indent=indent, ensure_ascii=ensure_ascii)


def encode_cn(data: Any, depth: int | None = None) -> str:
    """Encode keeping non-ascii characters and slashes unescaped."""
    return encode(data, ensure_ascii=False, depth=depth)


def pretty_json(data: Any, indent: int | None = None) -> str:
    if indent is None:
        indent = C.config.json_config.pretty_indent
    return json.dumps(data, indent=indent, ensure_ascii=False)


def parse_string(text: str, as_map: bool = True, *, string_aware: bool | None = None, depth: int | None = None) -> Any:
    """Decode JSON that may contain ``/* */`` and ``//`` comments.

    Blank input is not an error: it yields ``{}`` (or an empty ``BaseContext``
    when ``as_map`` is false).

    Examples:
        >>> parse_string('{ /* c */ "a": 1 // x\\n }')
        {'a': 1}
    """
    text = text.strip()
    if not text:
        return {} if as_map else BaseContext()

    if string_aware is None:
        string_aware = C.config.json_config.string_aware_comments

    if string_aware:
        text = strip_comments(text)
    else:
        text = strip_comments_heuristic(text)

    return decode(text, as_map=as_map, depth=depth)


def parse_file(path: str | Path, as_map: bool = True) -> Any:
    path = Path(path)
    if not path.is_file():
        raise JsonFileNotFoundError(path)

    logger.debug(f"load json file={path}")
    return parse_string(path.read_text(encoding="utf-8"), as_map)


def _is_file(data: str) -> bool:
    try:
        return Path(data).is_file()
    except (OSError, ValueError):
        # text too long for a path, or containing NUL
        return False


def parse(data: str, as_map: bool = True) -> Any:
    """Parse ``data`` as a file path when such a file exists, as JSON text otherwise."""
    if _is_file(data):
        return parse_file(data, as_map)
    return parse_string(data, as_map)


def minify(data: str) -> str:
    """Drop the whitespace outside string literals."""
    out = []
    in_string = False
    escaped = False

    for c in data:
        if in_string:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
            out.append(c)
        elif c == '"':
            in_string = True
            out.append(c)
        elif c not in _WHITESPACE:
            out.append(c)

    return "".join(out)


def save_as(data: str, output: str | Path, options: JsonFormatOptions | dict | None = None) -> int:
    """Write ``data`` to ``<dir of output>/<name>.<type>.json``.

    Returns:
        The number of characters written.

    Raises:
        OutputDirNotFoundError: The directory of ``output`` does not exist.
    """
    if not isinstance(options, JsonFormatOptions):
        options = JsonFormatOptions.model_validate(options or {})

    output = Path(output)
    save_dir = output.parent
    if not save_dir.is_dir():
        raise OutputDirNotFoundError(save_dir)

    name = output.name.removesuffix(".json")
    file = save_dir / f"{name}.{options.type}.json"

    if options.type == "min":
        data = minify(data)

    logger.info(f"save json file={file}")
    return file.write_text(data, encoding="utf-8")


def format(data: str, output: bool = False, options: JsonFormatOptions | dict | None = None) -> str | bool:
    """Strip comments and blank lines from a JSON file or text.

    Args:
        data: A file path or the JSON text itself.
        output: Also persist the result through ``save_as``.
        options: ``JsonFormatOptions`` (or a dict of them), used when ``output``.

    Returns:
        The cleaned text, or ``False`` when there is nothing to format.
    """
    if not isinstance(data, str):
        return False

    is_file = _is_file(data)
    text = Path(data).read_text(encoding="utf-8") if is_file else data.strip()
    if not text:
        return False

    text = strip_comments_heuristic(text, collapse_blank_lines=True)

    if not output:
        return text

    if not isinstance(options, JsonFormatOptions):
        options = JsonFormatOptions.model_validate(options or {})

    if is_file and (not options.file or not Path(options.file).is_file()):
        source = Path(data)
        options.file = str(source.parent / source.name.removesuffix(".json"))

    if not options.file:
        raise ValueError("options.file is required when formatting text with output=True")

    save_as(text, options.file, options)
    return text


class JsonHelper:
    """Namespace grouping the JSON helpers."""

    strip_comments = staticmethod(strip_comments)
    strip_comments_heuristic = staticmethod(strip_comments_heuristic)
    decode = staticmethod(decode)
    encode = staticmethod(encode)
    encode_cn = staticmethod(encode_cn)
    pretty_json = staticmethod(pretty_json)
    parse = staticmethod(parse)
    parse_file = staticmethod(parse_file)
    parse_string = staticmethod(parse_string)
    minify = staticmethod(minify)
    save_as = staticmethod(save_as)
    format = staticmethod(format)
