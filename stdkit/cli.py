"""Command line entry point.

```
stdkit action=parse input=conf.jsonc
stdkit action=format input=conf.jsonc output=true type=raw
stdkit action=case to=snake text=RangePrice
stdkit action=case to=camel text=first_name json.depth=64 config=my.yaml
```

Arguments whose key contains a dot, and ``config=``, configure stdkit; the rest
are passed to the action as plain strings.
"""

import sys

from loguru import logger

from .config import init_config
from .context import C
from .exceptions import StdkitError
from .utils import case_convert, json_helper


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@C.register_action("parse")
def parse_action(input: str, as_map: str = "true") -> str:
    data = json_helper.parse(input, _to_bool(as_map))
    return json_helper.pretty_json(data)


@C.register_action("format")
def format_action(input: str, output: str = "false", **options) -> str:
    result = json_helper.format(input, _to_bool(output), options)
    return "" if result is False else result


CASE_FUNCTIONS = {
    "lower": case_convert.to_lower,
    "upper": case_convert.to_upper,
    "upper_first": case_convert.upper_first,
    "title": case_convert.title_case,
    "camel": case_convert.to_camel_case,
    "camel_case": case_convert.camel_case,
    "snake": case_convert.to_snake_case,
    "name_change": case_convert.name_change,
    "nl2br": case_convert.nl2br,
}


@C.register_action("case")
def case_action(text: str, to: str = "camel", sep: str = "_", upper_first: str = "false",
                to_camel: str = "true") -> str:
    if to not in CASE_FUNCTIONS:
        raise ValueError(f"unknown case={to}, choose from {sorted(CASE_FUNCTIONS)}")

    fn = CASE_FUNCTIONS[to]
    if to in ("camel", "camel_case"):
        return fn(text, _to_bool(upper_first))
    if to == "snake":
        return fn(text, sep)
    if to == "name_change":
        return fn(text, _to_bool(to_camel))
    return fn(text)


def split_args(args: list[str]) -> tuple[list[str], dict]:
    config_args = []
    params = {}
    for arg in args:
        if "=" not in arg:
            logger.warning(f"ignore argument={arg}, expected key=value")
            continue

        key, value = arg.lstrip("-").split("=", 1)
        if "." in key or key in ("c", "config"):
            config_args.append(f"{key}={value}")
        else:
            params[key] = value

    return config_args, params


def main(argv: list[str] | None = None) -> int:
    config_args, params = split_args(sys.argv[1:] if argv is None else argv)

    try:
        init_config(*config_args)
        action = C.get_action(params.pop("action", ""))
        print(action(**params))

    except (StdkitError, KeyError, ValueError, TypeError, FileNotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0
