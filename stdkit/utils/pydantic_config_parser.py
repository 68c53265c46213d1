import copy
import inspect
from pathlib import Path
from typing import Any, Generic, Type, TypeVar

import yaml
from loguru import logger
from pydantic import BaseModel

from .json_helper import decode, parse_file
from ..exceptions import JsonParseError

T = TypeVar("T", bound=BaseModel)


class PydanticConfigParser(Generic[T]):
    """Build a pydantic config from layered sources.

    Layers, later ones winning: model defaults, ``default_config`` next to the
    parser class, files named by ``config=a,b``, then ``key.sub=value``
    overrides. Config files may be yaml or JSON with comments.
    """

    default_config: str = "default"
    config_suffixes: tuple = (".yaml", ".yml", ".json", ".jsonc")

    def __init__(self, config_class: Type[T]):
        self.config_class = config_class
        self.config_dict: dict = {}

    def _deep_merge(self, base_dict: dict, update_dict: dict) -> dict:
        result = copy.deepcopy(base_dict)

        for key, value in update_dict.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    @staticmethod
    def _convert_value(value_str: str) -> Any:
        value_str = value_str.strip()

        if value_str.lower() in ("true", "false"):
            return value_str.lower() == "true"

        if value_str.lower() in ("none", "null"):
            return None

        try:
            lower_str = value_str.lower()
            if "e" in lower_str or "." in value_str:
                return float(value_str)
            return int(value_str)
        except ValueError:
            pass

        if value_str[:1] in ("[", "{"):
            try:
                return decode(value_str, as_map=True)
            except JsonParseError:
                pass

        return value_str

    @staticmethod
    def load_from_file(config_path: str | Path) -> dict:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_path}")

        if config_path.suffix in (".json", ".jsonc"):
            return parse_file(config_path) or {}

        with config_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def merge_configs(self, *config_dicts: dict) -> dict:
        result = {}

        for config_dict in config_dicts:
            result = self._deep_merge(result, config_dict)

        return result

    def parse_dot_notation(self, dot_list: list[str]) -> dict:
        config_dict = {}

        for item in dot_list:
            if "=" not in item:
                continue

            key_path, value_str = item.split("=", 1)
            keys = key_path.split(".")
            value = self._convert_value(value_str)
            current_dict = config_dict
            for key in keys[:-1]:
                current_dict = current_dict.setdefault(key, {})

            current_dict[keys[-1]] = value

        return config_dict

    def _resolve_config_path(self, config_name: str) -> Path:
        if not config_name.endswith(self.config_suffixes):
            config_name += ".yaml"

        config_path = Path(inspect.getfile(self.__class__)).parent / config_name
        if config_path.exists():
            logger.debug(f"load config={config_path}")
            return config_path

        config_path = Path(config_name)
        if not config_path.exists():
            raise FileNotFoundError(f"config={config_path} not found")

        logger.debug(f"load config={config_path}")
        return config_path

    def parse_args(self, *args: str) -> T:
        configs_to_merge = [self.config_class().model_dump(by_alias=True)]

        config = ""
        filter_args = []
        for arg in args:
            if "=" not in arg:
                continue

            arg = arg.lstrip("-")

            if arg.startswith("c=") or arg.startswith("config="):
                config = arg.split("=", 1)[-1]
            else:
                filter_args.append(arg)

        config_list = [c.strip() for c in config.split(",") if c.strip()]
        if self.default_config:
            config_list.insert(0, self.default_config)

        for single_config in config_list:
            configs_to_merge.append(self.load_from_file(self._resolve_config_path(single_config)))

        if filter_args:
            configs_to_merge.append(self.parse_dot_notation(filter_args))

        self.config_dict = self.merge_configs(*configs_to_merge)
        return self.config_class.model_validate(self.config_dict)

    def update_config(self, **kwargs) -> T:
        dot_list = []
        for key, value in kwargs.items():
            dot_key = key.replace("__", ".")
            dot_list.append(f"{dot_key}={value}")

        override_config = self.parse_dot_notation(dot_list)
        final_config = self.merge_configs(copy.deepcopy(self.config_dict), override_config)

        return self.config_class.model_validate(final_config)
