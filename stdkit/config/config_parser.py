from loguru import logger

from ..context import C
from ..schema import StdkitConfig
from ..utils import PydanticConfigParser, init_logger


class StdkitConfigParser(PydanticConfigParser[StdkitConfig]):
    default_config: str = "default"


def init_config(*args: str, **kwargs) -> StdkitConfig:
    """Load the configuration and install it as ``C.config``.

    Args:
        *args: ``config=<file>[,<file>]`` and dot-notation overrides,
            e.g. ``"json.depth=64"``.
        **kwargs: Overrides with ``__`` as the separator, e.g. ``log__level="DEBUG"``.
    """
    parser = StdkitConfigParser(StdkitConfig)
    config = parser.parse_args(*args)
    if kwargs:
        config = parser.update_config(**kwargs)

    init_logger(config.log.level, config.log.log_dir, config.log.rotation)
    C.config = config
    logger.debug(f"stdkit config={config.model_dump_json(by_alias=True)}")
    return config
