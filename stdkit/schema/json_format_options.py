from typing import Literal

from pydantic import BaseModel, Field


class JsonFormatOptions(BaseModel):
    """Output options for ``JsonHelper.format`` and ``JsonHelper.save_as``.

    ``type`` is ``min`` for whitespace-free output or ``raw`` to keep the
    layout; ``file`` is the output path, derived from the input path when empty.
    """

    type: Literal["min", "raw"] = Field(default="min")
    file: str = Field(default="")
