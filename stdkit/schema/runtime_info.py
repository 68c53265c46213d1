from pydantic import BaseModel, ConfigDict, Field


class RuntimeInfo(BaseModel):
    """Resource usage between a start point and now.

    Extra keys passed in by the caller are kept alongside the measurements.
    """

    model_config = ConfigDict(extra="allow")

    start_time: float = Field(default=0.0)
    end_time: float = Field(default=0.0)
    end_memory: int = Field(default=0)
    runtime: str = Field(default="")
    memory: str | None = Field(default=None)
    peak_memory: str = Field(default="")
