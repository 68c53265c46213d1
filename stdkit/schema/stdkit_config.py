from pydantic import BaseModel, ConfigDict, Field


class JsonConfig(BaseModel):
    depth: int = Field(default=512, ge=1)
    string_aware_comments: bool = Field(default=True)
    pretty_indent: int = Field(default=4, ge=0)


class LogConfig(BaseModel):
    level: str = Field(default="INFO")
    log_dir: str = Field(default="")
    rotation: str = Field(default="10 MB")


class StdkitConfig(BaseModel):
    json_config: JsonConfig = Field(default_factory=JsonConfig, alias="json")
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = ConfigDict(populate_by_name=True)
