from pydantic import BaseModel, Field, field_validator
from typing import Literal


class AutomationConfig(BaseModel):
    backend: Literal["com"] = "com"
    prog_id: str = "Word.Application"
    dispatch: Literal["new", "shared"] = "new"
    visible: bool = False


class ConversionConfig(BaseModel):
    target_format: Literal["default", "pdf", "xps", "html", "rtf"] = "default"
    include: str = "*.doc"
    recurse: bool = False
    overwrite: bool = False
    reuse_instance: bool = False
    output_dir: str | None = None

    @field_validator("include")
    @classmethod
    def _include_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("include filter must not be empty")
        return v


class WordbatchConfig(BaseModel):
    automation: AutomationConfig = Field(default_factory=AutomationConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
