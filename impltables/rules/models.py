from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DocsRules(BaseModel):
    root: str = "target/doc"
    implementors_dir: str = "implementors"
    encoding: str = "utf-8"

class LoaderRules(BaseModel):
    # False simulates a page where the renderer has not registered yet
    deliver_to_hook: bool = True

class LoggingRules(BaseModel):
    level: LogLevel = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    docs: DocsRules = Field(default_factory=DocsRules)
    loader: LoaderRules = Field(default_factory=LoaderRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
