from pathlib import Path
from typing import List, Optional, Union
from pydantic import AliasChoices, BaseModel, Field
from .entry import RequestValidator
from .model import Stream, StreamSetting, HardwareLimits
from .utils import constants as const


class TrafficGenRequest(BaseModel):  # Main Model
    mode: const.GenerationMode = const.GenerationMode.RATE
    streams: List[Stream] = []
    stream_settings: List[StreamSetting] = Field(
        default=[], validation_alias=AliasChoices("stream_settings", "settings")
    )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TrafficGenRequest":
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    def check(self, is_tofino2: bool, limits: Optional[HardwareLimits] = None) -> None:
        RequestValidator(limits).validate(
            self.streams, self.stream_settings, self.mode, is_tofino2
        )
