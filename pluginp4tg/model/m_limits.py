from pathlib import Path
from typing import Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from ..utils import constants as const, exceptions


class HardwareLimits(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_num_mpls_label: int = Field(default=const.MAX_NUM_MPLS_LABEL, ge=0)
    max_num_srv6_sids: int = Field(default=const.MAX_NUM_SRV6_SIDS, ge=0)
    max_buffer_size: int = Field(default=const.MAX_BUFFER_SIZE, ge=0)
    tg_max_rate: float = Field(default=const.TG_MAX_RATE, ge=0)
    tg_max_rate_tf2: float = Field(default=const.TG_MAX_RATE_TF2, ge=0)
    check_stream_references: bool = False

    def max_rate(self, is_tofino2: bool) -> float:
        return self.tg_max_rate_tf2 if is_tofino2 else self.tg_max_rate

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HardwareLimits":
        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise exceptions.LimitsFileNotValid(str(path), str(e)) from e
