from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from ..utils import constants as const


class Stream(BaseModel):
    """Packet template of one traffic pattern, as sent by the request layer.

    The encapsulation specific counters stay optional here; whether they are
    present for the selected encapsulation is decided by the validator.
    """

    model_config = ConfigDict(frozen=True)

    stream_id: int = Field(ge=0, validation_alias=AliasChoices("stream_id", "app_id"))
    frame_size: int = Field(ge=0)
    encapsulation: const.Encapsulation = const.Encapsulation.NONE
    number_of_lse: Optional[int] = Field(default=None, ge=0)
    number_of_srv6_sids: Optional[int] = Field(default=None, ge=0)
    srv6_ip_tunneling: Optional[bool] = None
    ip_version: Optional[int] = None
    vxlan: bool = False
    traffic_rate: float = Field(default=0.0, ge=0)
    burst: int = Field(default=1, ge=1)

    @property
    def uses_ip_tunneling(self) -> bool:
        return True if self.srv6_ip_tunneling is None else self.srv6_ip_tunneling

    @property
    def is_ipv6(self) -> bool:
        return self.ip_version == const.IPVersion.IPV6
