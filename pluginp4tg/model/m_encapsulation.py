from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from ..utils import constants as const


class _EncapsulationBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def encapsulation(self) -> const.Encapsulation:
        return const.Encapsulation(self.kind)  # type: ignore[attr-defined]

    @property
    def overhead(self) -> int:
        return 0

    @property
    def carries_ip(self) -> bool:
        return True


class NoEncapsulation(_EncapsulationBase):
    kind: Literal["None"] = "None"


class VlanEncapsulation(_EncapsulationBase):
    kind: Literal["Vlan"] = "Vlan"

    @property
    def overhead(self) -> int:
        return const.VLAN_HEADER_LENGTH


class QinQEncapsulation(_EncapsulationBase):
    kind: Literal["QinQ"] = "QinQ"

    @property
    def overhead(self) -> int:
        return 2 * const.VLAN_HEADER_LENGTH


class MplsEncapsulation(_EncapsulationBase):
    kind: Literal["Mpls"] = "Mpls"
    number_of_lse: int = Field(gt=0)

    @property
    def overhead(self) -> int:
        return self.number_of_lse * const.LSE_LENGTH


class SRv6Encapsulation(_EncapsulationBase):
    kind: Literal["SRv6"] = "SRv6"
    number_of_sids: int = Field(gt=0)
    ip_tunneling: bool = True

    @property
    def overhead(self) -> int:
        return (
            const.IPV6_HEADER_LENGTH
            + const.SRH_BASE_LENGTH
            + self.number_of_sids * const.SID_LENGTH
        )

    @property
    def carries_ip(self) -> bool:
        # without tunneling there is no inner IP header behind the SRH
        return self.ip_tunneling


EncapsulationHeader = Annotated[
    Union[
        NoEncapsulation,
        VlanEncapsulation,
        QinQEncapsulation,
        MplsEncapsulation,
        SRv6Encapsulation,
    ],
    Field(discriminator="kind"),
]
