from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from ..utils import constants as const
from ..utils.field import MacAddress, IPv4Address, IPv6Address


class EthernetConfig(BaseModel):
    eth_src: MacAddress = MacAddress("00:00:00:00:00:00")
    eth_dst: MacAddress = MacAddress("00:00:00:00:00:00")


class VlanConfig(BaseModel):
    vlan_id: int = Field(default=1, ge=0, le=const.MAX_VLAN_ID)
    pcp: int = Field(default=0, ge=0, le=const.MAX_PCP)
    dei: int = Field(default=0, ge=0, le=1)
    inner_vlan_id: int = Field(default=1, ge=0, le=const.MAX_VLAN_ID)
    inner_pcp: int = Field(default=0, ge=0, le=const.MAX_PCP)
    inner_dei: int = Field(default=0, ge=0, le=1)


class LabelStackEntry(BaseModel):
    label: int = Field(ge=0, le=const.MAX_MPLS_LABEL)
    tc: int = Field(default=0, ge=0, le=const.MAX_MPLS_TC)
    ttl: int = Field(default=64, ge=0, le=const.MAX_TTL)


class IPv4Config(BaseModel):
    ip_src: IPv4Address = IPv4Address("0.0.0.0")
    ip_dst: IPv4Address = IPv4Address("0.0.0.0")
    ip_tos: int = Field(default=0, ge=0, le=255)
    # randomization masks, applied by the generator per packet
    ip_src_mask: IPv4Address = IPv4Address("0.0.0.0")
    ip_dst_mask: IPv4Address = IPv4Address("0.0.0.0")


class IPv6Config(BaseModel):
    ipv6_src: IPv6Address = IPv6Address("::")
    ipv6_dst: IPv6Address = IPv6Address("::")
    ipv6_traffic_class: int = Field(default=0, ge=0, le=255)
    ipv6_flow_label: int = Field(default=0, ge=0, le=const.MAX_FLOW_LABEL)
    ipv6_src_mask: IPv6Address = IPv6Address("::")
    ipv6_dst_mask: IPv6Address = IPv6Address("::")


class VxlanConfig(BaseModel):
    eth_src: MacAddress = MacAddress("00:00:00:00:00:00")
    eth_dst: MacAddress = MacAddress("00:00:00:00:00:00")
    ip_src: IPv4Address = IPv4Address("0.0.0.0")
    ip_dst: IPv4Address = IPv4Address("0.0.0.0")
    ip_tos: int = Field(default=0, ge=0, le=255)
    udp_source: int = Field(default=49152, ge=0, le=const.MAX_UDP_PORT)
    vni: int = Field(default=1, ge=0, le=const.MAX_VNI)


class StreamSetting(BaseModel):
    """Header values of a stream on one egress port."""

    model_config = ConfigDict(frozen=True)

    stream_id: int = Field(ge=0)
    port: int = Field(ge=0)
    active: bool = True
    ethernet: Optional[EthernetConfig] = None
    vlan: Optional[VlanConfig] = None
    mpls_stack: Optional[List[LabelStackEntry]] = None
    sid_list: Optional[List[IPv6Address]] = None
    ip: Optional[IPv4Config] = None
    ipv6: Optional[IPv6Config] = None
    vxlan: Optional[VxlanConfig] = None
