"""
Compare a traffic generation request with itself and with the hardware limits.

Every checker raises the first violation it finds and returns nothing (or the
resolved encapsulation header) otherwise.
"""


from typing import TYPE_CHECKING, Iterable, Sequence
from ..model.m_encapsulation import (
    NoEncapsulation,
    VlanEncapsulation,
    QinQEncapsulation,
    MplsEncapsulation,
    SRv6Encapsulation,
)
from ..utils import exceptions, constants as const
from .overhead import calculate_overhead


if TYPE_CHECKING:
    from ..model import Stream, StreamSetting, HardwareLimits
    from ..model.m_encapsulation import EncapsulationHeader


def check_mpls_encapsulation(
    stream: "Stream", limits: "HardwareLimits"
) -> MplsEncapsulation:
    number_of_lse = stream.number_of_lse
    if number_of_lse is None:
        raise exceptions.LSECountMissing(stream.stream_id)
    if number_of_lse > limits.max_num_mpls_label:
        raise exceptions.LSECountExceed(stream.stream_id, limits.max_num_mpls_label)
    if number_of_lse == 0:
        raise exceptions.LSECountZero(stream.stream_id)
    return MplsEncapsulation(number_of_lse=number_of_lse)


def check_srv6_encapsulation(
    stream: "Stream", is_tofino2: bool, limits: "HardwareLimits"
) -> SRv6Encapsulation:
    if not is_tofino2:
        raise exceptions.SRv6NotSupport()
    number_of_sids = stream.number_of_srv6_sids
    if number_of_sids is None:
        raise exceptions.SIDCountMissing(stream.stream_id)
    if number_of_sids > limits.max_num_srv6_sids:
        raise exceptions.SIDCountExceed(stream.stream_id, limits.max_num_srv6_sids)
    if number_of_sids == 0:
        raise exceptions.SIDCountZero(stream.stream_id)
    return SRv6Encapsulation(
        number_of_sids=number_of_sids, ip_tunneling=stream.uses_ip_tunneling
    )


def resolve_encapsulation(
    stream: "Stream", is_tofino2: bool, limits: "HardwareLimits"
) -> "EncapsulationHeader":
    encapsulation = stream.encapsulation
    if encapsulation.is_mpls:
        return check_mpls_encapsulation(stream, limits)
    elif encapsulation.is_srv6:
        return check_srv6_encapsulation(stream, is_tofino2, limits)
    elif encapsulation == const.Encapsulation.VLAN:
        return VlanEncapsulation()
    elif encapsulation == const.Encapsulation.QINQ:
        return QinQEncapsulation()
    return NoEncapsulation()


def check_vlan_setting(stream: "Stream", setting: "StreamSetting") -> None:
    if setting.vlan is None:
        raise exceptions.VlanSettingMissing(stream.stream_id, setting.port)


def check_mpls_setting(
    stream: "Stream", header: MplsEncapsulation, setting: "StreamSetting"
) -> None:
    if setting.mpls_stack is None:
        raise exceptions.MplsStackMissing(stream.stream_id, setting.port)
    if len(setting.mpls_stack) != header.number_of_lse:
        raise exceptions.MplsStackLengthMismatch(
            stream.stream_id,
            setting.port,
            len(setting.mpls_stack),
            header.number_of_lse,
        )


def check_srv6_setting(
    stream: "Stream", header: SRv6Encapsulation, setting: "StreamSetting"
) -> None:
    if setting.sid_list is None:
        raise exceptions.SIDListMissing(stream.stream_id, setting.port)
    if len(setting.sid_list) != header.number_of_sids:
        raise exceptions.SIDListLengthMismatch(
            stream.stream_id,
            setting.port,
            len(setting.sid_list),
            header.number_of_sids,
        )


def check_ip_setting(stream: "Stream", setting: "StreamSetting") -> None:
    ip_version = stream.ip_version
    if ip_version is None:
        return
    if ip_version == const.IPVersion.IPV4:
        if setting.ip is None:
            raise exceptions.IPv4SettingMissing(stream.stream_id, setting.port)
    elif ip_version == const.IPVersion.IPV6:
        if setting.ipv6 is None:
            raise exceptions.IPv6SettingMissing(stream.stream_id, setting.port)
    else:
        raise exceptions.IPVersionNotSupport(stream.stream_id, setting.port)


def check_stream_setting(
    stream: "Stream", header: "EncapsulationHeader", setting: "StreamSetting"
) -> None:
    if isinstance(header, (VlanEncapsulation, QinQEncapsulation)):
        check_vlan_setting(stream, setting)
    elif isinstance(header, MplsEncapsulation):
        check_mpls_setting(stream, header, setting)
    elif isinstance(header, SRv6Encapsulation):
        check_srv6_setting(stream, header, setting)

    if header.carries_ip:
        check_ip_setting(stream, setting)


def check_vxlan(
    stream: "Stream", header: "EncapsulationHeader", setting: "StreamSetting"
) -> None:
    """Run against every setting of the request, not only the stream's own."""
    if not stream.vxlan:
        return
    if setting.vxlan is None:
        raise exceptions.VxlanSettingMissing(stream.stream_id, setting.port)
    if stream.is_ipv6:
        raise exceptions.VxlanIPv6NotSupport(stream.stream_id)
    if isinstance(header, SRv6Encapsulation):
        raise exceptions.VxlanSRv6NotSupport(stream.stream_id)


def check_buffer_size(streams: Sequence["Stream"], limits: "HardwareLimits") -> None:
    total = sum(stream.frame_size for stream in streams)
    if total > limits.max_buffer_size:
        raise exceptions.BufferSizeExceed(total, limits.max_buffer_size)


def check_not_empty(
    streams: Sequence["Stream"],
    settings: Sequence["StreamSetting"],
    mode: const.GenerationMode,
) -> None:
    if mode.is_analyze:
        return
    if not settings:
        raise exceptions.NoActiveStream()
    if not streams:
        raise exceptions.NoStream()


def get_total_rate(
    streams: Sequence["Stream"],
    headers: Sequence["EncapsulationHeader"],
    mode: const.GenerationMode,
) -> float:
    """Aggregate sending rate in Gbps.

    In Mpps mode the rate of a stream is converted with its size on the wire,
    i.e. frame, encapsulation headers and the inter frame overhead.
    """
    if not mode.is_mpps:
        return sum(stream.traffic_rate for stream in streams)
    return sum(
        (stream.frame_size + calculate_overhead(stream, header) + const.INTER_FRAME_OVERHEAD)
        * 8
        * stream.traffic_rate
        / 1000
        for stream, header in zip(streams, headers)
    )


def check_traffic_rate(
    streams: Sequence["Stream"],
    headers: Sequence["EncapsulationHeader"],
    mode: const.GenerationMode,
    is_tofino2: bool,
    limits: "HardwareLimits",
) -> None:
    if mode.is_analyze:
        return
    rate = get_total_rate(streams, headers, mode)
    max_rate = limits.max_rate(is_tofino2)
    if rate > max_rate:
        raise exceptions.TrafficRateExceed(rate, max_rate)


def check_stream_references(
    streams: Iterable["Stream"], settings: Iterable["StreamSetting"]
) -> None:
    stream_ids = {stream.stream_id for stream in streams}
    for setting in settings:
        if setting.stream_id not in stream_ids:
            raise exceptions.UnknownStreamReference(setting.stream_id, setting.port)
