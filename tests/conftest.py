"""
Shared pytest fixtures for the request validator tests.
"""

from __future__ import annotations

from typing import Any, Callable, List

import pytest

from pluginp4tg.entry import RequestValidator
from pluginp4tg.model import (
    HardwareLimits,
    IPv4Config,
    IPv6Config,
    LabelStackEntry,
    Stream,
    StreamSetting,
    VlanConfig,
    VxlanConfig,
)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_stream(**overrides: Any) -> Stream:
    fields = dict(
        stream_id=1,
        frame_size=64,
        encapsulation="None",
        ip_version=4,
        traffic_rate=10.0,
    )
    fields.update(overrides)
    return Stream(**fields)


def build_setting(**overrides: Any) -> StreamSetting:
    fields = dict(
        stream_id=1,
        port=128,
        ip=IPv4Config(ip_src="10.0.0.1", ip_dst="10.0.0.2"),
    )
    fields.update(overrides)
    return StreamSetting(**fields)


def mpls_stack(count: int) -> List[LabelStackEntry]:
    return [LabelStackEntry(label=100 + i) for i in range(count)]


def sid_list(count: int) -> List[str]:
    return [f"2001:db8::{i + 1}" for i in range(count)]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_stream() -> Callable[..., Stream]:
    """Stream factory: a valid IPv4 stream without encapsulation by default."""
    return build_stream


@pytest.fixture
def make_setting() -> Callable[..., StreamSetting]:
    """Setting factory: IPv4 addressing for stream #1 on port 128 by default."""
    return build_setting


@pytest.fixture
def limits() -> HardwareLimits:
    return HardwareLimits()


@pytest.fixture
def validator(limits: HardwareLimits) -> RequestValidator:
    return RequestValidator(limits)


@pytest.fixture
def vlan() -> VlanConfig:
    return VlanConfig(vlan_id=100, pcp=3)


@pytest.fixture
def ipv6() -> IPv6Config:
    return IPv6Config(ipv6_src="2001:db8::1", ipv6_dst="2001:db8::2")


@pytest.fixture
def vxlan() -> VxlanConfig:
    return VxlanConfig(
        eth_src="02:00:00:00:00:01",
        eth_dst="02:00:00:00:00:02",
        ip_src="192.168.0.1",
        ip_dst="192.168.0.2",
        vni=42,
    )
