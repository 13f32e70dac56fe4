import re
from typing import Any
from ipaddress import (
    IPv4Address as OldIPv4Address,
    IPv6Address as OldIPv6Address,
)
from pydantic_core import core_schema
from . import exceptions


class MacAddress(str):
    def __new__(cls, *args: Any, **kwargs: Any) -> "MacAddress":
        value = str.__new__(cls, *args, **kwargs)
        if not value:
            value = "000000000000"
        validate_value = (
            value.upper()
            .replace("0X", "")
            .replace(":", "")
            .replace("-", "")
        )
        if len(validate_value) != 12:
            raise exceptions.MacAddressNotValid(value)
        for i in validate_value:
            if i not in "0123456789ABCDEF":
                raise exceptions.MacAddressNotValid(value)

        return str.__new__(cls, ":".join(re.findall(".{2}", validate_value)))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.to_string_ser_schema(),
        )

    @property
    def is_empty(self) -> bool:
        return self == MacAddress("000000000000")


def _address_validator(address_type: type) -> Any:
    def validate(value: Any) -> Any:
        if isinstance(value, address_type):
            return value
        return address_type(value)

    return validate


class IPv4Address(OldIPv4Address):
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _address_validator(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @property
    def is_empty(self) -> bool:
        return self == IPv4Address("0.0.0.0")


class IPv6Address(OldIPv6Address):
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _address_validator(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @property
    def is_empty(self) -> bool:
        return self == IPv6Address("::")
