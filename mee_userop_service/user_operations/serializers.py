import re
from enum import Enum
from typing import Any, Dict, Optional

from django.conf import settings

from djangorestframework_camel_case.util import underscoreize
from hexbytes import HexBytes
from rest_framework import serializers
from rest_framework.exceptions import ValidationError
from safe_eth.eth.utils import fast_to_checksum_address

from .constants import MEE_SIGNATURE_TYPE_OFFSET
from .exceptions import InputValidationError
from .UserOperationV7 import (
    Eip7702Authorization,
    MeeSignedQuote,
    MeeUserOperation,
    UserOperation,
)

DECIMAL_REGEX = re.compile(r"^[0-9]+$")
HEXADECIMAL_QUANTITY_REGEX = re.compile(r"^0x[0-9a-fA-F]+$")
HEXADECIMAL_BYTES_REGEX = re.compile(r"^0x(?:[0-9a-fA-F]{2})*$")
ADDRESS_REGEX = re.compile(r"^0x[0-9a-fA-F]{40}$")


class IntegerLikeKind(Enum):
    NATIVE = "native"  # Python `int`
    DECIMAL = "decimal"  # `"1000"`
    HEXADECIMAL = "hexadecimal"  # `"0x3e8"`


def get_integer_like_kind(value: Any) -> IntegerLikeKind:
    """
    :param value:
    :return: How ``value`` represents an integer
    :raises ValueError: If ``value`` is not an integer representation. Floats are never accepted
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return IntegerLikeKind.NATIVE
    if isinstance(value, str):
        if DECIMAL_REGEX.match(value):
            return IntegerLikeKind.DECIMAL
        if HEXADECIMAL_QUANTITY_REGEX.match(value):
            return IntegerLikeKind.HEXADECIMAL
    raise ValueError(f"{value!r} is not an integer representation")


def parse_integer_like(value: Any) -> int:
    kind = get_integer_like_kind(value)
    if kind == IntegerLikeKind.DECIMAL:
        return int(value, 10)
    if kind == IntegerLikeKind.HEXADECIMAL:
        return int(value, 16)
    return value


# ================================================ #
#            Fields
# ================================================ #
class IntegerLikeField(serializers.Field):
    """
    Unsigned integer provided as a number, a decimal string or a ``0x`` prefixed hexadecimal string
    """

    default_error_messages = {
        "invalid": "`{value}` is not an integer, a decimal string or a 0x prefixed hexadecimal string",
        "negative": "`{value}` cannot be negative",
        "max_bits": "`{value}` does not fit in an uint{max_bits}",
    }

    def __init__(self, max_bits: int = 256, **kwargs):
        self.max_bits = max_bits
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> int:
        try:
            value = parse_integer_like(data)
        except ValueError:
            self.fail("invalid", value=data)
        if value < 0:
            self.fail("negative", value=data)
        if value.bit_length() > self.max_bits:
            self.fail("max_bits", value=data, max_bits=self.max_bits)
        return value

    def to_representation(self, value: int) -> int:
        return value


class StrictBooleanField(serializers.Field):
    """
    JSON boolean. Unlike ``serializers.BooleanField`` strings and numbers are not coerced
    """

    default_error_messages = {
        "invalid": "`{value}` is not a boolean",
    }

    def to_internal_value(self, data: Any) -> bool:
        if not isinstance(data, bool):
            self.fail("invalid", value=data)
        return data

    def to_representation(self, value: bool) -> bool:
        return value


class AddressField(serializers.Field):
    """
    ``0x`` prefixed address in any case. Normalized to its checksummed version
    """

    default_error_messages = {
        "invalid": "`{value}` is not a valid address",
    }

    def to_internal_value(self, data: Any) -> str:
        if not isinstance(data, str) or not ADDRESS_REGEX.match(data):
            self.fail("invalid", value=data)
        return fast_to_checksum_address(data)

    def to_representation(self, value: str) -> str:
        return value


class HexBytesField(serializers.Field):
    """
    ``0x`` prefixed hexadecimal string with an even number of digits
    """

    default_error_messages = {
        "invalid": "`{value}` is not a 0x prefixed even length hexadecimal string",
        "length": "Expected {length} bytes, got {value_length}",
        "min_length": "Expected at least {min_length} bytes, got {value_length}",
    }

    def __init__(
        self,
        length: Optional[int] = None,
        min_length: Optional[int] = None,
        **kwargs,
    ):
        self.length = length
        self.min_length = min_length
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> HexBytes:
        if isinstance(data, (bytes, bytearray)):
            value = HexBytes(data)
        elif isinstance(data, str) and HEXADECIMAL_BYTES_REGEX.match(data):
            value = HexBytes(data)
        else:
            self.fail("invalid", value=data)

        if self.length is not None and len(value) != self.length:
            self.fail("length", length=self.length, value_length=len(value))
        if self.min_length is not None and len(value) < self.min_length:
            self.fail("min_length", min_length=self.min_length, value_length=len(value))
        return value

    def to_representation(self, value: bytes) -> str:
        return HexBytes(value).to_0x_hex()


class Hash32Field(HexBytesField):
    def __init__(self, **kwargs):
        super().__init__(length=32, **kwargs)


# ================================================ #
#            Request Serializers
# ================================================ #
class UserOperationSerializer(serializers.Serializer):
    sender = AddressField()
    nonce = IntegerLikeField()
    init_code = HexBytesField(required=False, default=HexBytes(b""))
    call_data = HexBytesField()
    call_gas_limit = IntegerLikeField()
    verification_gas_limit = IntegerLikeField()
    pre_verification_gas = IntegerLikeField()
    max_fee_per_gas = IntegerLikeField()
    max_priority_fee_per_gas = IntegerLikeField()
    paymaster_and_data = HexBytesField()
    signature = HexBytesField(required=False, default=HexBytes(b""))

    def create(self, validated_data: Dict[str, Any]) -> UserOperation:
        return UserOperation(**validated_data)


class Eip7702AuthorizationSerializer(serializers.Serializer):
    address = AddressField()
    chain_id = IntegerLikeField()
    nonce = IntegerLikeField(max_bits=64)
    r = IntegerLikeField()
    s = IntegerLikeField()
    y_parity = IntegerLikeField(max_bits=8)

    def create(self, validated_data: Dict[str, Any]) -> Eip7702Authorization:
        return Eip7702Authorization(**validated_data)


class MeeUserOperationSerializer(serializers.Serializer):
    user_op = UserOperationSerializer()
    user_op_hash = Hash32Field()
    mee_user_op_hash = Hash32Field()
    lower_bound_timestamp = IntegerLikeField(max_bits=48)
    upper_bound_timestamp = IntegerLikeField(max_bits=48)
    max_gas_limit = IntegerLikeField()
    max_fee_per_gas = IntegerLikeField()
    chain_id = IntegerLikeField()
    eip7702_auth = Eip7702AuthorizationSerializer(required=False, allow_null=True)
    is_clean_up_user_op = StrictBooleanField(required=False, default=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs["upper_bound_timestamp"] < attrs["lower_bound_timestamp"]:
            raise ValidationError(
                {
                    "upper_bound_timestamp": [
                        f"`upper_bound_timestamp`={attrs['upper_bound_timestamp']} cannot be lower than "
                        f"`lower_bound_timestamp`={attrs['lower_bound_timestamp']}"
                    ]
                }
            )
        return attrs

    def create(self, validated_data: Dict[str, Any]) -> MeeUserOperation:
        user_op = self.fields["user_op"].create(validated_data.pop("user_op"))
        eip7702_auth_data = validated_data.pop("eip7702_auth", None)
        eip7702_auth = (
            self.fields["eip7702_auth"].create(eip7702_auth_data)
            if eip7702_auth_data
            else None
        )
        return MeeUserOperation(
            user_op=user_op, eip7702_auth=eip7702_auth, **validated_data
        )


class MeeSignedQuoteSerializer(serializers.Serializer):
    hash = Hash32Field()
    signature = HexBytesField(min_length=MEE_SIGNATURE_TYPE_OFFSET)
    user_ops = MeeUserOperationSerializer(many=True, allow_empty=False)

    def create(self, validated_data: Dict[str, Any]) -> MeeSignedQuote:
        mee_user_operation_serializer = self.fields["user_ops"].child
        return MeeSignedQuote(
            hash=validated_data["hash"],
            signature=validated_data["signature"],
            user_ops=tuple(
                mee_user_operation_serializer.create(user_op_data)
                for user_op_data in validated_data["user_ops"]
            ),
        )


def _parse(serializer_class, data: Any):
    serializer = serializer_class(
        data=underscoreize(data, **settings.JSON_UNDERSCOREIZE)
    )
    if not serializer.is_valid():
        raise InputValidationError(serializer.errors)
    return serializer.save()


def parse_mee_user_operation(data: Any) -> MeeUserOperation:
    """
    :param data: MEE UserOperation as returned by the MEE node (camelCase)
    :return: Typed MEE UserOperation
    :raises InputValidationError: With every invalid field
    """
    return _parse(MeeUserOperationSerializer, data)


def parse_mee_signed_quote(data: Any) -> MeeSignedQuote:
    """
    :param data: Signed quote as returned by the MEE node (camelCase)
    :return: Typed signed quote
    :raises InputValidationError: With every invalid field, UserOperations errors are indexed
    """
    return _parse(MeeSignedQuoteSerializer, data)
