import dataclasses
from typing import Any, Dict, Optional, Tuple

from eth_abi import encode as abi_encode
from eth_abi import exceptions as eth_abi_exceptions
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from safe_eth.eth.utils import fast_keccak

from .constants import (
    ENTRY_POINT_USER_OPERATION_HASH_ABI_TYPES,
    PACKED_USER_OPERATION_HASH_ABI_TYPES,
    UINT128_MAX,
)
from .exceptions import EncodingError


def pack_uint128_pair(high: int, low: int) -> bytes:
    """
    :param high: Value stored in the first `bytes16`
    :param low: Value stored in the last `bytes16`
    :return: `bytes32` with both values left padded to 16 bytes
    :raises EncodingError: If any of the values does not fit in an `uint128`
    """
    for value in (high, low):
        if not isinstance(value, int) or isinstance(value, bool):
            raise EncodingError(f"Expected an integer, got {value!r}")
        if not 0 <= value <= UINT128_MAX:
            raise EncodingError(f"Value={value} does not fit in an uint128")
    return high.to_bytes(16, byteorder="big") + low.to_bytes(16, byteorder="big")


def unpack_uint128_pair(word: bytes) -> Tuple[int, int]:
    """
    Inverse of :func:`pack_uint128_pair`

    :param word: `bytes32`
    :return: Tuple with the `uint128` stored in the high and low halves
    """
    if len(word) != 32:
        raise EncodingError(f"Expected 32 bytes, got {len(word)}")
    return (
        int.from_bytes(word[:16], byteorder="big"),
        int.from_bytes(word[16:], byteorder="big"),
    )


def get_packed_user_operation_hash(
    packed_user_operation: "PackedUserOperation",
) -> bytes:
    """
    Hash of the UserOperation, not bound to any EntryPoint or chain. ``signature`` is not part of it

    :return: keccak256 of the ABI encoded UserOperation fields, with dynamic fields hashed
    """
    try:
        user_operation_encoded = abi_encode(
            PACKED_USER_OPERATION_HASH_ABI_TYPES,
            [
                packed_user_operation.sender,
                packed_user_operation.nonce,
                fast_keccak(packed_user_operation.init_code),
                fast_keccak(packed_user_operation.call_data),
                packed_user_operation.account_gas_limits,
                packed_user_operation.pre_verification_gas,
                packed_user_operation.gas_fees,
                fast_keccak(packed_user_operation.paymaster_and_data),
            ],
        )
    except eth_abi_exceptions.EncodingError as exc:
        raise EncodingError(f"Cannot encode UserOperation: {exc}") from exc
    return fast_keccak(user_operation_encoded)


def get_entry_point_user_operation_hash(
    user_operation_hash: bytes, entry_point: ChecksumAddress, chain_id: int
) -> bytes:
    """
    Binds a UserOperation hash to an EntryPoint deployment and a chain, so signatures cannot be replayed

    :return: Same hash returned by `EntryPoint.getUserOpHash`
    """
    try:
        encoded = abi_encode(
            ENTRY_POINT_USER_OPERATION_HASH_ABI_TYPES,
            [user_operation_hash, entry_point, chain_id],
        )
    except eth_abi_exceptions.EncodingError as exc:
        raise EncodingError(f"Cannot encode UserOperation hash: {exc}") from exc
    return fast_keccak(encoded)


@dataclasses.dataclass(eq=True, frozen=True)
class UserOperation:
    """
    EIP4337 UserOperation for Entrypoint v0.7, with every gas field unpacked

    https://github.com/eth-infinitism/account-abstraction/blob/v0.7.0/contracts/interfaces/PackedUserOperation.sol
    """

    sender: ChecksumAddress
    nonce: int
    init_code: bytes
    call_data: bytes
    call_gas_limit: int
    verification_gas_limit: int
    pre_verification_gas: int
    max_fee_per_gas: int
    max_priority_fee_per_gas: int
    paymaster_and_data: bytes
    signature: bytes = b""

    @property
    def account_gas_limits(self) -> bytes:
        """
        :return: Account Gas Limits is a `bytes32` in Solidity, first `bytes16` `verification_gas_limit` and then `call_gas_limit`
        """
        return pack_uint128_pair(self.verification_gas_limit, self.call_gas_limit)

    @property
    def gas_fees(self) -> bytes:
        """
        :return: Gas Fees is a `bytes32` in Solidity, first `bytes16` `max_fee_per_gas` and then `max_priority_fee_per_gas`
        """
        return pack_uint128_pair(self.max_fee_per_gas, self.max_priority_fee_per_gas)

    def pack(self) -> "PackedUserOperation":
        return PackedUserOperation(
            sender=self.sender,
            nonce=self.nonce,
            init_code=self.init_code,
            call_data=self.call_data,
            account_gas_limits=self.account_gas_limits,
            pre_verification_gas=self.pre_verification_gas,
            gas_fees=self.gas_fees,
            paymaster_and_data=self.paymaster_and_data,
            signature=self.signature,
        )


@dataclasses.dataclass(eq=True, frozen=True)
class PackedUserOperation:
    """
    `PackedUserOperation` struct expected by the EntryPoint v0.7. Field order is the ABI order
    """

    sender: ChecksumAddress
    nonce: int
    init_code: bytes
    call_data: bytes
    account_gas_limits: bytes
    pre_verification_gas: int
    gas_fees: bytes
    paymaster_and_data: bytes
    signature: bytes = b""

    def unpack(self) -> UserOperation:
        verification_gas_limit, call_gas_limit = unpack_uint128_pair(
            self.account_gas_limits
        )
        max_fee_per_gas, max_priority_fee_per_gas = unpack_uint128_pair(self.gas_fees)
        return UserOperation(
            sender=self.sender,
            nonce=self.nonce,
            init_code=self.init_code,
            call_data=self.call_data,
            call_gas_limit=call_gas_limit,
            verification_gas_limit=verification_gas_limit,
            pre_verification_gas=self.pre_verification_gas,
            max_fee_per_gas=max_fee_per_gas,
            max_priority_fee_per_gas=max_priority_fee_per_gas,
            paymaster_and_data=self.paymaster_and_data,
            signature=self.signature,
        )

    def with_signature(self, signature: bytes) -> "PackedUserOperation":
        return dataclasses.replace(self, signature=bytes(signature))

    def as_tuple(self) -> Tuple[Any, ...]:
        return (
            self.sender,
            self.nonce,
            bytes(self.init_code),
            bytes(self.call_data),
            bytes(self.account_gas_limits),
            self.pre_verification_gas,
            bytes(self.gas_fees),
            bytes(self.paymaster_and_data),
            bytes(self.signature),
        )

    def calculate_user_operation_hash(
        self, entry_point: ChecksumAddress, chain_id: int
    ) -> bytes:
        return get_entry_point_user_operation_hash(
            get_packed_user_operation_hash(self), entry_point, chain_id
        )

    def to_rpc_dict(self) -> Dict[str, Any]:
        return {
            "sender": self.sender,
            "nonce": hex(self.nonce),
            "initCode": HexBytes(self.init_code).to_0x_hex(),
            "callData": HexBytes(self.call_data).to_0x_hex(),
            "accountGasLimits": HexBytes(self.account_gas_limits).to_0x_hex(),
            "preVerificationGas": hex(self.pre_verification_gas),
            "gasFees": HexBytes(self.gas_fees).to_0x_hex(),
            "paymasterAndData": HexBytes(self.paymaster_and_data).to_0x_hex(),
            "signature": HexBytes(self.signature).to_0x_hex(),
        }


@dataclasses.dataclass(eq=True, frozen=True)
class Eip7702Authorization:
    """
    EIP7702 authorization tuple, makes ``address`` code the code of the authority for a transaction
    """

    address: ChecksumAddress
    chain_id: int
    nonce: int
    r: int
    s: int
    y_parity: int

    def to_rpc_dict(self) -> Dict[str, str]:
        return {
            "address": self.address,
            "chainId": hex(self.chain_id),
            "nonce": hex(self.nonce),
            "r": hex(self.r),
            "s": hex(self.s),
            "yParity": hex(self.y_parity),
        }


@dataclasses.dataclass(eq=True, frozen=True)
class MeeUserOperation:
    """
    UserOperation for one chain of a MEE (Modular Execution Environment) multichain batch
    """

    user_op: UserOperation
    user_op_hash: bytes
    mee_user_op_hash: bytes
    lower_bound_timestamp: int  # uint48
    upper_bound_timestamp: int  # uint48
    max_gas_limit: int
    max_fee_per_gas: int
    chain_id: int
    eip7702_auth: Optional[Eip7702Authorization] = None
    is_clean_up_user_op: bool = False

    @property
    def packed_user_op(self) -> PackedUserOperation:
        return self.user_op.pack()

    def calculate_user_operation_hash(self, entry_point: ChecksumAddress) -> bytes:
        return self.packed_user_op.calculate_user_operation_hash(
            entry_point, self.chain_id
        )

    def get_merkle_leaf(self, entry_point: ChecksumAddress) -> Tuple[bytes, int, int]:
        """
        :return: `(userOpHash, lowerBoundTimestamp, upperBoundTimestamp)` leaf for the batch merkle tree
        """
        return (
            self.calculate_user_operation_hash(entry_point),
            self.lower_bound_timestamp,
            self.upper_bound_timestamp,
        )


@dataclasses.dataclass(eq=True, frozen=True)
class SignedMeeUserOperation:
    mee_user_operation: MeeUserOperation
    packed_user_op: PackedUserOperation
    proof: Tuple[bytes, ...]

    @property
    def chain_id(self) -> int:
        return self.mee_user_operation.chain_id

    @property
    def signature(self) -> bytes:
        return self.packed_user_op.signature

    @property
    def eip7702_auth(self) -> Optional[Eip7702Authorization]:
        return self.mee_user_operation.eip7702_auth

    def to_rpc_dict(self) -> Dict[str, Any]:
        mee_user_operation = self.mee_user_operation
        return {
            "userOp": self.packed_user_op.to_rpc_dict(),
            "userOpHash": HexBytes(mee_user_operation.user_op_hash).to_0x_hex(),
            "meeUserOpHash": HexBytes(mee_user_operation.mee_user_op_hash).to_0x_hex(),
            "lowerBoundTimestamp": mee_user_operation.lower_bound_timestamp,
            "upperBoundTimestamp": mee_user_operation.upper_bound_timestamp,
            "maxGasLimit": hex(mee_user_operation.max_gas_limit),
            "maxFeePerGas": hex(mee_user_operation.max_fee_per_gas),
            "chainId": str(mee_user_operation.chain_id),
            "eip7702Auth": (
                self.eip7702_auth.to_rpc_dict() if self.eip7702_auth else None
            ),
            "isCleanUpUserOp": mee_user_operation.is_clean_up_user_op,
            "proof": [HexBytes(node).to_0x_hex() for node in self.proof],
        }


@dataclasses.dataclass(eq=True, frozen=True)
class MeeSignedQuote:
    """
    Quote returned by the MEE node: batch UserOperations and the signature of their merkle root
    """

    hash: bytes  # Merkle root of `user_ops`
    signature: bytes  # `bytes4(type) || signature data`
    user_ops: Tuple[MeeUserOperation, ...]
