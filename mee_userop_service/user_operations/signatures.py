from typing import Sequence, Tuple

from eth_abi import encode as abi_encode
from eth_abi import exceptions as eth_abi_exceptions
from eth_account import Account
from eth_account.messages import encode_defunct

from .constants import (
    MEE_SIGNATURE_ABI_TYPES,
    MEE_SIGNATURE_TYPE_OFFSET,
    MEE_SIGNATURE_TYPE_SIMPLE,
    UINT48_MAX,
)
from .exceptions import EncodingError


def split_mee_signature(signature: bytes) -> Tuple[bytes, bytes]:
    """
    :param signature: Signature of the batch root returned by the MEE node
    :return: Tuple with the signature type (first 4 bytes) and the signature data
    """
    signature = bytes(signature)
    if len(signature) < MEE_SIGNATURE_TYPE_OFFSET:
        raise EncodingError(
            f"Signature must be at least {MEE_SIGNATURE_TYPE_OFFSET} bytes, got {len(signature)}"
        )
    return (
        signature[:MEE_SIGNATURE_TYPE_OFFSET],
        signature[MEE_SIGNATURE_TYPE_OFFSET:],
    )


def build_mee_signature(
    signature_type: bytes,
    root: bytes,
    lower_bound_timestamp: int,
    upper_bound_timestamp: int,
    proof: Sequence[bytes],
    signature_data: bytes,
) -> bytes:
    """
    Build the signature for one UserOperation of a MEE batch:

    ``bytes4(type) || abi.encode(bytes32 root, uint48 lowerBound, uint48 upperBound, bytes32[] proof, bytes signature)``

    :param signature_type: Type of the batch signature
    :param root: Batch merkle root
    :param lower_bound_timestamp:
    :param upper_bound_timestamp:
    :param proof: Merkle proof for the UserOperation leaf
    :param signature_data: Batch signature without the type
    :return: Value for the UserOperation ``signature`` field
    :raises EncodingError: If any of the values does not match its ABI type
    """
    if len(signature_type) != MEE_SIGNATURE_TYPE_OFFSET:
        raise EncodingError(
            f"Signature type must be {MEE_SIGNATURE_TYPE_OFFSET} bytes, got {len(signature_type)}"
        )
    if len(root) != 32:
        raise EncodingError(f"Root must be 32 bytes, got {len(root)}")
    if any(len(node) != 32 for node in proof):
        raise EncodingError("Every proof node must be 32 bytes")
    for bound in (lower_bound_timestamp, upper_bound_timestamp):
        if not 0 <= bound <= UINT48_MAX:
            raise EncodingError(f"Timestamp={bound} does not fit in an uint48")

    try:
        encoded = abi_encode(
            MEE_SIGNATURE_ABI_TYPES,
            [
                bytes(root),
                lower_bound_timestamp,
                upper_bound_timestamp,
                [bytes(node) for node in proof],
                bytes(signature_data),
            ],
        )
    except eth_abi_exceptions.EncodingError as exc:
        raise EncodingError(f"Cannot encode MEE signature: {exc}") from exc
    return bytes(signature_type) + encoded


def sign_mee_root(private_key: str, root: bytes) -> bytes:
    """
    Sign a batch root as the MEE node does for `simple` mode quotes, an EIP191 signature of the raw root

    :param private_key:
    :param root: Batch merkle root
    :return: ``MEE_SIGNATURE_TYPE_SIMPLE`` followed by the 65 bytes signature
    """
    signed_message = Account.sign_message(encode_defunct(primitive=root), private_key)
    return MEE_SIGNATURE_TYPE_SIMPLE + bytes(signed_message.signature)
