import dataclasses
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, Type

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes
from safe_eth.eth.utils import fast_to_checksum_address


class MeeUserOperationException(Exception):
    pass


class InputValidationError(MeeUserOperationException):
    """
    Input does not match the expected shape. Raised before any hashing or packing happens

    ``errors`` maps every failing field to its error messages (nested for objects, indexed for lists)
    """

    def __init__(self, errors: Any, message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or f"Invalid input {errors}")


class EncodingError(MeeUserOperationException, ValueError):
    """
    Value cannot be represented in the expected ABI type (e.g. a gas value >= 2**128)
    """


class ProofMismatch(MeeUserOperationException):
    """
    Merkle proof does not verify against the batch root. Signature would never be accepted on chain
    """


class SimulationException(MeeUserOperationException):
    pass


class SimulationCallError(SimulationException):
    """
    Simulation `eth_call` failed without revert data (transport error, invalid params...)
    """


# ================================================ #
#            EntryPoint errors
# ================================================ #
@dataclasses.dataclass(frozen=True)
class EntryPointError:
    """
    Decoded custom error reverted by the EntryPoint or the MEE EntryPoint
    """

    signature: ClassVar[str] = ""
    abi_types: ClassVar[Sequence[str]] = ()

    @classmethod
    def selector(cls) -> bytes:
        return function_signature_to_4byte_selector(cls.signature)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __str__(self) -> str:
        values = ", ".join(
            f"{field.name}={getattr(self, field.name)!r}"
            for field in dataclasses.fields(self)
        )
        return f"{self.name}({values})"


@dataclasses.dataclass(frozen=True)
class FailedOp(EntryPointError):
    signature: ClassVar[str] = "FailedOp(uint256,string)"
    abi_types: ClassVar[Sequence[str]] = ("uint256", "string")

    op_index: int
    reason: str

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


@dataclasses.dataclass(frozen=True)
class FailedOpWithRevert(EntryPointError):
    signature: ClassVar[str] = "FailedOpWithRevert(uint256,string,bytes)"
    abi_types: ClassVar[Sequence[str]] = ("uint256", "string", "bytes")

    op_index: int
    reason: str
    inner: bytes

    def __str__(self) -> str:
        return f"{self.name}: {self.reason} inner={HexBytes(self.inner).to_0x_hex()}"


@dataclasses.dataclass(frozen=True)
class PostOpReverted(EntryPointError):
    signature: ClassVar[str] = "PostOpReverted(bytes)"
    abi_types: ClassVar[Sequence[str]] = ("bytes",)

    return_data: bytes


@dataclasses.dataclass(frozen=True)
class SenderAddressResult(EntryPointError):
    signature: ClassVar[str] = "SenderAddressResult(address)"
    abi_types: ClassVar[Sequence[str]] = ("address",)

    sender: str


@dataclasses.dataclass(frozen=True)
class SignatureValidationFailed(EntryPointError):
    signature: ClassVar[str] = "SignatureValidationFailed(address)"
    abi_types: ClassVar[Sequence[str]] = ("address",)

    aggregator: str


@dataclasses.dataclass(frozen=True)
class DelegateAndRevert(EntryPointError):
    signature: ClassVar[str] = "DelegateAndRevert(bool,bytes)"
    abi_types: ClassVar[Sequence[str]] = ("bool", "bytes")

    success: bool
    ret: bytes


@dataclasses.dataclass(frozen=True)
class ReentrancyGuardReentrantCall(EntryPointError):
    signature: ClassVar[str] = "ReentrancyGuardReentrantCall()"


@dataclasses.dataclass(frozen=True)
class InvalidShortString(EntryPointError):
    signature: ClassVar[str] = "InvalidShortString()"


@dataclasses.dataclass(frozen=True)
class StringTooLong(EntryPointError):
    signature: ClassVar[str] = "StringTooLong(string)"
    abi_types: ClassVar[Sequence[str]] = ("string",)

    value: str


@dataclasses.dataclass(frozen=True)
class EmptyMessageValue(EntryPointError):
    signature: ClassVar[str] = "EmptyMessageValue()"


@dataclasses.dataclass(frozen=True)
class InsufficientBalance(EntryPointError):
    signature: ClassVar[str] = "InsufficientBalance()"


@dataclasses.dataclass(frozen=True)
class OwnableInvalidOwner(EntryPointError):
    signature: ClassVar[str] = "OwnableInvalidOwner(address)"
    abi_types: ClassVar[Sequence[str]] = ("address",)

    owner: str


@dataclasses.dataclass(frozen=True)
class OwnableUnauthorizedAccount(EntryPointError):
    signature: ClassVar[str] = "OwnableUnauthorizedAccount(address)"
    abi_types: ClassVar[Sequence[str]] = ("address",)

    account: str


@dataclasses.dataclass(frozen=True)
class ErrorMessage(EntryPointError):
    """
    Solidity ``require``/``revert`` with a reason string
    """

    signature: ClassVar[str] = "Error(string)"
    abi_types: ClassVar[Sequence[str]] = ("string",)

    message: str

    def __str__(self) -> str:
        return f"Error: {self.message}"


@dataclasses.dataclass(frozen=True)
class Panic(EntryPointError):
    signature: ClassVar[str] = "Panic(uint256)"
    abi_types: ClassVar[Sequence[str]] = ("uint256",)

    code: int

    def __str__(self) -> str:
        return f"Panic: {hex(self.code)}"


@dataclasses.dataclass(frozen=True)
class UnrecognizedRevert(EntryPointError):
    """
    Revert data not matching any known error. Raw bytes are kept
    """

    data: bytes

    def __str__(self) -> str:
        return f"{self.name}: {HexBytes(self.data).to_0x_hex()}"


KNOWN_ENTRY_POINT_ERRORS: Tuple[Type[EntryPointError], ...] = (
    FailedOp,
    FailedOpWithRevert,
    PostOpReverted,
    SenderAddressResult,
    SignatureValidationFailed,
    DelegateAndRevert,
    ReentrancyGuardReentrantCall,
    InvalidShortString,
    StringTooLong,
    EmptyMessageValue,
    InsufficientBalance,
    OwnableInvalidOwner,
    OwnableUnauthorizedAccount,
    ErrorMessage,
    Panic,
)

ENTRY_POINT_ERRORS_BY_SELECTOR: Dict[bytes, Type[EntryPointError]] = {
    error_class.selector(): error_class for error_class in KNOWN_ENTRY_POINT_ERRORS
}


def decode_entry_point_error(data: bytes) -> EntryPointError:
    """
    :param data: Revert data returned by the node
    :return: Decoded error. ``UnrecognizedRevert`` if selector is unknown or arguments cannot be decoded
        (including `string` arguments not valid UTF-8)
    """
    data = bytes(HexBytes(data))
    error_class = ENTRY_POINT_ERRORS_BY_SELECTOR.get(data[:4])
    if error_class is None:
        return UnrecognizedRevert(data)

    if not error_class.abi_types:
        return error_class()

    try:
        values = abi_decode(list(error_class.abi_types), data[4:])
    except (DecodingError, UnicodeDecodeError):
        return UnrecognizedRevert(data)

    return error_class(
        *(
            fast_to_checksum_address(value) if abi_type == "address" else value
            for abi_type, value in zip(error_class.abi_types, values)
        )
    )


class SimulationRevert(SimulationException):
    """
    Simulation `eth_call` reverted. ``error`` holds the decoded EntryPoint error
    """

    def __init__(self, error: EntryPointError):
        self.error = error
        super().__init__(str(error))

    @property
    def revert_data(self) -> Optional[bytes]:
        return self.error.data if isinstance(self.error, UnrecognizedRevert) else None
