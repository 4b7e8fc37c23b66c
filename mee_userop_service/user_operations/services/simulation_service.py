import dataclasses
import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import cache
from typing import Any, Dict, Optional

from django.conf import settings

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from safe_eth.eth import EthereumClient
from safe_eth.eth.constants import NULL_ADDRESS
from safe_eth.eth.utils import fast_to_checksum_address
from web3 import Web3
from web3.types import RPCEndpoint

from ..abis.entry_point_v7 import entry_point_v7_deployed_bytecode
from ..constants import (
    EXECUTION_RESULT_ABI_TYPE,
    PACKED_USER_OPERATION_ABI_TYPE,
    SIMULATE_HANDLE_OP_SELECTOR,
    VALIDATION_DATA_SIG_FAILED_LENGTH,
)
from ..exceptions import (
    SimulationCallError,
    SimulationException,
    SimulationRevert,
    decode_entry_point_error,
)
from ..UserOperationV7 import (
    Eip7702Authorization,
    PackedUserOperation,
    SignedMeeUserOperation,
)
from .mee_service import MeeConfig

logger = logging.getLogger(__name__)


class EthCallReverted(SimulationException):
    """
    `eth_call` reverted, ``data`` holds the raw revert data
    """

    def __init__(self, data: bytes, message: Optional[str] = None):
        self.data = bytes(data)
        super().__init__(message or "execution reverted")


class EthCallTransport(ABC):
    """
    Executes read only calls against a node. Retries and timeouts are up to the implementation
    """

    @abstractmethod
    def eth_call(
        self,
        transaction: Dict[str, Any],
        block_identifier: str,
        state_override: Dict[str, Dict[str, Any]],
    ) -> bytes:
        """
        :param transaction: `eth_call` transaction object, JSON RPC formatted
        :param block_identifier:
        :param state_override: Code/storage to replace for the duration of the call
        :return: Call return data
        :raises EthCallReverted: If call reverted
        :raises SimulationCallError: If call could not be performed
        """


class Web3EthCallTransport(EthCallTransport):
    """
    Sends a raw `eth_call` using the ``web3`` provider, as not every client library supports
    state overrides together with EIP7702 ``authorizationList``
    """

    def __init__(self, w3: Web3):
        self.w3 = w3

    @staticmethod
    def _get_revert_data(error: Dict[str, Any]) -> Optional[HexBytes]:
        data = error.get("data")
        if isinstance(data, dict):  # Some nodes nest the revert data
            data = data.get("data")
        if isinstance(data, str) and data.startswith("0x"):
            return HexBytes(data)
        return None

    def eth_call(
        self,
        transaction: Dict[str, Any],
        block_identifier: str,
        state_override: Dict[str, Dict[str, Any]],
    ) -> bytes:
        response = self.w3.provider.make_request(
            RPCEndpoint("eth_call"), [transaction, block_identifier, state_override]
        )
        if error := response.get("error"):
            if (revert_data := self._get_revert_data(error)) is not None:
                raise EthCallReverted(revert_data, error.get("message"))
            raise SimulationCallError(f"eth_call failed: {error}")
        return HexBytes(response["result"])


@dataclasses.dataclass(eq=True, frozen=True)
class ExecutionResult:
    """
    ``IEntryPointSimulations.ExecutionResult`` returned by ``simulateHandleOp``
    """

    pre_op_gas: int
    paid: int
    account_validation_data: int
    paymaster_validation_data: int
    target_success: bool
    target_result: bytes

    @property
    def signature_failed(self) -> bool:
        """
        :return: ``True`` if account signature validation failed. Read from the last bytes of
            ``account_validation_data`` padded to 32 bytes. Only the low 4 bytes are read, not the
            whole 20 bytes ``aggregator`` field, so an aggregator address is not a failure
        """
        validation_data = self.account_validation_data.to_bytes(32, byteorder="big")
        return (
            int.from_bytes(
                validation_data[-VALIDATION_DATA_SIG_FAILED_LENGTH:], byteorder="big"
            )
            != 0
        )


class ValidationStatus(Enum):
    VALID = "valid"
    INVALID = "invalid"
    SIMULATION_FAILED = "simulation_failed"


@dataclasses.dataclass(frozen=True)
class ValidationOutcome:
    status: ValidationStatus
    execution_result: Optional[ExecutionResult] = None
    error: Optional[SimulationException] = None

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error else None


def encode_simulate_handle_op(
    packed_user_operation: PackedUserOperation,
    target: ChecksumAddress = NULL_ADDRESS,
    target_call_data: bytes = b"",
) -> bytes:
    """
    :return: Calldata for ``simulateHandleOp(PackedUserOperation op, address target, bytes callData)``
    """
    return SIMULATE_HANDLE_OP_SELECTOR + abi_encode(
        [PACKED_USER_OPERATION_ABI_TYPE, "address", "bytes"],
        [packed_user_operation.as_tuple(), target, bytes(target_call_data)],
    )


def decode_execution_result(data: bytes) -> ExecutionResult:
    try:
        (result,) = abi_decode([EXECUTION_RESULT_ABI_TYPE], bytes(data))
    except DecodingError as exc:
        raise SimulationCallError(
            f"Cannot decode ExecutionResult from data={HexBytes(data).to_0x_hex()}"
        ) from exc
    return ExecutionResult(*result)


@cache
def get_simulation_service() -> "ValidationSimulationService":
    config = MeeConfig.from_settings()
    ethereum_client = EthereumClient(
        config.ethereum_node_url,
        provider_timeout=settings.ETHEREUM_NODE_TIMEOUT,
        retry_count=settings.ETHEREUM_NODE_RETRY_COUNT,
    )
    return ValidationSimulationService(
        Web3EthCallTransport(ethereum_client.w3),
        fast_to_checksum_address(config.mee_entry_point_address),
        fast_to_checksum_address(config.entry_point_address),
        fast_to_checksum_address(config.simulation_sender),
        config.handle_ops_deposit,
        block_identifier=settings.MEE_SIMULATION_BLOCK,
    )


class ValidationSimulationService:
    """
    Off chain dry run of signed UserOperations using the MEE EntryPoint ``simulateHandleOp``
    """

    def __init__(
        self,
        transport: EthCallTransport,
        mee_entry_point_address: ChecksumAddress,
        entry_point_address: ChecksumAddress,
        simulation_sender: ChecksumAddress,
        handle_ops_deposit: int,
        entry_point_code: bytes = entry_point_v7_deployed_bytecode,
        block_identifier: str = "latest",
    ):
        """
        :param transport: Used to perform the `eth_call`
        :param mee_entry_point_address: Contract exposing ``simulateHandleOp``
        :param entry_point_address: EntryPoint v0.7 address, ``entry_point_code`` is installed there
        :param simulation_sender: `from` of the simulation call
        :param handle_ops_deposit: `value` of the simulation call, must cover the simulation gas
        :param entry_point_code: EntryPoint runtime bytecode
        :param block_identifier:
        """
        self.transport = transport
        self.mee_entry_point_address = mee_entry_point_address
        self.entry_point_address = entry_point_address
        self.simulation_sender = simulation_sender
        self.handle_ops_deposit = handle_ops_deposit
        self.entry_point_code = HexBytes(entry_point_code)
        self.block_identifier = block_identifier

    def build_state_override(self) -> Dict[str, Dict[str, Any]]:
        return {self.entry_point_address: {"code": self.entry_point_code.to_0x_hex()}}

    def build_simulation_transaction(
        self,
        packed_user_operation: PackedUserOperation,
        eip7702_auth: Optional[Eip7702Authorization] = None,
    ) -> Dict[str, Any]:
        """
        :param packed_user_operation: Signed UserOperation
        :param eip7702_auth: If provided, sender will use the delegated code during the simulation
        :return: `eth_call` transaction object
        """
        transaction = {
            "from": self.simulation_sender,
            "to": self.mee_entry_point_address,
            "value": hex(self.handle_ops_deposit),
            "data": HexBytes(
                encode_simulate_handle_op(packed_user_operation)
            ).to_0x_hex(),
        }
        if eip7702_auth:
            transaction["authorizationList"] = [eip7702_auth.to_rpc_dict()]
        return transaction

    def simulate_handle_op(
        self,
        packed_user_operation: PackedUserOperation,
        eip7702_auth: Optional[Eip7702Authorization] = None,
    ) -> ExecutionResult:
        """
        :param packed_user_operation: Signed UserOperation
        :param eip7702_auth:
        :return: Decoded ``ExecutionResult``
        :raises SimulationRevert: If simulation reverted, with the decoded EntryPoint error
        :raises SimulationCallError: If simulation could not be performed
        """
        transaction = self.build_simulation_transaction(
            packed_user_operation, eip7702_auth
        )
        logger.debug(
            "[%s] Simulating user-operation with nonce=%d on mee-entry-point=%s",
            packed_user_operation.sender,
            packed_user_operation.nonce,
            self.mee_entry_point_address,
        )
        try:
            data = self.transport.eth_call(
                transaction, self.block_identifier, self.build_state_override()
            )
        except EthCallReverted as exc:
            entry_point_error = decode_entry_point_error(exc.data)
            logger.info(
                "[%s] Simulation of user-operation with nonce=%d reverted: %s",
                packed_user_operation.sender,
                packed_user_operation.nonce,
                entry_point_error,
            )
            raise SimulationRevert(entry_point_error) from exc
        return decode_execution_result(data)

    def validate_user_operation(
        self, signed_mee_user_operation: SignedMeeUserOperation
    ) -> ValidationOutcome:
        """
        :param signed_mee_user_operation:
        :return: ``VALID`` if account validation passed, ``INVALID`` if signature validation failed and
            ``SIMULATION_FAILED`` with the reason if simulation could not be completed
        """
        mee_user_operation = signed_mee_user_operation.mee_user_operation
        try:
            execution_result = self.simulate_handle_op(
                signed_mee_user_operation.packed_user_op,
                signed_mee_user_operation.eip7702_auth,
            )
        except SimulationException as exc:
            logger.warning(
                "Simulation failed for user-operation on chain-id=%d: %s",
                mee_user_operation.chain_id,
                exc,
                extra={"user_operation": mee_user_operation},
            )
            return ValidationOutcome(ValidationStatus.SIMULATION_FAILED, error=exc)

        status = (
            ValidationStatus.INVALID
            if execution_result.signature_failed
            else ValidationStatus.VALID
        )
        logger.info(
            "Simulated user-operation on chain-id=%d, status=%s",
            mee_user_operation.chain_id,
            status.value,
            extra={"user_operation": mee_user_operation},
        )
        return ValidationOutcome(status, execution_result=execution_result)
