from unittest import mock
from unittest.mock import MagicMock

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from eth_abi import encode as abi_encode
from hexbytes import HexBytes
from safe_eth.eth.constants import NULL_ADDRESS

from ...abis.entry_point_v7 import entry_point_v7_deployed_bytecode
from ...constants import (
    EXECUTION_RESULT_ABI_TYPE,
    PACKED_USER_OPERATION_ABI_TYPE,
    SIMULATE_HANDLE_OP_SELECTOR,
)
from ...exceptions import (
    FailedOp,
    SimulationCallError,
    SimulationRevert,
    UnrecognizedRevert,
)
from ...services import (
    EthCallReverted,
    EthCallTransport,
    ExecutionResult,
    MeeConfig,
    MeeService,
    ValidationSimulationService,
    ValidationStatus,
    Web3EthCallTransport,
    get_simulation_service,
)
from ...services.simulation_service import (
    decode_execution_result,
    encode_simulate_handle_op,
)
from ..factories import Eip7702AuthorizationFactory, MeeUserOperationFactory


def execution_result_data(
    account_validation_data: int = 0,
    pre_op_gas: int = 80_000,
    paid: int = 1_000_000,
) -> bytes:
    return abi_encode(
        [EXECUTION_RESULT_ABI_TYPE],
        [(pre_op_gas, paid, account_validation_data, 0, True, b"")],
    )


class TestExecutionResult(SimpleTestCase):
    def test_signature_failed(self):
        for account_validation_data, signature_failed in (
            (0, False),
            (1, True),
            (2**32 - 1, True),
            # Only the last 4 bytes are checked
            (1 << 40, False),
            # Time range is not part of the signature check
            ((1_800_000_000 << 160) | (1_700_000_000 << 208), False),
            ((1_800_000_000 << 160) | 1, True),
        ):
            with self.subTest(account_validation_data=account_validation_data):
                execution_result = ExecutionResult(
                    80_000, 1_000, account_validation_data, 0, True, b""
                )
                self.assertEqual(execution_result.signature_failed, signature_failed)

    def test_decode_execution_result(self):
        execution_result = decode_execution_result(
            execution_result_data(account_validation_data=1)
        )
        self.assertEqual(
            execution_result, ExecutionResult(80_000, 1_000_000, 1, 0, True, b"")
        )
        with self.assertRaises(SimulationCallError):
            decode_execution_result(b"\x01")


class TestWeb3EthCallTransport(SimpleTestCase):
    def setUp(self):
        self.w3 = MagicMock()
        self.transport = Web3EthCallTransport(self.w3)
        self.transaction = {"to": NULL_ADDRESS, "data": "0x"}
        self.state_override = {NULL_ADDRESS: {"code": "0x00"}}

    def test_eth_call(self):
        self.w3.provider.make_request.return_value = {
            "jsonrpc": "2.0",
            "id": 1,
            "result": "0x1234",
        }
        self.assertEqual(
            self.transport.eth_call(self.transaction, "latest", self.state_override),
            HexBytes("0x1234"),
        )
        self.w3.provider.make_request.assert_called_once_with(
            "eth_call", [self.transaction, "latest", self.state_override]
        )

    def test_eth_call_reverted(self):
        revert_data = "0x08c379a0" + "00" * 32
        for error in (
            {"code": 3, "message": "execution reverted", "data": revert_data},
            {"code": -32000, "message": "reverted", "data": {"data": revert_data}},
        ):
            with self.subTest(error=error):
                self.w3.provider.make_request.return_value = {"error": error}
                with self.assertRaises(EthCallReverted) as context:
                    self.transport.eth_call(
                        self.transaction, "latest", self.state_override
                    )
                self.assertEqual(context.exception.data, HexBytes(revert_data))

    def test_eth_call_error(self):
        self.w3.provider.make_request.return_value = {
            "error": {"code": -32602, "message": "invalid argument"}
        }
        with self.assertRaisesMessage(SimulationCallError, "invalid argument"):
            self.transport.eth_call(self.transaction, "latest", self.state_override)


class TestValidationSimulationService(SimpleTestCase):
    def setUp(self):
        self.transport = MagicMock(spec=EthCallTransport)
        self.simulation_service = ValidationSimulationService(
            self.transport,
            settings.MEE_ENTRY_POINT_ADDRESS,
            settings.ETHEREUM_4337_ENTRYPOINT_V7,
            settings.MEE_SIMULATION_SENDER,
            settings.MEE_HANDLE_OPS_DEPOSIT,
        )
        self.mee_service = MeeService(MeeConfig.from_settings())

    def get_signed_mee_user_operation(self, **kwargs):
        mee_user_operations = [
            MeeUserOperationFactory(**kwargs),
            MeeUserOperationFactory(),
        ]
        batch = self.mee_service.build_batch(mee_user_operations)
        return self.mee_service.compose_signed_user_operations(
            mee_user_operations, self.mee_service.sign_batch(batch)
        )[0]

    def test_simulate_handle_op_selector(self):
        self.assertEqual(SIMULATE_HANDLE_OP_SELECTOR, HexBytes("0x97b2dcb9"))

    def test_encode_simulate_handle_op(self):
        packed_user_operation = MeeUserOperationFactory().packed_user_op
        data = encode_simulate_handle_op(packed_user_operation)
        self.assertEqual(data[:4], SIMULATE_HANDLE_OP_SELECTOR)
        self.assertEqual(
            data[4:],
            abi_encode(
                [PACKED_USER_OPERATION_ABI_TYPE, "address", "bytes"],
                [packed_user_operation.as_tuple(), NULL_ADDRESS, b""],
            ),
        )

    def test_build_state_override(self):
        state_override = self.simulation_service.build_state_override()
        self.assertEqual(
            state_override,
            {
                settings.ETHEREUM_4337_ENTRYPOINT_V7: {
                    "code": entry_point_v7_deployed_bytecode.to_0x_hex()
                }
            },
        )
        self.assertTrue(
            state_override[settings.ETHEREUM_4337_ENTRYPOINT_V7]["code"].startswith(
                "0x6080604052"
            )
        )

    def test_build_simulation_transaction(self):
        signed_mee_user_operation = self.get_signed_mee_user_operation()
        transaction = self.simulation_service.build_simulation_transaction(
            signed_mee_user_operation.packed_user_op
        )
        self.assertEqual(
            transaction,
            {
                "from": settings.MEE_SIMULATION_SENDER,
                "to": settings.MEE_ENTRY_POINT_ADDRESS,
                "value": hex(30_000_000_000_000_000),
                "data": HexBytes(
                    encode_simulate_handle_op(signed_mee_user_operation.packed_user_op)
                ).to_0x_hex(),
            },
        )

        eip7702_auth = Eip7702AuthorizationFactory()
        transaction = self.simulation_service.build_simulation_transaction(
            signed_mee_user_operation.packed_user_op, eip7702_auth
        )
        self.assertEqual(
            transaction["authorizationList"], [eip7702_auth.to_rpc_dict()]
        )

    def test_validate_user_operation(self):
        signed_mee_user_operation = self.get_signed_mee_user_operation()

        self.transport.eth_call.return_value = execution_result_data(0)
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.VALID)
        self.assertFalse(outcome.execution_result.signature_failed)
        self.assertIsNone(outcome.reason)
        transaction, block_identifier, state_override = (
            self.transport.eth_call.call_args.args
        )
        self.assertEqual(
            transaction,
            self.simulation_service.build_simulation_transaction(
                signed_mee_user_operation.packed_user_op
            ),
        )
        self.assertNotIn("authorizationList", transaction)
        self.assertEqual(block_identifier, "latest")
        self.assertEqual(
            state_override, self.simulation_service.build_state_override()
        )

        self.transport.eth_call.return_value = execution_result_data(1)
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.INVALID)
        self.assertTrue(outcome.execution_result.signature_failed)

    def test_validate_user_operation_eip7702(self):
        eip7702_auth = Eip7702AuthorizationFactory()
        signed_mee_user_operation = self.get_signed_mee_user_operation(
            eip7702_auth=eip7702_auth
        )
        self.transport.eth_call.return_value = execution_result_data(0)
        self.simulation_service.validate_user_operation(signed_mee_user_operation)
        transaction = self.transport.eth_call.call_args.args[0]
        self.assertEqual(
            transaction["authorizationList"], [eip7702_auth.to_rpc_dict()]
        )

    def test_validate_user_operation_reverted(self):
        signed_mee_user_operation = self.get_signed_mee_user_operation()
        self.transport.eth_call.side_effect = EthCallReverted(
            FailedOp.selector()
            + abi_encode(["uint256", "string"], [0, "AA23 reverted"])
        )
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.SIMULATION_FAILED)
        self.assertIsNone(outcome.execution_result)
        self.assertIsInstance(outcome.error, SimulationRevert)
        self.assertEqual(outcome.error.error, FailedOp(0, "AA23 reverted"))
        self.assertEqual(outcome.reason, "FailedOp: AA23 reverted")

        with self.assertRaises(SimulationRevert):
            self.simulation_service.simulate_handle_op(
                signed_mee_user_operation.packed_user_op
            )

        self.transport.eth_call.side_effect = EthCallReverted(b"\xde\xad\xbe\xef")
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.SIMULATION_FAILED)
        self.assertEqual(
            outcome.error.error, UnrecognizedRevert(b"\xde\xad\xbe\xef")
        )
        self.assertEqual(outcome.error.revert_data, b"\xde\xad\xbe\xef")

    def test_validate_user_operation_reverted_invalid_reason(self):
        signed_mee_user_operation = self.get_signed_mee_user_operation()
        # `FailedOp` reason is not valid UTF-8
        revert_data = FailedOp.selector() + abi_encode(
            ["uint256", "bytes"], [0, b"\xff\xfe"]
        )
        self.transport.eth_call.side_effect = EthCallReverted(revert_data)
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.SIMULATION_FAILED)
        self.assertIsInstance(outcome.error, SimulationRevert)
        self.assertEqual(outcome.error.error, UnrecognizedRevert(revert_data))
        self.assertEqual(outcome.error.revert_data, revert_data)

    def test_validate_user_operation_call_error(self):
        signed_mee_user_operation = self.get_signed_mee_user_operation()
        self.transport.eth_call.side_effect = SimulationCallError(
            "connection refused"
        )
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.SIMULATION_FAILED)
        self.assertEqual(outcome.reason, "connection refused")

        # Garbage return data
        self.transport.eth_call.side_effect = None
        self.transport.eth_call.return_value = b"\x01"
        outcome = self.simulation_service.validate_user_operation(
            signed_mee_user_operation
        )
        self.assertEqual(outcome.status, ValidationStatus.SIMULATION_FAILED)
        self.assertIsInstance(outcome.error, SimulationCallError)

    @mock.patch(
        "mee_userop_service.user_operations.services.simulation_service.EthereumClient"
    )
    def test_get_simulation_service(self, ethereum_client_mock: MagicMock):
        get_simulation_service.cache_clear()
        try:
            simulation_service = get_simulation_service()
        finally:
            get_simulation_service.cache_clear()
        ethereum_client_mock.assert_called_once_with(
            settings.ETHEREUM_NODE_URL,
            provider_timeout=settings.ETHEREUM_NODE_TIMEOUT,
            retry_count=settings.ETHEREUM_NODE_RETRY_COUNT,
        )
        self.assertIsInstance(simulation_service.transport, Web3EthCallTransport)
        self.assertEqual(
            simulation_service.entry_point_address,
            settings.ETHEREUM_4337_ENTRYPOINT_V7,
        )
        self.assertEqual(
            simulation_service.handle_ops_deposit, 30_000_000_000_000_000
        )

    @mock.patch(
        "mee_userop_service.user_operations.services.simulation_service.EthereumClient"
    )
    def test_get_simulation_service_improperly_configured(
        self, ethereum_client_mock: MagicMock
    ):
        for ethereum_node_url in (None, ""):
            with self.subTest(ethereum_node_url=ethereum_node_url):
                get_simulation_service.cache_clear()
                try:
                    with override_settings(ETHEREUM_NODE_URL=ethereum_node_url):
                        with self.assertRaises(ImproperlyConfigured):
                            get_simulation_service()
                finally:
                    get_simulation_service.cache_clear()
        ethereum_client_mock.assert_not_called()
