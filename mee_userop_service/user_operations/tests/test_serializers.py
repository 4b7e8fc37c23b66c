import copy

from django.test import SimpleTestCase

from hexbytes import HexBytes
from safe_eth.eth.utils import fast_to_checksum_address

from ..exceptions import InputValidationError
from ..serializers import (
    IntegerLikeKind,
    MeeUserOperationSerializer,
    get_integer_like_kind,
    parse_integer_like,
    parse_mee_signed_quote,
    parse_mee_user_operation,
)
from ..UserOperationV7 import Eip7702Authorization
from .mocks import (
    mee_user_operation_mock,
    mee_user_operation_with_auth_mock,
    mee_user_operations_mock,
)


class TestIntegerLike(SimpleTestCase):
    def test_get_integer_like_kind(self):
        self.assertEqual(get_integer_like_kind(5), IntegerLikeKind.NATIVE)
        self.assertEqual(get_integer_like_kind("1000"), IntegerLikeKind.DECIMAL)
        self.assertEqual(get_integer_like_kind("0x3e8"), IntegerLikeKind.HEXADECIMAL)
        for value in (1.5, 1.0, True, None, "", "0x", "-5", "1e3", " 1", "0xzz", [1]):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    get_integer_like_kind(value)

    def test_parse_integer_like(self):
        self.assertEqual(parse_integer_like(1_000), 1_000)
        self.assertEqual(parse_integer_like("1000"), 1_000)
        self.assertEqual(parse_integer_like("0x3e8"), 1_000)
        self.assertEqual(parse_integer_like("0x3E8"), 1_000)
        self.assertEqual(parse_integer_like("007"), 7)


class TestMeeUserOperationSerializer(SimpleTestCase):
    def test_parse_mee_user_operation(self):
        mee_user_operation = parse_mee_user_operation(mee_user_operation_mock)
        user_operation = mee_user_operation.user_op
        self.assertEqual(
            user_operation.sender,
            fast_to_checksum_address("0x1f9090aae28b8a3dceadf281b0f12828e676c326"),
        )
        self.assertEqual(
            user_operation.nonce,
            int(mee_user_operation_mock["userOp"]["nonce"], 16),
        )
        self.assertEqual(user_operation.init_code, b"")
        self.assertEqual(user_operation.call_gas_limit, 100_000)
        self.assertEqual(user_operation.verification_gas_limit, 250_000)
        self.assertEqual(user_operation.pre_verification_gas, 55_000)
        self.assertEqual(user_operation.max_fee_per_gas, 1_000_000_000)
        self.assertEqual(user_operation.max_priority_fee_per_gas, 1_000_000_000)
        self.assertEqual(user_operation.signature, b"")
        self.assertEqual(
            mee_user_operation.user_op_hash,
            HexBytes(mee_user_operation_mock["userOpHash"]),
        )
        self.assertEqual(mee_user_operation.lower_bound_timestamp, 1735689600)
        self.assertEqual(mee_user_operation.upper_bound_timestamp, 1735693200)
        self.assertEqual(mee_user_operation.max_gas_limit, 355_000)
        self.assertEqual(mee_user_operation.chain_id, 8453)
        self.assertIsNone(mee_user_operation.eip7702_auth)
        self.assertFalse(mee_user_operation.is_clean_up_user_op)

    def test_parse_mee_user_operation_with_eip7702_auth(self):
        mee_user_operation = parse_mee_user_operation(
            mee_user_operation_with_auth_mock
        )
        self.assertEqual(mee_user_operation.chain_id, 10)
        self.assertEqual(mee_user_operation.upper_bound_timestamp, 0x6774C710)
        self.assertEqual(mee_user_operation.user_op.pre_verification_gas, 0xD6D8)
        # `signature` is optional
        self.assertEqual(mee_user_operation.user_op.signature, b"")
        self.assertTrue(mee_user_operation.is_clean_up_user_op)

        eip7702_auth = mee_user_operation.eip7702_auth
        self.assertIsInstance(eip7702_auth, Eip7702Authorization)
        self.assertEqual(
            eip7702_auth.address,
            fast_to_checksum_address("0x000000004f43c49e93c970e84001853a70923b03"),
        )
        self.assertEqual(eip7702_auth.chain_id, 10)
        self.assertEqual(eip7702_auth.nonce, 0)
        self.assertEqual(eip7702_auth.y_parity, 1)
        self.assertEqual(
            eip7702_auth.r,
            int(mee_user_operation_with_auth_mock["eip7702Auth"]["r"], 16),
        )

        data = copy.deepcopy(mee_user_operation_with_auth_mock)
        data["eip7702Auth"] = None
        self.assertIsNone(parse_mee_user_operation(data).eip7702_auth)

    def test_parse_mee_user_operation_invalid(self):
        invalid_values = [
            # Missing `0x` prefix
            (
                ("userOp", "sender"),
                "1f9090aae28b8a3dceadf281b0f12828e676c326",
            ),
            (("userOp", "sender"), "0x1234"),
            (("userOp", "nonce"), "-5"),
            (("userOp", "nonce"), -5),
            (("userOp", "nonce"), 1.5),
            (("userOp", "callGasLimit"), "0x" + "ff" * 33),
            # Odd number of hex digits
            (("userOp", "callData"), "0x123"),
            (("userOp", "callData"), "1234"),
            (("userOpHash",), "0x1234"),
            (("lowerBoundTimestamp",), 2**48),
            (("chainId",), "eight"),
        ]
        for path, value in invalid_values:
            with self.subTest(path=path, value=value):
                data = copy.deepcopy(mee_user_operation_mock)
                target = data
                for key in path[:-1]:
                    target = target[key]
                target[path[-1]] = value

                with self.assertRaises(InputValidationError) as context:
                    parse_mee_user_operation(data)

                errors = context.exception.errors
                snake_case_path = [
                    {
                        "userOp": "user_op",
                        "sender": "sender",
                        "nonce": "nonce",
                        "callGasLimit": "call_gas_limit",
                        "callData": "call_data",
                        "userOpHash": "user_op_hash",
                        "lowerBoundTimestamp": "lower_bound_timestamp",
                        "chainId": "chain_id",
                    }[key]
                    for key in path
                ]
                for key in snake_case_path:
                    self.assertIn(key, errors)
                    errors = errors[key]

    def test_parse_mee_user_operation_missing_fields(self):
        data = copy.deepcopy(mee_user_operation_mock)
        del data["userOp"]["callData"]
        del data["chainId"]
        with self.assertRaises(InputValidationError) as context:
            parse_mee_user_operation(data)
        self.assertIn("call_data", context.exception.errors["user_op"])
        self.assertIn("chain_id", context.exception.errors)

    def test_time_bounds(self):
        data = copy.deepcopy(mee_user_operation_mock)
        data["lowerBoundTimestamp"] = data["upperBoundTimestamp"]
        self.assertEqual(
            parse_mee_user_operation(data).lower_bound_timestamp,
            data["upperBoundTimestamp"],
        )

        data["lowerBoundTimestamp"] = data["upperBoundTimestamp"] + 1
        with self.assertRaises(InputValidationError) as context:
            parse_mee_user_operation(data)
        self.assertIn("upper_bound_timestamp", context.exception.errors)

    def test_is_clean_up_user_op(self):
        data = copy.deepcopy(mee_user_operation_mock)
        for value in (True, False):
            with self.subTest(value=value):
                data["isCleanUpUserOp"] = value
                self.assertIs(
                    parse_mee_user_operation(data).is_clean_up_user_op, value
                )

        del data["isCleanUpUserOp"]
        self.assertIs(parse_mee_user_operation(data).is_clean_up_user_op, False)

        # Not coerced to a boolean
        for value in ("yes", "true", "1", 1, 0, None):
            with self.subTest(value=value):
                data["isCleanUpUserOp"] = value
                with self.assertRaises(InputValidationError) as context:
                    parse_mee_user_operation(data)
                self.assertIn("is_clean_up_user_op", context.exception.errors)

    def test_serializer_errors(self):
        serializer = MeeUserOperationSerializer(data={})
        self.assertFalse(serializer.is_valid())
        for field_name in (
            "user_op",
            "user_op_hash",
            "mee_user_op_hash",
            "lower_bound_timestamp",
            "upper_bound_timestamp",
            "max_gas_limit",
            "max_fee_per_gas",
            "chain_id",
        ):
            self.assertIn(field_name, serializer.errors)
        self.assertNotIn("eip7702_auth", serializer.errors)
        self.assertNotIn("is_clean_up_user_op", serializer.errors)


class TestMeeSignedQuoteSerializer(SimpleTestCase):
    def test_parse_mee_signed_quote(self):
        data = {
            "hash": "0x" + "11" * 32,
            "signature": "0x177eee00" + "ab" * 65,
            "userOps": mee_user_operations_mock,
        }
        mee_signed_quote = parse_mee_signed_quote(data)
        self.assertEqual(mee_signed_quote.hash, b"\x11" * 32)
        self.assertEqual(
            mee_signed_quote.signature, bytes.fromhex("177eee00" + "ab" * 65)
        )
        self.assertEqual(len(mee_signed_quote.user_ops), 2)
        self.assertEqual(
            [
                mee_user_operation.chain_id
                for mee_user_operation in mee_signed_quote.user_ops
            ],
            [8453, 10],
        )

    def test_parse_mee_signed_quote_invalid(self):
        data = {
            "hash": "0x" + "11" * 32,
            "signature": "0x177e",
            "userOps": [],
        }
        with self.assertRaises(InputValidationError) as context:
            parse_mee_signed_quote(data)
        self.assertIn("signature", context.exception.errors)
        self.assertIn("user_ops", context.exception.errors)

        # Errors of UserOperations are indexed
        invalid_user_operation = copy.deepcopy(mee_user_operation_mock)
        invalid_user_operation["chainId"] = "-1"
        data = {
            "hash": "0x" + "11" * 32,
            "signature": "0x177eee00" + "ab" * 65,
            "userOps": [mee_user_operation_mock, invalid_user_operation],
        }
        with self.assertRaises(InputValidationError) as context:
            parse_mee_signed_quote(data)
        user_ops_errors = context.exception.errors["user_ops"]
        self.assertEqual(user_ops_errors[0], {})
        self.assertIn("chain_id", user_ops_errors[1])
