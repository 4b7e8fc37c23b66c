from django.test import SimpleTestCase

from eth_abi import encode as abi_encode
from eth_account import Account
from hexbytes import HexBytes

from ..exceptions import (
    KNOWN_ENTRY_POINT_ERRORS,
    ErrorMessage,
    FailedOp,
    InsufficientBalance,
    OwnableInvalidOwner,
    Panic,
    SimulationRevert,
    UnrecognizedRevert,
    decode_entry_point_error,
)


class TestEntryPointErrors(SimpleTestCase):
    def test_selectors(self):
        self.assertEqual(FailedOp.selector(), HexBytes("0x220266b6"))
        self.assertEqual(ErrorMessage.selector(), HexBytes("0x08c379a0"))
        self.assertEqual(Panic.selector(), HexBytes("0x4e487b71"))
        selectors = {error_class.selector() for error_class in KNOWN_ENTRY_POINT_ERRORS}
        self.assertEqual(len(selectors), len(KNOWN_ENTRY_POINT_ERRORS))

    def test_decode_failed_op(self):
        data = FailedOp.selector() + abi_encode(
            ["uint256", "string"], [0, "AA24 signature error"]
        )
        entry_point_error = decode_entry_point_error(data)
        self.assertEqual(entry_point_error, FailedOp(0, "AA24 signature error"))
        self.assertEqual(str(entry_point_error), "FailedOp: AA24 signature error")
        self.assertEqual(entry_point_error.name, "FailedOp")

        # Hex strings are accepted too
        self.assertEqual(
            decode_entry_point_error(HexBytes(data).to_0x_hex()), entry_point_error
        )

    def test_decode_every_known_error(self):
        address = Account.create().address
        values_by_abi_type = {
            "uint256": 3,
            "string": "reason",
            "bytes": b"\x01\x02",
            "address": address,
            "bool": True,
        }
        for error_class in KNOWN_ENTRY_POINT_ERRORS:
            with self.subTest(error_class=error_class.__name__):
                values = [
                    values_by_abi_type[abi_type] for abi_type in error_class.abi_types
                ]
                data = error_class.selector() + abi_encode(
                    list(error_class.abi_types), values
                )
                self.assertEqual(
                    decode_entry_point_error(data), error_class(*values)
                )

    def test_decode_address_is_checksummed(self):
        address = Account.create().address
        data = OwnableInvalidOwner.selector() + abi_encode(
            ["address"], [address.lower()]
        )
        self.assertEqual(decode_entry_point_error(data).owner, address)

    def test_decode_unrecognized(self):
        for data in (
            b"",
            b"\x01\x02",
            HexBytes("0xdeadbeef") + b"\x00" * 32,
            # Known selector with invalid arguments
            FailedOp.selector() + b"\x00" * 10,
            # Reason is not valid UTF-8
            FailedOp.selector() + abi_encode(["uint256", "bytes"], [0, b"\xff\xfe"]),
        ):
            with self.subTest(data=data):
                entry_point_error = decode_entry_point_error(data)
                self.assertEqual(entry_point_error, UnrecognizedRevert(bytes(data)))
                self.assertEqual(
                    str(entry_point_error),
                    f"UnrecognizedRevert: {HexBytes(data).to_0x_hex()}",
                )

    def test_simulation_revert(self):
        simulation_revert = SimulationRevert(InsufficientBalance())
        self.assertEqual(str(simulation_revert), "InsufficientBalance()")
        self.assertIsNone(simulation_revert.revert_data)

        simulation_revert = SimulationRevert(UnrecognizedRevert(b"\xde\xad"))
        self.assertEqual(simulation_revert.revert_data, b"\xde\xad")

        self.assertEqual(
            str(SimulationRevert(ErrorMessage("AA23 reverted"))),
            "Error: AA23 reverted",
        )
        self.assertEqual(str(SimulationRevert(Panic(0x11))), "Panic: 0x11")
