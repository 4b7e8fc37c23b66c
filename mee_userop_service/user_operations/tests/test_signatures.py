from django.test import SimpleTestCase

from eth_account import Account
from eth_account.messages import encode_defunct
from hexbytes import HexBytes
from safe_eth.eth.utils import fast_keccak_text

from ..constants import MEE_SIGNATURE_TYPE_SIMPLE, UINT48_MAX
from ..exceptions import EncodingError
from ..signatures import build_mee_signature, sign_mee_root, split_mee_signature


def word(value: int) -> bytes:
    return value.to_bytes(32, byteorder="big")


class TestSignatures(SimpleTestCase):
    def test_split_mee_signature(self):
        signature = HexBytes("0x177eee00" + "ab" * 65)
        signature_type, signature_data = split_mee_signature(signature)
        self.assertEqual(signature_type, bytes.fromhex("177eee00"))
        self.assertEqual(signature_data, b"\xab" * 65)

        self.assertEqual(
            split_mee_signature(b"\x01\x02\x03\x04"), (b"\x01\x02\x03\x04", b"")
        )
        with self.assertRaises(EncodingError):
            split_mee_signature(b"\x01\x02\x03")

    def test_build_mee_signature(self):
        root = b"\x11" * 32
        proof = [b"\x22" * 32, b"\x33" * 32]
        signature_data = b"\xab" * 65

        signature = build_mee_signature(
            MEE_SIGNATURE_TYPE_SIMPLE, root, 1_000, 2_000, proof, signature_data
        )
        expected = (
            bytes.fromhex("177eee00")
            # Head
            + root
            + word(1_000)
            + word(2_000)
            + word(0xA0)  # Offset of `proof`
            + word(0x100)  # Offset of `signature`, after `proof` length and 2 nodes
            # Tail
            + word(2)
            + proof[0]
            + proof[1]
            + word(65)
            + signature_data
            + b"\x00" * 31
        )
        self.assertEqual(HexBytes(signature), HexBytes(expected))
        self.assertEqual(len(signature), 4 + 32 * 10)

    def test_build_mee_signature_empty_proof(self):
        root = fast_keccak_text("root")
        signature = build_mee_signature(
            MEE_SIGNATURE_TYPE_SIMPLE, root, 0, UINT48_MAX, [], b""
        )
        self.assertEqual(
            signature,
            MEE_SIGNATURE_TYPE_SIMPLE
            + root
            + word(0)
            + word(UINT48_MAX)
            + word(0xA0)
            + word(0xC0)
            + word(0)
            + word(0),
        )

    def test_build_mee_signature_invalid(self):
        root = fast_keccak_text("root")
        for signature_type, root, lower, upper, proof in (
            (b"\x17\x7e\xee", root, 0, 1, []),
            (MEE_SIGNATURE_TYPE_SIMPLE, root[:31], 0, 1, []),
            (MEE_SIGNATURE_TYPE_SIMPLE, root, 0, 1, [root[:31]]),
            (MEE_SIGNATURE_TYPE_SIMPLE, root, -1, 1, []),
            (MEE_SIGNATURE_TYPE_SIMPLE, root, 0, UINT48_MAX + 1, []),
        ):
            with self.subTest(signature_type=signature_type, lower=lower, upper=upper):
                with self.assertRaises(EncodingError):
                    build_mee_signature(
                        signature_type, root, lower, upper, proof, b"\x01" * 65
                    )

    def test_sign_mee_root(self):
        account = Account.create()
        root = fast_keccak_text("root")
        signature = sign_mee_root(account.key, root)
        signature_type, signature_data = split_mee_signature(signature)
        self.assertEqual(signature_type, MEE_SIGNATURE_TYPE_SIMPLE)
        self.assertEqual(len(signature_data), 65)
        self.assertEqual(
            Account.recover_message(
                encode_defunct(primitive=root), signature=signature_data
            ),
            account.address,
        )
