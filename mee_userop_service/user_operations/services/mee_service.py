import dataclasses
import logging
from functools import cache
from typing import List, Optional, Sequence

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from safe_eth.eth.utils import fast_to_checksum_address

from ..exceptions import InputValidationError, ProofMismatch
from ..merkle import StandardMerkleTree, create_mee_merkle_tree, verify_proof
from ..signatures import build_mee_signature, sign_mee_root, split_mee_signature
from ..UserOperationV7 import (
    MeeSignedQuote,
    MeeUserOperation,
    SignedMeeUserOperation,
)

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MeeConfig:
    """
    Configuration of a MEE signing session. Missing values are detected when it's built
    """

    ethereum_node_url: str
    entry_point_address: ChecksumAddress
    mee_entry_point_address: ChecksumAddress
    simulation_sender: ChecksumAddress
    handle_ops_deposit: int
    private_key: Optional[str] = None  # Only required to sign roots locally

    def __post_init__(self):
        for field_name in (
            "ethereum_node_url",
            "entry_point_address",
            "mee_entry_point_address",
            "simulation_sender",
        ):
            if not getattr(self, field_name):
                raise ImproperlyConfigured(f"MEE `{field_name}` is not configured")
        if self.handle_ops_deposit is None or self.handle_ops_deposit < 0:
            raise ImproperlyConfigured(
                f"MEE `handle_ops_deposit`={self.handle_ops_deposit} is not valid"
            )
        if self.private_key is not None and not self.private_key.strip():
            raise ImproperlyConfigured("MEE `private_key` cannot be empty")

    @classmethod
    def from_settings(cls) -> "MeeConfig":
        return cls(
            ethereum_node_url=settings.ETHEREUM_NODE_URL,
            entry_point_address=settings.ETHEREUM_4337_ENTRYPOINT_V7,
            mee_entry_point_address=settings.MEE_ENTRY_POINT_ADDRESS,
            simulation_sender=settings.MEE_SIMULATION_SENDER,
            handle_ops_deposit=settings.MEE_HANDLE_OPS_DEPOSIT,
            private_key=settings.MEE_PRIVATE_KEY or None,
        )


class MeeBatch:
    """
    Merkle commitment over every UserOperation of a signing session
    """

    def __init__(
        self,
        mee_user_operations: Sequence[MeeUserOperation],
        entry_point: ChecksumAddress,
    ):
        """
        :param mee_user_operations:
        :param entry_point: EntryPoint UserOperation hashes are bound to
        :raises InputValidationError: If there are no UserOperations
        :raises ProofMismatch: If any proof does not verify against the root
        """
        if not mee_user_operations:
            raise InputValidationError(
                {"user_ops": ["At least one user operation is required"]},
                "Cannot build a MEE batch without user operations",
            )
        self.mee_user_operations = tuple(mee_user_operations)
        self.entry_point = entry_point
        self.merkle_tree: StandardMerkleTree = create_mee_merkle_tree(
            self.mee_user_operations, entry_point
        )
        self.merkle_tree.validate()

    def __len__(self) -> int:
        return len(self.mee_user_operations)

    @property
    def root(self) -> bytes:
        return self.merkle_tree.root

    def get_leaf_hash(self, index: int) -> bytes:
        return self.merkle_tree.leaf_hash(
            self.mee_user_operations[index].get_merkle_leaf(self.entry_point)
        )

    def get_proof(self, index: int) -> List[bytes]:
        """
        :param index: Position of the UserOperation in the batch
        :return: Merkle proof for the UserOperation
        :raises ProofMismatch: If proof does not verify against the root
        """
        proof = self.merkle_tree.get_proof(index)
        if not verify_proof(self.get_leaf_hash(index), proof, self.root):
            raise ProofMismatch(
                f"Proof for user-operation-index={index} does not verify against "
                f"root={HexBytes(self.root).to_0x_hex()}"
            )
        return proof


@cache
def get_mee_service() -> "MeeService":
    return MeeService(MeeConfig.from_settings())


class MeeService:
    """
    Builds the merkle commitment of a MEE batch and the signature of every UserOperation on it
    """

    def __init__(self, config: MeeConfig):
        self.config = config
        self.entry_point = fast_to_checksum_address(config.entry_point_address)

    def build_batch(self, mee_user_operations: Sequence[MeeUserOperation]) -> MeeBatch:
        batch = MeeBatch(mee_user_operations, self.entry_point)
        logger.info(
            "Built MEE batch with %d user-operations and root=%s",
            len(batch),
            HexBytes(batch.root).to_0x_hex(),
        )
        return batch

    def sign_batch(self, batch: MeeBatch) -> bytes:
        """
        :param batch:
        :return: Signature of the batch root using the configured private key, type included
        """
        if not self.config.private_key:
            raise ImproperlyConfigured("MEE `private_key` is required to sign batches")
        return sign_mee_root(self.config.private_key, batch.root)

    def compose_signed_user_operations(
        self,
        mee_user_operations: Sequence[MeeUserOperation],
        signature: bytes,
        expected_root: Optional[bytes] = None,
    ) -> List[SignedMeeUserOperation]:
        """
        :param mee_user_operations: Every UserOperation of the batch
        :param signature: Signature of the batch root, ``bytes4(type) || signature data``
        :param expected_root: Root the signature was created for, if known (e.g. MEE node quote hash)
        :return: UserOperations with their signatures, same order as ``mee_user_operations``
        :raises ProofMismatch: If ``expected_root`` does not match the computed root
        """
        batch = self.build_batch(mee_user_operations)
        if expected_root is not None and bytes(expected_root) != batch.root:
            raise ProofMismatch(
                f"Expected root={HexBytes(expected_root).to_0x_hex()} does not match "
                f"computed root={HexBytes(batch.root).to_0x_hex()}"
            )

        signature_type, signature_data = split_mee_signature(signature)
        signed_mee_user_operations = []
        for index, mee_user_operation in enumerate(batch.mee_user_operations):
            proof = batch.get_proof(index)
            user_operation_signature = build_mee_signature(
                signature_type,
                batch.root,
                mee_user_operation.lower_bound_timestamp,
                mee_user_operation.upper_bound_timestamp,
                proof,
                signature_data,
            )
            signed_mee_user_operations.append(
                SignedMeeUserOperation(
                    mee_user_operation,
                    mee_user_operation.packed_user_op.with_signature(
                        user_operation_signature
                    ),
                    tuple(proof),
                )
            )
        return signed_mee_user_operations

    def compose_signed_quote(
        self, mee_signed_quote: MeeSignedQuote
    ) -> List[SignedMeeUserOperation]:
        """
        :param mee_signed_quote: Quote signed by the MEE node, its ``hash`` must be the batch root
        :return: UserOperations of the quote with their signatures
        """
        return self.compose_signed_user_operations(
            mee_signed_quote.user_ops,
            mee_signed_quote.signature,
            expected_root=mee_signed_quote.hash,
        )
