"""
Merkle tree compatible with OpenZeppelin ``StandardMerkleTree`` and ``MerkleProof.sol``

    - Leaves are ``keccak256(keccak256(abi.encode(leaf_encoding, value)))``, so they cannot be confused
      with 64 bytes internal nodes (second preimage attacks)
    - Internal nodes hash their children sorted, so proofs don't need to carry left/right information
    - Tree is stored as an array, root at ``0`` and children of ``i`` at ``2i + 1`` and ``2i + 2``

https://github.com/OpenZeppelin/merkle-tree
"""

import logging
from typing import Any, Iterator, List, Sequence, Tuple

from eth_abi import encode as abi_encode
from eth_abi import exceptions as eth_abi_exceptions
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from safe_eth.eth.utils import fast_keccak

from .constants import MEE_MERKLE_LEAF_ENCODING
from .exceptions import EncodingError, InputValidationError, ProofMismatch
from .UserOperationV7 import MeeUserOperation

logger = logging.getLogger(__name__)


def _check_node(node: bytes) -> bytes:
    if len(node) != 32:
        raise EncodingError(
            f"Merkle tree node={HexBytes(node).to_0x_hex()} must be 32 bytes"
        )
    return bytes(node)


def hash_pair(a: bytes, b: bytes) -> bytes:
    """
    :return: keccak256 of both nodes concatenated, lower one first
    """
    return fast_keccak(b"".join(sorted((_check_node(a), _check_node(b)))))


def standard_leaf_hash(leaf_encoding: Sequence[str], value: Sequence[Any]) -> bytes:
    try:
        encoded = abi_encode(list(leaf_encoding), list(value))
    except eth_abi_exceptions.EncodingError as exc:
        raise EncodingError(f"Cannot encode merkle leaf {value}: {exc}") from exc
    return fast_keccak(fast_keccak(encoded))


def _is_leaf_node(tree: Sequence[bytes], index: int) -> bool:
    return 0 <= index < len(tree) and 2 * index + 1 >= len(tree)


def _sibling_index(index: int) -> int:
    return index + 1 if index % 2 else index - 1


def _parent_index(index: int) -> int:
    return (index - 1) // 2


def make_merkle_tree(leaves: Sequence[bytes]) -> List[bytes]:
    """
    :param leaves: Leaf hashes, already in the order they must be stored
    :return: Flat tree with ``2 * len(leaves) - 1`` nodes, root first
    """
    if not leaves:
        raise InputValidationError(
            {"leaves": ["Expected non-zero number of leaves"]},
            "Cannot build a merkle tree without leaves",
        )

    tree: List[bytes] = [b""] * (2 * len(leaves) - 1)
    for i, leaf in enumerate(leaves):
        tree[len(tree) - 1 - i] = _check_node(leaf)
    for i in range(len(tree) - 1 - len(leaves), -1, -1):
        tree[i] = hash_pair(tree[2 * i + 1], tree[2 * i + 2])
    return tree


def get_proof(tree: Sequence[bytes], index: int) -> List[bytes]:
    """
    :param tree:
    :param index: Tree index of the leaf (not the position of the value)
    :return: Sibling hashes from the leaf up to the root
    """
    if not _is_leaf_node(tree, index):
        raise IndexError(f"Index={index} is not a leaf of the tree")

    proof = []
    while index > 0:
        proof.append(tree[_sibling_index(index)])
        index = _parent_index(index)
    return proof


def process_proof(leaf: bytes, proof: Sequence[bytes]) -> bytes:
    node = _check_node(leaf)
    for sibling in proof:
        node = hash_pair(node, sibling)
    return node


def verify_proof(leaf: bytes, proof: Sequence[bytes], root: bytes) -> bool:
    """
    :return: ``True`` if ``proof`` proves ``leaf`` is part of the tree with ``root``, ``False`` otherwise
    """
    try:
        return process_proof(leaf, proof) == _check_node(root)
    except EncodingError:
        return False


class StandardMerkleTree:
    """
    Merkle tree over ABI encoded values
    """

    def __init__(
        self,
        tree: List[bytes],
        values: List[Tuple[Tuple[Any, ...], int]],
        leaf_encoding: Sequence[str],
    ):
        """
        :param tree: Flat tree as returned by :func:`make_merkle_tree`
        :param values: For every value in input order, the value and its index in the tree
        :param leaf_encoding: ABI types of every value
        """
        self.tree = tree
        self.values = values
        self.leaf_encoding = list(leaf_encoding)

    @classmethod
    def of(
        cls,
        values: Sequence[Sequence[Any]],
        leaf_encoding: Sequence[str],
        sort_leaves: bool = True,
    ) -> "StandardMerkleTree":
        """
        :param values:
        :param leaf_encoding:
        :param sort_leaves: Sort leaves by hash, so root and proofs don't depend on ``values`` order
        :return: Merkle tree
        """
        hashed_values = [
            (standard_leaf_hash(leaf_encoding, value), value_index)
            for value_index, value in enumerate(values)
        ]
        if sort_leaves:
            hashed_values.sort(key=lambda hashed_value: hashed_value[0])

        tree = make_merkle_tree([leaf_hash for leaf_hash, _ in hashed_values])

        tree_indexes = [0] * len(values)
        for leaf_index, (_, value_index) in enumerate(hashed_values):
            tree_indexes[value_index] = len(tree) - leaf_index - 1

        return cls(
            tree,
            [
                (tuple(value), tree_index)
                for value, tree_index in zip(values, tree_indexes)
            ],
            leaf_encoding,
        )

    @staticmethod
    def verify_value(
        root: bytes,
        leaf_encoding: Sequence[str],
        value: Sequence[Any],
        proof: Sequence[bytes],
    ) -> bool:
        return verify_proof(standard_leaf_hash(leaf_encoding, value), proof, root)

    @property
    def root(self) -> bytes:
        return self.tree[0]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Tuple[int, Tuple[Any, ...]]]:
        for value_index, (value, _) in enumerate(self.values):
            yield value_index, value

    def leaf_hash(self, value: Sequence[Any]) -> bytes:
        return standard_leaf_hash(self.leaf_encoding, value)

    def leaf_lookup(self, value: Sequence[Any]) -> int:
        """
        :return: Position of ``value`` in the values used to build the tree
        :raises ValueError: If value is not part of the tree
        """
        leaf_hash = self.leaf_hash(value)
        for value_index, (_, tree_index) in enumerate(self.values):
            if self.tree[tree_index] == leaf_hash:
                return value_index
        raise ValueError(f"Leaf is not in tree: {value}")

    def get_proof(self, index: int) -> List[bytes]:
        """
        :param index: Position of the value in the values used to build the tree
        :return: Proof for the value
        """
        _, tree_index = self.values[index]
        return get_proof(self.tree, tree_index)

    def verify(self, index: int, proof: Sequence[bytes]) -> bool:
        value, _ = self.values[index]
        return self.verify_value(self.root, self.leaf_encoding, value, proof)

    def validate(self) -> None:
        """
        Check every internal node and every proof

        :raises ProofMismatch: If tree is not consistent
        """
        for i in range(len(self.tree) - len(self.values)):
            if self.tree[i] != hash_pair(self.tree[2 * i + 1], self.tree[2 * i + 2]):
                raise ProofMismatch(f"Merkle tree node={i} does not match its children")

        for value_index, (value, tree_index) in enumerate(self.values):
            if self.tree[tree_index] != self.leaf_hash(value):
                raise ProofMismatch(
                    f"Merkle leaf for value-index={value_index} does not match its value"
                )
            if not self.verify(value_index, self.get_proof(value_index)):
                raise ProofMismatch(
                    f"Merkle proof for value-index={value_index} does not verify against "
                    f"root={HexBytes(self.root).to_0x_hex()}"
                )


def create_mee_merkle_tree(
    mee_user_operations: Sequence[MeeUserOperation], entry_point: ChecksumAddress
) -> StandardMerkleTree:
    """
    :param mee_user_operations: UserOperations of a MEE batch, any order
    :param entry_point: EntryPoint the UserOperation hashes are bound to
    :return: Merkle tree over ``(userOpHash, lowerBoundTimestamp, upperBoundTimestamp)`` leaves, tree
        value ``i`` is ``mee_user_operations[i]``
    """
    leaves = [
        mee_user_operation.get_merkle_leaf(entry_point)
        for mee_user_operation in mee_user_operations
    ]
    merkle_tree = StandardMerkleTree.of(
        leaves, MEE_MERKLE_LEAF_ENCODING, sort_leaves=True
    )
    logger.debug(
        "Built merkle tree with %d leaves and root=%s",
        len(merkle_tree),
        HexBytes(merkle_tree.root).to_0x_hex(),
    )
    return merkle_tree
