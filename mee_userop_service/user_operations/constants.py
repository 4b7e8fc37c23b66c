"""
MEE UserOperation Constants

EntryPoint v0.7.0
-----------------
    PackedUserOperation (
                        address sender,
                        uint256 nonce,
                        bytes initCode,
                        bytes callData,
                        bytes32 accountGasLimits,
                        uint256 preVerificationGas,
                        bytes32 gasFees,
                        bytes paymasterAndData,
                        bytes signature
                        )

MEE EntryPoint
--------------
    simulateHandleOp(PackedUserOperation op, address target, bytes callData)
        returns ExecutionResult (
                                uint256 preOpGas,
                                uint256 paid,
                                uint256 accountValidationData,
                                uint256 paymasterValidationData,
                                bool targetSuccess,
                                bytes targetResult
                                )
"""

from eth_utils import function_signature_to_4byte_selector

UINT48_MAX = 2**48 - 1
UINT128_MAX = 2**128 - 1
UINT256_MAX = 2**256 - 1

PACKED_USER_OPERATION_ABI_TYPE = (
    "(address,uint256,bytes,bytes,bytes32,uint256,bytes32,bytes,bytes)"
)
PACKED_USER_OPERATION_HASH_ABI_TYPES = [
    "address",
    "uint256",
    "bytes32",
    "bytes32",
    "bytes32",
    "uint256",
    "bytes32",
    "bytes32",
]
ENTRY_POINT_USER_OPERATION_HASH_ABI_TYPES = ["bytes32", "address", "uint256"]

# Leaves of the MEE merkle tree: (userOpHash, lowerBoundTimestamp, upperBoundTimestamp)
MEE_MERKLE_LEAF_ENCODING = ["bytes32", "uint256", "uint256"]

# Signature placed on every UserOperation of a MEE batch:
# bytes4(type) || abi.encode(bytes32 root, uint48 lowerBound, uint48 upperBound, bytes32[] proof, bytes signature)
MEE_SIGNATURE_TYPE_OFFSET = 4
MEE_SIGNATURE_ABI_TYPES = ["bytes32", "uint48", "uint48", "bytes32[]", "bytes"]
MEE_SIGNATURE_TYPE_SIMPLE = bytes.fromhex("177eee00")

SIMULATE_HANDLE_OP_SIGNATURE = (
    f"simulateHandleOp({PACKED_USER_OPERATION_ABI_TYPE},address,bytes)"
)
SIMULATE_HANDLE_OP_SELECTOR = function_signature_to_4byte_selector(
    SIMULATE_HANDLE_OP_SIGNATURE
)
EXECUTION_RESULT_ABI_TYPE = "(uint256,uint256,uint256,uint256,bool,bytes)"

# `accountValidationData` signature failure is read from the last 4 bytes of the 32 bytes word
VALIDATION_DATA_SIG_FAILED_LENGTH = 4
