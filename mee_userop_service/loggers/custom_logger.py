import json
import logging
import time
import traceback
from dataclasses import asdict, dataclass

from hexbytes import HexBytes

from ..user_operations.UserOperationV7 import MeeUserOperation


@dataclass
class UserOperationLog:
    chainId: int
    sender: str
    nonce: int
    userOpHash: str
    meeUserOpHash: str
    isCleanUpUserOp: bool = False


@dataclass
class ErrorInfo:
    function: str
    line: int
    exceptionInfo: str | None = None


@dataclass
class ContextMessageLog:
    userOperation: UserOperationLog | None = None
    errorInfo: ErrorInfo | None = None
    extraData: dict | None = None


@dataclass
class JsonLog:
    level: str
    timestamp: int
    context: str
    message: str
    lineno: int
    contextMessage: ContextMessageLog | None = None

    def _remove_null_values_from_log(self, json_log: dict):
        """
        Delete keys with the value ``None`` in a dictionary, recursively.
        """
        for key, value in list(json_log.items()):
            if value is None:
                del json_log[key]
            elif isinstance(value, dict):
                self._remove_null_values_from_log(value)
        return json_log

    def to_json(self):
        return json.dumps(self._remove_null_values_from_log(asdict(self)))


def get_milliseconds_now():
    return int(time.time() * 1000)


def user_operation_log(mee_user_operation: MeeUserOperation) -> UserOperationLog:
    """
    Generate UserOperationLog from provided MEE UserOperation
    """
    return UserOperationLog(
        chainId=mee_user_operation.chain_id,
        sender=mee_user_operation.user_op.sender,
        nonce=mee_user_operation.user_op.nonce,
        userOpHash=HexBytes(mee_user_operation.user_op_hash).to_0x_hex(),
        meeUserOpHash=HexBytes(mee_user_operation.mee_user_op_hash).to_0x_hex(),
        isCleanUpUserOp=mee_user_operation.is_clean_up_user_op,
    )


class MeeJsonFormatter(logging.Formatter):
    """
    Json formatter with following schema
    {
        level: str,
        timestamp: Datetime,
        context: str,
        message: str,
        contextMessage: <contextMessage>
    }

    ``user_operation`` (a ``MeeUserOperation``) and ``extra_data`` can be provided using ``extra``
    """

    def format(self, record) -> str:
        """
        Format logging record as json string.
        """

        error_info: ErrorInfo | None = None
        if record.levelno >= logging.ERROR:
            exception_info: str | None = None
            # Check if the error contains exception data
            if record.exc_info:
                exc_type, exc_value, exc_tb = record.exc_info
                exception_info = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

            error_info = ErrorInfo(
                function=record.funcName,
                line=record.lineno,
                exceptionInfo=exception_info,
            )

        mee_user_operation = getattr(record, "user_operation", None)
        context_message = ContextMessageLog(
            userOperation=(
                user_operation_log(mee_user_operation) if mee_user_operation else None
            ),
            errorInfo=error_info,
            extraData=getattr(record, "extra_data", None),
        )

        json_log = JsonLog(
            level=record.levelname,
            timestamp=get_milliseconds_now(),
            context=f"{record.module}.{record.funcName}",
            message=record.getMessage(),
            contextMessage=context_message,
            lineno=record.lineno,
        )

        return json_log.to_json()
