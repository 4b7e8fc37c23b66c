# flake8: noqa F401
from .mee_quote_mock import (
    mee_quote_chain_ids,
    mee_user_operation_mock,
    mee_user_operation_with_auth_mock,
    mee_user_operations_mock,
)
