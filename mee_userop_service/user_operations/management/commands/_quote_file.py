import json
from typing import Any, List, Optional

from django.core.management.base import CommandError

from ...exceptions import InputValidationError
from ...serializers import parse_mee_signed_quote
from ...UserOperationV7 import MeeSignedQuote, SignedMeeUserOperation


def add_quote_file_arguments(parser):
    parser.add_argument(
        "--quote-file",
        required=True,
        help="JSON file with the signed quote returned by the MEE node",
    )
    parser.add_argument(
        "--index",
        type=int,
        help="Only process the UserOperation with this index in the quote",
    )


def load_mee_signed_quote(path: str) -> MeeSignedQuote:
    try:
        with open(path) as quote_file:
            data: Any = json.load(quote_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise CommandError(f"Cannot read quote file {path}: {exc}") from exc

    try:
        return parse_mee_signed_quote(data)
    except InputValidationError as exc:
        raise CommandError(f"Invalid quote: {json.dumps(exc.errors)}") from exc


def select_user_operations(
    signed_mee_user_operations: List[SignedMeeUserOperation], index: Optional[int]
) -> List[SignedMeeUserOperation]:
    if index is None:
        return signed_mee_user_operations
    if not 0 <= index < len(signed_mee_user_operations):
        raise CommandError(
            f"Index={index} out of range, quote has {len(signed_mee_user_operations)} user operations"
        )
    return [signed_mee_user_operations[index]]
