import json

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import MeeUserOperationException
from ...services import get_mee_service
from ._quote_file import (
    add_quote_file_arguments,
    load_mee_signed_quote,
    select_user_operations,
)


class Command(BaseCommand):
    help = "Compose the signature of every UserOperation of a MEE signed quote"

    def add_arguments(self, parser):
        add_quote_file_arguments(parser)

    def handle(self, *args, **options):
        mee_signed_quote = load_mee_signed_quote(options["quote_file"])
        self.stdout.write(
            self.style.SUCCESS(
                f"Composing signatures for {len(mee_signed_quote.user_ops)} UserOperations"
            )
        )
        try:
            signed_mee_user_operations = get_mee_service().compose_signed_quote(
                mee_signed_quote
            )
        except MeeUserOperationException as exc:
            raise CommandError(str(exc)) from exc

        signed_mee_user_operations = select_user_operations(
            signed_mee_user_operations, options["index"]
        )
        self.stdout.write(
            json.dumps(
                [
                    signed_mee_user_operation.to_rpc_dict()
                    for signed_mee_user_operation in signed_mee_user_operations
                ],
                indent=2,
            )
        )
