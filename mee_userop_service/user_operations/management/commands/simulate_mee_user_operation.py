import json

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import MeeUserOperationException
from ...services import ValidationStatus, get_mee_service, get_simulation_service
from ._quote_file import (
    add_quote_file_arguments,
    load_mee_signed_quote,
    select_user_operations,
)


class Command(BaseCommand):
    help = "Simulate the signed UserOperations of a MEE signed quote using `simulateHandleOp`"

    def add_arguments(self, parser):
        add_quote_file_arguments(parser)

    def handle(self, *args, **options):
        mee_signed_quote = load_mee_signed_quote(options["quote_file"])
        try:
            signed_mee_user_operations = get_mee_service().compose_signed_quote(
                mee_signed_quote
            )
        except MeeUserOperationException as exc:
            raise CommandError(str(exc)) from exc

        simulation_service = get_simulation_service()
        failed = 0
        for signed_mee_user_operation in select_user_operations(
            signed_mee_user_operations, options["index"]
        ):
            outcome = simulation_service.validate_user_operation(
                signed_mee_user_operation
            )
            if outcome.status == ValidationStatus.SIMULATION_FAILED:
                failed += 1
                self.stderr.write(
                    f"Simulation failed on chain-id={signed_mee_user_operation.chain_id}: "
                    f"{outcome.reason}"
                )
                continue

            self.stdout.write(
                json.dumps(
                    {
                        "chainId": signed_mee_user_operation.chain_id,
                        "sigFailed": outcome.execution_result.signature_failed,
                        "preOpGas": outcome.execution_result.pre_op_gas,
                        "paid": outcome.execution_result.paid,
                    }
                )
            )

        if failed:
            raise CommandError(f"{failed} UserOperations could not be simulated")
        self.stdout.write(self.style.SUCCESS("Simulation finished"))
