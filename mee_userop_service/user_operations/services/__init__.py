# flake8: noqa F401
from .mee_service import MeeBatch, MeeConfig, MeeService, get_mee_service
from .simulation_service import (
    EthCallReverted,
    EthCallTransport,
    ExecutionResult,
    ValidationOutcome,
    ValidationSimulationService,
    ValidationStatus,
    Web3EthCallTransport,
    get_simulation_service,
)
