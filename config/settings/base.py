"""
Base settings to build other settings files upon.
"""

from pathlib import Path

import environ

ROOT_DIR = Path(__file__).resolve(strict=True).parent.parent.parent
APPS_DIR = ROOT_DIR / "mee_userop_service"

env = environ.Env()

READ_DOT_ENV_FILE = env.bool("DJANGO_READ_DOT_ENV_FILE", default=False)
DOT_ENV_FILE = env("DJANGO_DOT_ENV_FILE", default=None)
if READ_DOT_ENV_FILE or DOT_ENV_FILE:
    DOT_ENV_FILE = DOT_ENV_FILE or ".env"
    # OS environment variables take precedence over variables from .env
    env.read_env(str(ROOT_DIR / DOT_ENV_FILE))

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = env.bool("DEBUG", False)
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env("DJANGO_SECRET_KEY", default=None)
TIME_ZONE = "UTC"
# https://docs.djangoproject.com/en/dev/ref/settings/#use-tz
USE_TZ = True

# DATABASES
# ------------------------------------------------------------------------------
# Nothing is persisted, user operations only live for one signing session
DATABASES = {}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# APPS
# ------------------------------------------------------------------------------
THIRD_PARTY_APPS = [
    "rest_framework",
]
LOCAL_APPS = [
    "mee_userop_service.user_operations.apps.UserOperationsConfig",
]
# https://docs.djangoproject.com/en/dev/ref/settings/#installed-apps
INSTALLED_APPS = THIRD_PARTY_APPS + LOCAL_APPS

# Django REST Framework
# ------------------------------------------------------------------------------
# Serializers are only used to parse coordinator payloads, keys are converted from camelCase
# with the same options used by `djangorestframework_camel_case` parsers
JSON_UNDERSCOREIZE = {
    "no_underscore_before_number": True,
}

# LOGGING
# ------------------------------------------------------------------------------
# See: https://docs.djangoproject.com/en/dev/ref/settings/#logging
LOG_FORMATTER = env.str("LOG_FORMATTER", default="verbose")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "short": {"format": "%(asctime)s %(message)s"},
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] [%(processName)s] %(message)s"
        },
        "json": {
            "()": "mee_userop_service.loggers.custom_logger.MeeJsonFormatter",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": LOG_FORMATTER,
        },
        "console_short": {
            "class": "logging.StreamHandler",
            "formatter": "short",
        },
    },
    "loggers": {
        "": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "web3.providers": {
            "level": "DEBUG" if DEBUG else "WARNING",
        },
        "urllib3": {
            "level": "DEBUG" if DEBUG else "WARNING",
        },
        "mee_userop_service": {
            "level": "DEBUG" if DEBUG else "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

# Ethereum RPC
# ------------------------------------------------------------------------------
ETHEREUM_NODE_URL = env("ETHEREUM_NODE_URL", default=None)
ETHEREUM_NODE_TIMEOUT = env.int("ETHEREUM_NODE_TIMEOUT", default=15)
ETHEREUM_NODE_RETRY_COUNT = env.int(
    "ETHEREUM_NODE_RETRY_COUNT", default=1
)  # Retries are handled by the RPC provider, not by the signing pipeline

# ERC4337
# ------------------------------------------------------------------------------
ETHEREUM_4337_ENTRYPOINT_V7 = env.str(
    "ETHEREUM_4337_ENTRYPOINT_V7",
    default="0x0000000071727De22E5E9d8BAf0edAc6f37da032",
)  # Canonical EntryPoint v0.7, its bytecode is injected as a state override when simulating

# MEE (Modular Execution Environment)
# ------------------------------------------------------------------------------
MEE_PRIVATE_KEY = env.str(
    "MEE_PRIVATE_KEY", default=None
)  # Only required to sign batch roots locally
MEE_ENTRY_POINT_ADDRESS = env.str(
    "MEE_ENTRY_POINT_ADDRESS",
    default="0xE854C84cD68fC434cB3B0042c29235D452cAD977",
)  # Entry point exposing `simulateHandleOp`
MEE_SIMULATION_SENDER = env.str(
    "MEE_SIMULATION_SENDER",
    default="0x845cD903BcB7f9aeF67925cAb73E2DC8c3101C40",
)  # `from` of the simulation `eth_call`
MEE_HANDLE_OPS_DEPOSIT = env.int(
    "MEE_HANDLE_OPS_DEPOSIT", default=30_000_000_000_000_000
)  # 0.03 ether, `value` sent to `simulateHandleOp` to cover simulation gas
MEE_SIMULATION_BLOCK = env.str("MEE_SIMULATION_BLOCK", default="latest")
