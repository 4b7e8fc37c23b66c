from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env("DJANGO_SECRET_KEY")

# Ethereum RPC is mandatory outside of tests
ETHEREUM_NODE_URL = env.str("ETHEREUM_NODE_URL")

# LOGGING
# ------------------------------------------------------------------------------
LOGGING["handlers"]["console"]["formatter"] = env.str(  # noqa F405
    "LOG_FORMATTER", default="json"
)
