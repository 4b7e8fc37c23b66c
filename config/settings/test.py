"""
With these settings, tests run faster.
"""

from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = False
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="q8lVkJGsIiHcTSQKaWIBsMVPOGnCnF6f7NDGup8KdDNmviSaZVhP0Nq3q3MolmFU",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# Ethereum
ETHEREUM_NODE_URL = "http://localhost:8545"

# Ganache #2 private key
MEE_PRIVATE_KEY = "6370fd033278c143179d81c5526140625662b8daa446c22ee2d73db3707e620c"

LOGGING["loggers"] = {  # noqa F405
    "mee_userop_service": {
        "level": "DEBUG",
    }
}
