from django.apps import AppConfig


class UserOperationsConfig(AppConfig):
    name = "mee_userop_service.user_operations"
    verbose_name = "MEE multichain UserOperations (ERC4337 v0.7) signing and simulation"
