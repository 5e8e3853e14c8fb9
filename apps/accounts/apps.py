from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.accounts'
    label = 'accounts'
    verbose_name = 'Accounts'

    token_verifier = None

    def ready(self):
        from django.conf import settings
        from .authentication import build_token_verifier
        from . import schema  # noqa: F401  registers the OpenAPI auth scheme

        self.token_verifier = build_token_verifier(settings)
