"""OpenAPI description of the bearer-token authentication scheme."""

from drf_spectacular.extensions import OpenApiAuthenticationExtension


class ProviderJWTScheme(OpenApiAuthenticationExtension):
    target_class = 'apps.accounts.authentication.ProviderJWTAuthentication'
    name = 'providerJWT'

    def get_security_definition(self, auto_schema):
        return {
            'type': 'http',
            'scheme': 'bearer',
            'bearerFormat': 'JWT',
            'description': 'Token issued by the identity provider; its `sub` claim identifies the user.',
        }
