from django.apps import AppConfig


class DrinksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.drinks'
    label = 'drinks'
