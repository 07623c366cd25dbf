# barbershops/apps.py
from django.apps import AppConfig


class BarbershopsConfig(AppConfig):
    name = 'barbershops'
    verbose_name = 'Barbearias'
