import django
from django.conf import settings


def pytest_configure():
    settings.configure(
        INSTALLED_APPS=['hrid'],
        DATABASES={},
    )
    django.setup()
