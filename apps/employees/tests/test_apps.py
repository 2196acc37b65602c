from django.apps import apps
from django.conf import settings


def test_employees_app_has_no_orm_models():
    config = apps.get_app_config("employees")
    assert config.name == "apps.employees"
    assert list(config.get_models()) == []
    assert settings.DATABASES == {}
    assert "default_auto_field" not in type(config).__dict__
