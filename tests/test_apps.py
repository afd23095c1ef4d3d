from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings


class TestAppConfig(SimpleTestCase):
    def setUp(self):
        self.app_config = apps.get_app_config("django_multidomain")

    def test_valid_configuration(self):
        self.app_config.ready()

    @override_settings(MULTIDOMAIN_CONFIG={})
    def test_missing_home_url(self):
        with self.assertRaisesMessage(ImproperlyConfigured, "must define 'HOME_URL'"):
            self.app_config.ready()

    @override_settings(MULTIDOMAIN_CONFIG={"HOME_URL": "example.com"})
    def test_home_url_without_host(self):
        with self.assertRaisesMessage(ImproperlyConfigured, "must be an absolute URL"):
            self.app_config.ready()
