from django.test import SimpleTestCase

from django_multidomain.redirects import NO_ACTION, RedirectTo, decide


class TestDecide(SimpleTestCase):
    def test_outside_base_redirects(self):
        self.assertEqual(decide("/base/path", "/other/path"), RedirectTo("base/path"))

    def test_inside_base(self):
        self.assertIs(decide("/base/path", "/base/path/x"), NO_ACTION)
        self.assertIs(decide("/base/path", "/base/path"), NO_ACTION)

    def test_leading_slash_is_optional(self):
        self.assertIs(decide("base", "/base/x"), NO_ACTION)
        self.assertIs(decide("/base", "base/x"), NO_ACTION)
        self.assertEqual(decide("base", "/"), RedirectTo("base"))

    def test_only_one_leading_slash_is_stripped(self):
        self.assertEqual(decide("/base", "//base/x"), RedirectTo("base"))

    def test_no_base(self):
        for base in (None, "", "/"):
            with self.subTest(base=base):
                self.assertIs(decide(base, "/other"), NO_ACTION)

    def test_framework_routes_are_never_redirected(self):
        for path in ("/wp-login.php", "/wp-admin/", "/WP-ADMIN/options.php", "/wp-json", "/wp-cron.php?doing=1"):
            with self.subTest(path=path):
                self.assertIs(decide("/base/path", path), NO_ACTION)

    def test_lookalike_routes_are_redirected(self):
        for path in ("/wp-content2x", "/my-wp-admin/", "/wp-1/"):
            with self.subTest(path=path):
                self.assertEqual(decide("/base", path), RedirectTo("base"))

    def test_custom_exclude_pattern(self):
        self.assertIs(decide("/base", "/admin/login/", r"^admin/"), NO_ACTION)
        self.assertEqual(decide("/base", "/wp-login.php", r"^admin/"), RedirectTo("base"))
