from django.test import SimpleTestCase

from django_multidomain.rewriters import RegexRewriter, ScanRewriter, get_rewriter

SAMPLE_CONTENT = (
    "<p><a href='http://example.com/x'>x</a> "
    '<img src="HTTPS://Example.Com/logo.png"> '
    "http://example.com.evil.org/ http://example.com:8080/ "
    "https://example.com "
    "xhttp://example.com/y "
    "ftp://example.com/ "
    "http://example.com-cdn.net/ "
    "http://example.com?q=1 http://example.com#top "
    "http:/example.com https:// http://example.co "
    "http://example.com</p>"
)


class RewriterContractMixin:
    rewriter_class = None

    def setUp(self):
        self.rewriter = self.rewriter_class()

    def rewrite(self, content, source="example.com", target="b.com", protocol="auto"):
        return self.rewriter.rewrite(content, source, target, protocol)

    def test_exact_host_matches(self):
        self.assertEqual(self.rewrite("http://example.com/x"), "http://b.com/x")

    def test_longer_host_does_not_match(self):
        for url in (
            "http://example.com.evil.org/x",
            "http://example.com-cdn.net/x",
            "http://example.comx/",
            "http://example.com:8080/x",
        ):
            with self.subTest(url=url):
                self.assertEqual(self.rewrite(url), url)

    def test_host_at_end_of_content(self):
        self.assertEqual(self.rewrite("see http://example.com"), "see http://b.com")

    def test_auto_keeps_scheme(self):
        self.assertEqual(self.rewrite("http://example.com/a"), "http://b.com/a")
        self.assertEqual(self.rewrite("https://example.com/a"), "https://b.com/a")
        self.assertEqual(self.rewrite("HTTPS://example.com/a"), "HTTPS://b.com/a")

    def test_forced_scheme(self):
        self.assertEqual(self.rewrite("http://example.com/a", protocol="https"), "https://b.com/a")
        self.assertEqual(self.rewrite("https://example.com/a", protocol="http"), "http://b.com/a")

    def test_case_insensitive_host(self):
        self.assertEqual(self.rewrite("http://EXAMPLE.com/"), "http://b.com/")

    def test_port_in_source(self):
        self.assertEqual(
            self.rewrite("http://localhost:8000/a http://localhost/b", source="localhost:8000"),
            "http://b.com/a http://localhost/b",
        )

    def test_regex_characters_in_source_are_literal(self):
        self.assertEqual(self.rewrite("http://exampleXcom/", source="example.com"), "http://exampleXcom/")

    def test_other_schemes_are_ignored(self):
        self.assertEqual(self.rewrite("ftp://example.com/"), "ftp://example.com/")

    def test_no_match_returns_same_content(self):
        self.assertEqual(self.rewrite("nothing to see"), "nothing to see")
        self.assertEqual(self.rewrite(""), "")

    def test_every_occurrence_is_replaced(self):
        self.assertEqual(
            self.rewrite("http://example.com/1 https://example.com/2", protocol="https"),
            "https://b.com/1 https://b.com/2",
        )

    def test_idempotent(self):
        once = self.rewrite(SAMPLE_CONTENT, protocol="https")
        self.assertEqual(self.rewrite(once, protocol="https"), once)

    def test_end_to_end_anchor(self):
        self.assertEqual(
            self.rewrite("<a href='http://a.com/x'>", source="a.com", protocol="https"),
            "<a href='https://b.com/x'>",
        )


class TestRegexRewriter(RewriterContractMixin, SimpleTestCase):
    rewriter_class = RegexRewriter


class TestScanRewriter(RewriterContractMixin, SimpleTestCase):
    rewriter_class = ScanRewriter


class TestStrategiesAgree(SimpleTestCase):
    def test_same_output(self):
        regex, scan = RegexRewriter(), ScanRewriter()
        for source in ("example.com", "Example.COM", "example.co", "localhost:8000"):
            for protocol in ("auto", "http", "https"):
                with self.subTest(source=source, protocol=protocol):
                    self.assertEqual(
                        regex.rewrite(SAMPLE_CONTENT, source, "b.com", protocol),
                        scan.rewrite(SAMPLE_CONTENT, source, "b.com", protocol),
                    )

    def test_get_rewriter(self):
        self.assertIsInstance(get_rewriter(), RegexRewriter)
        self.assertIsInstance(get_rewriter(low_memory=True), ScanRewriter)
