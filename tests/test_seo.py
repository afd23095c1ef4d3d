from django.test import RequestFactory, SimpleTestCase

from django_multidomain import seo
from django_multidomain.context import DomainContext
from django_multidomain.domains import DomainTable


def make_context(domains, current_domain="original.com", protocol="http", add_canonical=False):
    table = DomainTable("original.com")
    table.reset()
    for host, options in domains.items():
        table.add(host, **options)
    return DomainContext(
        "original.com",
        table,
        current_domain=current_domain,
        add_canonical=add_canonical,
        home_url="http://original.com",
        protocol=protocol,
    )


class TestLocalizedPath(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_trailing_slash_is_added(self):
        self.assertEqual(seo.get_localized_path(self.factory.get("/about")), "/about/")
        self.assertEqual(seo.get_localized_path(self.factory.get("/")), "/")

    def test_query_string_is_kept(self):
        self.assertEqual(seo.get_localized_path(self.factory.get("/search/?q=x&p=2")), "/search/?q=x&p=2")

    def test_no_request(self):
        self.assertEqual(seo.get_localized_path(None), "/")


class TestHrefLangTags(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/about/")

    def test_one_tag_per_language_and_x_default(self):
        context = make_context({"a.com": {"lang": "en"}, "original.com": {"lang": None}})
        self.assertEqual(
            seo.hreflang_tags(context, self.request),
            [
                '<link rel="alternate" href="http://original.com/about/" hreflang="x-default" />',
                '<link rel="alternate" href="http://a.com/about/" hreflang="en" />',
            ],
        )

    def test_original_domain_with_language_gets_both_tags(self):
        context = make_context({"original.com": {"lang": "en_US"}})
        self.assertEqual(
            seo.hreflang_tags(context, self.request),
            [
                '<link rel="alternate" href="http://original.com/about/" hreflang="en-US" />',
                '<link rel="alternate" href="http://original.com/about/" hreflang="x-default" />',
            ],
        )

    def test_domains_without_language_are_skipped(self):
        context = make_context({"a.com": {}, "b.com": {"lang": "de_DE"}})
        tags = seo.hreflang_tags(context, self.request)
        self.assertEqual(len(tags), 2)
        self.assertNotIn("a.com", "".join(tags))

    def test_protocol_resolution(self):
        context = make_context(
            {"a.com": {"lang": "en", "protocol": "http"}, "b.com": {"lang": "de", "protocol": "auto"}},
            protocol="https",
        )
        tags = seo.hreflang_tags(context, self.request)
        self.assertIn('href="http://a.com/about/" hreflang="en"', tags[1])
        self.assertIn('href="https://b.com/about/" hreflang="de"', tags[2])

    def test_values_are_escaped(self):
        context = make_context({"a.com": {"lang": 'en"><script>'}})
        request = RequestFactory().get("/about/", {"q": "<x>", "r": "1"})
        tags = seo.hreflang_tags(context, request)
        self.assertIn('href="http://a.com/about/?q=%3Cx%3E&amp;r=1"', tags[1])
        self.assertIn('hreflang="en&quot;&gt;&lt;script&gt;"', tags[1])


class TestCanonicalTag(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/about")

    def test_disabled_by_default(self):
        context = make_context({"a.com": {}}, current_domain="a.com")
        self.assertEqual(seo.canonical_tag(context, self.request), "")

    def test_points_to_original_domain(self):
        context = make_context({"a.com": {}}, current_domain="a.com", add_canonical=True)
        self.assertEqual(
            seo.canonical_tag(context, self.request),
            '<link rel="canonical" href="http://original.com/about/" />',
        )

    def test_original_domain_protocol(self):
        context = make_context(
            {"original.com": {"protocol": "https"}},
            add_canonical=True,
        )
        self.assertEqual(
            seo.canonical_tag(context, self.request),
            '<link rel="canonical" href="https://original.com/about/" />',
        )

    def test_query_string_is_left_out(self):
        context = make_context({"a.com": {"lang": "en"}}, current_domain="a.com", add_canonical=True)
        request = RequestFactory().get("/about", {"page": "2"})

        self.assertEqual(
            seo.canonical_tag(context, request),
            '<link rel="canonical" href="http://original.com/about/" />',
        )
        self.assertIn('href="http://a.com/about/?page=2"', seo.hreflang_tags(context, request)[0])
