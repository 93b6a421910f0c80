import unittest

from ..site_classes import Domain, Site, Toehold, Nick, reverse, complement


class TestSiteClasses(unittest.TestCase):

    def test_domain_complement(self):
        """Complementing flips the polarity and nothing else"""
        a = Domain("a")
        self.assertEqual(Domain("a", True), a.complement())
        self.assertEqual(a, ~~a)
        self.assertEqual("a*", str(~a))
        self.assertEqual("a", str(a))

    def test_site_complement_keeps_binding(self):
        site = Site(Domain("a"), "x")
        self.assertEqual(Site(Domain("a", True), "x"), site.complement())

    def test_site_str(self):
        self.assertEqual("a", str(Site(Domain("a"))))
        self.assertEqual("a*!x", str(Site(Domain("a", True), "x")))
        self.assertEqual("b!_3", str(Site(Domain("b")).with_binding("_3")))

    def test_equality_and_hash(self):
        self.assertEqual(Site(Domain("a"), "1"), Site(Domain("a"), "1"))
        self.assertNotEqual(Site(Domain("a"), "1"), Site(Domain("a"), "2"))
        self.assertNotEqual(Domain("a"), Toehold("a"))
        self.assertEqual(1, len(set([Site(Domain("a")), Site(Domain("a"))])))

    def test_repr(self):
        self.assertEqual("Domain(name='a', complemented=False)", repr(Domain("a")))

    def test_reverse_and_complement(self):
        """reverse only reorders, complement only flips domains"""
        s = (Site(Domain("a"), "1"), Site(Domain("b")))
        self.assertEqual((Site(Domain("b")), Site(Domain("a"), "1")), reverse(s))
        self.assertEqual((Site(Domain("a", True), "1"), Site(Domain("b", True))), complement(s))

    def test_toehold_and_nick_str(self):
        self.assertEqual("toehold t", str(Toehold("t")))
        nick = Nick([Domain("a"), Domain("b")], [Domain("c", True)])
        self.assertEqual("nick(a b, c*)", str(nick))


def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestSiteClasses)
