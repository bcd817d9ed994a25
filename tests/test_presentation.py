"""Tests for navigation decoration."""

import unittest

from wikigen.presentation import capfirst, with_navigation

from tests.support import AppTestCase


class TestCapfirst(unittest.TestCase):
    def test_capfirst(self):
        self.assertEqual(capfirst("science fiction"), "Science fiction")
        self.assertEqual(capfirst("iPhone"), "IPhone")
        self.assertEqual(capfirst(""), "")
        self.assertEqual(capfirst(None), "")


class TestWithNavigation(AppTestCase):
    def test_inserted_before_first_closing_body(self):
        with self.app.test_request_context():
            html = with_navigation("<html><body>x</body></html><!-- </body> -->", ["art"])
        self.assertEqual(html.count("Back to Home"), 1)
        self.assertLess(html.index("Back to Home"), html.index("</body>"))
        self.assertTrue(html.endswith("</html><!-- </body> -->"))
        self.assertIn(">Art</a>", html)

    def test_appended_when_no_body_tag(self):
        with self.app.test_request_context():
            html = with_navigation("<p>x</p>", [])
        self.assertTrue(html.startswith("<p>x</p>"))
        self.assertIn("Back to Home", html)


if __name__ == "__main__":
    unittest.main()
