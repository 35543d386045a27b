import unittest

# Module to test
from device_checkout.services.sheets import utils

class TestSheetsUtils(unittest.TestCase):

    def test_build_values_url_read(self):
        """Read calls target the fixed A:E range."""
        self.assertEqual(
            utils.build_values_url("abc"),
            "https://sheets.googleapis.com/v4/spreadsheets/abc/values/Sheet1!A:E",
        )

    def test_build_values_url_append(self):
        self.assertEqual(
            utils.build_values_url("abc", append=True),
            "https://sheets.googleapis.com/v4/spreadsheets/abc/values/Sheet1!A:E:append",
        )

    def test_build_auth_prefers_bearer_token(self):
        headers, params = utils.build_auth(access_token="tok", api_key="key")
        self.assertEqual(headers['Authorization'], "Bearer tok")
        self.assertEqual(params, {})

    def test_build_auth_api_key(self):
        headers, params = utils.build_auth(api_key="key")
        self.assertEqual(params, {'key': 'key'})
        self.assertNotIn('Authorization', headers)

    def test_build_auth_empty_token_still_sends_bearer(self):
        """An empty token from the exchange is still sent, matching the token helper's '' result."""
        headers, _ = utils.build_auth(access_token="")
        self.assertEqual(headers['Authorization'], "Bearer ")

    def test_short_id(self):
        self.assertEqual(utils.short_id("1AbCdEfGhIj"), "1AbCdE...")
        self.assertEqual(utils.short_id(None), "(none)")

if __name__ == '__main__':
    unittest.main()
