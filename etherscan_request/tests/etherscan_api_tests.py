import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from etherscan_request.constants.etherscan import API_KEY_ENV, BASE_URL
from etherscan_request.etherscan_api import EtherscanAPI
from etherscan_request.request import account_balance, block_get_countdown, stats_eth_price
from etherscan_request.tests.test_constants import API_KEY


class TestEtherscanAPI(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        self.session.get.return_value.status_code = 200
        self.etherscan_api = EtherscanAPI(etherscan_api_key=API_KEY, base_url="http://x", session=self.session)

    def test_prepare_fills_url_and_apikey(self):
        request = self.etherscan_api.prepare(stats_eth_price())
        self.assertEqual(request.render(), "http://x?module=stats&action=ethprice&apikey=K")

    def test_prepare_keeps_request_values(self):
        request = stats_eth_price().with_url("http://y").with_apikey("other")
        self.assertEqual(self.etherscan_api.prepare(request), request)

    def test_send(self):
        response = self.etherscan_api.send(account_balance(0xAB))
        self.session.get.assert_called_once_with("http://x?module=account&action=balance&address=0xAB&apikey=K")
        response.raise_for_status.assert_called_once_with()
        self.assertIs(response, self.session.get.return_value)

    def test_send_surfaces_http_errors(self):
        self.session.get.return_value.raise_for_status.side_effect = requests.HTTPError("502 Server Error")
        with self.assertRaises(requests.HTTPError):
            self.etherscan_api.send(stats_eth_price())
        self.assertEqual(self.session.get.call_count, 1)

    def test_send_many_keeps_order(self):
        responses = {}

        def fake_get(url):
            response = MagicMock()
            response.status_code = 200
            responses[url] = response
            return response

        self.session.get.side_effect = fake_get
        results = self.etherscan_api.send_many([block_get_countdown(n) for n in range(5)])
        expected_urls = [f"http://x?module=block&action=getblockcountdown&blockno={n}&apikey=K" for n in range(5)]
        self.assertEqual(results, [responses[url] for url in expected_urls])

    @patch.dict(os.environ, {API_KEY_ENV: "from-env"})
    def test_api_key_from_environment(self):
        etherscan_api = EtherscanAPI(session=self.session)
        self.assertEqual(etherscan_api.etherscan_api_key, "from-env")
        self.assertEqual(etherscan_api.base_url, BASE_URL)

    @patch.dict(os.environ, {}, clear=True)
    def test_no_api_key(self):
        etherscan_api = EtherscanAPI(base_url="http://x", session=self.session)
        self.assertEqual(etherscan_api.prepare(stats_eth_price()).render(), "http://x?module=stats&action=ethprice")


if __name__ == '__main__':
    unittest.main()
