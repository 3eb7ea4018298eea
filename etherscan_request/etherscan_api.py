import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import requests

from etherscan_request.constants.etherscan import API_KEY_ENV, BASE_URL
from etherscan_request.log import logger
from etherscan_request.request import EtherscanRequest
from etherscan_request.utils.threading_utils import execute_concurrent_requests


class EtherscanAPI:
    """
    Sends EtherscanRequests with a shared base URL, API key and HTTP session.
    """
    def __init__(
            self, etherscan_api_key: Optional[str] = None,
            base_url: str = BASE_URL, session: Optional[requests.Session] = None
    ):
        """Initializes a new instance of the EtherscanAPI class.

        Args:
            etherscan_api_key: The API key for accessing the Etherscan API. Read from the
                ETHERSCAN_API_KEY environment variable if omitted.
            base_url: The API URL requests are sent to when they don't carry their own.
            session: The requests session to send through. A new one is created if omitted.
        """
        self.etherscan_api_key = etherscan_api_key or os.environ.get(API_KEY_ENV)
        self.base_url = base_url
        self.session = session or requests.Session()

    def prepare(self, request: EtherscanRequest) -> EtherscanRequest:
        """Fills in the base URL and API key where the request leaves them unset."""
        if request.url is None:
            request = request.with_url(self.base_url)
        if request.apikey is None and self.etherscan_api_key:
            request = request.with_apikey(self.etherscan_api_key)
        return request

    def send(self, request: EtherscanRequest) -> requests.Response:
        """Sends a request to the Etherscan API.

        Args:
            request: The request to send.

        Returns:
            The HTTP response. The body is not parsed.

        Raises:
            requests.HTTPError: If the API answers with an error status code.
            requests.RequestException: If the request can't be completed.
        """
        response = self.prepare(request).build(self.session)
        response.raise_for_status()
        logger.info(f"Retrieved {request.module.value}.{request.action.value}: status={response.status_code}")
        return response

    def send_many(
            self,
            etherscan_requests: List[EtherscanRequest],
            executor: Optional[ThreadPoolExecutor] = None
    ) -> List[requests.Response]:
        """Sends several requests concurrently.

        Args:
            etherscan_requests: The requests to send.
            executor: The ThreadPoolExecutor to use. A temporary one is created if omitted.

        Returns:
            The responses, in the same order as the requests.
        """
        return execute_concurrent_requests(etherscan_requests, self.send, executor)
