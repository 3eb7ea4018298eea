import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

from etherscan_request.log import logger

T = TypeVar("T")


def execute_concurrent_requests(
        etherscan_requests: Sequence,
        send: Callable[..., T],
        executor: Optional[ThreadPoolExecutor] = None
) -> List[T]:
    """Send a batch of requests concurrently.

    Args:
        etherscan_requests: The requests to send.
        send: Called once per request to send it.
        executor: The ThreadPoolExecutor to use.

    Returns:
        One result per request, in the order the requests were given.

    Raises:
        Exception: The first error raised by send, unchanged. Nothing is retried.
    """
    if executor is None:
        executor_created = True
        executor = ThreadPoolExecutor()
    else:
        executor_created = False
    start = time.time()
    logger.info(f'Sending {len(etherscan_requests)} requests.')
    try:
        futures = [executor.submit(send, request) for request in etherscan_requests]
        results = [future.result() for future in futures]
    finally:
        if executor_created:
            executor.shutdown(wait=True)
    end = time.time()
    logger.info(f'{len(results)} requests completed in {(end - start)} seconds.')
    return results
