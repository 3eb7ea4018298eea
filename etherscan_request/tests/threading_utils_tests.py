import unittest
from concurrent.futures import ThreadPoolExecutor

from etherscan_request.utils.threading_utils import execute_concurrent_requests


class TestExecuteConcurrentRequests(unittest.TestCase):
    def test_results_in_input_order(self):
        results = execute_concurrent_requests(list(range(20)), lambda n: n * n)
        self.assertEqual(results, [n * n for n in range(20)])

    def test_uses_given_executor(self):
        with ThreadPoolExecutor(max_workers=2) as executor:
            results = execute_concurrent_requests(["a", "b"], str.upper, executor)
            self.assertEqual(results, ["A", "B"])
            self.assertEqual(executor.submit(len, "abc").result(), 3)

    def test_first_error_propagates(self):
        calls = []

        def send(n):
            calls.append(n)
            if n == 2:
                raise ConnectionError("down")
            return n

        with self.assertRaises(ConnectionError):
            execute_concurrent_requests([1, 2, 3], send)
        self.assertEqual(calls.count(2), 1)

    def test_empty_batch(self):
        self.assertEqual(execute_concurrent_requests([], lambda n: n), [])


if __name__ == '__main__':
    unittest.main()
