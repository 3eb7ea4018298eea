import logging
import os
import time

LOGS_DIR = os.environ.get("ETHERSCAN_REQUEST_LOGS_DIR")

logger = logging.getLogger("etherscan_request")

prog_time = time.strftime('%Y-%m-%d %H:%M:%S', time.gmtime())
logger.setLevel(logging.INFO)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.WARNING)

formatter = logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s")
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

if LOGS_DIR:
    if not os.path.exists(LOGS_DIR):
        os.makedirs(LOGS_DIR)

    file_handler = logging.FileHandler(f"{LOGS_DIR}/etherscan_request - {prog_time}.log")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
