# file: pwinty/config.py
"""
Configuration for the Pwinty API client.

Endpoint constants are fixed by the vendor. Ambient settings (timeout,
logging) can be overridden through the environment or a .env file.
Credentials are always passed explicitly to the client.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# Vendor endpoints
SANDBOX_API_BASE_URL = "https://sandbox.pwinty.com/"
LIVE_API_BASE_URL = "https://api.pwinty.com/"
API_VERSION = "v3.0"

# Auth headers
MERCHANT_ID_HEADER = "X-Pwinty-MerchantId"
API_KEY_HEADER = "X-Pwinty-REST-API-Key"
JSON_CONTENT_TYPE = "application/json"

# Transport settings
REQUEST_TIMEOUT = float(os.getenv("PWINTY_TIMEOUT", "30"))

# Logging settings
LOG_LEVEL = os.getenv("PWINTY_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("PWINTY_LOG_FILE") or None

# Validate config
if REQUEST_TIMEOUT <= 0:
    raise ValueError(
        "PWINTY_TIMEOUT must be a positive number of seconds. "
        "Check your .env file."
    )

if __name__ == "__main__":
    print(f"Sandbox URL: {SANDBOX_API_BASE_URL}")
    print(f"Live URL: {LIVE_API_BASE_URL}")
    print(f"API version: {API_VERSION}")
    print(f"Timeout: {REQUEST_TIMEOUT}s")
