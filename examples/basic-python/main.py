"""
Basic Python example for Prime webhook verification

This is a minimal working example showing how to:
- Load HMAC_KEY / API_KEY from a .env file
- Verify a recorded callback request
- Inspect the verification result
"""

import json
import logging
import sys

from prime_webhook import ConfigurationError, SignatureVerifier

logging.basicConfig(level=logging.DEBUG)


# Headers and body of a recorded callback
headers = {
    "Host": "api-mock.cortech.cloud",
    "Content-Type": "application/json",
    "X-Api-Key": "prime_api_key_2bc2e105-8432-4a81-be8a-dbfb0209eba4",
    "X-Hmac-Signature": "X+o3GN/avoky0h1nEGDdqDuPBhmViuDDF4k3YNgyEto=",
}

body = """
{
    "callbackUrl": "https://api-mock.cortech.cloud/api/m/3dfce244-b7ea-48d4-9ff9-cbe8b06351cd",
    "amount": "1.00",
    "primeClientPhone": "+221767760904",
    "externalRefId": "externalRefId2",
    "statusPayment": "SUCCEED",
    "datePayment": "2025-01-16T15:40:26.128312Z",
    "primeInternalPaymentRef": "649a4fdc-a865-4c00-b8d4-ce4ac501fb60"
}
"""


def main():
    try:
        verifier = SignatureVerifier.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    print(f"Verifying with HMAC-{verifier.algorithm.value.upper()}")

    payload = json.loads(body)
    result = verifier.verify(headers, payload)

    print(f"Verification result: {'VALID' if result.valid else 'INVALID'}")
    if not result.valid:
        print(f"Error: {result.error}")
        try:
            print(f"Calculated signature: {verifier.calculate_signature(payload)}")
        except Exception as e:
            print(f"Could not calculate signature: {e}")

    return 0 if result.valid else 2


if __name__ == "__main__":
    sys.exit(main())
