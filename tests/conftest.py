import pytest

from prime_webhook import Payload, SignatureVerifier

HMAC_KEY = "prime_hmac_key_f226959b-50a3-4cd2-9a2f-64b44cdb1258"
API_KEY = "prime_api_key_2bc2e105-8432-4a81-be8a-dbfb0209eba4"

# HMAC of "SUCCEED+2217677609041.00" under HMAC_KEY
SHA256_SIGNATURE = "X+o3GN/avoky0h1nEGDdqDuPBhmViuDDF4k3YNgyEto="
SHA512_SIGNATURE = (
    "41IsVJkRM1ziULfDMpkv/+WuVuhy+eOFlclI8l7kpCA95MQFcd7eesrT2g4C8vvD"
    "gfHQpKzxwPNDrcmWgsUWsw=="
)


@pytest.fixture
def body():
    return {
        "callbackUrl": "https://api-mock.cortech.cloud/api/m/3dfce244-b7ea-48d4-9ff9-cbe8b06351cd",
        "amount": "1.00",
        "primeClientPhone": "+221767760904",
        "externalRefId": "externalRefId2",
        "statusPayment": "SUCCEED",
        "datePayment": "2025-01-16T15:40:26.128312Z",
        "primeInternalPaymentRef": "649a4fdc-a865-4c00-b8d4-ce4ac501fb60",
    }


@pytest.fixture
def payload(body):
    return Payload.from_mapping(body)


@pytest.fixture
def verifier():
    return SignatureVerifier(hmac_key=HMAC_KEY, api_key=API_KEY)


@pytest.fixture
def headers():
    return {
        "x-api-key": API_KEY,
        "x-hmac-signature": SHA256_SIGNATURE,
    }
