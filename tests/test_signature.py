import pytest

from app.application.services.signature import compute_signature, verify_signature

from helpers import WEBHOOK_SECRET, sign

BODY = b'{"event":"payment.completed","data":{"id":"txn_001","amount":100}}'


def test_valid_signature():
    assert verify_signature(BODY, sign(BODY), WEBHOOK_SECRET) is True


def test_compute_signature_matches_hmac_hex():
    assert compute_signature(BODY, WEBHOOK_SECRET) == sign(BODY)


@pytest.mark.parametrize("position", [0, 17, 63])
def test_flipped_byte_fails(position):
    signature = sign(BODY)
    flipped = "0" if signature[position] != "0" else "1"
    tampered = signature[:position] + flipped + signature[position + 1:]
    assert verify_signature(BODY, tampered, WEBHOOK_SECRET) is False


def test_every_single_byte_flip_fails():
    signature = sign(BODY).encode("ascii")
    for position in range(len(signature)):
        tampered = bytearray(signature)
        tampered[position] ^= 0x01
        assert verify_signature(BODY, tampered.decode("latin-1"), WEBHOOK_SECRET) is False


def test_modified_body_fails():
    assert verify_signature(BODY + b" ", sign(BODY), WEBHOOK_SECRET) is False


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_fails(secret):
    assert verify_signature(BODY, sign(BODY), secret) is False


@pytest.mark.parametrize("signature", [None, ""])
def test_missing_signature_fails(signature):
    assert verify_signature(BODY, signature, WEBHOOK_SECRET) is False


def test_sha256_prefix_is_stripped():
    signature = sign(BODY)
    assert verify_signature(BODY, f"sha256={signature}", WEBHOOK_SECRET) is True
    assert verify_signature(BODY, f"sha256={signature[:-1]}0", WEBHOOK_SECRET) == verify_signature(
        BODY, f"{signature[:-1]}0", WEBHOOK_SECRET
    )


def test_wrong_secret_fails():
    assert verify_signature(BODY, sign(BODY, "other_secret"), WEBHOOK_SECRET) is False


@pytest.mark.parametrize("signature", ["not-hex", "abc", "é" * 64])
def test_malformed_signature_fails(signature):
    assert verify_signature(BODY, signature, WEBHOOK_SECRET) is False


def test_sign_webhook_script_output_verifies():
    from scripts.sign_webhook import sign_payload

    header, body = sign_payload({"event": "payment.completed", "data": {"id": "txn_1"}}, WEBHOOK_SECRET)

    assert header.startswith("sha256=")
    assert verify_signature(body, header, WEBHOOK_SECRET) is True
