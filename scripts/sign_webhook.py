import json
import os
import sys

# Add current directory to path for imports
sys.path.append(os.getcwd())

from app.application.services.signature import SIGNATURE_PREFIX, compute_signature


def sign_payload(payload: dict, secret: str) -> tuple[str, bytes]:
    body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return f"{SIGNATURE_PREFIX}{compute_signature(body, secret)}", body


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: python scripts/sign_webhook.py <payload_json> <secret>")
        sys.exit(1)

    header, body = sign_payload(json.loads(sys.argv[1]), sys.argv[2])
    print(f"x-helio-signature: {header}")
    print(body.decode("utf-8"))
