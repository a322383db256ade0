# crypto_utils.py
import json
import time
import hashlib
from typing import Any, Optional

from nacl.encoding import Base64Encoder, HexEncoder
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey


def now_ts() -> int:
    """Unix timestamp in seconds."""
    return int(time.time())


def canonical_json(data: Any) -> str:
    """Stable JSON text: sorted keys, no whitespace, UTF-8 kept as-is."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def encode_payload(data: Any) -> str:
    """Hide business data at rest as hex of its canonical JSON."""
    return canonical_json(data).encode("utf-8").hex()


def decode_payload(body: str) -> Any:
    return json.loads(bytes.fromhex(body).decode("utf-8"))


def hash_block(height: int, timestamp: int, previous_hash: Optional[str], body: str) -> str:
    """
    Deterministic SHA-256 over the block's non-hash fields.
    Field set and encoding are fixed; changing either breaks every stored hash.
    """
    material = canonical_json({
        "body": body,
        "height": height,
        "previous_hash": previous_hash,
        "timestamp": timestamp,
    })
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


# -------------------------------------------------------------
# Address signatures (Ed25519). An address is the hex verify key.
# -------------------------------------------------------------

def generate_keypair():
    """Generate an Ed25519 keypair."""
    sk = SigningKey.generate()
    vk = sk.verify_key
    return sk, vk


def address_for(vk: VerifyKey) -> str:
    return vk.encode(encoder=HexEncoder).decode("ascii")


def sign_message(sk: SigningKey, message: str) -> str:
    """Sign a message string, returning the base64 detached signature."""
    signed = sk.sign(message.encode("utf-8"))
    return Base64Encoder.encode(signed.signature).decode("ascii")


def verify_address_signature(address: str, message: str, signature: str) -> bool:
    """Verify signature against the key named by address, returning True/False."""
    try:
        vk = VerifyKey(address.encode("ascii"), encoder=HexEncoder)
        raw_sig = Base64Encoder.decode(signature.encode("ascii"))
        vk.verify(message.encode("utf-8"), raw_sig)
        return True
    except (BadSignatureError, ValueError, TypeError, AttributeError):
        return False
