"""
Tests for the hashing/signature helpers and the Block type.
"""

import hashlib
import json

import pytest

from block import Block
from crypto_utils import (
    address_for,
    decode_payload,
    encode_payload,
    generate_keypair,
    hash_block,
    sign_message,
    verify_address_signature,
)


# =============================================================================
# PAYLOAD CODEC + HASHING
# =============================================================================

class TestPayloadCodec:

    def test_encoded_payload_hides_raw_content(self):
        body = encode_payload({"owner": "1Addr", "star": {"story": "secret"}})
        assert "secret" not in body
        assert all(c in "0123456789abcdef" for c in body)

    def test_decode_restores_non_ascii(self):
        data = {"star": {"dec": "-26° 29'"}}
        assert decode_payload(encode_payload(data)) == data

    def test_encoding_is_key_order_independent(self):
        """Equal dicts encode identically regardless of insertion order."""
        assert encode_payload({"a": 1, "b": 2}) == encode_payload({"b": 2, "a": 1})


class TestHashBlock:

    def test_matches_documented_canonical_form(self):
        """Digest is SHA-256 over sorted, compact JSON of the four non-hash fields."""
        material = json.dumps(
            {"body": "ab", "height": 1, "previous_hash": None, "timestamp": 5},
            sort_keys=True, separators=(",", ":"),
        )
        expected = hashlib.sha256(material.encode("utf-8")).hexdigest()
        assert hash_block(1, 5, None, "ab") == expected

    def test_deterministic(self):
        assert hash_block(3, 10, "ff", "00") == hash_block(3, 10, "ff", "00")

    @pytest.mark.parametrize("args", [
        (4, 10, "ff", "00"),
        (3, 11, "ff", "00"),
        (3, 10, "fe", "00"),
        (3, 10, "ff", "01"),
        (3, 10, None, "00"),
    ])
    def test_any_field_change_changes_digest(self, args):
        assert hash_block(*args) != hash_block(3, 10, "ff", "00")


# =============================================================================
# SIGNATURES
# =============================================================================

class TestAddressSignatures:

    def test_valid_signature_verifies(self):
        sk, vk = generate_keypair()
        address = address_for(vk)
        assert verify_address_signature(address, "hello", sign_message(sk, "hello"))

    def test_signature_over_other_message_fails(self):
        sk, vk = generate_keypair()
        assert not verify_address_signature(address_for(vk), "hello", sign_message(sk, "hellO"))

    def test_signature_by_other_key_fails(self):
        sk, _ = generate_keypair()
        _, other_vk = generate_keypair()
        assert not verify_address_signature(address_for(other_vk), "hi", sign_message(sk, "hi"))

    @pytest.mark.parametrize("address,signature", [
        ("not-hex", "AAAA"),
        ("abcd", "AAAA"),
        (None, "AAAA"),
    ])
    def test_malformed_inputs_return_false(self, address, signature):
        assert verify_address_signature(address, "hi", signature) is False

    def test_garbage_signature_returns_false(self):
        _, vk = generate_keypair()
        assert verify_address_signature(address_for(vk), "hi", "@@not base64@@") is False


# =============================================================================
# BLOCK
# =============================================================================

def _stored_block() -> Block:
    block = Block.from_data({"owner": "1Addr", "star": {"story": "x"}})
    block.height = 1
    block.timestamp = 100
    block.previous_hash = "aa" * 32
    block.hash = block.recompute_hash()
    return block


class TestBlock:

    def test_decode_payload(self):
        block = Block.from_data({"owner": "1Addr", "star": {"story": "x"}})
        assert block.decode_payload() == {"owner": "1Addr", "star": {"story": "x"}}

    def test_owner(self):
        assert Block.from_data({"owner": "1Addr", "star": {}}).owner == "1Addr"
        assert Block.from_data({"data": "Genesis Block"}).owner is None

    def test_owner_of_garbled_body_is_none(self):
        assert Block(body="zz").owner is None

    @pytest.mark.parametrize("body", [b"7b7d", None, 42])
    def test_owner_of_non_str_body_is_none(self, body):
        """A body tampered into a non-string reads as unowned, not an error."""
        assert Block(body=body).owner is None

    def test_validate_untouched(self):
        assert _stored_block().validate()

    def test_recompute_hash_does_not_mutate(self):
        block = _stored_block()
        before = block.to_dict()
        block.recompute_hash()
        assert block.to_dict() == before

    @pytest.mark.parametrize("field,value", [
        ("height", 2),
        ("timestamp", 101),
        ("previous_hash", "bb" * 32),
        ("body", encode_payload({"owner": "1Thief", "star": {"story": "x"}})),
    ])
    def test_field_tampering_detected(self, field, value):
        block = _stored_block()
        setattr(block, field, value)
        assert not block.validate()

    def test_unhashable_tampering_is_invalid_not_error(self):
        """A field that can no longer be serialized fails validation without raising."""
        block = _stored_block()
        block.timestamp = object()
        assert block.validate() is False
