"""Tests for leaf/pair hashing and the Hashable contract."""

from __future__ import annotations

import hashlib

import pytest

from merkle_funnel.merkle.hashing import (
    FINGERPRINT_LENGTH,
    BytesLeaf,
    Hashable,
    RecordLeaf,
    TextLeaf,
    hash_bytes,
    hash_pair,
    is_fingerprint,
    leaf_hash,
)


class TestHashBytes:
    def test_matches_sha256(self):
        assert hash_bytes(b"hello") == hashlib.sha256(b"hello").hexdigest()

    def test_is_lowercase_hex(self):
        h = hash_bytes(b"anything")
        assert len(h) == FINGERPRINT_LENGTH == 64
        assert h == h.lower()
        int(h, 16)  # Should not raise — valid hex

    def test_empty_bytes(self):
        assert hash_bytes(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestHashPair:
    def test_concatenates_hex_text(self):
        a = hash_bytes(b"a")
        b = hash_bytes(b"b")
        assert hash_pair(a, b) == hashlib.sha256((a + b).encode()).hexdigest()

    def test_order_matters(self):
        a = hash_bytes(b"a")
        b = hash_bytes(b"b")
        assert hash_pair(a, b) != hash_pair(b, a)

    def test_self_pair(self):
        a = hash_bytes(b"a")
        assert hash_pair(a, a) == hashlib.sha256((a * 2).encode()).hexdigest()


class TestLeafTypes:
    def test_text_leaf(self):
        assert TextLeaf(value="A").to_hash() == hashlib.sha256(b"A").hexdigest()

    def test_text_leaf_utf8(self):
        assert TextLeaf(value="café").to_hash() == hashlib.sha256("café".encode("utf-8")).hexdigest()

    def test_bytes_leaf(self):
        assert BytesLeaf(value=b"\x00\xff").to_hash() == hashlib.sha256(b"\x00\xff").hexdigest()

    def test_record_leaf_key_order_irrelevant(self):
        r1 = RecordLeaf(record={"b": 2, "a": 1})
        r2 = RecordLeaf(record={"a": 1, "b": 2})
        assert r1.to_hash() == r2.to_hash()
        assert r1.canonical() == '{"a":1,"b":2}'

    def test_record_leaf_different_values(self):
        assert RecordLeaf(record={"a": 1}).to_hash() != RecordLeaf(record={"a": 2}).to_hash()

    def test_leaf_types_are_hashable(self):
        for leaf in (TextLeaf(value="x"), BytesLeaf(value=b"x"), RecordLeaf(record={})):
            assert isinstance(leaf, Hashable)

    def test_str_is_not_hashable_protocol(self):
        assert not isinstance("x", Hashable)


class TestLeafHash:
    def test_str(self):
        assert leaf_hash("A") == TextLeaf(value="A").to_hash()

    def test_bytes_and_bytearray(self):
        assert leaf_hash(b"A") == leaf_hash(bytearray(b"A")) == BytesLeaf(value=b"A").to_hash()

    def test_hashable_object(self):
        class Fixed:
            def to_hash(self) -> str:
                return "f" * 64

        assert leaf_hash(Fixed()) == "f" * 64

    @pytest.mark.parametrize("item", [1, 2.5, None, ["A"], {"a": 1}])
    def test_rejects_non_hashable(self, item):
        with pytest.raises(TypeError, match="cannot be a Merkle leaf"):
            leaf_hash(item)


class TestIsFingerprint:
    def test_valid(self):
        assert is_fingerprint(hash_bytes(b"x"))

    def test_uppercase_rejected(self):
        assert not is_fingerprint(hash_bytes(b"x").upper())

    def test_wrong_length(self):
        assert not is_fingerprint("ab" * 16)
