"""Tests for content identity."""

from __future__ import annotations

from sheetmark.ingest.identity import NO_CRYPTO_DIGEST, resolve_identity


def test_identity_is_reproducible() -> None:
    first = resolve_identity(b"a,b,c", "leads.csv")
    second = resolve_identity(b"a,b,c", "leads.csv")
    assert first == second
    assert first.key == f"leads.csv_5_{first.digest}"
    assert len(first.digest) == 64
    assert not first.degraded


def test_identity_changes_with_content_name_or_size() -> None:
    base = resolve_identity(b"a,b,c", "leads.csv")
    assert resolve_identity(b"a,b,d", "leads.csv").key != base.key
    assert resolve_identity(b"a,b,c", "other.csv").key != base.key
    assert resolve_identity(b"a,b,c", "leads.csv", size=99).key != base.key


def test_unavailable_digest_degrades_to_name_and_size() -> None:
    first = resolve_identity(b"abc", "leads.csv", algorithm="not-a-digest")
    second = resolve_identity(b"xyz", "leads.csv", algorithm="not-a-digest")
    assert first.degraded
    assert first.digest == NO_CRYPTO_DIGEST
    assert first.key == "leads.csv_3_no-crypto"
    assert first.key == second.key


def test_variable_length_digest_degrades_to_name_and_size() -> None:
    identity = resolve_identity(b"abc", "leads.csv", algorithm="shake_128")
    assert identity.degraded
    assert identity.key == "leads.csv_3_no-crypto"
