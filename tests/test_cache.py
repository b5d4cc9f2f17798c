"""Tests for the chronicle cache and content fingerprints."""

from living_chronicle.cache import ChronicleCache, fingerprint
from living_chronicle.pipeline import compile_chronicle

RECORDS = [
    {"id": "e1", "year": 10, "type": "Religious", "category": "Spiritual", "significance": 1.0},
    {"id": "e2", "year": 14, "type": "Military", "category": "Conflict", "significance": 2.5},
]


def test_fingerprint_ignores_record_order():
    assert fingerprint("Valdoria", RECORDS) == fingerprint("Valdoria", list(reversed(RECORDS)))


def test_fingerprint_changes_with_content():
    edited = [RECORDS[0], {**RECORDS[1], "significance": 3.5}]
    assert fingerprint("Valdoria", RECORDS) != fingerprint("Valdoria", edited)


def test_fingerprint_changes_with_name():
    assert fingerprint("Valdoria", RECORDS) != fingerprint("Thalor", RECORDS)


def test_get_or_compile_reuses_entry():
    cache = ChronicleCache()
    calls = []

    def _compile():
        calls.append(1)
        return compile_chronicle("valdoria", "Valdoria", RECORDS)

    key = fingerprint("Valdoria", RECORDS)
    first = cache.get_or_compile("valdoria", key, _compile)
    second = cache.get_or_compile("valdoria", key, _compile)
    assert first is second
    assert len(calls) == 1


def test_new_fingerprint_replaces_entry():
    cache = ChronicleCache()
    chronicle = compile_chronicle("valdoria", "Valdoria", RECORDS)
    cache.put("valdoria", "old", chronicle)
    assert cache.get("valdoria", "new") is None
    cache.put("valdoria", "new", chronicle)
    assert cache.get("valdoria", "old") is None
    assert len(cache) == 1


def test_invalidate():
    cache = ChronicleCache()
    cache.put("valdoria", "k", compile_chronicle("valdoria", "Valdoria", []))
    cache.invalidate("valdoria")
    assert cache.get("valdoria", "k") is None
    cache.invalidate("never-cached")
