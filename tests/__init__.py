"""
Test utilities package.

Shared fakes and mock payloads live in `tests.test_framework`.
Do not globally monkeypatch sys.modules here; prefer per-test fixtures.
"""
