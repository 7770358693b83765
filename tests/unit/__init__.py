"""Unit tests.

Verify one module, class or function at a time. File I/O is limited to
pytest's `tmp_path`; environment variables are set through `monkeypatch`.
"""
