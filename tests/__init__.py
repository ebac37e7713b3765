"""Test suite for msgsocket.

This package contains the pytest unit tests (tests/unit), a CLI smoke client
for a running server (tests/smoke.py) and shared helpers in the helpers/
subpackage.
"""
