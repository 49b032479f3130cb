"""
clients/ - External Providers
=============================
HTTP clients for third-party APIs. Each client returns domain models from
models/ and raises its own error type on failure.
"""
