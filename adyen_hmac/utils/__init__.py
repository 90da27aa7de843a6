"""Canonicalization and HMAC primitives."""
