"""GOST primitives: Streebog, Kuznyechik, a CTR-ACPKM style mode, HMAC/KDF, and helpers."""

__version__ = "0.1.0"