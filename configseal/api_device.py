"""Device fingerprint, key/IV derivation and raw cipher wrappers."""

from .main import configseal


def device_fingerprint(source=None) -> str:
    return configseal.device_fingerprint(source)


def describe_device(source=None) -> dict:
    return configseal.describe_device(source)


def derive_material(fingerprint: str, pad_char: str, length: int) -> bytes:
    return configseal.derive_material(fingerprint, pad_char, length)


def derive_key_iv(fingerprint: str, pad_char: str | None = None):
    return configseal.derive_key_iv(fingerprint, pad_char)


def encrypt_bytes(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    return configseal.encrypt_bytes(plaintext, key, iv)


def decrypt_bytes(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    return configseal.decrypt_bytes(ciphertext, key, iv)


FingerprintSource = configseal.FingerprintSource
IpconfigSource = configseal.IpconfigSource
PsutilSource = configseal.PsutilSource


__all__ = [
    "FingerprintSource",
    "IpconfigSource",
    "PsutilSource",
    "decrypt_bytes",
    "derive_key_iv",
    "derive_material",
    "describe_device",
    "device_fingerprint",
    "encrypt_bytes",
]
