"""Config file convenience wrappers: store/load, path policy and existence probe."""

from .main import configseal


def encrypt_config(
    json_text: str,
    output_path: str | None = None,
    pad_char: str | None = None,
    *,
    username: str | None = None,
    fingerprint: str | None = None,
    dirs=None,
):
    return configseal.encrypt_config(
        json_text,
        output_path,
        pad_char,
        username=username,
        fingerprint=fingerprint,
        dirs=dirs,
    )


def decrypt_config(
    input_path: str | None = None,
    pad_char: str | None = None,
    username: str | None = None,
    *,
    fingerprint: str | None = None,
    dirs=None,
):
    return configseal.decrypt_config(
        input_path,
        pad_char,
        username,
        fingerprint=fingerprint,
        dirs=dirs,
    )


def config_file_exists(username: str, dirs=None) -> bool:
    return configseal.config_file_exists(username, dirs=dirs)


def resolve_output_path(explicit_path: str | None = None, username: str | None = None, dirs=None) -> str:
    return configseal.resolve_output_path(explicit_path, username=username, dirs=dirs)


def resolve_input_path(explicit_path: str | None = None, username: str | None = None, dirs=None) -> str:
    return configseal.resolve_input_path(explicit_path, username=username, dirs=dirs)


def save_encrypted(data: bytes, path: str) -> None:
    configseal.save_encrypted(data, path)


def load_encrypted(path: str) -> bytes:
    return configseal.load_encrypted(path)


def platform_dirs():
    return configseal.platform_dirs()


StandardDirs = configseal.StandardDirs


__all__ = [
    "StandardDirs",
    "config_file_exists",
    "decrypt_config",
    "encrypt_config",
    "load_encrypted",
    "platform_dirs",
    "resolve_input_path",
    "resolve_output_path",
    "save_encrypted",
]
