from .main import configseal
from .core import (
    CipherConfig,
    CipherConstructionError,
    ConfigIOError,
    ConfigSealError,
    DecryptionResult,
    EncodingError,
    EncryptionResult,
    PaddingError,
)
from .api_config import (
    StandardDirs,
    config_file_exists,
    decrypt_config,
    encrypt_config,
    load_encrypted,
    platform_dirs,
    resolve_input_path,
    resolve_output_path,
    save_encrypted,
)
from .api_device import (
    FingerprintSource,
    IpconfigSource,
    PsutilSource,
    decrypt_bytes,
    derive_key_iv,
    derive_material,
    describe_device,
    device_fingerprint,
    encrypt_bytes,
)
from .version import __version__

__all__ = [
    "CipherConfig",
    "CipherConstructionError",
    "ConfigIOError",
    "ConfigSealError",
    "DecryptionResult",
    "EncodingError",
    "EncryptionResult",
    "FingerprintSource",
    "IpconfigSource",
    "PaddingError",
    "PsutilSource",
    "StandardDirs",
    "__version__",
    "config_file_exists",
    "configseal",
    "decrypt_bytes",
    "decrypt_config",
    "derive_key_iv",
    "derive_material",
    "describe_device",
    "device_fingerprint",
    "encrypt_bytes",
    "encrypt_config",
    "load_encrypted",
    "platform_dirs",
    "resolve_input_path",
    "resolve_output_path",
    "save_encrypted",
]
