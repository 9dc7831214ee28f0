# CONFIGSEAL DEVICE-BOUND CONFIG ENGINE ->

import os as _os_module
import sys as _sys_module
from dataclasses import asdict as _asdict
from dataclasses import dataclass as _dataclass


class ConfigSealError(Exception):
    """Base class for every failure surfaced by the engine."""


class CipherConstructionError(ConfigSealError, ValueError):
    """Key or IV has the wrong length for AES-256-CBC."""


class PaddingError(ConfigSealError, ValueError):
    """Ciphertext framing or PKCS7 trailer is invalid."""


class ConfigIOError(ConfigSealError, OSError):
    """Directory creation, read or write failed; ``__cause__`` holds the OS error."""


class EncodingError(ConfigSealError, ValueError):
    """Decrypted bytes are not valid UTF-8 text."""


@_dataclass(frozen=True)
class CipherConfig:
    key: bytes
    iv: bytes


@_dataclass(frozen=True)
class EncryptionResult:
    success: bool
    message: str
    file_path: str

    def to_dict(self) -> dict:
        return _asdict(self)


@_dataclass(frozen=True)
class DecryptionResult:
    success: bool
    message: str
    json_data: str

    def to_dict(self) -> dict:
        return _asdict(self)


class configseal:
    import json
    import os
    import pathlib
    import socket
    import subprocess
    import sys
    import typing
    import psutil
    from cryptography.hazmat.primitives import padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

    @staticmethod
    def _env_flag(name: str) -> bool:
        raw = _os_module.getenv(name)
        if not raw:
            return False
        return raw.strip().lower() in ("1", "true", "yes", "on")

    ENGINE_VERSION = "1.2.0"
    DEFAULT_PAD_CHAR = "T"
    FALLBACK_MAC = "902E168B9AC1"
    UNKNOWN_HOSTNAME = "unknown"
    KEY_LEN = 32
    IV_LEN = 16
    BLOCK_SIZE = 16
    APP_VENDOR_DIR = "Btic"
    APP_NAME_DIR = "ConfigConnectorTickelia"
    DEFAULT_CONFIG_NAME = "config"
    USER_CONFIG_PREFIX = "config-"
    EXCLUDED_INTERFACE_TOKENS = ("virtual", "vpn", "vethernet", "loopback")
    WIRELESS_INTERFACE_TOKENS = ("wi-fi", "wlan")
    IPCONFIG_COMMAND = ("ipconfig", "/all")
    IPCONFIG_TIMEOUT = 10
    PAD_CHAR_ENV = "CONFIGSEAL_PAD_CHAR"
    DOWNLOAD_DIR_ENV = "CONFIGSEAL_DOWNLOAD_DIR"
    CONFIG_DIR_ENV = "CONFIGSEAL_CONFIG_DIR"
    DEBUG_ENV = "CONFIGSEAL_DEBUG"

    @staticmethod
    def _debug_enabled() -> bool:
        return configseal._env_flag(configseal.DEBUG_ENV)

    @staticmethod
    def _debug(msg: str) -> None:
        if not configseal._debug_enabled():
            return
        try:
            print(msg, file=configseal.sys.stderr)
        except Exception:
            pass

    @staticmethod
    def _platform_name() -> str:
        return configseal.sys.platform

    # ---------- Standard directories ---------------------------------------

    class StandardDirs:
        """Download/config directory pair; ``None`` marks a directory as unavailable."""

        def __init__(self, download_dir=None, config_dir=None):
            self.download_dir = None if download_dir is None else configseal.pathlib.Path(download_dir)
            self.config_dir = None if config_dir is None else configseal.pathlib.Path(config_dir)

        def app_config_dir(self) -> "configseal.typing.Optional[configseal.pathlib.Path]":
            if self.config_dir is None:
                return None
            return self.config_dir / configseal.APP_VENDOR_DIR / configseal.APP_NAME_DIR

        def __repr__(self) -> str:
            return f"StandardDirs(download_dir={self.download_dir!r}, config_dir={self.config_dir!r})"

    @staticmethod
    def _home_dir() -> "configseal.typing.Optional[configseal.pathlib.Path]":
        try:
            home = configseal.pathlib.Path.home()
        except (RuntimeError, KeyError, OSError):
            return None
        if not str(home) or str(home) == ".":
            return None
        return home

    @staticmethod
    def _env_dir(name: str) -> "configseal.typing.Tuple[bool, configseal.typing.Optional[configseal.pathlib.Path]]":
        raw = _os_module.environ.get(name)
        if raw is None:
            return False, None
        raw = raw.strip()
        if not raw:
            return True, None
        return True, configseal.pathlib.Path(raw).expanduser()

    @staticmethod
    def _xdg_config_home(home) -> "configseal.typing.Optional[configseal.pathlib.Path]":
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg and configseal.os.path.isabs(xdg):
            return configseal.pathlib.Path(xdg)
        if home is None:
            return None
        return home / ".config"

    @staticmethod
    def _read_user_dirs_entry(key: str, home) -> "configseal.typing.Optional[configseal.pathlib.Path]":
        config_home = configseal._xdg_config_home(home)
        if config_home is None:
            return None
        user_dirs = config_home / "user-dirs.dirs"
        try:
            if not user_dirs.is_file():
                return None
            lines = user_dirs.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError):
            return None
        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            name, _, value = line.partition("=")
            if name.strip() != key:
                continue
            value = value.strip().strip('"')
            if value.startswith("$HOME/"):
                if home is None:
                    return None
                return home / value[len("$HOME/"):]
            # "$HOME" alone means the directory is disabled
            if configseal.os.path.isabs(value):
                return configseal.pathlib.Path(value)
            return None
        return None

    @staticmethod
    def _default_download_dir() -> "configseal.typing.Optional[configseal.pathlib.Path]":
        home = configseal._home_dir()
        platform_name = configseal._platform_name()
        if platform_name in ("win32", "darwin"):
            return None if home is None else home / "Downloads"
        xdg = _os_module.getenv("XDG_DOWNLOAD_DIR")
        if xdg and configseal.os.path.isabs(xdg):
            return configseal.pathlib.Path(xdg)
        return configseal._read_user_dirs_entry("XDG_DOWNLOAD_DIR", home)

    @staticmethod
    def _default_config_dir() -> "configseal.typing.Optional[configseal.pathlib.Path]":
        home = configseal._home_dir()
        platform_name = configseal._platform_name()
        if platform_name == "win32":
            appdata = _os_module.getenv("APPDATA")
            if appdata:
                return configseal.pathlib.Path(appdata)
            return None if home is None else home / "AppData" / "Roaming"
        if platform_name == "darwin":
            return None if home is None else home / "Library" / "Application Support"
        return configseal._xdg_config_home(home)

    @staticmethod
    def platform_dirs() -> "configseal.StandardDirs":
        """Resolve download/config directories for this host, honouring env overrides."""
        overridden, download_dir = configseal._env_dir(configseal.DOWNLOAD_DIR_ENV)
        if not overridden:
            download_dir = configseal._default_download_dir()
        overridden, config_dir = configseal._env_dir(configseal.CONFIG_DIR_ENV)
        if not overridden:
            config_dir = configseal._default_config_dir()
        return configseal.StandardDirs(download_dir, config_dir)

    # ---------- Device fingerprint -----------------------------------------

    class FingerprintSource:
        """Reports ``(name, mac)`` pairs in the order the OS lists its adapters."""

        def interfaces(self) -> "configseal.typing.List[configseal.typing.Tuple[str, str]]":
            raise NotImplementedError

    class IpconfigSource(FingerprintSource):
        """Windows inventory parsed from ``ipconfig /all``."""

        def interfaces(self):
            try:
                completed = configseal.subprocess.run(
                    list(configseal.IPCONFIG_COMMAND),
                    capture_output=True,
                    timeout=configseal.IPCONFIG_TIMEOUT,
                    check=False
                )
            except (OSError, configseal.subprocess.SubprocessError) as exc:
                configseal._debug(f"ipconfig unavailable: {exc}")
                return []
            try:
                text = completed.stdout.decode("utf-8")
            except UnicodeDecodeError:
                configseal._debug("ipconfig output is not valid UTF-8")
                return []
            return self.parse(text)

        @staticmethod
        def parse(text: str) -> "configseal.typing.List[configseal.typing.Tuple[str, str]]":
            found = []
            current = None
            for raw_line in text.splitlines():
                line = raw_line.strip()
                if "adapter" in line and line.endswith(":"):
                    if current is not None and current[1]:
                        found.append((current[0], current[1]))
                    current = [line.rstrip(":"), ""]
                if "Physical Address" in line and current is not None:
                    parts = line.split(":")
                    if len(parts) > 1:
                        current[1] = configseal.normalize_mac(parts[1])
            if current is not None and current[1]:
                found.append((current[0], current[1]))
            return found

    class PsutilSource(FingerprintSource):
        """Link-layer addresses from ``psutil.net_if_addrs()``; all-zero MACs are skipped."""

        def interfaces(self):
            try:
                table = configseal.psutil.net_if_addrs()
            except (OSError, configseal.psutil.Error) as exc:
                configseal._debug(f"psutil inventory failed: {exc}")
                return []
            found = []
            for name, addrs in table.items():
                mac = ""
                for addr in addrs:
                    if addr.family == configseal.psutil.AF_LINK and addr.address:
                        mac = configseal.normalize_mac(addr.address)
                        break
                if mac and mac.strip("0"):
                    found.append((name, mac))
            return found

    @staticmethod
    def default_fingerprint_source() -> "configseal.FingerprintSource":
        if configseal._platform_name() == "win32":
            return configseal.IpconfigSource()
        return configseal.PsutilSource()

    @staticmethod
    def normalize_mac(raw: str) -> str:
        return raw.strip().replace("-", "").replace(":", "").upper()

    @staticmethod
    def collect_interfaces(source=None) -> "configseal.typing.List[configseal.typing.Tuple[str, str]]":
        source = source if source is not None else configseal.default_fingerprint_source()
        interfaces = list(source.interfaces())
        configseal._debug(f"Found {len(interfaces)} network interfaces:")
        for index, (name, mac) in enumerate(interfaces):
            configseal._debug(f"  [{index}] {name} -> {mac}")
        return interfaces

    @staticmethod
    def _is_preferred_interface(name: str) -> bool:
        lowered = name.lower()
        if any(token in lowered for token in configseal.EXCLUDED_INTERFACE_TOKENS):
            return False
        if "ethernet" in lowered and "vethernet" not in lowered:
            return True
        return any(token in lowered for token in configseal.WIRELESS_INTERFACE_TOKENS)

    @staticmethod
    def select_mac(interfaces) -> str:
        """Pick the adapter MAC: wired/wireless physical first, then any non-loopback."""
        for name, mac in interfaces:
            if mac and configseal._is_preferred_interface(name):
                configseal._debug(f"Selected interface: {name} with MAC: {mac}")
                return mac
        for name, mac in interfaces:
            if mac and "loopback" not in name.lower():
                configseal._debug(f"Fallback interface: {name} with MAC: {mac}")
                return mac
        configseal._debug(f"Using hardcoded fallback MAC address: {configseal.FALLBACK_MAC}")
        return configseal.FALLBACK_MAC

    @staticmethod
    def get_hostname() -> str:
        try:
            name = configseal.socket.gethostname()
        except OSError:
            return configseal.UNKNOWN_HOSTNAME
        return name or configseal.UNKNOWN_HOSTNAME

    @staticmethod
    def describe_device(source=None) -> "configseal.typing.Dict[str, configseal.typing.Any]":
        """Inventory, chosen MAC, hostname and the fingerprint built from them."""
        interfaces = configseal.collect_interfaces(source)
        mac = configseal.select_mac(interfaces)
        hostname = configseal.get_hostname()
        return {
            "interfaces": interfaces,
            "mac": mac,
            "hostname": hostname,
            "fingerprint": f"{mac}{hostname}",
        }

    @staticmethod
    def device_fingerprint(source=None) -> str:
        fingerprint = configseal.describe_device(source)["fingerprint"]
        configseal._debug(f"Raw computer info (before padding): {fingerprint}")
        return fingerprint

    # ---------- Key/IV derivation ------------------------------------------

    @staticmethod
    def normalize_pad_char(pad_char: "configseal.typing.Optional[str]" = None) -> str:
        if not pad_char:
            pad_char = _os_module.getenv(configseal.PAD_CHAR_ENV) or configseal.DEFAULT_PAD_CHAR
        return pad_char[0]

    @staticmethod
    def derive_material(fingerprint: str, pad_char: str, length: int) -> bytes:
        material = fingerprint.encode("utf-8")
        if len(material) > length:
            return material[:length]
        filler = configseal.normalize_pad_char(pad_char).encode("utf-8")
        while len(material) < length:
            material += filler
        # multi-byte pad characters may overshoot the target
        return material[:length]

    @staticmethod
    def derive_key_iv(fingerprint: str, pad_char: "configseal.typing.Optional[str]" = None) -> CipherConfig:
        pad_char = configseal.normalize_pad_char(pad_char)
        return CipherConfig(
            key=configseal.derive_material(fingerprint, pad_char, configseal.KEY_LEN),
            iv=configseal.derive_material(fingerprint, pad_char, configseal.IV_LEN)
        )

    @staticmethod
    def _debug_key_material(material: CipherConfig, pad_char: str) -> None:
        if not configseal._debug_enabled():
            return
        for label, value in (("key", material.key), ("IV", material.iv)):
            shown = value.decode("utf-8", errors="replace")
            configseal._debug(
                f"Full {label} string (with '{pad_char}' padding): {shown} (length: {len(value)})"
            )
            configseal._debug(f"Generated {label} (hex): {value.hex()}")

    # ---------- Cipher engine ----------------------------------------------

    @staticmethod
    def _build_cipher(key: bytes, iv: bytes) -> "configseal.Cipher":
        if not isinstance(key, (bytes, bytearray, memoryview)) or len(key) != configseal.KEY_LEN:
            size = len(key) if isinstance(key, (bytes, bytearray, memoryview)) else type(key).__name__
            raise CipherConstructionError(
                f"Error creating cipher: key must be {configseal.KEY_LEN} bytes, got {size}"
            )
        if not isinstance(iv, (bytes, bytearray, memoryview)) or len(iv) != configseal.IV_LEN:
            size = len(iv) if isinstance(iv, (bytes, bytearray, memoryview)) else type(iv).__name__
            raise CipherConstructionError(
                f"Error creating cipher: IV must be {configseal.IV_LEN} bytes, got {size}"
            )
        try:
            return configseal.Cipher(
                configseal.algorithms.AES(bytes(key)),
                configseal.modes.CBC(bytes(iv))
            )
        except ValueError as exc:
            raise CipherConstructionError(f"Error creating cipher: {exc}") from exc

    @staticmethod
    def encrypt_bytes(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
        """AES-256-CBC with PKCS7; always adds 1..16 bytes of padding."""
        cipher = configseal._build_cipher(key, iv)
        padder = configseal.padding.PKCS7(configseal.BLOCK_SIZE * 8).padder()
        padded = padder.update(bytes(plaintext)) + padder.finalize()
        configseal._debug(
            f"Buffer size calculated: {len(padded)} bytes (with {len(padded) - len(plaintext)} padding)"
        )
        encryptor = cipher.encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    @staticmethod
    def decrypt_bytes(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
        cipher = configseal._build_cipher(key, iv)
        size = len(ciphertext)
        if size == 0 or size % configseal.BLOCK_SIZE:
            raise PaddingError(
                f"Error during decryption: ciphertext length {size} is not a positive multiple of "
                f"{configseal.BLOCK_SIZE}"
            )
        decryptor = cipher.decryptor()
        padded = decryptor.update(bytes(ciphertext)) + decryptor.finalize()
        unpadder = configseal.padding.PKCS7(configseal.BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise PaddingError(f"Error during decryption: {exc}") from exc

    # ---------- Path resolution --------------------------------------------

    @staticmethod
    def _config_file_name(username: "configseal.typing.Optional[str]" = None) -> str:
        if username is None:
            return configseal.DEFAULT_CONFIG_NAME
        return f"{configseal.USER_CONFIG_PREFIX}{username}"

    @staticmethod
    def _tiered_path(name: str, dirs: "configseal.StandardDirs") -> str:
        if dirs.download_dir is not None:
            return str(dirs.download_dir / name)
        app_dir = dirs.app_config_dir()
        if app_dir is not None:
            return str(app_dir / name)
        return name

    @staticmethod
    def _ensure_parent(path: "configseal.pathlib.Path") -> None:
        parent = path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"Failed to create directory: {exc}") from exc

    @staticmethod
    def resolve_output_path(explicit_path=None, username=None, dirs=None) -> str:
        """Where a store writes: absolute as-is, relative under Downloads, else the default tiers."""
        dirs = dirs if dirs is not None else configseal.platform_dirs()
        if explicit_path is None:
            return configseal._tiered_path(configseal._config_file_name(username), dirs)
        explicit_path = configseal.os.fspath(explicit_path)
        if configseal.os.path.isabs(explicit_path):
            return explicit_path
        if dirs.download_dir is None:
            return explicit_path
        target = dirs.download_dir / explicit_path
        configseal._ensure_parent(target)
        return str(target)

    @staticmethod
    def resolve_input_path(explicit_path=None, username=None, dirs=None) -> str:
        if explicit_path is not None:
            return configseal.os.fspath(explicit_path)
        dirs = dirs if dirs is not None else configseal.platform_dirs()
        return configseal._tiered_path(configseal._config_file_name(username), dirs)

    @staticmethod
    def config_exists(username: str, dirs=None) -> bool:
        dirs = dirs if dirs is not None else configseal.platform_dirs()
        name = configseal._config_file_name(username)
        candidates = []
        if dirs.download_dir is not None:
            candidates.append(dirs.download_dir / name)
        app_dir = dirs.app_config_dir()
        if app_dir is not None:
            candidates.append(app_dir / name)
        candidates.append(configseal.pathlib.Path(name))
        for candidate in candidates:
            if candidate.exists():
                configseal._debug(f"Found config for {username}: {candidate}")
                return True
        return False

    # ---------- Persistence ------------------------------------------------

    @staticmethod
    def save_encrypted(data: bytes, path) -> None:
        target = configseal.pathlib.Path(path)
        configseal._ensure_parent(target)
        try:
            target.write_bytes(bytes(data))
        except OSError as exc:
            raise ConfigIOError(f"Failed to write file: {exc}") from exc

    @staticmethod
    def load_encrypted(path) -> bytes:
        try:
            return configseal.pathlib.Path(path).read_bytes()
        except OSError as exc:
            raise ConfigIOError(f"Failed to read file: {exc}") from exc

    # ---------- Operations -------------------------------------------------

    @staticmethod
    def _material_for(fingerprint, pad_char) -> CipherConfig:
        pad_char = configseal.normalize_pad_char(pad_char)
        if fingerprint is None:
            fingerprint = configseal.device_fingerprint()
        material = configseal.derive_key_iv(fingerprint, pad_char)
        configseal._debug_key_material(material, pad_char)
        return material

    @staticmethod
    def encrypt_config(
        json_text: "configseal.typing.Union[str, bytes]",
        output_path=None,
        pad_char: "configseal.typing.Optional[str]" = None,
        *,
        username: "configseal.typing.Optional[str]" = None,
        fingerprint: "configseal.typing.Optional[str]" = None,
        dirs: "configseal.typing.Optional[configseal.StandardDirs]" = None
    ) -> EncryptionResult:
        material = configseal._material_for(fingerprint, pad_char)
        try:
            payload = json_text.encode("utf-8") if isinstance(json_text, str) else bytes(json_text)
        except UnicodeEncodeError as exc:
            # lone surrogates, e.g. undecodable argv bytes on POSIX
            raise EncodingError(f"Encryption error: {exc}") from exc
        try:
            encrypted = configseal.encrypt_bytes(payload, material.key, material.iv)
        except CipherConstructionError as exc:
            raise CipherConstructionError(f"Encryption error: {exc}") from exc
        configseal._debug(f"Encrypted data size: {len(encrypted)} bytes")
        target = configseal.resolve_output_path(output_path, username=username, dirs=dirs)
        try:
            configseal.save_encrypted(encrypted, target)
        except ConfigIOError as exc:
            raise ConfigIOError(f"Failed to save file: {exc}") from exc
        configseal._debug(f"Encrypted data saved to: {target}")
        return EncryptionResult(
            success=True,
            message=f"Encryption successful. File saved to: {target}",
            file_path=target
        )

    @staticmethod
    def decrypt_config(
        input_path=None,
        pad_char: "configseal.typing.Optional[str]" = None,
        username: "configseal.typing.Optional[str]" = None,
        *,
        fingerprint: "configseal.typing.Optional[str]" = None,
        dirs: "configseal.typing.Optional[configseal.StandardDirs]" = None
    ) -> DecryptionResult:
        material = configseal._material_for(fingerprint, pad_char)
        source = configseal.resolve_input_path(input_path, username=username, dirs=dirs)
        encrypted = configseal.load_encrypted(source)
        try:
            decrypted = configseal.decrypt_bytes(encrypted, material.key, material.iv)
        except (CipherConstructionError, PaddingError) as exc:
            raise type(exc)(f"Decryption error: {exc}") from exc
        try:
            text = decrypted.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"Failed to convert decrypted data to string: {exc}") from exc
        return DecryptionResult(success=True, message="Decryption successful", json_data=text)

    @staticmethod
    def config_file_exists(username: str, dirs=None) -> bool:
        return configseal.config_exists(username, dirs=dirs)


def cli(argv=None) -> int:
    import argparse

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("CONFIGSEAL_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("CONFIGSEAL_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        return not bool(getattr(_sys_module.stdout, "isatty", lambda: False)())

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"
            self.yellow = "" if plain else "\033[33m"
            self.cyan = "" if plain else "\033[36m"

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan, "✨")

    theme = _CliTheme(_cli_plain_mode())
    if not theme.plain:
        try:
            import colorama
            colorama.init()  # Windows consoles need the ANSI shim
        except ImportError:
            pass  # "color" extra not installed

    parser = argparse.ArgumentParser(prog="configseal", description="Device-bound config encryption")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encrypt", help="Encrypt a JSON document to the config file")
    enc.add_argument("text", nargs="?", default=None, help="JSON text (stdin when omitted)")
    enc.add_argument("-f", "--file", default=None, help="Read the JSON document from this file")
    enc.add_argument("-o", "--output", default=None, help="Output path (relative paths land in Downloads)")
    enc.add_argument("-u", "--user", default=None, help="Username; defaults the file name to config-<user>")
    enc.add_argument("-p", "--pad-char", default=None, help="Padding character for key/IV derivation")
    enc.add_argument("--raw", action="store_true", help="Skip JSON validation of the input")
    enc.add_argument("--json", action="store_true", help="Print the result as JSON")

    dec = subparsers.add_parser("decrypt", help="Decrypt the config file back to JSON")
    dec.add_argument("-i", "--input", default=None, help="Encrypted file path")
    dec.add_argument("-u", "--user", default=None, help="Username; looks for config-<user>")
    dec.add_argument("-p", "--pad-char", default=None, help="Padding character for key/IV derivation")
    dec.add_argument("-o", "--output", default=None, help="Write the decrypted JSON to this file")
    dec.add_argument("--json", action="store_true", help="Print the result as JSON")

    exists = subparsers.add_parser("exists", help="Check whether config-<user> exists")
    exists.add_argument("user", help="Username")
    exists.add_argument("--json", action="store_true", help="Print the result as JSON")

    fp = subparsers.add_parser("fingerprint", help="Show the device fingerprint used for key derivation")
    fp.add_argument("-p", "--pad-char", default=None, help="Padding character for key/IV derivation")
    fp.add_argument("--show-key", action="store_true", help="Also print the padded key/IV material")
    fp.add_argument("--json", action="store_true", help="Print the result as JSON")

    paths = subparsers.add_parser("paths", help="Show resolved directories and config paths")
    paths.add_argument("-u", "--user", default=None, help="Username")
    paths.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args(argv)

    def _emit_failure(message: str, as_json: bool) -> None:
        if as_json:
            print(configseal.json.dumps({"success": False, "message": message}))
        else:
            print(theme.err(message), file=_sys_module.stderr)

    if args.command == "encrypt":
        try:
            if args.text is not None:
                text = args.text
            elif args.file is not None:
                text = configseal.pathlib.Path(args.file).read_text(encoding="utf-8")
            else:
                text = _sys_module.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            _emit_failure(f"Failed to read input: {exc}", args.json)
            return 1
        if not args.raw:
            try:
                configseal.json.loads(text)
            except ValueError as exc:
                _emit_failure(f"Invalid JSON input: {exc}", args.json)
                return 2
        try:
            result = configseal.encrypt_config(
                text,
                args.output,
                args.pad_char,
                username=args.user
            )
        except ConfigSealError as exc:
            _emit_failure(str(exc), args.json)
            return 1
        if args.json:
            print(configseal.json.dumps(result.to_dict()))
        else:
            print(theme.ok(result.message))
        return 0

    if args.command == "decrypt":
        try:
            result = configseal.decrypt_config(args.input, args.pad_char, args.user)
        except ConfigSealError as exc:
            _emit_failure(str(exc), args.json)
            return 1
        if args.output:
            try:
                configseal.pathlib.Path(args.output).write_text(result.json_data, encoding="utf-8")
            except OSError as exc:
                _emit_failure(f"Failed to write file: {exc}", args.json)
                return 1
        if args.json:
            print(configseal.json.dumps(result.to_dict()))
        elif args.output:
            print(theme.ok(f"{result.message}. Wrote {args.output}"))
        else:
            print(result.json_data)
        return 0

    if args.command == "exists":
        found = configseal.config_file_exists(args.user)
        if args.json:
            print(configseal.json.dumps({"username": args.user, "exists": found}))
        elif found:
            print(theme.ok(f"config-{args.user} found"))
        else:
            print(theme.warn(f"config-{args.user} not found"))
        return 0 if found else 1

    if args.command == "fingerprint":
        device = configseal.describe_device()
        mac = device["mac"]
        hostname = device["hostname"]
        fingerprint = device["fingerprint"]
        report = {
            "interfaces": [{"name": name, "mac": value} for name, value in device["interfaces"]],
            "mac": mac,
            "hostname": hostname,
            "fingerprint": fingerprint,
        }
        if args.show_key:
            pad_char = configseal.normalize_pad_char(args.pad_char)
            material = configseal.derive_key_iv(fingerprint, pad_char)
            report["pad_char"] = pad_char
            report["key"] = material.key.decode("utf-8", errors="replace")
            report["iv"] = material.iv.decode("utf-8", errors="replace")
            report["key_hex"] = material.key.hex()
            report["iv_hex"] = material.iv.hex()
        if args.json:
            print(configseal.json.dumps(report))
            return 0
        for entry in report["interfaces"]:
            print(f"  {entry['name']} -> {entry['mac']}")
        print(theme.info(f"MAC: {mac}"))
        print(theme.info(f"Hostname: {hostname}"))
        print(theme.info(f"Fingerprint: {fingerprint}"))
        if args.show_key:
            print(theme.warn(f"Key: {report['key']} ({report['key_hex']})"))
            print(theme.warn(f"IV: {report['iv']} ({report['iv_hex']})"))
        return 0

    if args.command == "paths":
        dirs = configseal.platform_dirs()
        report = {
            "download_dir": None if dirs.download_dir is None else str(dirs.download_dir),
            "config_dir": None if dirs.config_dir is None else str(dirs.config_dir),
            "store_path": configseal.resolve_output_path(None, username=args.user, dirs=dirs),
            "load_path": configseal.resolve_input_path(None, username=args.user, dirs=dirs),
        }
        if args.json:
            print(configseal.json.dumps(report))
            return 0
        for label, value in report.items():
            print(f"{label}: {value if value is not None else '(unavailable)'}")
        return 0

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
