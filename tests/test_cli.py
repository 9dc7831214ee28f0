import io
import json
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

try:
    from configseal.main import configseal, main
except ModuleNotFoundError as exc:  # pragma: no cover - dependency missing
    configseal = None
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


FINGERPRINT = "AABBCCDDEEFFhostname"


@unittest.skipIf(configseal is None, f"dependency unavailable: {_IMPORT_ERROR}")
class ConfigSealCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        self.repo_root = REPO_ROOT
        self.download_dir = self.tmp_path / "Downloads"
        self.config_dir = self.tmp_path / "AppConfig"
        self.env_patch = mock.patch.dict(os.environ, {
            "HOME": str(self.tmp_path),
            "CONFIGSEAL_DOWNLOAD_DIR": str(self.download_dir),
            "CONFIGSEAL_CONFIG_DIR": str(self.config_dir),
            "CONFIGSEAL_CLI_PLAIN": "1",
        })
        self.env_patch.start()
        os.environ.pop("CONFIGSEAL_PAD_CHAR", None)
        os.environ.pop("CONFIGSEAL_DEBUG", None)
        self.fp_patch = mock.patch.object(configseal, "device_fingerprint", return_value=FINGERPRINT)
        self.fp_patch.start()

    def tearDown(self) -> None:
        self.fp_patch.stop()
        self.env_patch.stop()
        self.tmpdir.cleanup()

    def _invoke(self, *args: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(args))
        return code, out.getvalue(), err.getvalue()

    def _run_cli(self, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(self.repo_root), env.get("PYTHONPATH")])
        )
        return subprocess.run(
            [sys.executable, "-m", "configseal", *args],
            cwd=self.tmp_path,
            input=stdin,
            capture_output=True,
            text=True,
            env=env,
        )

    def test_encrypt_then_decrypt(self):
        code, out, _ = self._invoke("encrypt", '{"server":"db01"}', "--json")
        self.assertEqual(code, 0)
        report = json.loads(out)
        self.assertTrue(report["success"])
        self.assertEqual(report["file_path"], str(self.download_dir / "config"))
        self.assertTrue(Path(report["file_path"]).is_file())

        code, out, _ = self._invoke("decrypt")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), '{"server":"db01"}')

    def test_encrypt_from_file_for_user(self):
        src = self.tmp_path / "settings.json"
        src.write_text('{"port": 1433}', encoding="utf-8")
        code, out, _ = self._invoke("encrypt", "-f", str(src), "-u", "alice", "-p", "#")
        self.assertEqual(code, 0)
        self.assertIn("Encryption successful. File saved to:", out)
        self.assertTrue((self.download_dir / "config-alice").is_file())

        code, out, _ = self._invoke("decrypt", "-u", "alice", "-p", "#", "--json")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["json_data"], '{"port": 1433}')

    def test_encrypt_from_stdin(self):
        with mock.patch.object(sys, "stdin", io.StringIO('{"from":"stdin"}')):
            code, _, _ = self._invoke("encrypt", "-o", "piped.bin")
        self.assertEqual(code, 0)
        self.assertTrue((self.download_dir / "piped.bin").is_file())

    def test_invalid_json_rejected(self):
        code, out, _ = self._invoke("encrypt", "{not json", "--json")
        self.assertEqual(code, 2)
        self.assertFalse(json.loads(out)["success"])
        self.assertFalse((self.download_dir / "config").exists())

        code, _, _ = self._invoke("encrypt", "{not json", "--raw")
        self.assertEqual(code, 0)

    def test_encrypt_undecodable_argument(self):
        # undecodable argv bytes arrive as lone surrogates (surrogateescape)
        text = '{"a":"\udcff"}'
        code, out, _ = self._invoke("encrypt", text, "--json")
        self.assertEqual(code, 1)
        report = json.loads(out)
        self.assertFalse(report["success"])
        self.assertTrue(report["message"].startswith("Encryption error:"))
        self.assertFalse((self.download_dir / "config").exists())

        code, _, err = self._invoke("encrypt", text)
        self.assertEqual(code, 1)
        self.assertIn("Encryption error:", err)

    def test_decrypt_missing_file(self):
        code, out, _ = self._invoke("decrypt", "-u", "ghost", "--json")
        self.assertEqual(code, 1)
        report = json.loads(out)
        self.assertFalse(report["success"])
        self.assertTrue(report["message"].startswith("Failed to read file"))

        code, _, err = self._invoke("decrypt", "-u", "ghost")
        self.assertEqual(code, 1)
        self.assertIn("Failed to read file", err)

    def test_decrypt_to_output_file(self):
        self._invoke("encrypt", '{"a":1}')
        target = self.tmp_path / "plain.json"
        code, out, _ = self._invoke("decrypt", "-o", str(target))
        self.assertEqual(code, 0)
        self.assertEqual(target.read_text(encoding="utf-8"), '{"a":1}')
        self.assertIn("Decryption successful", out)

    def test_exists_exit_codes(self):
        code, out, _ = self._invoke("exists", "bob", "--json")
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out), {"username": "bob", "exists": False})
        self._invoke("encrypt", "{}", "-u", "bob")
        code, out, _ = self._invoke("exists", "bob")
        self.assertEqual(code, 0)
        self.assertIn("config-bob found", out)

    def test_fingerprint_report(self):
        with mock.patch.object(configseal, "collect_interfaces", return_value=[("Ethernet", "AABBCCDDEEFF")]), \
                mock.patch.object(configseal, "get_hostname", return_value="host"):
            code, out, _ = self._invoke("fingerprint", "--show-key", "--json")
        self.assertEqual(code, 0)
        report = json.loads(out)
        self.assertEqual(report["fingerprint"], "AABBCCDDEEFFhost")
        self.assertEqual(report["key"], "AABBCCDDEEFFhost" + "T" * 16)
        self.assertEqual(report["iv"], "AABBCCDDEEFFhost")
        self.assertEqual(report["interfaces"], [{"name": "Ethernet", "mac": "AABBCCDDEEFF"}])

    def test_paths_report(self):
        code, out, _ = self._invoke("paths", "-u", "alice", "--json")
        self.assertEqual(code, 0)
        report = json.loads(out)
        self.assertEqual(report["download_dir"], str(self.download_dir))
        self.assertEqual(report["store_path"], str(self.download_dir / "config-alice"))
        self.assertEqual(report["load_path"], str(self.download_dir / "config-alice"))

    def test_keyboard_interrupt_exit_code(self):
        with mock.patch("configseal.core.cli", side_effect=KeyboardInterrupt):
            from configseal import core

            out = io.StringIO()
            with redirect_stdout(out):
                self.assertEqual(core.main([]), 130)
        self.assertIn("Exiting", out.getvalue())

    def test_module_entrypoint_roundtrip(self):
        result = self._run_cli("encrypt", '{"cli":true}', "-u", "proc")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertTrue((self.download_dir / "config-proc").is_file())
        result = self._run_cli("decrypt", "-u", "proc")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(result.stdout.strip(), '{"cli":true}')

    def test_module_entrypoint_paths(self):
        result = self._run_cli("paths", "--json")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(json.loads(result.stdout)["store_path"], str(self.download_dir / "config"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
