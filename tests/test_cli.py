import os
import random
import subprocess
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory


class CliTests(unittest.TestCase):
    """CLI smokes: encode/decode through files and pipes, exit statuses."""

    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        self.repo_root = Path(__file__).resolve().parent.parent

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _run_cli(self, *args: str, stdin: bytes = b"", extra_env=None) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        for name in ("LASTRESORT_SCHEME", "LASTRESORT_LINE_WORDS", "LASTRESORT_EFF_WORDLIST", "LASTRESORT_DEBUG"):
            env.pop(name, None)
        env.update(extra_env or {})
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(self.repo_root), env.get("PYTHONPATH")]))
        return subprocess.run(
            [sys.executable, "-m", "lastresort", *args],
            cwd=self.repo_root,
            input=stdin,
            capture_output=True,
            env=env,
        )

    def test_encode_default_scheme_from_stdin(self):
        result = self._run_cli(stdin=b"\x05\x05\x05")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stdout, b"adult almighty adult\n")

    def test_encode_eff(self):
        result = self._run_cli("-e", "eff", stdin=b"\x05\x05\x05")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stdout, b"acuteness acuteness acuteness\n")

    def test_encode_empty_input_writes_nothing(self):
        result = self._run_cli(stdin=b"")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stdout, b"")

    def test_decode_eff_from_stdin(self):
        result = self._run_cli("-d", "eff", stdin=b"acute ness\nACUTENESS")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stdout, b"\x05\x05")

    def test_file_roundtrip(self):
        data = bytes(random.Random(1).randrange(256) for _ in range(500))
        src = self.tmp_path / "secret.key"
        words = self.tmp_path / "secret.txt"
        restored = self.tmp_path / "restored.key"
        src.write_bytes(data)
        result = self._run_cli("-i", str(src), "-o", str(words), "--line-words", "8")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertIn(b"500 words", result.stderr)
        lines = words.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 63)
        self.assertEqual(len(lines[0].split()), 8)
        result = self._run_cli("-d", "-i", str(words), "-o", str(restored), "-q")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stderr, b"")
        self.assertEqual(restored.read_bytes(), data)

    def test_invalid_data_fails(self):
        result = self._run_cli("-d", stdin=b"adult almighty zz")
        self.assertEqual(result.returncode, 1)
        self.assertEqual(result.stdout, b"\x05\x05")
        self.assertIn(b"invalid data", result.stderr)

    def test_truncated_input(self):
        result = self._run_cli("-d", stdin=b"adult alm")
        self.assertEqual(result.returncode, 1)
        self.assertIn(b"input ended inside a word", result.stderr)
        result = self._run_cli("-d", "--allow-truncated", stdin=b"adult alm")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertEqual(result.stdout, b"\x05")
        self.assertIn(b"warning", result.stderr)

    def test_usage_errors(self):
        self.assertEqual(self._run_cli("-e", "base64").returncode, 2)
        self.assertEqual(self._run_cli("-d", "eff", "-e", "pgp").returncode, 2)

    def test_bad_scheme_from_environment(self):
        for args in ((), ("-d",)):
            with self.subTest(args=args):
                result = self._run_cli(*args, stdin=b"\x05", extra_env={"LASTRESORT_SCHEME": "base64"})
                self.assertEqual(result.returncode, 1)
                self.assertIn(b"lastresort: LASTRESORT_SCHEME", result.stderr)
                self.assertNotIn(b"usage:", result.stderr)

    def test_missing_input_file(self):
        result = self._run_cli("-i", str(self.tmp_path / "missing.bin"))
        self.assertEqual(result.returncode, 1)
        self.assertIn(b"lastresort:", result.stderr)

    def test_version(self):
        result = self._run_cli("--version")
        self.assertEqual(result.returncode, 0)
        self.assertIn(b"lastresort", result.stdout)


if __name__ == "__main__":
    unittest.main()
