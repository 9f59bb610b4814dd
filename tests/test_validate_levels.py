import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

# tools/ is a script directory, not a package
TOOLS = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "tools")
if TOOLS not in sys.path:
    sys.path.insert(0, TOOLS)

import validate_levels  # noqa: E402


GOOD = "2 2\n0 0\n- ?\n- -\n"
BAD = "2 2\n0 0\n- -\n- -\n"


def _write(dirname, name, text):
    path = os.path.join(dirname, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = validate_levels.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestValidateLevels(unittest.TestCase):
    def test_given_good_and_bad_levels_when_validating_dir_then_summary_and_exit_1(self):
        with tempfile.TemporaryDirectory() as td:
            good = _write(td, "level1.txt", GOOD)
            bad = _write(td, "level2.txt", BAD)
            _write(td, "notes.md", "ignored")
            code, out, _ = _run([td])
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out), {good: "ok", bad: "DoorExitInvariantViolated"})

    def test_given_only_good_levels_when_validating_files_then_exit_0(self):
        with tempfile.TemporaryDirectory() as td:
            good = _write(td, "level1.txt", GOOD)
            code, out, _ = _run([good])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {good: "ok"})

    def test_given_missing_file_when_validating_then_reported_not_found(self):
        with tempfile.TemporaryDirectory() as td:
            missing = os.path.join(td, "level9.txt")
            code, out, _ = _run([missing])
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out), {missing: "FileNotFound"})

    def test_given_no_arguments_when_validating_then_usage_and_exit_2(self):
        code, out, err = _run([])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("usage:", err)

    def test_given_empty_dir_when_validating_then_error_and_exit_2(self):
        with tempfile.TemporaryDirectory() as td:
            code, out, err = _run([td])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("error: no level files found", err)

    def test_given_bundled_levels_when_validating_then_all_ok(self):
        levels = os.path.join(os.path.dirname(TOOLS), "levels")
        code, out, _ = _run([levels])
        self.assertEqual(code, 0)
        self.assertEqual(set(json.loads(out).values()), {"ok"})


if __name__ == "__main__":
    unittest.main(verbosity=2)
