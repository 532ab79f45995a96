from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from nginx_stats.cli import main


def line(request: str, status: int, size: int) -> str:
    return json.dumps({
        "time": "17/May/2015:08:05:32 +0000",
        "remote_ip": "127.0.0.1",
        "remote_user": "-",
        "request": request,
        "response": status,
        "bytes": size,
        "referrer": "-",
        "agent": "curl/8.0",
    })


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_cli(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_prints_summary(self) -> None:
        path = self.tmp / "access.log"
        path.write_text("\n".join([
            line("GET /a HTTP/1.1", 200, 100),
            line("GET /b HTTP/1.1", 404, 50),
            line("GET /c HTTP/1.1", 200, 300),
        ]) + "\n", encoding="utf-8")

        code, out, err = self.run_cli(str(path))

        self.assertEqual(code, 0)
        self.assertEqual(err, "")
        self.assertIn("Status Codes:\n  200: 2\n  404: 1\n", out)
        self.assertIn("Mean Bytes:\n  All Requests: 150.00\n", out)
        self.assertIn("Median Bytes:\n  All Requests: 100\n", out)
        self.assertIn("Largest Endpoint: /c\n", out)
        self.assertIn("Failingest Endpoint: /b\n", out)

    def test_missing_file_exits_with_error(self) -> None:
        code, out, err = self.run_cli(str(self.tmp / "nope.log"))
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("Error reading log file: "))

    def test_malformed_line_produces_no_summary(self) -> None:
        path = self.tmp / "access.log"
        path.write_text(
            line("GET /a HTTP/1.1", 200, 1) + "\nnot json\n" + line("GET /c HTTP/1.1", 200, 1) + "\n",
            encoding="utf-8",
        )
        code, out, err = self.run_cli(str(path))
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error reading log file: line 2: invalid JSON", err)

    def test_empty_file_prints_nan_summary(self) -> None:
        path = self.tmp / "empty.log"
        path.write_text("", encoding="utf-8")
        code, out, _ = self.run_cli(str(path))
        self.assertEqual(code, 0)
        self.assertIn("All Requests: NaN", out)
        self.assertIn("Failingest Endpoint: /", out)

    def test_requires_a_path(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli()
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
