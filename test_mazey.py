import contextlib
import io
import unittest

import grid as _grid
import mazey

class TestCommandLine(unittest.TestCase):

    def tearDown(self):
        _grid.DBG = False

    def _run(self, *argv: str) -> str:
        """Run the command line and return what it printed to stdout."""
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            mazey.main(list(argv))
        self.stderr = err.getvalue()
        return out.getvalue()

    def test_defaults(self):
        """30 wide, 20 high, solved, unicode."""
        lines = self._run("--seed", "1").splitlines()
        self.assertEqual(len(lines), 2 * mazey.DEFAULT_HEIGHT + 1)
        self.assertEqual(len(lines[0]), 4 * mazey.DEFAULT_WIDTH + 1)
        self.assertIn("┄", "".join(lines))

    def test_size_flags(self):
        lines = self._run("-w", "3", "-H", "2", "--seed", "7").splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(len(lines[0]), 13)

    def test_ascii_no_solve(self):
        text = self._run("-w", "5", "-H", "5", "--ascii", "--no-solve", "--seed", "3")
        self.assertNotIn("X", text)
        self.assertTrue(all(ord(ch) < 128 for ch in text))

    def test_seed_reproduces_output(self):
        self.assertEqual(self._run("--seed", "99", "-w", "8"), self._run("--seed", "99", "-w", "8"))

    def test_bad_dimensions_exit_with_usage_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run("-w", "0")
        self.assertEqual(ctx.exception.code, 2)

    def test_debug_logs_to_stderr(self):
        out = self._run("--debug", "-w", "4", "-H", "4", "--seed", "5")
        self.assertIn("[MAZE DBG]", self.stderr)
        self.assertNotIn("[MAZE DBG]", out)

    def test_progress_keeps_stdout_clean(self):
        plain = self._run("-w", "6", "-H", "4", "--seed", "8")
        with_bar = self._run("-w", "6", "-H", "4", "--seed", "8", "--progress")
        self.assertEqual(plain, with_bar)


if __name__ == '__main__':
    unittest.main()
