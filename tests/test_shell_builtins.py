import io
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

import shell_builtins
from exceptions import BuiltinError, ShellExit
from shell_state import ShellState


class TestShellBuiltins(unittest.TestCase):
    def setUp(self):
        self.state = ShellState(program_name="hsh", environ={"PATH": "/bin"},
                                input_source=io.StringIO(""))
        self.state.begin_line("")

        # Work in a temp dir for cd
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

        self.old_cwd = os.getcwd()
        os.chdir(self.tmpdir.name)
        self.addCleanup(lambda: os.chdir(self.old_cwd))

        self.start = os.getcwd()
        self.test_dir = os.path.join(self.start, "dir")
        os.mkdir(self.test_dir)

    def call(self, name, *args):
        """ Run a builtin, returning (rc, stdout, stderr). """
        out = io.StringIO()
        err = io.StringIO()
        with patch.object(sys, "stdout", out), patch.object(sys, "stderr", err):
            rc = shell_builtins.BUILTINS[name](list(args), self.state)
        return rc, out.getvalue(), err.getvalue()

    # -----------------------
    # Registry / decorator
    # -----------------------
    def test_registry_contains_expected_builtins_in_order(self):
        self.assertEqual(
            ["exit", "cd", "env", "setenv", "unsetenv", "help", "alias", "unalias"],
            list(shell_builtins.BUILTINS),
        )

    # -----------------------
    # exit
    # -----------------------
    def test_exit_without_args_uses_last_status(self):
        self.state.set_status(4)
        with self.assertRaises(ShellExit) as ctx:
            self.call("exit")
        self.assertEqual(4, ctx.exception.status)

    def test_exit_with_number(self):
        with self.assertRaises(ShellExit) as ctx:
            self.call("exit", "98")
        self.assertEqual(98, ctx.exception.status)

    def test_exit_number_wraps(self):
        with self.assertRaises(ShellExit) as ctx:
            self.call("exit", "257")
        self.assertEqual(1, ctx.exception.status)

    def test_exit_non_numeric_is_error(self):
        for arg in ("abc", "-1", "1.5"):
            with self.assertRaises(BuiltinError) as ctx:
                self.call("exit", arg)
            self.assertEqual(2, ctx.exception.status)
            self.assertEqual(f"Illegal number: {arg}", ctx.exception.reason)

    # -----------------------
    # cd
    # -----------------------
    def test_cd_changes_directory_and_updates_pwd(self):
        rc, _, _ = self.call("cd", "dir")
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(self.test_dir), os.path.realpath(os.getcwd()))
        self.assertEqual(os.getcwd(), self.state.environment.get("PWD"))
        self.assertEqual(self.start, self.state.environment.get("OLDPWD"))

    def test_cd_no_args_goes_home(self):
        self.state.environment.set("HOME", self.test_dir)
        rc, _, _ = self.call("cd")
        self.assertEqual(0, rc)
        self.assertEqual(os.path.realpath(self.test_dir), os.path.realpath(os.getcwd()))

    def test_cd_no_args_without_home_stays(self):
        rc, _, _ = self.call("cd")
        self.assertEqual(0, rc)
        self.assertEqual(self.start, os.getcwd())

    def test_cd_missing_directory_leaves_cwd(self):
        with self.assertRaises(BuiltinError) as ctx:
            self.call("cd", "/does/not/exist")
        self.assertEqual(2, ctx.exception.status)
        self.assertEqual("can't cd to /does/not/exist", ctx.exception.reason)
        self.assertEqual(self.start, os.getcwd())
        self.assertIsNone(self.state.environment.get("OLDPWD"))

    def test_cd_null_byte_leaves_cwd(self):
        with self.assertRaises(BuiltinError) as ctx:
            self.call("cd", "a\x00b")
        self.assertEqual(2, ctx.exception.status)
        self.assertEqual(self.start, os.getcwd())

    def test_cd_to_file_fails(self):
        with open("file.txt", "w", encoding="utf-8") as f:
            f.write("x")
        with self.assertRaises(BuiltinError):
            self.call("cd", "file.txt")
        self.assertEqual(self.start, os.getcwd())

    def test_cd_dash_returns_and_prints(self):
        self.call("cd", "dir")
        rc, out, _ = self.call("cd", "-")
        self.assertEqual(0, rc)
        self.assertEqual(self.start, os.getcwd())
        self.assertEqual(self.start + "\n", out)
        self.assertEqual(os.getcwd(), self.state.environment.get("PWD"))

    def test_cd_dash_without_oldpwd(self):
        with self.assertRaises(BuiltinError) as ctx:
            self.call("cd", "-")
        self.assertEqual("OLDPWD not set", ctx.exception.reason)

    # -----------------------
    # env / setenv / unsetenv
    # -----------------------
    def test_env_lists_entries(self):
        self.state.environment.set("FOO", "bar")
        rc, out, _ = self.call("env")
        self.assertEqual(0, rc)
        self.assertEqual("PATH=/bin\nFOO=bar\n", out)

    def test_setenv_creates_and_overwrites(self):
        self.assertEqual(0, self.call("setenv", "FOO", "bar")[0])
        self.assertEqual("bar", self.state.environment.get("FOO"))
        self.call("setenv", "FOO", "baz")
        self.assertEqual("baz", self.state.environment.get("FOO"))

    def test_setenv_wrong_arg_count(self):
        for args in ((), ("FOO",), ("A", "B", "C")):
            with self.assertRaises(BuiltinError) as ctx:
                self.call("setenv", *args)
            self.assertEqual("usage: setenv NAME VALUE", ctx.exception.reason)

    def test_setenv_invalid_name(self):
        with self.assertRaises(BuiltinError) as ctx:
            self.call("setenv", "A=B", "x")
        self.assertEqual(1, ctx.exception.status)

    def test_unsetenv_removes_and_ignores_missing(self):
        self.state.environment.set("FOO", "bar")
        rc, _, err = self.call("unsetenv", "FOO", "MISSING")
        self.assertEqual(0, rc)
        self.assertEqual("", err)
        self.assertNotIn("FOO", self.state.environment)

    def test_unsetenv_requires_name(self):
        with self.assertRaises(BuiltinError):
            self.call("unsetenv")

    # -----------------------
    # help
    # -----------------------
    def test_help_lists_builtins(self):
        rc, out, _ = self.call("help")
        self.assertEqual(0, rc)
        for name in shell_builtins.BUILTINS:
            self.assertIn(name, out)

    def test_help_topic(self):
        rc, out, _ = self.call("help", "cd")
        self.assertEqual(0, rc)
        self.assertTrue(out.startswith("cd [dir|-]"))

    def test_help_unknown_topic(self):
        with self.assertRaises(BuiltinError) as ctx:
            self.call("help", "nope")
        self.assertEqual("no help topics match 'nope'", ctx.exception.reason)

    # -----------------------
    # alias / unalias
    # -----------------------
    def test_alias_set_and_list(self):
        self.call("alias", "ll=ls")
        self.call("alias", "la='ls", "-a'")
        rc, out, _ = self.call("alias")
        self.assertEqual(0, rc)
        self.assertEqual("ll='ls'\nla='ls -a'\n", out)

    def test_alias_double_quotes(self):
        self.call("alias", 'll="ls', '-l"')
        self.assertEqual("ls -l", self.state.aliases.get("ll"))

    def test_alias_show_one(self):
        self.state.aliases.set("ll", "ls -l")
        rc, out, _ = self.call("alias", "ll")
        self.assertEqual(0, rc)
        self.assertEqual("ll='ls -l'\n", out)

    def test_alias_show_missing(self):
        self.state.aliases.set("ll", "ls -l")
        rc, out, err = self.call("alias", "nope", "ll")
        self.assertEqual(1, rc)
        self.assertEqual("ll='ls -l'\n", out)
        self.assertEqual("hsh: 1: alias: nope not found\n", err)

    def test_alias_mixed_set_and_show(self):
        rc, out, _ = self.call("alias", "a=x", "b=y", "a")
        self.assertEqual(0, rc)
        self.assertEqual("a='x'\n", out)
        self.assertEqual("y", self.state.aliases.get("b"))

    def test_unalias_removes(self):
        self.state.aliases.set("ll", "ls -l")
        rc, _, _ = self.call("unalias", "ll")
        self.assertEqual(0, rc)
        self.assertIsNone(self.state.aliases.get("ll"))

    def test_unalias_missing_is_not_found_noop(self):
        self.state.aliases.set("ll", "ls -l")
        rc, _, err = self.call("unalias", "nope")
        self.assertEqual(1, rc)
        self.assertIn("unalias: nope not found", err)
        self.assertEqual([("ll", "ls -l")], self.state.aliases.items())

        # Repeating gives the same documented status
        self.assertEqual(1, self.call("unalias", "nope")[0])

    def test_unalias_requires_name(self):
        with self.assertRaises(BuiltinError):
            self.call("unalias")


if __name__ == "__main__":
    unittest.main()
