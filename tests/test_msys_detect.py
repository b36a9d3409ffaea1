# SPDX-License-Identifier: BSD-3-Clause
import io

import pytest

from msysdetect.base import msys_detect


@pytest.mark.parametrize("msystem, expected",
                         [("MINGW64", "x64-msvcrt\n"),
                          ("MinGW64", "x64-msvcrt\n"),
                          ("mingw32", "msvcrt\n"),
                          ("UCRT64", "x64-ucrt\n"),
                          ("CLANG64", "x64-ucrt\n"),
                          ("ClangArm64", "x64-ucrt\n"),
                          ("clang32", "ucrt\n"),
                          ("foobar", ""),
                          ("", ""),
                          ])
def test_run(msystem, expected):
    out, err = io.StringIO(), io.StringIO()
    assert msys_detect.run({"MSYSTEM": msystem}, stdout=out, stderr=err) == 0
    assert out.getvalue() == expected
    assert out.getvalue().count("\n") <= 1
    assert err.getvalue() == ""


def test_run_missing_variable():
    out, err = io.StringIO(), io.StringIO()
    assert msys_detect.run({}, stdout=out, stderr=err) == 1
    assert out.getvalue() == ""
    assert err.getvalue() == "Error: Environment variable MSYSTEM is not set\n"


class TestMain:
    def test_match(self, monkeypatch, capsys):
        monkeypatch.setenv("MSYSTEM", "UCRT64")
        monkeypatch.setattr("sys.argv", ["msys-detect"])
        with pytest.raises(SystemExit) as exc:
            msys_detect.main()
        assert exc.value.code == 0
        captured = capsys.readouterr()
        assert captured.out == "x64-ucrt\n"
        assert captured.err == ""

    def test_no_match(self, monkeypatch, capsys):
        monkeypatch.setenv("MSYSTEM", "MSYS")
        monkeypatch.setattr("sys.argv", ["msys-detect"])
        with pytest.raises(SystemExit) as exc:
            msys_detect.main()
        assert exc.value.code == 0
        assert capsys.readouterr().out == ""

    def test_unset(self, monkeypatch, capsys):
        monkeypatch.delenv("MSYSTEM", raising=False)
        monkeypatch.setattr("sys.argv", ["msys-detect"])
        with pytest.raises(SystemExit) as exc:
            msys_detect.main()
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "MSYSTEM is not set" in captured.err

    def test_rejects_arguments(self, monkeypatch):
        monkeypatch.setenv("MSYSTEM", "MINGW64")
        monkeypatch.setattr("sys.argv", ["msys-detect", "--arch", "x64"])
        with pytest.raises(SystemExit) as exc:
            msys_detect.main()
        assert exc.value.code == 2
