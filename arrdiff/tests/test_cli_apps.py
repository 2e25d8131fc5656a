# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

import pytest

import arrdiff
from arrdiff import arrdiffapp
from arrdiff.arrdiffapp import main_diff
from arrdiff.__main__ import main_dispatch
from arrdiff.diff_format import from_json, source_values, target_values
from arrdiff.utils import EXPLICIT_MISSING_FILE, read_sequence


def test_arrdiff_app_lines(filespath, isolated_config, capsys):
    afn = os.path.join(filespath, "lines-base.txt")
    bfn = os.path.join(filespath, "lines-modified.txt")

    args = arrdiffapp._build_arg_parser().parse_args([afn, bfn, '--log-level=WARN'])
    assert 0 == main_diff(args)
    assert args.log_level == 'WARN'
    assert arrdiff.log.logger.level == logging.WARN

    d = from_json(capsys.readouterr().out)
    assert source_values(d) == read_sequence(afn)
    assert target_values(d) == read_sequence(bfn)
    assert d[0] == {"value": "def f(a, b):", "mask": 0}


def test_arrdiff_app_json(filespath, isolated_config, capsys):
    afn = os.path.join(filespath, "values-base.json")
    bfn = os.path.join(filespath, "values-modified.json")

    args = arrdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--input-format=json'])
    assert 0 == main_diff(args)
    d = json.loads(capsys.readouterr().out)
    assert d == [
        {"value": "foo", "mask": -1},
        {"value": "bar", "mask": 0},
        {"value": 1, "mask": 0},
        {"value": 2, "mask": -1},
        {"value": "qux", "mask": 1},
    ]

    args = arrdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--input-format=json', '--compare=strict'])
    assert 0 == main_diff(args)
    d = json.loads(capsys.readouterr().out)
    assert d == [
        {"value": "foo", "mask": -1},
        {"value": "bar", "mask": 0},
        {"value": 1, "mask": -1},
        {"value": 2, "mask": -1},
        {"value": "1", "mask": 1},
        {"value": "qux", "mask": 1},
    ]


def test_arrdiff_app_out(tempfiles, isolated_config):
    afn = os.path.join(tempfiles, "lines-base.txt")
    bfn = os.path.join(tempfiles, "lines-modified.txt")
    dfn = os.path.join(tempfiles, "diff.json")

    args = arrdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--out', dfn, '--indent', '0'])
    assert 0 == main_diff(args)

    with io.open(dfn, encoding='utf-8') as f:
        text = f.read()
    assert text.count("\n") == 1
    d = from_json(text)
    assert target_values(d) == read_sequence(bfn)


def test_arrdiff_app_null_file(filespath, isolated_config, capsys):
    fn = os.path.join(filespath, "lines-base.txt")
    lines = read_sequence(fn)

    args = arrdiffapp._build_arg_parser().parse_args([fn, EXPLICIT_MISSING_FILE])
    assert 0 == main_diff(args)
    d = from_json(capsys.readouterr().out)
    assert [e.mask for e in d] == [-1] * len(lines)

    args = arrdiffapp._build_arg_parser().parse_args([EXPLICIT_MISSING_FILE, fn])
    assert 0 == main_diff(args)
    d = from_json(capsys.readouterr().out)
    assert [e.mask for e in d] == [1] * len(lines)


def test_arrdiff_app_missing_file(filespath, isolated_config, capsys):
    fn = os.path.join(filespath, "lines-base.txt")
    args = arrdiffapp._build_arg_parser().parse_args([fn, "does-not-exist.txt"])
    assert 1 == main_diff(args)
    assert "Missing file does-not-exist.txt" in capsys.readouterr().out


def test_arrdiff_app_bad_json(filespath, isolated_config):
    afn = os.path.join(filespath, "values-base.json")
    for bad in ("not-a-list.json", "lines-base.txt"):
        bfn = os.path.join(filespath, bad)
        args = arrdiffapp._build_arg_parser().parse_args(
            [afn, bfn, '--input-format=json'])
        assert 1 == main_diff(args)


def test_arrdiff_app_main(filespath, isolated_config, capsys):
    afn = os.path.join(filespath, "values-base.json")
    bfn = os.path.join(filespath, "values-modified.json")
    assert 0 == arrdiffapp.main([afn, bfn, '--input-format', 'json'])
    assert len(from_json(capsys.readouterr().out)) == 5


def test_dispatch_diff(filespath, isolated_config, capsys):
    afn = os.path.join(filespath, "lines-base.txt")
    assert 0 == main_dispatch(["diff", afn, afn])
    d = from_json(capsys.readouterr().out)
    assert all(e.mask == 0 for e in d)


def test_dispatch_version():
    with pytest.raises(SystemExit) as e:
        main_dispatch(["--version"])
    assert e.value.code == arrdiff.__version__


@pytest.mark.parametrize("args", [[], ["-h"], ["frobnicate"]])
def test_dispatch_usage(args):
    with pytest.raises(SystemExit) as e:
        main_dispatch(args)
    assert "Usage: arrdiff" in str(e.value.code)


def test_dispatch_config(isolated_config, capsys):
    with pytest.raises(SystemExit) as e:
        main_dispatch(["--config"])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert "All available config options" in err
    assert "input_format" in err


def test_read_sequence(filespath):
    fn = os.path.join(filespath, "values-base.json")
    assert read_sequence(fn, 'json') == ["foo", "bar", 1, 2]
    assert read_sequence(io.StringIO("a\nb\r\nc"), 'lines') == ["a", "b", "c"]
    assert read_sequence(EXPLICIT_MISSING_FILE, 'json') == []
    with pytest.raises(ValueError):
        read_sequence(fn, 'yaml')


def test_arrdiff_app_lines_loose_and_strict(tmpdir, isolated_config, capsys):
    afn = str(tmpdir.join("a.txt"))
    bfn = str(tmpdir.join("b.txt"))
    with io.open(afn, "w", encoding="utf-8") as f:
        f.write(u"1\n2\n")
    with io.open(bfn, "w", encoding="utf-8") as f:
        f.write(u"1.0\n2\n")

    args = arrdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--compare=loose'])
    assert 0 == main_diff(args)
    d = json.loads(capsys.readouterr().out)
    assert d == [
        {"value": "1", "mask": 0},
        {"value": "2", "mask": 0},
    ]

    args = arrdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--compare=strict'])
    assert 0 == main_diff(args)
    d = json.loads(capsys.readouterr().out)
    assert d == [
        {"value": "1", "mask": -1},
        {"value": "1.0", "mask": 1},
        {"value": "2", "mask": 0},
    ]
