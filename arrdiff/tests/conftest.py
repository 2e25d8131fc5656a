# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import shutil

from pytest import fixture, skip

import arrdiff.config


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return pjoin(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty working directory, without user config files"""
    monkeypatch.chdir(str(tmpdir))
    monkeypatch.setattr(arrdiff.config, 'jupyter_config_path', lambda: [])
    return tmpdir
