# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_sequence(f, input_format='lines'):
    """Read and return a list of values from a filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows), which
            gives an empty sequence.
            Alternatively a file-like object can be passed.
        input_format: How to interpret the contents
            "lines": one string value per line, without line endings
            "json": a json array of values
    """
    if input_format not in ('lines', 'json'):
        raise ValueError(
            'Not valid value for `input_format`: %r. Valid values '
            'are "lines" or "json"' % (input_format,))
    if f == EXPLICIT_MISSING_FILE:
        return []
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()

    if input_format == 'lines':
        return text.splitlines()

    values = json.loads(text)
    if not isinstance(values, list):
        raise ValueError(
            'Expected a json array of values, got %s' % type(values).__name__)
    return values


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            new_stream = codecs.getwriter(enc)(stream.buffer, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    _setup_std_stream_encoding()
