# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "1.0.0"

_levels = {"a": "alpha", "b": "beta", "rc": "candidate", "": "final"}

_match = re.match(
    r"^(\d+)\.(\d+)\.(\d+)(?:(a|b|rc)(\d+))?$", __version__
)

version_info = VersionInfo(
    int(_match.group(1)),
    int(_match.group(2)),
    int(_match.group(3)),
    _levels[_match.group(4) or ""],
    _match.group(5) or "",
)
