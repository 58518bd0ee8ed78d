"""
Restamp natural/version.py, a docstring-only module with a timestamped version-code.

The release part (e.g. 0.0.1) is kept from the current version.py unless given on the command line:

    python version_update_now.py          # 0.0.1.2026.1019.1959.39 --> 0.0.1.<now>
    python version_update_now.py 0.0.2   # --> 0.0.2.<now>
"""

import datetime
import sys

VERSION_PY = 'natural/version.py'
RELEASE_PARTS = 3   # major.minor.patch, the rest of the version-code is the UTC timestamp

with open(VERSION_PY, 'r') as version_py:
    old_version = version_py.read().strip().strip('"')

if len(sys.argv) > 1:
    version_base = sys.argv[1]
else:
    version_base = '.'.join(old_version.split('.')[:RELEASE_PARTS])
yyyy_mmdd_hhmm_ss = datetime.datetime.now(datetime.timezone.utc).strftime('%Y.%m%d.%H%M.%S')
new_version = version_base + '.' + yyyy_mmdd_hhmm_ss

with open(VERSION_PY, 'w') as version_py:
    version_py.write('"""' + new_version + '"""')

print(old_version, "-->", new_version)
