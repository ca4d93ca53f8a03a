# python
import sys

import pytest


@pytest.fixture
def source_tree():
    return {
        "name": "Cooper",
        "booleanFalse": False,
        "booleanTrue": True,
        "MAX_INTEGER": 2**31 - 1,
        "MAX_LONG": 2**63 - 1,
        "MAX_DOUBLE": sys.float_info.max,
        "nullValue": None,
        "proxy": {
            "port": 9999,
            "params": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],
            "map": {"number": 1, "name": "Harry"},
        },
    }
