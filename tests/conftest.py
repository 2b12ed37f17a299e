import sys

import pytest

from churchy.names import naming_context

sys.setrecursionlimit(10000)


@pytest.fixture
def fresh_names():
    """Run a test with its own generated names, starting again at `u1`."""
    with naming_context() as context:
        yield context
