import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from envenc import CipherSuite, EnvContext


@pytest.fixture(params=list(CipherSuite), ids=lambda s: s.label)
def suite(request):
    return request.param


@pytest.fixture
def ctx():
    return EnvContext({})


@pytest.fixture
def scrub_env(monkeypatch):
    """
    Remove variables from os.environ for one test and restore them after,
    including ones the code under test creates.
    """
    def scrub(*names):
        for name in names:
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
    return scrub
