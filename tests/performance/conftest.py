"""Performance test configuration.

Coverage tracing distorts timings, so it is paused around every benchmark.
"""

import pytest

from bankengine import Bank, RequestType


@pytest.fixture(autouse=True)
def _no_coverage(request):
    cov_plugin = request.config.pluginmanager.get_plugin("_cov")
    if cov_plugin and cov_plugin.cov_controller:
        cov_plugin.cov_controller.cov.stop()
        yield
        cov_plugin.cov_controller.cov.start()
    else:
        yield


@pytest.fixture
def funded_bank() -> Bank:
    """1000 accounts of 10_000 each."""
    bank = Bank(0, 0.01, 0.005)
    for key in range(1000):
        bank.request(key * 7919, RequestType.OPEN_ACCOUNT, 10_000)
    return bank
