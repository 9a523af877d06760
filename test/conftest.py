import logging

import pytest


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by configure_logging."""
    yield
    package_logger = logging.getLogger("nhxtree")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def wikipedia_newick():
    return "(A:0.1,B:0.2,(C:0.3,D:0.4)E:0.5)F;"


@pytest.fixture
def wikipedia_nhx():
    return (
        "(A:0.1[&&NHX:gn=10],B:0.2[&&NHX:gn=10],"
        "(C:0.3[&&NHX:gn=10],D:0.4[&&NHX:gn=10])E:0.5[&&NHX:gn=10])F[&&NHX:gn=10];"
    )
