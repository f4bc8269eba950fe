import io
import logging

import pytest

from tests.fixtures import BINDING_XML, CONFIG_XML, THING_XML


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("eshinf")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def binding_tree(tmp_path):
    """A binding directory with a valid ESH-INF tree and an i18n folder."""
    esh_inf = tmp_path / "org.acme.binding" / "ESH-INF"
    for name in ("thing", "binding", "config", "i18n"):
        (esh_inf / name).mkdir(parents=True)

    (esh_inf / "thing" / "Thermostat.xml").write_text(THING_XML)
    (esh_inf / "binding" / "binding.xml").write_text(BINDING_XML)
    (esh_inf / "config" / "config.xml").write_text(CONFIG_XML)
    (esh_inf / "i18n" / "strings.xml").write_text("<strings/>\n")
    (esh_inf / "i18n" / "acme_de.properties").write_text("key=value\n")

    return tmp_path / "org.acme.binding"
