import io

import pytest

from planisphere.catalogue import ASTERISMS, HYG_DATABASE, CatalogueBuilder

from samples import ALNITAK, ANONYMOUS, ASTERISM_LINES, BETELGEUSE, SIRIUS, hyg_file


@pytest.fixture
def hyg_stream():
    return io.BytesIO(hyg_file(SIRIUS, BETELGEUSE, ALNITAK, ANONYMOUS))


@pytest.fixture
def asterism_stream():
    return io.BytesIO(ASTERISM_LINES.encode("ascii"))


@pytest.fixture
def catalogue(hyg_stream, asterism_stream):
    return (
        CatalogueBuilder()
        .load_from(hyg_stream, HYG_DATABASE)
        .load_from(asterism_stream, ASTERISMS)
        .build()
    )
