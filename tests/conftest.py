# tests/conftest.py

import pytest

SCENARIO_TITLE = "URGENTE: descoberta revolucionária!!!"

SCENARIO_CONTENT = (
    "In 2024 a small team of volunteers rewrote the public API that powers our "
    "city transit map. The old service answered every HTTP request with a large "
    "JSON document, even when the client only needed a single bus stop, so phones "
    "on slow connections often gave up before the page loaded.\n\n"
    "The new version splits the data into smaller pages, caches the results for a "
    "few minutes and only accepts TLS connections. Early measurements show the "
    "median response time falling from four seconds to under half a second, and "
    "the maintainers plan to publish the full benchmark numbers next month."
)

TRUSTED_TITLE = "Boas práticas de segurança para aplicações web"

TRUSTED_CONTENT = (
    "Em 2024 a equipe revisou as práticas de segurança do nosso projeto em python "
    "e passou a usar criptografia em todas as conexões.\n"
    "O guia completo explica como configurar o firewall, rotacionar chaves e "
    "registrar tentativas de acesso suspeitas sem expor dados pessoais dos usuários."
)

HOAX_TITLE = "BOMBA: governo esconde a verdade!!!!!"

HOAX_CONTENT = (
    "Médicos odeiam este método secreto. A verdade oculta que chamam de fake news."
)


@pytest.fixture
def scenario_article():
    """Sensationalist headline over a solid technical body (review band)."""
    return SCENARIO_TITLE, SCENARIO_CONTENT, ["https://scholar.google.com/x"]


@pytest.fixture
def trusted_article():
    """Well-sourced, on-topic article (approve band)."""
    return TRUSTED_TITLE, TRUSTED_CONTENT, ["https://arxiv.org/abs/2401.00001"]


@pytest.fixture
def hoax_article():
    """Short, unsourced, sensationalist post (reject band)."""
    return HOAX_TITLE, HOAX_CONTENT, []
