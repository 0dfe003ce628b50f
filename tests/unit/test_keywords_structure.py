# tests/unit/test_keywords_structure.py

from blogcred.verification.category import analyze_category_relevance
from blogcred.verification.keywords import analyze_keywords
from blogcred.verification.structure import analyze_structure

LONG_PARAGRAPH = (
    "A equipe de infraestrutura publicou um relatório detalhado sobre a migração "
    "dos servidores, descrevendo cada etapa, os riscos avaliados e o plano de "
    "contingência adotado durante a janela de manutenção do fim de semana."
)


class TestKeywordAnalyzer:
    """Test suspicious phrase detection."""

    def test_no_keywords(self):
        warnings = []
        assert analyze_keywords("Relatório trimestral de incidentes", warnings) == 100
        assert warnings == []

    def test_fake_news_case_insensitive(self):
        """'fake news' in any case costs 15 points and one warning."""
        warnings = []
        assert analyze_keywords("Isso é FAKE NEWS, diz o ministro", warnings) == 85
        assert warnings == ['Suspicious keyword found: "fake news"']

    def test_distinct_phrases_stack(self):
        """Nested phrases count separately, repeated phrases count once."""
        warnings = []
        text = "Uma teoria da conspiração. Outra teoria da conspiração. Método secreto!"
        # "teoria da conspiração" also contains "conspiração"
        assert analyze_keywords(text, warnings) == 55
        assert len(warnings) == 3

    def test_floor_is_zero(self):
        warnings = []
        text = (
            "descoberta revolucionária, médicos odeiam, governo esconde, "
            "mídia não quer que você saiba, método secreto, teoria da conspiração, "
            "fake news, informação censurada, verdade oculta"
        )
        assert analyze_keywords(text, warnings) == 0
        assert len(warnings) == 10


class TestStructureAnalyzer:
    """Test length, paragraph and technical density checks."""

    def test_short_single_paragraph(self):
        warnings = []
        assert analyze_structure("Texto curto.", warnings) == 65
        assert warnings == [
            "Content too short for adequate verification",
            "Inadequate structure (too few paragraphs)",
        ]

    def test_well_structured_content(self):
        warnings = []
        content = LONG_PARAGRAPH + "\n\n" + LONG_PARAGRAPH
        assert analyze_structure(content, warnings) == 100
        assert warnings == []

    def test_technical_bonus_requires_digit_and_term(self):
        """Technical bonus needs both a number and a technical term."""
        assert analyze_structure("Dicas de Python 3", []) == 75
        assert analyze_structure("Dicas de Python", []) == 65
        assert analyze_structure("Dicas número 3", []) == 65

    def test_technical_term_whole_word(self):
        """Technical terms only count as whole words."""
        assert analyze_structure("5 malwares", []) == 65
        assert analyze_structure("5 tipos de Node.js", []) == 75

    def test_bonus_is_capped(self):
        content = "Em 2024 a API mudou.\n" + LONG_PARAGRAPH
        assert analyze_structure(content, []) == 100


class TestCategoryRelevance:
    """Test topical keyword overlap with the blog categories."""

    def test_two_hits_in_one_category(self):
        warnings = []
        score = analyze_category_relevance(
            "Guia de segurança", "Como usar criptografia no dia a dia", warnings
        )
        assert score == 100
        assert warnings == []

    def test_hits_spread_across_categories_do_not_count(self):
        """One hit in each of several categories is not enough."""
        warnings = []
        score = analyze_category_relevance("Firewall", "um golpe", warnings)
        assert score == 70
        assert warnings == ["Content may be miscategorized"]

    def test_off_topic_content(self):
        warnings = []
        assert analyze_category_relevance("Receita de bolo", "Misture tudo.", warnings) == 70
        assert warnings == ["Content may be miscategorized"]
