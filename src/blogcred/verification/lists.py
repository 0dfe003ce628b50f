# src/blogcred/verification/lists.py

import re
from types import MappingProxyType
from typing import FrozenSet, Mapping, Pattern, Tuple

# Trusted source registry: category -> domain substrings
# Checked with substring matching, so "gov.br" also covers every *.gov.br host
TRUSTED_SOURCE_REGISTRY: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        "academic": frozenset(
            {
                "scholar.google.com",
                "ieee.org",
                "acm.org",
                "scielo.org",
                "researchgate.net",
                "arxiv.org",
                "pubmed.ncbi.nlm.nih.gov",
                "jstor.org",
                "springer.com",
                "elsevier.com",
            }
        ),
        "government": frozenset(
            {
                "gov.br",
                "serpro.gov.br",
                "cert.br",
                "cgi.br",
                "anatel.gov.br",
                "mj.gov.br",
                "pf.gov.br",
                "dpf.gov.br",
            }
        ),
        "techNews": frozenset(
            {
                "tecnoblog.net",
                "olhardigital.com.br",
                "canaltech.com.br",
                "techtudo.com.br",
                "convergenciadigital.com.br",
                "securityreport.com.br",
                "hackernews.com",
                "arstechnica.com",
                "wired.com",
                "techcrunch.com",
            }
        ),
        "cybersecurity": frozenset(
            {
                "kaspersky.com.br",
                "symantec.com",
                "mcafee.com",
                "trendmicro.com",
                "checkpoint.com",
                "fortinet.com",
                "paloaltonetworks.com",
                "crowdstrike.com",
                "fireeye.com",
                "sans.org",
            }
        ),
    }
)

# Phrases commonly found in fabricated or manipulative articles (lowercase)
SUSPICIOUS_KEYWORDS: Tuple[str, ...] = (
    "descoberta revolucionária",
    "médicos odeiam",
    "governo esconde",
    "mídia não quer que você saiba",
    "método secreto",
    "conspiração",
    "teoria da conspiração",
    "fake news",
    "informação censurada",
    "verdade oculta",
)

# Sensationalist markers, one warning per entry that matches
SENSATIONALIST_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"URGENTE:", re.IGNORECASE),
    re.compile(r"BOMBA:", re.IGNORECASE),
    re.compile(r"EXCLUSIVO:", re.IGNORECASE),
    re.compile(r"CHOCANTE:", re.IGNORECASE),
    re.compile(r"INACREDITÁVEL:", re.IGNORECASE),
    re.compile(r"SURPREENDENTE:", re.IGNORECASE),
    re.compile(r"!!!+"),
    # Caps-lock words; ASCII word boundaries so accented letters split tokens
    re.compile(r"\b[A-Z]{3,}\b", re.ASCII),
)

TECHNICAL_TERMS: Tuple[str, ...] = (
    "API",
    "HTTP",
    "SSL",
    "TLS",
    "SQL",
    "JavaScript",
    "Python",
    "React",
    "Node.js",
    "cybersecurity",
    "malware",
    "phishing",
)

TECHNICAL_TERMS_PATTERN: Pattern[str] = re.compile(
    r"\b(" + "|".join(re.escape(term) for term in TECHNICAL_TERMS) + r")\b",
    re.IGNORECASE,
)

# Topical keyword sets per blog category (lowercase)
CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "programming": (
            "código",
            "programação",
            "desenvolvimento",
            "software",
            "algoritmo",
            "javascript",
            "python",
            "react",
        ),
        "cybersecurity": (
            "segurança",
            "proteção",
            "criptografia",
            "firewall",
            "antivírus",
            "vulnerability",
            "exploit",
        ),
        "digital_crime": (
            "crime",
            "fraude",
            "phishing",
            "scam",
            "golpe",
            "roubo",
            "invasão",
            "hacker",
        ),
        "news": (
            "notícia",
            "atualização",
            "lançamento",
            "empresa",
            "mercado",
            "tecnologia",
        ),
        "legislation": (
            "lei",
            "legislação",
            "marco civil",
            "lgpd",
            "regulamentação",
            "jurídico",
            "direito",
        ),
        "campaigns": (
            "campanha",
            "conscientização",
            "educação",
            "prevenção",
            "comunidade",
        ),
    }
)


def match_trusted_categories(domain: str) -> FrozenSet[str]:
    """
    Return every registry category with a substring that occurs in the domain.

    Args:
        domain: Normalized domain (lowercase, no www.)

    Returns:
        Frozen set of category tags (empty if the domain is on no list).
    """
    return frozenset(
        category
        for category, trusted_domains in TRUSTED_SOURCE_REGISTRY.items()
        if any(trusted in domain for trusted in trusted_domains)
    )
