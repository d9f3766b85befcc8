"""
Keyword Relevance Analyzer
Compares resume text with a target text (job description, role vocabulary or
the generic ATS keyword string) using two independent signals:
  1. Overlap of the top TF-IDF terms of each side
  2. Cosine similarity of raw term-frequency vectors over the full texts
"""

from sklearn.feature_extraction.text import CountVectorizer, TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity


STOPWORDS = [
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "been", "be",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "this", "that", "these", "those",
]

TOP_TERMS = 30
MAX_MISSING = 10
MAX_REPORTED = 15

OVERLAP_WEIGHT = 0.6
SIMILARITY_WEIGHT = 0.4


def _has_tokens(vectorizer, docs: list[str]) -> bool:
    analyzer = vectorizer.build_analyzer()
    return any(analyzer(doc) for doc in docs)


def rank_terms(resume_text: str, target_text: str, limit: int = TOP_TERMS) -> tuple[list[dict], list[dict]]:
    """
    Ranks the terms of each document by TF-IDF weight, treating the two texts
    as a two-document corpus. Terms under 3 characters and stopwords are
    dropped. Ties are broken alphabetically.

    Returns:
        (resume_terms, target_terms), each [{"term": str, "score": float}, ...]
    """
    docs = [resume_text, target_text]
    vectorizer = TfidfVectorizer(
        lowercase=True,
        token_pattern=r"(?u)\b\w\w\w+\b",
        stop_words=STOPWORDS,
        norm=None,
    )
    if not _has_tokens(vectorizer, docs):
        return [], []

    matrix = vectorizer.fit_transform(docs).toarray()
    vocabulary = vectorizer.get_feature_names_out()

    ranked = []
    for row in matrix:
        terms = [
            {"term": str(term), "score": float(weight)}
            for term, weight in zip(vocabulary, row)
            if weight > 0
        ]
        # vocabulary is alphabetical and sort() is stable, so ties stay alphabetical
        terms.sort(key=lambda t: t["score"], reverse=True)
        ranked.append(terms[:limit])

    return ranked[0], ranked[1]


def term_frequency_similarity(text_a: str, text_b: str) -> float:
    """Cosine similarity of raw word counts over the full texts (0.0-1.0)."""
    docs = [text_a, text_b]
    vectorizer = CountVectorizer(lowercase=True, token_pattern=r"(?u)\b\w+\b")
    if not _has_tokens(vectorizer, docs):
        return 0.0

    counts = vectorizer.fit_transform(docs)
    similarity = float(cosine_similarity(counts[0:1], counts[1:2])[0][0])
    return min(max(similarity, 0.0), 1.0)


def analyze_keywords(resume_text: str, target_text: str) -> dict:
    """
    Keyword relevance score.

    score = 0.6 * (matched / target top terms) * 100 + 0.4 * similarity * 100,
    capped at 100. An empty target term list gives an overlap of 0.

    Returns:
        {
            "score": float (0-100),
            "details": {
                "matchedKeywords": [str],
                "missingKeywords": [str],
                "resumeKeywords": [{"term", "score"}],
                "targetKeywords": [{"term", "score"}],
                "similarity": float
            }
        }
    """
    resume_terms, target_terms = rank_terms(resume_text, target_text)

    target_set = {t["term"] for t in target_terms}
    resume_set = {t["term"] for t in resume_terms}

    matched = [t["term"] for t in resume_terms if t["term"] in target_set]
    missing = [t["term"] for t in target_terms if t["term"] not in resume_set][:MAX_MISSING]

    similarity = term_frequency_similarity(resume_text, target_text)

    overlap = len(matched) / len(target_terms) if target_terms else 0.0
    score = min(overlap * 100 * OVERLAP_WEIGHT + similarity * 100 * SIMILARITY_WEIGHT, 100.0)

    return {
        "score": score,
        "details": {
            "matchedKeywords": matched[:MAX_REPORTED],
            "missingKeywords": missing,
            "resumeKeywords": resume_terms[:MAX_REPORTED],
            "targetKeywords": target_terms[:MAX_REPORTED],
            "similarity": similarity,
        },
    }
