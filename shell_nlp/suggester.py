"""Phrase Suggester Module

When a request is not understood, proposes the closest phrasing the shell
does understand. Each translation rule carries an example request; the
examples are simplified and indexed with TF-IDF, and the canonical form of
the failed request is compared against them with cosine similarity.

The suggestion is only a hint, it never changes what gets executed."""

import logging
from typing import List, Optional, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from .rules import SimplificationRule, TranslationRule
from .simplifier import simplify


logger = logging.getLogger(__name__)


class PhraseSuggester:
    """TF-IDF index over the example requests of the translation rules."""

    def __init__(
        self,
        translation_rules: Sequence[TranslationRule],
        simplification_rules: Sequence[SimplificationRule],
        threshold: float = 0.2,
        whole_words: bool = False,
    ):
        """Sets up the suggester.

        Takes in:
            translation_rules: rules whose `example` requests get indexed
            simplification_rules: rules used to bring examples to canonical form
            threshold: minimum cosine similarity for a suggestion
            whole_words: simplify the examples in whole word mode"""
        self.threshold = threshold
        self.examples: List[str] = [rule.example for rule in translation_rules if rule.example]
        self.canonical_examples: List[str] = [simplify(text, simplification_rules, whole_words) for text in self.examples]

        self.vectorizer: Optional[TfidfVectorizer] = None
        self.example_vectors = None

        self._build_model()

    def _build_model(self):
        """Builds the TF-IDF model over the canonical examples."""
        if not self.canonical_examples:
            return

        # canonical strings are already stripped of stop words
        self.vectorizer = TfidfVectorizer(
            ngram_range=(1, 2),
            min_df=1,
            analyzer='word',
            lowercase=True,
            norm='l2',
            token_pattern=r"(?u)\b\w+\b",
        )
        self.example_vectors = self.vectorizer.fit_transform(self.canonical_examples)
        logger.debug("suggester indexed %d examples, %d features",
                     len(self.canonical_examples), self.example_vectors.shape[1])

    def suggest(self, canonical: str) -> Optional[str]:
        """Find the example request closest to a canonical string.
        Takes in:
        canonical: simplified form of the request that was not understood
        Gives back:
        the natural language example, or None if nothing is close enough"""
        if self.vectorizer is None or not canonical or not canonical.strip():
            return None

        user_vector = self.vectorizer.transform([canonical])
        similarities = cosine_similarity(user_vector, self.example_vectors)[0]

        best_idx = int(np.argmax(similarities))
        best_similarity = float(similarities[best_idx])
        logger.debug("closest example to %r is %r (%.3f)",
                     canonical, self.examples[best_idx], best_similarity)

        if best_similarity < self.threshold:
            return None
        return self.examples[best_idx]
