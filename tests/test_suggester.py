from shell_nlp.rules import SIMPLIFICATION_RULES, TRANSLATION_RULES, build_translation_rules
from shell_nlp.suggester import PhraseSuggester


def make_suggester(**kwargs):
    return PhraseSuggester(TRANSLATION_RULES, SIMPLIFICATION_RULES, **kwargs)


def test_examples_are_indexed_in_canonical_form():
    suggester = make_suggester()
    assert len(suggester.examples) == len(TRANSLATION_RULES)
    assert "files on directory projects" in suggester.canonical_examples


def test_suggests_closest_example():
    suggester = make_suggester()
    assert suggester.suggest("make folder reports") == "could you create the directory reports"
    assert suggester.suggest("files on folder docs") == "what files are in directory projects"


def test_nothing_close_enough():
    suggester = make_suggester()
    assert suggester.suggest("purple elephant") is None
    assert suggester.suggest("") is None
    assert suggester.suggest("   ") is None


def test_threshold_is_respected():
    assert make_suggester(threshold=1.01).suggest("make folder reports") is None


def test_rules_without_examples():
    rules = build_translation_rules([(r"^quit$", "quit")])
    suggester = PhraseSuggester(rules, SIMPLIFICATION_RULES)
    assert suggester.vectorizer is None
    assert suggester.suggest("anything") is None
