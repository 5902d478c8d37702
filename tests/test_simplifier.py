import pytest

from shell_nlp.rules import QUIT, SIMPLIFICATION_RULES, SimplificationRule
from shell_nlp.simplifier import RewriteStep, iter_rewrites, simplify


@pytest.mark.parametrize("text, expected", [
    ("quit", "quit"),
    ("bye", "quit"),
    ("Exit", "quit"),
    ("current directory", "current directory"),
    ("change directory C:\\temp", "change directory C:\\temp"),
    ("purple elephant", "purple elephant"),
    ("please switch directory to C:\\temp", "change directory C:\\temp"),
    ("PLEASE Switch Directory To D:\\Work", "change directory D:\\Work"),
    ("what files are in directory projects", "files on directory projects"),
    ("show the contents of file notes.txt", "contents files notes.txt"),
    ("could you create the directory reports", "make directory reports"),
    ("what os am i running", "os using"),
    ("show me everything on disk C", "all files on drive C"),
    ("any files in disk C", "all files on drive C"),
])
def test_simplify(text, expected):
    assert simplify(text, SIMPLIFICATION_RULES) == expected


def test_empty_and_blank_input():
    assert simplify("", SIMPLIFICATION_RULES) == ""
    assert simplify("   ", SIMPLIFICATION_RULES) == ""
    assert simplify("please", SIMPLIFICATION_RULES) == ""


def test_whitespace_runs_collapse():
    assert simplify("list   the   files", SIMPLIFICATION_RULES) == "files"
    assert simplify("  purple \t elephant  ", SIMPLIFICATION_RULES) == "purple elephant"


def test_unmatched_words_keep_their_case():
    assert simplify("make directory MyReports", SIMPLIFICATION_RULES) == "make directory MyReports"


def test_prefix_matching_reaches_inside_words():
    # "is" eats the start of "island", then "a" eats the start of "and"
    assert simplify("island", SIMPLIFICATION_RULES) == "d"
    assert simplify("show me all files on drive C", SIMPLIFICATION_RULES) == "l files on drive C"


def test_whole_words_keeps_longer_words_intact():
    assert simplify("island", SIMPLIFICATION_RULES, whole_words=True) == "island"
    assert simplify("could you show me all files on drive C", SIMPLIFICATION_RULES,
                    whole_words=True) == "all files on drive C"


def test_phrase_consumes_one_separator_character():
    rules = [SimplificationRule("ab", "X")]
    assert simplify("abcd", rules) == "X d"
    assert simplify("ab", rules) == "X"


def test_first_rule_in_table_order_wins():
    rules = [SimplificationRule("go", "short"), SimplificationRule("go to", "long")]
    assert simplify("go to town", rules) == "short to town"
    assert simplify("go to town", list(reversed(rules))) == "long town"


def test_rewrite_steps():
    steps = list(iter_rewrites("bye now", SIMPLIFICATION_RULES))
    assert steps == [
        RewriteStep(SimplificationRule("bye", QUIT), QUIT, "now"),
        RewriteStep(None, "now", ""),
    ]


def test_stop_words_emit_no_token():
    steps = list(iter_rewrites("please", SIMPLIFICATION_RULES))
    assert len(steps) == 1
    assert steps[0].rule.source == "please"
    assert steps[0].token is None


@pytest.mark.parametrize("text", [
    "could you show me all files on drive C",
    "a a a a a",
    "i would like you to show me the contents of file x",
    "   leading and trailing   ",
    "x",
])
def test_every_step_makes_progress(text):
    steps = list(iter_rewrites(text, SIMPLIFICATION_RULES))
    assert len(steps) <= len(text)
    lengths = [len(text)] + [len(step.remaining) for step in steps]
    assert all(after < before for before, after in zip(lengths, lengths[1:]))


def test_simplify_is_deterministic():
    text = "would you tell me which files are on disk in drive E"
    first = simplify(text, SIMPLIFICATION_RULES)
    assert all(simplify(text, SIMPLIFICATION_RULES) == first for _ in range(5))
