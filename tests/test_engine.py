import pytest
from packages.engine import (
    GREEN, YELLOW, GRAY,
    compute_clue, pattern_key, all_green, is_solved, to_letters,
    filter_candidates, guess_problem,
)

_GLYPH = {"G": GREEN, "Y": YELLOW, "-": GRAY}


def _p(letters: str) -> str:
    """'G-Y' -> glyph pattern, keeps the golden tables readable."""
    return "".join(_GLYPH[c] for c in letters)


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("scoop", "scoop", "GGGGG"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("abbey", "babes", "YYGG-"),
    ("abbey", "kebab", "-YGYY"),
])
def test_compute_clue_n5_golden(secret, guess, expected):
    assert compute_clue(secret, guess) == _p(expected)


# --- N=6 and short words ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("letter", "settle", "-GGGYY"),
    ("letter", "little", "G-GG-Y"),
    ("palate", "planet", "GYY-YY"),
    ("tinket", "kitten", "YGYYGY"),
    ("abb", "bba", "YGY"),
    ("a", "a", "G"),
    ("a", "b", "-"),
])
def test_compute_clue_other_lengths(secret, guess, expected):
    assert compute_clue(secret, guess) == _p(expected)


def test_duplicate_guess_letters_beyond_secret_count_are_gray():
    # extra copies of a letter earn nothing once the secret's copies are used up
    assert compute_clue("crane", "eerie") == _p("--Y-G")
    assert compute_clue("there", "eerie") == _p("Y-Y-G")


@pytest.mark.parametrize("word", ["a", "abc", "crane", "letter", "mississippi"])
def test_self_clue_is_all_green(word):
    patt = compute_clue(word, word)
    assert patt == all_green(len(word))
    assert is_solved(patt)


@pytest.mark.parametrize("secret,guess", [("abc", "xyz"), ("crane", "stare"), ("aaaa", "abab")])
def test_clue_length_matches_word_length(secret, guess):
    assert len(compute_clue(secret, guess)) == len(secret)


def test_compute_clue_length_mismatch_asserts():
    with pytest.raises(AssertionError):
        compute_clue("abc", "ab")


def test_pattern_key_ranks_gray_yellow_green():
    assert pattern_key(_p("-YG")) == (0, 1, 2)
    ordered = sorted([_p("GG"), _p("-G"), _p("Y-"), _p("--")], key=pattern_key)
    assert ordered == [_p("--"), _p("-G"), _p("Y-"), _p("GG")]


def test_to_letters_and_is_solved():
    assert to_letters(_p("G-Y")) == "G-Y"
    assert not is_solved(_p("GGY"))
    assert not is_solved("")


def test_filter_candidates_n5_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", _p("YY--G"))]
    cand = filter_candidates(words, history, N=5)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_length_and_dupes():
    words = ["cat", "dog", "cat", "frog"]
    assert filter_candidates(words, [], N=3) == ["cat", "dog"]


def test_guess_problem():
    allowed = {"crane", "raise", "stare"}
    assert guess_problem("crane", 5, allowed) is None
    assert guess_problem("zzzzz", 5) is None
    assert "5 letters" in guess_problem("cranes", 5, allowed)
    assert "a-z" in guess_problem("cr4ne", 5)
    assert "dictionary" in guess_problem("zzzzz", 5, ["crane"])
