from apps.cli.play import play_game
from packages.absurdle import AbsurdleManager
from packages.engine import GRAY, is_solved


def test_play_game_skips_bad_input_and_finishes():
    lines = []
    m = AbsurdleManager(["abc", "abd", "xyz"], 3)
    history = play_game(m, ["ab", "", "abc", "xyz", "never-read"], out=lines.append)

    assert [g for g, _ in history] == ["abc", "xyz"]
    assert history[0][1] == GRAY * 3
    assert is_solved(history[-1][1])
    assert "3 letters" in lines[0]
    assert lines[-1].startswith("Absurdle solved in 2 guesses")


def test_play_game_strict_mode_and_word_listing():
    lines = []
    m = AbsurdleManager(["abc", "abd", "abe", "xyz"], 3)
    history = play_game(m, ["qqq", "abc"], allowed={"abc", "abd", "abe", "xyz"},
                        show_words=5, out=lines.append)

    assert len(history) == 1
    assert "not in the dictionary" in lines[0]
    assert lines[-1] == "  abd, abe"
