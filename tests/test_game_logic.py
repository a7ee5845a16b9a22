import random

import pytest

from wordscramble.game_logic import (
    RejectionReason,
    Session,
    is_possible,
    normalize,
    validate,
)

WORDS = {"silk", "worm", "milk", "skim", "slow", "owl", "rows", "silks"}


def is_word(w):
    return w in WORDS


# --- rule scenarios against the "silkworm" root ---
@pytest.mark.parametrize("candidate,used,expected", [
    ("silk", set(), None),
    ("silkworm", set(), RejectionReason.IS_ROOT_WORD),
    ("sl", set(), RejectionReason.TOO_SHORT),
    ("silks", set(), RejectionReason.NOT_SUBSEQUENCE),
    ("silk", {"silk"}, RejectionReason.ALREADY_USED),
    ("xyzzy", set(), RejectionReason.NOT_SUBSEQUENCE),
    ("wormil", set(), RejectionReason.NOT_IN_DICTIONARY),
])
def test_validate_silkworm_scenarios(candidate, used, expected):
    r = validate(candidate, "silkworm", used, is_word)
    assert r.reason == expected
    assert r.accepted is (expected is None)


def test_unknown_word_made_of_root_letters_is_not_in_dictionary():
    r = validate("xyzzy", "xyzzyabc", set(), is_word)
    assert r.reason is RejectionReason.NOT_IN_DICTIONARY
    assert r.title == "Word not recognized"


def test_first_failure_wins():
    # too short AND not in the root: length is reported
    assert validate("zz", "silkworm", set(), is_word).reason is RejectionReason.TOO_SHORT
    # used AND not a word: reuse is reported before the dictionary check
    assert validate("lkw", "silkworm", {"lkw"}, is_word).reason is RejectionReason.ALREADY_USED


def test_candidate_is_normalized():
    r = validate("  SiLk \n", "silkworm", set(), is_word)
    assert r.accepted and r.word == "silk"
    assert normalize("\tWORM ") == "worm"


def test_rejection_messages_mention_root_word():
    r = validate("silks", "silkworm", set(), is_word)
    assert r.title == "Word not possible"
    assert r.message == "You can't spell that word from 'silkworm'!"
    r = validate("ab", "silkworm", set(), is_word)
    assert r.message == "The word should be at least 3 letters"


def test_validate_is_pure():
    used = {"worm"}
    calls = []

    def oracle(w):
        calls.append(w)
        return w in WORDS

    first = validate("milk", "silkworm", used, oracle)
    second = validate("milk", "silkworm", used, oracle)
    assert first == second
    assert used == {"worm"}
    assert calls == ["milk", "milk"]


def test_oracle_not_consulted_when_earlier_rule_fails():
    def oracle(w):
        raise AssertionError("dictionary should not be queried")

    assert validate("silks", "silkworm", set(), oracle).reason is RejectionReason.NOT_SUBSEQUENCE


def test_is_possible_respects_letter_counts():
    assert is_possible("silk", "silkworm")
    assert is_possible("mrowklis", "silkworm")
    assert not is_possible("silks", "silkworm")
    assert is_possible("ball", "baseball")
    assert is_possible("balls", "baseball")
    assert not is_possible("bbb", "baseball")
    assert not is_possible("sass", "baseball")


def test_custom_min_length():
    assert validate("owl", "silkworm", set(), is_word, min_length=4).reason is RejectionReason.TOO_SHORT
    assert validate("slow", "silkworm", set(), is_word, min_length=4).accepted


# --- Session ---
def test_session_submit_records_most_recent_first():
    s = Session(["silkworm"], is_word, rng=random.Random(1))
    assert s.root_word == "silkworm"
    assert s.submit("silk").accepted
    assert s.submit("Worm").accepted
    assert s.used_words == ["worm", "silk"]


def test_rejection_leaves_session_unchanged():
    s = Session(["silkworm"], is_word)
    s.submit("silk")
    before = (list(s.used_words), list(s.scores), s.root_word)
    for bad in ["sl", "silkworm", "silk", "silks", "wormil"]:
        assert not s.submit(bad).accepted
    assert (s.used_words, s.scores, s.root_word) == before


def test_restart_appends_one_score_and_clears_words():
    s = Session(["silkworm", "baseball"], is_word, rng=random.Random(3))
    root = s.root_word
    s.used_words = ["a", "b"]
    new_root = s.restart()
    assert new_root in ("silkworm", "baseball")
    assert s.root_word == new_root
    assert s.used_words == []
    assert len(s.scores) == 1
    assert (s.scores[0].word, s.scores[0].score) == (root, 2)
    s.restart()
    assert [x.score for x in s.scores] == [2, 0]


def test_session_normalizes_root_words():
    s = Session([" SilkWorm \n"], lambda w: True)
    assert s.root_word == "silkworm"
    r = s.submit("silkworm")
    assert r.reason is RejectionReason.IS_ROOT_WORD
    assert s.submit("Silk").accepted

    assert s.start_game(["  ", "BaseBall"]) == "baseball"
    r = s.submit("balls")
    assert r.accepted and r.word == "balls"
    r = s.submit("bbb")
    assert r.message == "You can't spell that word from 'baseball'!"


def test_start_game_falls_back_on_empty_list():
    s = Session([], is_word)
    assert s.root_word == "silkworm"
    assert s.start_game(["", ""]) == "silkworm"
    assert s.start_game(["notebook"]) == "notebook"


def test_start_game_draws_from_list():
    words = ["silkworm", "baseball", "notebook"]
    s = Session(words, is_word, rng=random.Random(0))
    seen = {s.start_game() for _ in range(50)}
    assert seen <= set(words)
    assert len(seen) > 1
