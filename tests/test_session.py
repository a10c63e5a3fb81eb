import random

import pytest
from packages.datasets import build_corpus
from packages.engine import AnswersHiddenError, ExhaustionError, GameOverError, InvalidWordError
from packages.game import GameSession, GameStatus, new_session, submit

ALLOWED = ["arise", "count", "stack", "lymph", "crane", "sassy", "bumpy", "world"]


def _session(max_guesses=6):
    return GameSession(answers=("arise", "count"), allowed=frozenset(ALLOWED), max_guesses=max_guesses)


def test_initial_state():
    s = _session()
    assert s.status is GameStatus.IN_PROGRESS
    assert s.guess_count == 0
    assert s.attempts_remaining == 6
    assert s.found_letters == frozenset() and s.eliminated_letters == frozenset()


def test_stack_touches_both_words():
    s = _session()
    out = s.submit("stack")
    assert out.both_words is True
    assert not s.is_correct("stack")
    assert s.result_suffix(out) == "  (both words)"
    assert s.guess_count == 1 and s.status is GameStatus.IN_PROGRESS
    assert s.found_letters == {"s", "t", "a", "c"}
    assert s.eliminated_letters == {"k"}


def test_exact_letters_are_found():
    s = _session()
    out = s.submit("crane")
    assert out.pattern == "GGYGG"
    assert s.found_letters == set("crane")
    assert s.eliminated_letters == frozenset()
    assert s.attempts_remaining == 5


def test_letter_views_are_read_only_snapshots():
    s = _session()
    s.submit("stack")
    found = s.found_letters
    assert isinstance(found, frozenset)
    assert isinstance(s.eliminated_letters, frozenset)
    assert not hasattr(s, "found") and not hasattr(s, "eliminated")
    s.submit("lymph")
    assert found == {"s", "t", "a", "c"}  # earlier view unchanged
    assert s.eliminated_letters == {"k"} | set("lymph")


def test_lymph_same_word_suffix():
    s = _session()
    out = s.submit("lymph")
    assert out.both_words is False
    assert s.result_suffix(out) == "  (same word)"
    assert s.eliminated_letters == set("lymph")


def test_correct_guess_wins_immediately():
    s = _session()
    s.submit("stack")
    out = s.submit("count")
    assert out.both_words is False
    assert s.is_won and s.is_over
    assert s.result_suffix(out) == ""
    assert s.attempts_remaining == 4
    assert s.reveal_answers() == ("arise", "count")
    assert s.won_message() == "Congratulations! The answers were ARISE and COUNT"


def test_win_on_last_guess_is_a_win():
    s = _session(max_guesses=2)
    s.submit("lymph")
    s.submit("arise")
    assert s.is_won and not s.is_lost


def test_out_of_guesses_loses():
    s = _session(max_guesses=3)
    for g in ["stack", "lymph", "crane"]:
        s.submit(g)
    assert s.is_lost
    assert s.guess_count == s.max_guesses
    assert s.lost_message() == "Bad luck! The answers were ARISE and COUNT"


def test_invalid_word_changes_nothing():
    s = _session()
    s.submit("stack")
    before = (s.guess_count, set(s.found_letters), set(s.eliminated_letters), len(s.history))
    with pytest.raises(InvalidWordError) as ei:
        s.submit("zzzzz")
    assert ei.value.word == "zzzzz"
    assert (s.guess_count, set(s.found_letters), set(s.eliminated_letters), len(s.history)) == before


def test_letter_sets_only_grow():
    s = _session()
    seen_found, seen_elim = set(), set()
    for g in ["stack", "lymph", "sassy", "crane"]:
        s.submit(g)
        assert seen_found <= s.found_letters and seen_elim <= s.eliminated_letters
        seen_found, seen_elim = set(s.found_letters), set(s.eliminated_letters)


def test_no_transition_out_of_terminal():
    s = _session()
    s.submit("arise")
    with pytest.raises(GameOverError):
        s.submit("count")
    assert s.guess_count == 1


def test_answers_hidden_while_playing():
    s = _session()
    with pytest.raises(AnswersHiddenError):
        s.reveal_answers()


def test_guess_prompt_counts_from_one():
    s = _session()
    assert s.guess_prompt() == "Guess 1/6:"
    s.submit("stack")
    assert s.guess_prompt() == "Guess 2/6:"


def test_bad_max_guesses():
    with pytest.raises(ValueError):
        _session(max_guesses=0)


def test_functional_submit():
    s = _session()
    out = submit(s, "stack")
    assert out.guess == "stack" and s.guess_count == 1


def test_new_session_with_seeded_rng():
    corpus = build_corpus(["arise", "count", "stack", "lymph"], ALLOWED)
    s1 = new_session(4, corpus=corpus, rng=random.Random(3))
    s2 = new_session(4, corpus=corpus, rng=random.Random(3))
    assert s1.answers == s2.answers
    a, b = s1.answers
    assert not set(a) & set(b)
    assert s1.max_guesses == 4 and s1.allowed == corpus.allowed


def test_new_session_exhaustion_propagates():
    corpus = build_corpus(["arise", "crane", "stack"], ALLOWED)  # all share 'a'
    with pytest.raises(ExhaustionError):
        new_session(corpus=corpus, rng=random.Random(0), max_attempts=10)


def test_new_session_default_corpus():
    s = new_session(rng=random.Random(42))
    a, b = s.answers
    assert len(a) == len(b) == 5
    assert not set(a) & set(b)
    assert a in s.allowed and b in s.allowed
