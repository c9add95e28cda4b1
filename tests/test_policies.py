import string

import pytest
from packages.engine import (KnowledgeState, ContradictionError, NoCandidateLetter,
                             PolicyExhausted)
from packages.policies import create_policy, get_policy_ids
from packages.policies.letters import ENGLISH_FREQUENCY


def _state(corpus, pattern=None, tried=(), asked=()):
    N = len(corpus[0]) if corpus else 3
    return {"N": N, "pattern": pattern or "_" * N, "tried": set(tried),
            "asked": set(asked), "corpus": corpus}


def _fresh(policy_id, corpus, seed=None):
    p = create_policy(policy_id)
    p.reset(corpus=corpus, N=len(corpus[0]), seed=seed)
    return p


def test_registry_lists_all_policies():
    assert get_policy_ids() == sorted([
        "information_gain", "random_letter", "random_word", "random_word_order",
        "sequential_letter", "sequential_word", "static_freq",
    ])
    with pytest.raises(ValueError, match="Unknown policy id"):
        create_policy("nope")


def test_sequential_letter_walks_the_alphabet_then_stops():
    p = _fresh("sequential_letter", ["cat"])
    tried = set()
    for expected in string.ascii_lowercase:
        letter = p.next_question(_state(["cat"], tried=tried))
        assert letter == expected
        tried.add(letter)
    with pytest.raises(NoCandidateLetter):
        p.next_question(_state(["cat"], tried=tried))


def test_static_freq_follows_english_ranking():
    p = _fresh("static_freq", ["cat"])
    assert p.next_question(_state(["cat"])) == "e"
    assert p.next_question(_state(["cat"], tried={"e", "t"})) == "a"
    assert ENGLISH_FREQUENCY[:6] == "etaoin"
    assert sorted(ENGLISH_FREQUENCY) == list(string.ascii_lowercase)


def test_random_letter_is_a_seeded_permutation():
    def order(seed):
        p = _fresh("random_letter", ["cat"], seed=seed)
        tried, out = set(), []
        for _ in range(26):
            letter = p.next_question(_state(["cat"], tried=tried))
            tried.add(letter)
            out.append(letter)
        return out

    a = order(7)
    assert sorted(a) == list(string.ascii_lowercase)
    assert order(7) == a
    assert order(8) != a


def test_sequential_word_never_repeats_and_runs_out():
    corpus = ["cat", "car", "can"]
    p = _fresh("sequential_word", corpus)
    asked = []
    for expected in corpus:
        w = p.next_question(_state(corpus, asked=asked))
        assert w == expected
        asked.append(w)
    with pytest.raises(PolicyExhausted):
        p.next_question(_state(corpus, asked=asked))


def test_random_word_order_shuffles_once_per_round():
    corpus = ["ant", "bee", "cat", "dog", "eel", "fox", "gnu", "hen"]
    p = _fresh("random_word_order", corpus, seed=3)
    asked = []
    for _ in corpus:
        asked.append(p.next_question(_state(corpus, asked=asked)))
    assert sorted(asked) == sorted(corpus)

    again = _fresh("random_word_order", corpus, seed=3)
    assert again.next_question(_state(corpus)) == asked[0]


def test_random_word_draws_from_corpus_with_replacement():
    corpus = ["cat", "dog"]
    p = _fresh("random_word", corpus, seed=1)
    picks = [p.next_question(_state(corpus, asked=corpus)) for _ in range(20)]
    assert set(picks) <= set(corpus)
    # already-asked words are not excluded
    assert len(set(picks)) == 2


def test_information_gain_picks_most_frequent_untried_letter():
    corpus = ["cat", "car", "can"]
    p = _fresh("information_gain", corpus)
    assert p.next_question(_state(corpus)) == "a"
    assert p.next_question(_state(corpus, "_a_", {"a"})) == "c"
    assert p.next_question(_state(corpus, "ca_", {"a", "c"})) == "n"
    assert p.next_question(_state(corpus, "ca_", {"a", "c", "n"})) == "r"


@pytest.mark.parametrize("secret", ["apple", "angle", "ample", "maple", "table", "cable"])
def test_information_gain_never_proposes_a_tried_letter(secret):
    corpus = ["apple", "angle", "ample", "maple", "table", "cable"]
    p = _fresh("information_gain", corpus)
    ks = KnowledgeState.blank(5)
    while not ks.is_revealed():
        letter = p.next_question(_state(corpus, ks.masked, ks.tried))
        assert letter not in ks.tried
        if letter in secret:
            ks.reveal(letter, secret)
        else:
            ks.miss(letter)
    assert ks.masked == secret


def test_information_gain_signals_contradiction_on_empty_candidates():
    p = _fresh("information_gain", ["dog"])
    with pytest.raises(ContradictionError):
        p.next_question(_state(["dog"], "___", {"d"}))


def test_information_gain_signals_no_candidate_letter():
    # fully revealed pattern: the candidate survives but has nothing untried
    p = _fresh("information_gain", ["dog"])
    with pytest.raises(NoCandidateLetter):
        p.next_question(_state(["dog"], "dog", {"d", "o", "g"}))


def test_reset_rejects_corpus_words_of_the_wrong_length():
    p = create_policy("sequential_word")
    with pytest.raises(ValueError, match="length 3"):
        p.reset(corpus=["cat", "cart"], N=3)
    p.reset(corpus=["cat", "car"], N=3)
    assert p.N == 3
