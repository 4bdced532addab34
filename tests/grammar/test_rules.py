"""
Tests for the Rule Set
======================
Accept and suggest branches of each rule family, run one rule at a time.
"""

import pytest

from grammar.lexicon import update_lexicon
from grammar.rules import (
    RULE_CLASSES,
    build_default_rules,
    get_rule_ids,
    ThereTheirRule,
    ItsRule,
    YourRule,
    ToTooTwoRule,
    ArticleRule,
    DoubleSpaceRule,
    SentenceCapitalizationRule,
    MultiplePeriodsRule,
    MissingApostropheRule,
    HyphenationRule,
    ConcisenessRule,
)


def suggestions(errors):
    return [list(e.suggestions) for e in errors]


class TestRuleSet:

    def test_rule_ids_unique(self):
        ids = get_rule_ids()
        assert len(ids) == len(set(ids)) == len(RULE_CLASSES)

    def test_disabled_rules_left_out(self):
        rules = build_default_rules(disabled=["A_AN", "DOUBLE_SPACE"])
        ids = [rule.RULE_ID for rule in rules]
        assert "A_AN" not in ids
        assert "DOUBLE_SPACE" not in ids
        assert len(rules) == len(RULE_CLASSES) - 2

    def test_context_window_passed_through(self):
        assert all(rule.context_window == 20 for rule in build_default_rules(20))

    def test_describe(self):
        info = ArticleRule().describe()
        assert info["rule_id"] == "A_AN"
        assert info["category"] == "Articles"
        assert info["message"]


class TestThereTheir:
    """there / their / they're."""

    @pytest.fixture
    def rule(self):
        return ThereTheirRule()

    def test_their_before_verb_form(self, rule, run_rule):
        errors = run_rule(rule, "Their going to the store.")
        assert suggestions(errors) == [["they're"]]
        assert errors[0].text == "Their"

    def test_their_before_copula(self, rule, run_rule):
        assert suggestions(run_rule(rule, "Their is a problem.")) == [["there"]]

    def test_their_before_noun(self, rule, run_rule):
        assert run_rule(rule, "I like their car.") == []

    def test_their_before_ing_noun(self, rule, run_rule):
        assert run_rule(rule, "Check their booking today.") == []

    def test_their_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "I saw their quickly.")) == [["there", "they're"]]

    def test_there_before_noun(self, rule, run_rule):
        errors = run_rule(rule, "I like there car.")
        assert suggestions(errors) == [["their"]]
        assert (errors[0].start_index, errors[0].end_index) == (7, 12)

    def test_there_before_copula(self, rule, run_rule):
        assert run_rule(rule, "There is a cat.") == []

    @pytest.mark.parametrize("text", [
        "Put it over there.",
        "Put it over there",
        "Over there , on the left.",
    ])
    def test_there_at_end_or_before_punctuation(self, rule, run_rule, text):
        assert suggestions(run_rule(rule, text)) == [["their", "they're"]]

    def test_there_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "They left there quickly.")) == [["their", "they're"]]

    def test_theyre_modifier_before_noun(self, rule, run_rule):
        errors = run_rule(rule, "They're booking process is slow.")
        assert suggestions(errors) == [["their"]]
        assert errors[0].text == "They're"

    def test_theyre_ing_at_end(self, rule, run_rule):
        assert run_rule(rule, "I think they're leaving") == []

    def test_theyre_ing_before_punctuation(self, rule, run_rule):
        assert run_rule(rule, "They're leaving.") == []

    def test_theyre_before_adjective(self, rule, run_rule):
        assert run_rule(rule, "They're happy now.") == []

    def test_theyre_before_noun(self, rule, run_rule):
        assert suggestions(run_rule(rule, "They're car is red.")) == [["their"]]

    def test_theyre_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "They're over.")) == [["there", "their"]]

    def test_typographic_apostrophe(self, rule, run_rule):
        assert run_rule(rule, "They’re happy now.") == []

    def test_glued_contraction_not_matched(self, rule, run_rule):
        assert run_rule(rule, "There's a cat.") == []


class TestIts:

    @pytest.fixture
    def rule(self):
        return ItsRule()

    def test_its_before_noun(self, rule, run_rule):
        assert run_rule(rule, "The dog wagged its tail.") == []

    def test_its_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "Its raining today.")) == [["it's"]]

    def test_contraction_before_verb_form(self, rule, run_rule):
        assert run_rule(rule, "It's raining today.") == []

    def test_contraction_before_cue_word(self, rule, run_rule):
        assert run_rule(rule, "It's very late.") == []

    def test_contraction_before_noun(self, rule, run_rule):
        assert suggestions(run_rule(rule, "It's color is red.")) == [["its"]]


class TestYour:

    @pytest.fixture
    def rule(self):
        return YourRule()

    def test_your_before_noun(self, rule, run_rule):
        assert run_rule(rule, "Your car is red.") == []

    def test_your_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "Your welcome.")) == [["you're"]]

    def test_contraction_before_cue_word(self, rule, run_rule):
        assert run_rule(rule, "You're nice.") == []

    def test_contraction_before_noun(self, rule, run_rule):
        assert suggestions(run_rule(rule, "You're car is red.")) == [["your"]]


class TestToTooTwo:

    @pytest.fixture
    def rule(self):
        return ToTooTwoRule()

    def test_to_infinitive(self, rule, run_rule):
        assert run_rule(rule, "I want to go.") == []
        assert run_rule(rule, "We need to work.") == []

    def test_to_before_quantity(self, rule, run_rule):
        assert suggestions(run_rule(rule, "I ate to much.")) == [["too"]]
        assert suggestions(run_rule(rule, "Add to 5 more.")) == [["too"]]

    def test_to_as_preposition(self, rule, run_rule):
        assert run_rule(rule, "Walk to the store.") == []
        assert run_rule(rule, "We flew to Paris.") == []
        assert run_rule(rule, "Give it to them.") == []

    def test_to_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "I went to quickly.")) == [["too", "two"]]

    def test_too_degree_word(self, rule, run_rule):
        assert run_rule(rule, "It is too much.") == []

    def test_too_before_punctuation(self, rule, run_rule):
        assert run_rule(rule, "Me too.") == []
        assert run_rule(rule, "Me too") == []

    def test_too_before_verb_form(self, rule, run_rule):
        assert suggestions(run_rule(rule, "We went too shopping.")) == [["to"]]

    def test_too_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "I want too go home.")) == [["to", "two"]]

    def test_two_before_noun(self, rule, run_rule):
        assert run_rule(rule, "I have two cats.") == []
        assert run_rule(rule, "It costs two hundred.") == []

    def test_two_otherwise(self, rule, run_rule):
        assert suggestions(run_rule(rule, "I have two.")) == [["to", "too"]]

    def test_hyphenated_compound_not_matched(self, rule, run_rule):
        assert run_rule(rule, "An up-to-date list.") == []


class TestArticle:

    @pytest.fixture
    def rule(self):
        return ArticleRule()

    def test_a_before_vowel(self, rule, run_rule):
        errors = run_rule(rule, "I ate a apple.")
        assert suggestions(errors) == [["an"]]
        assert errors[0].text == "a"

    def test_an_before_consonant(self, rule, run_rule):
        assert suggestions(run_rule(rule, "She is an teacher.")) == [["a"]]

    def test_silent_h(self, rule, run_rule):
        assert run_rule(rule, "It took an hour.") == []
        assert suggestions(run_rule(rule, "He is a honest man.")) == [["an"]]

    def test_case_preserved(self, rule, run_rule):
        assert suggestions(run_rule(rule, "A apple a day.")) == [["An"]]

    def test_correct_usage(self, rule, run_rule):
        assert run_rule(rule, "A cat and an owl.") == []

    def test_abstains_without_sounding_word(self, rule, run_rule):
        assert run_rule(rule, "Give me an") == []
        assert run_rule(rule, "It took a 5 minute walk.") == []
        assert run_rule(rule, "This is a up-to-date list.") == []


class TestMechanics:

    def test_double_space(self, run_rule):
        errors = run_rule(DoubleSpaceRule(), "This is  a test.")
        assert suggestions(errors) == [[" "]]
        assert (errors[0].start_index, errors[0].end_index) == (7, 9)

    def test_long_space_run_is_one_error(self, run_rule):
        errors = run_rule(DoubleSpaceRule(), "a     b")
        assert len(errors) == 1
        assert errors[0].text == "     "

    def test_sentence_capital(self, run_rule):
        errors = run_rule(SentenceCapitalizationRule(), "Hello. world")
        assert suggestions(errors) == [["W"]]
        assert errors[0].text == ". w"

    def test_sentence_capital_ignores_uppercase(self, run_rule):
        assert run_rule(SentenceCapitalizationRule(), "Hello. World") == []

    def test_multiple_periods(self, run_rule):
        assert suggestions(run_rule(MultiplePeriodsRule(), "Wait.... what")) == [["..."]]

    def test_exact_ellipsis_flagged(self, run_rule):
        errors = run_rule(MultiplePeriodsRule(), "Wait... what")
        assert suggestions(errors) == [["..."]]
        assert errors[0].text == "..."

    def test_missing_apostrophe(self, run_rule):
        errors = run_rule(MissingApostropheRule(), "I dont know and I CANT say.")
        assert suggestions(errors) == [["don't"], ["can't"]]
        assert errors[1].text == "CANT"

    def test_apostrophe_words_not_partial(self, run_rule):
        assert run_rule(MissingApostropheRule(), "The dontology cantilever.") == []


class TestStyle:

    def test_hyphenation(self, run_rule):
        errors = run_rule(HyphenationRule(), "A state of the art system.")
        assert suggestions(errors) == [["state-of-the-art"]]

    def test_hyphenation_spans_whitespace_runs(self, run_rule):
        errors = run_rule(HyphenationRule(), "A well\nknown fact.")
        assert suggestions(errors) == [["well-known"]]

    def test_conciseness(self, run_rule):
        errors = run_rule(ConcisenessRule(), "Due to the fact that it rained, we left.")
        assert suggestions(errors) == [["because"]]
        assert errors[0].text == "Due to the fact that"

    def test_longest_phrase_wins(self, run_rule):
        errors = run_rule(ConcisenessRule(), "In spite of the fact that it rained.")
        assert suggestions(errors) == [["although"]]

    def test_delete_suggestion(self, run_rule):
        errors = run_rule(ConcisenessRule(), "In terms of cost, it is fine.")
        assert suggestions(errors) == [[""]]

    def test_new_phrases_picked_up(self, run_rule):
        rule = HyphenationRule()
        assert run_rule(rule, "The user friendly tool.") == []

        update_lexicon(hyphens={"user friendly": "user-friendly"})
        assert suggestions(run_rule(rule, "The user friendly tool.")) == [["user-friendly"]]

    def test_missing_table_entry_falls_back_to_match(self):
        rule = ConcisenessRule()
        assert rule.get_suggestions("not a phrase", None, "not a phrase", 0) == ["not a phrase"]
