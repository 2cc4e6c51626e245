"""Tests for the ordered grammar/tone rule table."""

import pytest

from trainer.data.grammar_rules import GRAMMAR_RULES


def findings(text):
    return [rule.fix for rule in GRAMMAR_RULES if rule.pattern.search(text)]


class TestRuleTable:
    @pytest.mark.parametrize(
        "text, fix",
        [
            ("We recieved it", "received"),
            ("I have send the file", "have sent"),
            ("The information are correct", "information is"),
            ("Let us discuss about price", "discuss the..."),
            ("We are gonna call", "going to"),
            ("Please check , thanks", "Remove space"),
            ("This is a damn mess", "Remove offensive term"),
            ("Check the jotform portal", "Capitalize (e.g., JotForm)"),
            ("Send the eMail now", "lowercase"),
        ],
    )
    def test_rule_fires(self, text, fix):
        assert fix in findings(text)

    def test_capitalization_rules_are_case_sensitive(self):
        assert findings("See you on Monday, I promise.") == []
        assert "Monday" in findings("See you on monday.")

    def test_spelling_rules_ignore_case(self):
        assert "tomorrow" in findings("Tomorow works")

    def test_clean_business_sentence_has_no_findings(self):
        assert findings("Dear Team, the October invoices were received. Best regards, Darek") == []
