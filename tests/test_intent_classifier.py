import pytest

from saathi_agent.graph.intents import INTENT_RULES, Intent, classify_intent


@pytest.mark.parametrize("query, expected", [
    ("Namaste", Intent.GREETING),
    ("HELLO saathi", Intent.GREETING),
    ("thank you", Intent.THANKS),
    ("bahut dhanyavad", Intent.THANKS),
    ("madad karo", Intent.HELP),
    ("aaj kitna kamaya", Intent.EARNINGS),
    ("my earnings today", Intent.EARNINGS),
    ("kya koi PENALTY lagi", Intent.PENALTY),
    ("kitna dand laga", Intent.PENALTY),
    ("fine kyun laga", Intent.PENALTY),
    ("challan kaise contest karein", Intent.CHALLAN),
    ("traffic ticket aaya", Intent.CHALLAN),
    ("digilocker par upload", Intent.DIGILOCKER),
    ("document kaise daalu", Intent.DIGILOCKER),
    ("mera business kaisa raha", Intent.BUSINESS),
    ("vyapar kaisa", Intent.BUSINESS),
    ("emergency", Intent.EMERGENCY),
    ("sahayata", Intent.EMERGENCY),
    ("insurance renew karna", Intent.INSURANCE),
    ("gaadi ka bima", Intent.INSURANCE),
])
def test_classifies_each_vocabulary(query, expected):
    assert classify_intent(query) == expected


@pytest.mark.parametrize("query", ["", "   ", "kuch aur batao", "12345"])
def test_unmatched_queries_are_unknown(query):
    assert classify_intent(query) == Intent.UNKNOWN


def test_none_query_is_unknown():
    assert classify_intent(None) == Intent.UNKNOWN


def test_help_wins_over_challan():
    assert classify_intent("help with challan") == Intent.HELP


def test_help_wins_over_emergency():
    assert classify_intent("emergency help needed") == Intent.HELP


def test_earlier_rule_wins():
    assert classify_intent("kamaya aur penalty") == Intent.EARNINGS
    assert classify_intent("penalty ka challan") == Intent.PENALTY


def test_hi_substring_is_a_greeting():
    # "chahiye" contains "hi"
    assert classify_intent("Sahayata chahiye") == Intent.GREETING


def test_rule_order():
    assert [intent for intent, _ in INTENT_RULES] == [
        Intent.GREETING,
        Intent.THANKS,
        Intent.HELP,
        Intent.EARNINGS,
        Intent.PENALTY,
        Intent.CHALLAN,
        Intent.DIGILOCKER,
        Intent.BUSINESS,
        Intent.EMERGENCY,
        Intent.INSURANCE,
    ]
