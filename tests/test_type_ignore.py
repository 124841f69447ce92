import logging

from pyistub.rule_name import CustomRule, RuleName
from pyistub.type_ignore import IgnoreTarget


def test_all_comment():
    assert IgnoreTarget.all().comment() == "  # type: ignore"


def test_all_has_no_rules():
    assert IgnoreTarget.all().parsed_rules() == []


def test_specified_known_rules_comment():
    target = IgnoreTarget.specified(["attr-defined", "union-attr"])
    assert target.comment() == "  # type: ignore[attr-defined,union-attr]"


def test_specified_parses_rules():
    target = IgnoreTarget.specified(["reportGeneralTypeIssues", "unknown-rule"])
    assert target.parsed_rules() == [
        RuleName.REPORT_GENERAL_TYPE_ISSUES,
        CustomRule("unknown-rule"),
    ]


def test_specified_accepts_generator():
    target = IgnoreTarget.specified(r for r in ["misc"])
    assert target.rules == ("misc",)


def test_custom_rule_kept_and_warned(caplog):
    target = IgnoreTarget.specified(["my-rule"])
    with caplog.at_level(logging.WARNING, logger="pyistub.type_ignore"):
        text = target.comment()
    assert "my-rule" in text
    assert text.startswith("  # type: ignore[")
    assert any("my-rule" in record.getMessage() for record in caplog.records)


def test_known_rules_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="pyistub.type_ignore"):
        IgnoreTarget.specified(["attr-defined"]).comment()
    assert caplog.records == []


def test_all_differs_from_empty_specified():
    assert IgnoreTarget.all() != IgnoreTarget.specified([])
    assert IgnoreTarget.specified([]).comment().endswith("[]")