from __future__ import annotations

from dataclasses import dataclass, field

from .rules.base import CellRule
from .rules.day_number_rule import DayNumberRule
from .rules.empty_rule import EmptyCellRule
from .rules.numeric_hours_rule import NumericHoursRule
from .rules.status_keyword_rule import StatusKeywordRule
from .rules.time_range_rule import TimeRangeRule
from .rules.time_tokens_rule import TimeTokensRule
from .rules.unrecognized_rule import UnrecognizedCellRule


def default_rules() -> list[CellRule]:
    # Order matters: numbers are read as hours before status codes such as
    # '1' or '0.5' are considered, which leaves DayNumberRule as a backstop.
    return [
        EmptyCellRule(),
        TimeRangeRule(),
        TimeTokensRule(),
        NumericHoursRule(),
        StatusKeywordRule(),
        DayNumberRule(),
    ]


@dataclass
class CellRuleFactory:
    """Factory Pattern: choose the first rule that understands the cell."""

    rules: list[CellRule] = field(default_factory=default_rules)
    fallback: CellRule = field(default_factory=UnrecognizedCellRule)

    def for_value(self, text: str) -> CellRule:
        for rule in self.rules:
            if rule.matches(text):
                return rule
        return self.fallback
