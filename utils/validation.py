"""
Declarative field rules for portal forms.

A rule set is a dict mapping a field name to an ordered list of rules. Each
rule returns an error message or None; the first failing rule wins.
"""


class Rule:
    """Base class for a single field constraint."""

    def __init__(self, label):
        self.label = label

    def check(self, value):
        raise NotImplementedError


class Required(Rule):
    def check(self, value):
        if value is None or value == '':
            return f"{self.label} is required"
        return None


class Length(Rule):
    """Text length within [minimum, maximum], both inclusive."""

    def __init__(self, label, minimum, maximum):
        super().__init__(label)
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value):
        if not isinstance(value, str):
            return f"{self.label} must be text"
        if len(value) < self.minimum:
            return f"{self.label} must be at least {self.minimum} characters"
        if len(value) > self.maximum:
            return f"{self.label} must not exceed {self.maximum} characters"
        return None


class OneOf(Rule):
    def __init__(self, label, choices):
        super().__init__(label)
        self.choices = tuple(choices)

    def check(self, value):
        if value not in self.choices:
            return f"Please select a valid {self.label.lower()}"
        return None


class WholeNumber(Rule):
    def check(self, value):
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool) or not isinstance(value, int):
            return f"{self.label} must be a whole number"
        return None


class Range(Rule):
    def __init__(self, label, minimum, maximum):
        super().__init__(label)
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value):
        if value < self.minimum:
            return f"{self.label} must be at least {self.minimum}"
        if value > self.maximum:
            return f"{self.label} must not exceed {self.maximum}"
        return None


def validate_field(rules, name, value):
    """Return the first error message for one field, or None if it passes."""
    for rule in rules.get(name, []):
        message = rule.check(value)
        if message:
            return message
    return None


def validate(rules, values):
    """Validate every field in the rule set.

    Missing fields are checked as None, so they fail their Required rule.
    Returns a dict of field name -> message; empty when everything passes.
    """
    errors = {}
    for name in rules:
        message = validate_field(rules, name, values.get(name))
        if message:
            errors[name] = message
    return errors
