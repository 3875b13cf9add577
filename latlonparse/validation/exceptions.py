"""
Custom exceptions for coordinate parsing.
"""


class CoordinateParseError(ValueError):
    """
    Exception raised when a coordinate string has no valid reading.

    Grammar rules never raise; this is raised at the whole-string boundary
    once every alternative has been tried and none consumed the full input.
    A malformed string and an out-of-range value are not distinguished.

    Attributes
    ----------
    text : str
        The rejected input.
    rule_name : str
        Name of the rule that was asked to read it.
    """

    def __init__(self, text: str, rule_name: str):
        self.text = text
        self.rule_name = rule_name
        super().__init__(f"No valid {rule_name} reading of '{text}'")
