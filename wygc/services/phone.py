# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Phone number normalization — pure computation, no side effects.
"""


def format_phone_number(number: str) -> str:
    """
    Turn an OpsGenie contact destination into a dialable number.

    OpsGenie stores numbers as ``<country code>-<number>`` (e.g. ``49-1701234567``);
    hyphens are dropped and a ``+`` is prefixed. No further validation happens,
    so ``""`` becomes ``"+"``. A destination that already starts with ``+`` is
    passed through as-is (minus hyphens), so applying the function twice
    returns the same string.
    """
    number = number.replace("-", "")
    if number.startswith("+"):
        return number
    return "+" + number
