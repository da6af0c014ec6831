# messages.py - outcome copy in the base language, and markup removal
import re

BASE_LANGUAGE = "en"

NO_TRANSLATE_OPEN = '<span translate="no">'
NO_TRANSLATE_CLOSE = "</span>"

APPROVED_TEMPLATE = (
    "Congratulations {name}, your application has been approved. "
    "Please get in touch with your local branch in order to proceed with becoming a new member. "
    "We look forward to build a long-lasting relationship with you for your financial future. "
    "You are in good hands."
)

REJECTED_TEXT = (
    "At this time we are unfortunately unable to offer you an insurance policy. "
    "We wish you all the very best with finding a provider who can support your requirements."
)

_TAG = re.compile(r"<.*?>")


def protect(text: str) -> str:
    """Wrap text so the translation service leaves it untouched."""
    return f"{NO_TRANSLATE_OPEN}{text}{NO_TRANSLATE_CLOSE}"


def render_outcome(is_approved: bool, first_name: str, last_name: str) -> str:
    if is_approved:
        return APPROVED_TEMPLATE.format(name=protect(f"{first_name} {last_name}"))
    return REJECTED_TEXT


def strip_markup(text: str) -> str:
    return _TAG.sub("", text)
