"""Field rules for inbound reviews.

Each rule looks at one field of the payload and returns its error message, or
None when the field is acceptable. A value of the wrong JSON type breaks the
rule of its field. ``validate_review`` runs every rule and keeps the messages
in rule order, so a client sees all problems at once.
"""
from typing import Any, Callable, List, Optional

from src.common.dependencies import is_valid_object_id
from src.errors import CommonErrorMessages, ReviewErrorMessages
from .schemas import CreateReviewModel

AUTHOR_NAME_MIN_LENGTH = 2
AUTHOR_NAME_MAX_LENGTH = 30
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 1000
RATING_MIN = 1
RATING_MAX = 5

Rule = Callable[[CreateReviewModel], Optional[str]]


def _length_between(value: Any, minimum: int, maximum: int) -> bool:
    # len() counts code points, so Cyrillic or CJK text is measured per character
    return isinstance(value, str) and minimum <= len(value) <= maximum


def check_author_name(review: CreateReviewModel) -> Optional[str]:
    if not _length_between(review.author_name, AUTHOR_NAME_MIN_LENGTH, AUTHOR_NAME_MAX_LENGTH):
        return ReviewErrorMessages.AUTHOR_NAME_LONG.value
    return None


def check_description(review: CreateReviewModel) -> Optional[str]:
    if not _length_between(review.description, DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH):
        return ReviewErrorMessages.DESCRIPTION_LONG.value
    return None


def check_rating(review: CreateReviewModel) -> Optional[str]:
    rating = review.rating
    # bool is a subclass of int; floats such as 5.0 are not integers on the wire
    if type(rating) is not int or not RATING_MIN <= rating <= RATING_MAX:
        return ReviewErrorMessages.RATING_COUNT.value
    return None


def check_title(review: CreateReviewModel) -> Optional[str]:
    if not isinstance(review.title, str) or not review.title.strip():
        return ReviewErrorMessages.TITLE_EMPTY.value
    return None


def check_product_id(review: CreateReviewModel) -> Optional[str]:
    if not is_valid_object_id(review.product_id):
        return CommonErrorMessages.ID_VALIDATION_ERROR.value
    return None


REVIEW_RULES: List[Rule] = [
    check_author_name,
    check_description,
    check_rating,
    check_title,
    check_product_id,
]


def validate_review(review: CreateReviewModel, rules: List[Rule] = REVIEW_RULES) -> List[str]:
    """Return the messages of every rule the review breaks; empty when valid."""
    messages = []
    for rule in rules:
        message = rule(review)
        if message is not None:
            messages.append(message)
    return messages
