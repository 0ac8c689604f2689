import pytest

from src.errors import CommonErrorMessages, ReviewErrorMessages
from src.review.schemas import CreateReviewModel
from src.review.validators import validate_review, check_rating


def make_review(**overrides):
    data = {
        "author_name": "name author",
        "title": "title review",
        "description": "description review",
        "rating": 5,
        "product_id": "65f1c0ffee0000000000abcd",
    }
    data.update(overrides)
    return CreateReviewModel(**data)


class TestValidateReview:
    def test_valid_review_has_no_messages(self):
        assert validate_review(make_review()) == []

    @pytest.mark.parametrize("author_name", ["a", "", "x" * 31])
    def test_author_name_out_of_bounds(self, author_name):
        messages = validate_review(make_review(author_name=author_name))
        assert messages == [ReviewErrorMessages.AUTHOR_NAME_LONG.value]

    @pytest.mark.parametrize("author_name", ["ab", "x" * 30])
    def test_author_name_bounds_are_inclusive(self, author_name):
        assert validate_review(make_review(author_name=author_name)) == []

    @pytest.mark.parametrize("description", ["short", "x" * 9, "x" * 1001])
    def test_description_out_of_bounds(self, description):
        messages = validate_review(make_review(description=description))
        assert messages == [ReviewErrorMessages.DESCRIPTION_LONG.value]

    def test_description_counts_characters_not_bytes(self):
        # 10 Cyrillic letters are 20 bytes in UTF-8
        assert validate_review(make_review(description="ж" * 10)) == []
        assert validate_review(make_review(description="ж" * 1000)) == []

        messages = validate_review(make_review(description="ж" * 1001))
        assert messages == [ReviewErrorMessages.DESCRIPTION_LONG.value]

    @pytest.mark.parametrize("rating", [0, 6, -1, 100])
    def test_rating_out_of_range(self, rating):
        messages = validate_review(make_review(rating=rating))
        assert messages == [ReviewErrorMessages.RATING_COUNT.value]

    @pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
    def test_rating_in_range(self, rating):
        assert validate_review(make_review(rating=rating)) == []

    @pytest.mark.parametrize("rating", [True, False, "5", 4.5, 3.0, None])
    def test_rating_is_not_coerced(self, rating):
        messages = validate_review(make_review(rating=rating))
        assert messages == [ReviewErrorMessages.RATING_COUNT.value]

    @pytest.mark.parametrize("author_name", [None, 12, ["name author"]])
    def test_author_name_wrong_type(self, author_name):
        messages = validate_review(make_review(author_name=author_name))
        assert messages == [ReviewErrorMessages.AUTHOR_NAME_LONG.value]

    @pytest.mark.parametrize("product_id", ["1", "65f1c0ffee0000000000abcd0", "zzf1c0ffee0000000000abcd", None])
    def test_invalid_product_id(self, product_id):
        messages = validate_review(make_review(product_id=product_id))
        assert messages == [CommonErrorMessages.ID_VALIDATION_ERROR.value]

    def test_blank_title(self):
        messages = validate_review(make_review(title="   "))
        assert messages == [ReviewErrorMessages.TITLE_EMPTY.value]

    def test_all_violations_are_collected_in_rule_order(self):
        review = make_review(author_name="a", description="short", rating=9, title="")

        assert validate_review(review) == [
            ReviewErrorMessages.AUTHOR_NAME_LONG.value,
            ReviewErrorMessages.DESCRIPTION_LONG.value,
            ReviewErrorMessages.RATING_COUNT.value,
            ReviewErrorMessages.TITLE_EMPTY.value,
        ]

    def test_custom_rule_list(self):
        review = make_review(author_name="a", rating=9)

        assert validate_review(review, rules=[check_rating]) == [ReviewErrorMessages.RATING_COUNT.value]
