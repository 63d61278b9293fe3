"""Tests for restaurant, dish, account and weather validators.

Validators return every failing field at once (first error per field).
"""

from decimal import Decimal

import pytest
from uuid_extensions import uuid7

from src.application.commands import (
    CreateDish,
    CreateRestaurant,
    RegisterUser,
    UpdateRestaurant,
)
from src.application.queries import GetWeatherForecast, ListRestaurants
from src.application.validators import (
    validate_create_dish,
    validate_create_restaurant,
    validate_register_user,
    validate_restaurant_query,
    validate_update_restaurant,
    validate_weather_forecast,
)
from src.core.constants import (
    CONTACT_EMAIL_MAX_LENGTH,
    CONTACT_NUMBER_MAX_LENGTH,
    POSTAL_CODE_MAX_LENGTH,
    RESTAURANT_CATEGORY_MAX_LENGTH,
)
from src.core.enums import ErrorCode
from tests.conftest import make_principal


def _fields(errors) -> list[str]:
    return [error.field for error in errors]


@pytest.mark.unit
class TestRestaurantQueryValidator:
    """Listing query rules: page number, page size, sort column."""

    @pytest.mark.parametrize("page_size", [5, 10, 15])
    def test_allowed_page_sizes_pass(self, page_size):
        query = ListRestaurants(page_number=1, page_size=page_size)

        assert validate_restaurant_query(query) == []

    @pytest.mark.parametrize("page_size", [0, 1, 2, 11, 16, 100, -5])
    def test_other_page_sizes_fail(self, page_size):
        query = ListRestaurants(page_number=1, page_size=page_size)

        errors = validate_restaurant_query(query)

        assert _fields(errors) == ["pageSize"]
        assert errors[0].code == ErrorCode.INVALID_PAGE_SIZE
        assert errors[0].message == "PageSize must in [5,10,15]"

    @pytest.mark.parametrize("page_number", [0, -1, -100])
    def test_page_number_below_one_fails(self, page_number):
        query = ListRestaurants(page_number=page_number, page_size=10)

        errors = validate_restaurant_query(query)

        assert _fields(errors) == ["pageNumber"]
        assert errors[0].code == ErrorCode.INVALID_PAGE_NUMBER

    def test_empty_query_is_invalid(self):
        errors = validate_restaurant_query(ListRestaurants())

        assert _fields(errors) == ["pageNumber", "pageSize"]

    @pytest.mark.parametrize("sort_by", ["Name", "Description", "Category", None])
    def test_allowed_sort_columns_pass(self, sort_by):
        query = ListRestaurants(page_number=1, page_size=5, sort_by=sort_by)

        assert validate_restaurant_query(query) == []

    @pytest.mark.parametrize("sort_by", ["ContactEmail", "name", "Id", "HasDelivery"])
    def test_columns_outside_allow_list_fail(self, sort_by):
        query = ListRestaurants(page_number=1, page_size=5, sort_by=sort_by)

        errors = validate_restaurant_query(query)

        assert _fields(errors) == ["sortBy"]
        assert errors[0].code == ErrorCode.INVALID_SORT_COLUMN


@pytest.mark.unit
class TestCreateRestaurantValidator:
    def _command(self, **overrides) -> CreateRestaurant:
        data = {
            "principal": make_principal(),
            "name": "KFC",
            "category": "Fast Food",
            "city": "Kraków",
            "street": "Długa 5",
        }
        data.update(overrides)
        return CreateRestaurant(**data)

    def test_valid_command_passes(self):
        assert validate_create_restaurant(self._command()) == []

    def test_missing_required_fields_are_all_reported(self):
        command = self._command(name=None, category="", city=None, street="  ")

        errors = validate_create_restaurant(command)

        assert _fields(errors) == ["name", "category", "city", "street"]

    def test_name_longer_than_25_fails(self):
        errors = validate_create_restaurant(self._command(name="x" * 26))

        assert _fields(errors) == ["name"]

    def test_address_fields_limited_to_50(self):
        errors = validate_create_restaurant(
            self._command(city="c" * 51, street="s" * 51)
        )

        assert _fields(errors) == ["city", "street"]

    @pytest.mark.parametrize(
        ("field", "limit"),
        [
            ("category", RESTAURANT_CATEGORY_MAX_LENGTH),
            ("postal_code", POSTAL_CODE_MAX_LENGTH),
            ("contact_number", CONTACT_NUMBER_MAX_LENGTH),
        ],
    )
    def test_values_longer_than_their_column_fail(self, field, limit):
        at_limit = validate_create_restaurant(self._command(**{field: "x" * limit}))
        over_limit = validate_create_restaurant(
            self._command(**{field: "x" * (limit + 1)})
        )

        assert at_limit == []
        assert _fields(over_limit) == [field]

    def test_contact_email_limited_to_column_length(self):
        email = "a" * (CONTACT_EMAIL_MAX_LENGTH - len("@kfc.com") + 1) + "@kfc.com"

        errors = validate_create_restaurant(self._command(contact_email=email))

        assert _fields(errors) == ["contact_email"]

    def test_malformed_contact_email_fails(self):
        errors = validate_create_restaurant(self._command(contact_email="not-an-email"))

        assert _fields(errors) == ["contact_email"]

    def test_blank_contact_email_is_ignored(self):
        assert validate_create_restaurant(self._command(contact_email="")) == []

    def test_update_requires_name(self):
        command = UpdateRestaurant(
            principal=make_principal(), restaurant_id=uuid7(), name=None
        )

        assert _fields(validate_update_restaurant(command)) == ["name"]


@pytest.mark.unit
class TestCreateDishValidator:
    def test_valid_dish_passes(self):
        command = CreateDish(
            principal=make_principal(),
            restaurant_id=uuid7(),
            name="Nuggets",
            price=Decimal("0"),
        )

        assert validate_create_dish(command) == []

    def test_negative_price_and_missing_name_fail(self):
        command = CreateDish(
            principal=make_principal(),
            restaurant_id=uuid7(),
            name=None,
            price=Decimal("-0.01"),
        )

        errors = validate_create_dish(command)

        assert _fields(errors) == ["name", "price"]
        assert errors[1].code == ErrorCode.INVALID_PRICE


@pytest.mark.unit
class TestRegisterUserValidator:
    def _command(self, **overrides) -> RegisterUser:
        data = {
            "email": "user@example.com",
            "password": "password123",
            "confirm_password": "password123",
        }
        data.update(overrides)
        return RegisterUser(**data)

    def test_valid_registration_passes(self):
        assert validate_register_user(self._command()) == []

    def test_missing_email_fails(self):
        errors = validate_register_user(self._command(email=None))

        assert _fields(errors) == ["email"]

    def test_malformed_email_fails(self):
        errors = validate_register_user(self._command(email="user.example.com"))

        assert _fields(errors) == ["email"]
        assert errors[0].code == ErrorCode.INVALID_EMAIL

    def test_password_shorter_than_six_fails(self):
        errors = validate_register_user(
            self._command(password="abc", confirm_password="abc")
        )

        assert _fields(errors) == ["password"]

    def test_password_over_72_bytes_fails(self):
        long_password = "ż" * 40  # 80 bytes in UTF-8

        errors = validate_register_user(
            self._command(password=long_password, confirm_password=long_password)
        )

        assert _fields(errors) == ["password"]

    def test_confirmation_mismatch_fails(self):
        errors = validate_register_user(self._command(confirm_password="password124"))

        assert _fields(errors) == ["confirm_password"]
        assert errors[0].code == ErrorCode.PASSWORD_MISMATCH

    def test_unknown_role_fails(self):
        errors = validate_register_user(self._command(role="Owner"))

        assert _fields(errors) == ["role"]

    def test_all_failures_reported_together(self):
        command = RegisterUser(email=None, password=None, confirm_password="x")

        assert _fields(validate_register_user(command)) == [
            "email",
            "password",
            "confirm_password",
        ]


@pytest.mark.unit
class TestWeatherForecastValidator:
    def test_defaults_pass(self):
        assert validate_weather_forecast(GetWeatherForecast()) == []

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_count_out_of_range_fails(self, count):
        errors = validate_weather_forecast(GetWeatherForecast(count=count))

        assert _fields(errors) == ["count"]

    def test_min_not_below_max_fails(self):
        errors = validate_weather_forecast(
            GetWeatherForecast(min_temperature=10, max_temperature=10)
        )

        assert errors[0].code == ErrorCode.INVALID_TEMPERATURE_RANGE
