import pytest

from coworker.shared.utils.input_validation import InputValidator


class TestPersonName:
    @pytest.mark.parametrize("name", ["Taro", "Müller", "ユーザ", "José"])
    def test_letters_only(self, name):
        assert InputValidator.validate_person_name(name) == (True, None)

    @pytest.mark.parametrize("name", [
        "Taro\n",
        "\nTaro",
        "Taro ",
        "Ta ro",
        "Taro1",
        "Taro_",
        "O'Neil",
        "Jean-Luc",
    ])
    def test_rejects_anything_else(self, name):
        is_valid, error_msg = InputValidator.validate_person_name(name)

        assert is_valid is False
        assert error_msg == "Name must contain letters only"

    def test_empty(self):
        assert InputValidator.validate_person_name("") == (False, "Name cannot be empty")

    def test_too_long(self):
        is_valid, _ = InputValidator.validate_person_name("a" * (InputValidator.MAX_NAME_LENGTH + 1))

        assert is_valid is False


class TestPassword:
    def test_minimum_length(self):
        assert InputValidator.validate_password("a" * InputValidator.MIN_PASSWORD_LENGTH) == (True, None)

    def test_too_short(self):
        is_valid, _ = InputValidator.validate_password("a" * (InputValidator.MIN_PASSWORD_LENGTH - 1))

        assert is_valid is False

    def test_too_long_for_bcrypt(self):
        is_valid, _ = InputValidator.validate_password("é" * 37)

        assert is_valid is False
