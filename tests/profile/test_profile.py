from io import StringIO

import pytest
from storefront.profile.prompter import INVALID_NUMBER_MESSAGE, ProfileInputAborted, ProfilePrompter
from storefront.profile.render import render_profile
from storefront.profile.types import UserProfile


def prompter(*lines: str) -> tuple[ProfilePrompter, StringIO]:
    out = StringIO()
    return ProfilePrompter(stdin=StringIO("".join(f"{line}\n" for line in lines)), stdout=out), out


# ----------------------------
# Single questions
# ----------------------------


class TestAskPositiveInt:
    def test_first_answer_valid(self):
        p, out = prompter("42")
        assert p.ask_positive_int("Age: ") == 42
        assert INVALID_NUMBER_MESSAGE not in out.getvalue()

    def test_retries_until_positive(self):
        p, out = prompter("abc", "0", "-3", "4.5", "", " 7 ")
        assert p.ask_positive_int("Age: ") == 7
        assert out.getvalue().count(INVALID_NUMBER_MESSAGE) == 5
        assert out.getvalue().count("Age: ") == 6

    def test_only_plain_digits_accepted(self):
        p, out = prompter("1_000", "٣", "+5", "12")
        assert p.ask_positive_int("Age: ") == 12
        assert out.getvalue().count(INVALID_NUMBER_MESSAGE) == 3

    def test_eof_aborts(self):
        p, _ = prompter("nope")
        with pytest.raises(ProfileInputAborted):
            p.ask_positive_int("Age: ")


class TestAskText:
    def test_reprompts_on_blank(self):
        p, out = prompter("", "   ", "Ivan")
        assert p.ask_text("Name: ", "Name cannot be empty.") == "Ivan"
        assert out.getvalue().count("Name cannot be empty.") == 2

    def test_trims(self):
        p, _ = prompter("  Anna  ")
        assert p.ask_text("Name: ", "err") == "Anna"


@pytest.mark.parametrize("answer", ["да", "ДА", "yes", "Yes", "y", " Y "])
def test_yes_answers(answer: str):
    p, _ = prompter(answer)
    assert p.ask_yes_no("Pet? ") is True


@pytest.mark.parametrize("answer", ["нет", "no", "n", "", "yeah", "1"])
def test_no_answers(answer: str):
    p, _ = prompter(answer)
    assert p.ask_yes_no("Pet? ") is False


def test_ask_items_numbers_prompts():
    p, out = prompter("Rex", "Tom")
    assert p.ask_items(2, "pet name") == ("Rex", "Tom")
    assert "Enter pet name #1: " in out.getvalue()
    assert "Enter pet name #2: " in out.getvalue()


# ----------------------------
# Whole questionnaire
# ----------------------------


def test_collect_with_pets():
    p, _ = prompter("Ivan", "Petrov", "x", "30", "yes", "2", "Rex", "Tom", "3", "red", "green", "blue")
    assert p.collect() == UserProfile(
        name="Ivan",
        surname="Petrov",
        age=30,
        pets=("Rex", "Tom"),
        colors=("red", "green", "blue"),
    )


def test_collect_without_pets_skips_pet_questions():
    p, out = prompter("Anna", "", "Smirnova", "25", "no", "1", "black")
    profile = p.collect()
    assert profile.pets == ()
    assert profile.colors == ("black",)
    assert "number of pets" not in out.getvalue()
    assert "Surname cannot be empty. Try again." in out.getvalue()


def test_collect_aborts_on_early_eof():
    p, _ = prompter("Ivan", "Petrov")
    with pytest.raises(ProfileInputAborted) as ei:
        p.collect()
    assert "Enter your age:" in str(ei.value)


# ----------------------------
# Rendering
# ----------------------------


def test_render_profile_with_pets():
    text = render_profile(UserProfile("Ivan", "Petrov", 30, ("Rex",), ("red",)))
    assert "Name: Ivan" in text
    assert "Surname: Petrov" in text
    assert "Age: 30" in text
    assert "Pets:\n - Rex" in text
    assert "Favorite colors:\n - red" in text
    assert "No pets." not in text


def test_render_profile_without_pets():
    text = render_profile(UserProfile("Anna", "Smirnova", 25, (), ("black",)))
    assert "No pets." in text
    assert "Pets:" not in text


def test_profile_to_dict():
    assert UserProfile("A", "B", 1).to_dict() == {"name": "A", "surname": "B", "age": 1, "pets": [], "colors": []}
