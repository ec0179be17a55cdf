import pytest
from pydantic import ValidationError

from src.app.use_cases.games import CreateGameCommand, UpdateGameCommand
from src.domain.base import utcnow


def _valid(**overrides):
    fields = {
        "title": "Elden Ring",
        "description": "An epic open-world action RPG by FromSoftware",
        "genre": "RPG",
        "platform": ["PS5", "Xbox Series X", "PC"],
        "releaseYear": 2022,
        "publisher": "Bandai Namco",
        "rating": 9.5,
        "price": 59.99,
        "inStock": True,
    }
    fields.update(overrides)
    return fields


def _error_fields(exc_info):
    return {".".join(str(part) for part in error["loc"]) for error in exc_info.value.errors()}


def test_valid_command_maps_to_store_fields():
    command = CreateGameCommand.model_validate(_valid(title="  Elden Ring  "))

    fields = command.to_fields()
    assert fields["title"] == "Elden Ring"
    assert fields["releaseYear"] == 2022
    assert fields["inStock"] is True
    assert fields["genre"] == "RPG"


def test_defaults_for_optional_fields():
    payload = _valid()
    for key in ("rating", "price", "inStock"):
        payload.pop(key)

    fields = CreateGameCommand.model_validate(payload).to_fields()

    assert fields["rating"] == 0
    assert fields["price"] == 0
    assert fields["inStock"] is True


def test_every_invalid_field_is_reported():
    payload = {
        "title": "A",
        "description": "Short",
        "genre": "InvalidGenre",
        "platform": [],
        "releaseYear": 1950,
        "publisher": "Test",
        "rating": 11,
        "price": -10,
        "inStock": True,
    }

    with pytest.raises(ValidationError) as exc_info:
        CreateGameCommand.model_validate(payload)

    assert _error_fields(exc_info) == {
        "title",
        "description",
        "genre",
        "platform",
        "releaseYear",
        "rating",
        "price",
    }


def test_release_year_upper_bound_tracks_current_year():
    limit = utcnow().year + 2

    CreateGameCommand.model_validate(_valid(releaseYear=limit))
    with pytest.raises(ValidationError):
        CreateGameCommand.model_validate(_valid(releaseYear=limit + 1))


def test_blank_platform_entry_is_rejected():
    with pytest.raises(ValidationError):
        CreateGameCommand.model_validate(_valid(platform=["PC", ""]))


def test_update_requires_at_least_one_field():
    with pytest.raises(ValidationError):
        UpdateGameCommand.model_validate({})


def test_update_keeps_only_present_fields():
    command = UpdateGameCommand.model_validate({"price": 39.99})

    assert command.to_fields() == {"price": 39.99}


def test_update_validates_present_fields():
    with pytest.raises(ValidationError):
        UpdateGameCommand.model_validate({"rating": 12})


@pytest.mark.parametrize("field", ["title", "releaseYear", "inStock", "platform"])
def test_update_rejects_explicit_null(field):
    with pytest.raises(ValidationError) as exc_info:
        UpdateGameCommand.model_validate({field: None, "price": 10})

    assert f"{field} cannot be null" in str(exc_info.value)
