from __future__ import annotations


class ParseError(ValueError):
    """Submitted text does not name a known pet type."""

    def __init__(self, text, message=None):
        self.text = text
        super().__init__(message or f'type not found: {text}')


class PetTypeFormatter:
    """Converts between a PetType and the name shown in forms.

    The list of known pet types comes from ``repository.find_pet_types()``
    and is fetched again on every parse, nothing is kept between calls.
    The locale argument is accepted for symmetry with other formatters and
    is not used.
    """

    def __init__(self, repository):
        self.repository = repository

    def print(self, pet_type, locale=None) -> str:
        return pet_type.name

    def parse(self, text, locale=None):
        for pet_type in self.repository.find_pet_types():
            if pet_type.name == text:
                return pet_type
        raise ParseError(text)
