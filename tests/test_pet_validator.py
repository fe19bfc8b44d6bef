import unittest
from datetime import date, timedelta
from types import SimpleNamespace

from petclinic.domain.errors import Errors, FUTURE_BIRTH_DATE, REQUIRED
from petclinic.domain.pet_validator import PetValidator
from petclinic.models import Pet, PetType


TODAY = date(2024, 6, 15)


def make_pet(name='Buddy', pet_type='Dog', birth_date=date(1990, 1, 1)):
    return SimpleNamespace(
        name=name,
        type=SimpleNamespace(name=pet_type) if pet_type else None,
        birth_date=birth_date,
    )


class PetValidatorTests(unittest.TestCase):
    def setUp(self):
        self.validator = PetValidator()
        self.errors = Errors('pet')

    def test_valid_pet_has_no_errors(self):
        self.validator.validate(make_pet(), self.errors, today=TODAY)
        self.assertFalse(self.errors.has_errors())

    def test_empty_name_is_required(self):
        self.validator.validate(make_pet(name=''), self.errors, today=TODAY)
        self.assertEqual(self.errors.codes('name'), [REQUIRED])

    def test_whitespace_name_is_required(self):
        self.validator.validate(make_pet(name='\t \n'), self.errors, today=TODAY)
        self.assertEqual(self.errors.codes('name'), [REQUIRED])

    def test_missing_name_does_not_skip_other_rules(self):
        self.validator.validate(make_pet(name=None, pet_type=None, birth_date=None), self.errors, today=TODAY)
        self.assertEqual(self.errors.fields(), ['name', 'type', 'birth_date'])
        self.assertEqual(self.errors.error_count, 3)

    def test_missing_type_is_required(self):
        self.validator.validate(make_pet(pet_type=None), self.errors, today=TODAY)
        self.assertEqual(self.errors.codes('type'), [REQUIRED])
        self.assertFalse(self.errors.has_field_errors('name'))

    def test_missing_birth_date_is_required(self):
        self.validator.validate(make_pet(birth_date=None), self.errors, today=TODAY)
        self.assertEqual(self.errors.codes('birth_date'), [REQUIRED])

    def test_future_birth_date_is_rejected(self):
        self.validator.validate(make_pet(birth_date=TODAY + timedelta(days=1)), self.errors, today=TODAY)
        self.assertEqual(self.errors.codes('birth_date'), [FUTURE_BIRTH_DATE])

    def test_birth_date_today_is_accepted(self):
        self.validator.validate(make_pet(birth_date=TODAY), self.errors, today=TODAY)
        self.assertFalse(self.errors.has_field_errors('birth_date'))

    def test_defaults_to_current_date(self):
        next_month = date.today() + timedelta(days=31)
        self.validator.validate(make_pet(birth_date=next_month), self.errors)
        self.assertEqual(self.errors.codes('birth_date'), [FUTURE_BIRTH_DATE])

    def test_reuses_error_collection_without_residual_state(self):
        pet = make_pet(name='')
        self.validator.validate(pet, self.errors, today=TODAY)
        fresh = Errors('pet')
        pet.name = 'Buddy'
        self.validator.validate(pet, fresh, today=TODAY)
        self.assertFalse(fresh.has_errors())
        self.assertEqual(self.errors.codes('name'), [REQUIRED])

    def test_accepts_mapped_pet(self):
        pet = Pet(name='Leo', birth_date=date(2010, 9, 7), type=PetType(name='cat'))
        self.assertTrue(self.validator.supports(pet))
        self.validator.validate(pet, self.errors, today=TODAY)
        self.assertFalse(self.errors.has_errors())

    def test_supports_rejects_other_objects(self):
        self.assertFalse(self.validator.supports(SimpleNamespace(name='x')))


if __name__ == '__main__':
    unittest.main()
