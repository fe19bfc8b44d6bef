import unittest

from petclinic.domain.errors import DUPLICATE, Errors, NOT_FOUND, REQUIRED


class ErrorsTests(unittest.TestCase):
    def test_empty_collection(self):
        errors = Errors('pet')
        self.assertFalse(errors)
        self.assertFalse(errors.has_field_errors('name'))
        self.assertEqual(errors.codes('name'), [])
        self.assertIsNone(errors.first('name'))

    def test_codes_keep_recording_order(self):
        errors = Errors('pet')
        errors.reject_value('name', REQUIRED)
        errors.reject_value('name', DUPLICATE, 'already exists')
        self.assertEqual(errors.codes('name'), [REQUIRED, DUPLICATE])
        self.assertEqual(errors.first('name').message, 'is required')
        self.assertEqual(errors.field_errors('name')[1].message, 'already exists')

    def test_merge_appends_per_field(self):
        first = Errors('owner')
        first.reject_value('last_name', REQUIRED)
        second = Errors('owner')
        second.reject_value('last_name', NOT_FOUND)
        second.reject_value('city', REQUIRED)
        first.merge(second)
        self.assertEqual(first.codes('last_name'), [REQUIRED, NOT_FOUND])
        self.assertEqual(first.fields(), ['last_name', 'city'])
        self.assertEqual(len(first), 3)

    def test_global_errors_are_not_field_errors(self):
        errors = Errors('owner')
        errors.reject('mismatch', 'ids differ')
        self.assertTrue(errors.has_errors())
        self.assertFalse(errors.has_field_errors())

    def test_as_dict(self):
        errors = Errors('owner')
        errors.reject_value('last_name', NOT_FOUND, 'has not been found')
        self.assertEqual(errors.as_dict(), {'last_name': ['has not been found']})
        self.assertIn('last_name', errors)


if __name__ == '__main__':
    unittest.main()
