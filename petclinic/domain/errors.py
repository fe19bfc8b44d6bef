from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


REQUIRED = 'required'
DUPLICATE = 'duplicate'
NOT_FOUND = 'notFound'
TYPE_MISMATCH = 'typeMismatch'
FUTURE_BIRTH_DATE = 'typeMismatch.birthDate'

# Used for errors that belong to the submission as a whole.
GLOBAL = '__all__'

DEFAULT_MESSAGES = {
    REQUIRED: 'is required',
    DUPLICATE: 'is already in use',
    NOT_FOUND: 'has not been found',
    TYPE_MISMATCH: 'is not a valid value',
    FUTURE_BIRTH_DATE: 'must not be in the future',
}


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


class Errors:
    """Ordered collection of field errors for one submitted object.

    Rules append to it, the caller decides what to do once every rule ran.
    Fields keep the order in which they first failed; codes keep the order
    in which they were recorded.
    """

    def __init__(self, object_name: str):
        self.object_name = object_name
        self._errors: Dict[str, List[FieldError]] = {}

    def reject_value(self, field: str, code: str, message: Optional[str] = None) -> FieldError:
        error = FieldError(field=field, code=code, message=message or DEFAULT_MESSAGES.get(code, code))
        self._errors.setdefault(field, []).append(error)
        return error

    def reject(self, code: str, message: Optional[str] = None) -> FieldError:
        return self.reject_value(GLOBAL, code, message)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_field_errors(self, field: Optional[str] = None) -> bool:
        if field is None:
            return any(name != GLOBAL for name in self._errors)
        return bool(self._errors.get(field))

    def field_errors(self, field: str) -> List[FieldError]:
        return list(self._errors.get(field, ()))

    def codes(self, field: str) -> List[str]:
        return [error.code for error in self._errors.get(field, ())]

    def first(self, field: str) -> Optional[FieldError]:
        errors = self._errors.get(field)
        return errors[0] if errors else None

    def fields(self) -> List[str]:
        return list(self._errors)

    @property
    def error_count(self) -> int:
        return sum(len(errors) for errors in self._errors.values())

    def merge(self, other: 'Errors') -> 'Errors':
        for field, errors in other._errors.items():
            self._errors.setdefault(field, []).extend(errors)
        return self

    def as_dict(self) -> Dict[str, List[str]]:
        """Field name to messages, the shape templates render."""
        return {field: [e.message for e in errors] for field, errors in self._errors.items()}

    def __iter__(self) -> Iterator[FieldError]:
        for errors in self._errors.values():
            yield from errors

    def __len__(self) -> int:
        return self.error_count

    def __bool__(self) -> bool:
        return self.has_errors()

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __repr__(self) -> str:
        return f'<Errors {self.object_name} {self.as_dict()!r}>'
