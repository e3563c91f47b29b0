"""
Request DTOs for the admin forms
Parsed from form or JSON bodies and validated before any handler logic runs
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from scripthub.utils.slug import generate_slug


@dataclass
class ValidationResult:
    """Outcome of validating a form; empty errors means valid"""
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    return str(value)


def _optional_int(value: Any) -> Optional[int]:
    """Falsy or non-numeric values mean "no value" """
    if not value:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass
class LoginForm:
    username: str
    password: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'LoginForm':
        return cls(username=_text(data, 'username'), password=_text(data, 'password'))

    def validate(self) -> ValidationResult:
        errors = []
        if not self.username:
            errors.append('username is required')
        if not self.password:
            errors.append('password is required')
        return ValidationResult(errors)


@dataclass
class CategoryForm:
    name: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'CategoryForm':
        return cls(name=_text(data, 'name').strip())

    @property
    def slug(self) -> str:
        return generate_slug(self.name)

    def validate(self) -> ValidationResult:
        if not self.name:
            return ValidationResult(['name is required'])
        if not self.slug:
            return ValidationResult(['name needs at least one letter or digit'])
        return ValidationResult()


@dataclass
class ScriptForm:
    title: str
    code: str
    description: str = ''
    category_id: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ScriptForm':
        return cls(
            title=_text(data, 'title').strip(),
            code=_text(data, 'code'),
            description=_text(data, 'description'),
            category_id=_optional_int(data.get('category_id')),
        )

    @property
    def slug(self) -> str:
        return generate_slug(self.title)

    def validate(self) -> ValidationResult:
        errors = []
        if not self.title:
            errors.append('title is required')
        elif not self.slug:
            errors.append('title needs at least one letter or digit')
        if not self.code:
            errors.append('code is required')
        return ValidationResult(errors)
