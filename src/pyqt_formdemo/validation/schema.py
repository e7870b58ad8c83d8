"""
Declarative validation schema.

A schema is a mapping from field name to an ordered list of rules. It is
built by a schema function that receives a SchemaPath and calls the rule
factories in ``validators``; each factory registers its rule through the
FieldPath it is given.

Pattern:
    def schema_fn(path):
        required(path.first_name, message='First name is required')
        min_length(path.first_name, 2, message='...')

    schema = FormSchema.build(schema_fn)
    schema.validate(record)  # {'first_name': [...], ...}
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Type

from pyqt_formdemo.models import RegistrationData
from .errors import ValidationError

logger = logging.getLogger(__name__)

Check = Callable[[RegistrationData], Optional[ValidationError]]


@dataclass(frozen=True)
class FieldRule:
    """One check bound to one field. ``check`` is a pure function of the record."""
    field_name: str
    check: Check
    description: str = ''

    def __call__(self, record: RegistrationData) -> Optional[ValidationError]:
        return self.check(record)


@dataclass(frozen=True)
class FieldPath:
    """Reference to one field, handed to rule factories."""
    schema: 'FormSchema'
    name: str

    def add_rule(self, check: Check, description: str = '') -> FieldRule:
        rule = FieldRule(self.name, check, description)
        self.schema.add_rule(rule)
        return rule


class SchemaPath:
    """Attribute-access proxy over the record's fields: ``path.first_name``."""

    def __init__(self, schema: 'FormSchema'):
        self._schema = schema

    def __getattr__(self, name: str) -> FieldPath:
        if name.startswith('_') or name not in self._schema.field_names:
            raise AttributeError(
                f"{self._schema.model_type.__name__} has no field {name!r}"
            )
        return FieldPath(self._schema, name)


@dataclass
class FormSchema:
    """Ordered per-field rule table evaluated on demand against a record."""

    model_type: Type[RegistrationData] = RegistrationData
    rules: Dict[str, List[FieldRule]] = field(default_factory=dict)

    def __post_init__(self):
        for name in self.field_names:
            self.rules.setdefault(name, [])

    @property
    def field_names(self):
        return self.model_type.field_names()

    @classmethod
    def build(cls, schema_fn: Callable[[SchemaPath], None],
              model_type: Type[RegistrationData] = RegistrationData) -> 'FormSchema':
        """Create a schema and let ``schema_fn`` attach rules to it."""
        schema = cls(model_type)
        schema_fn(SchemaPath(schema))
        logger.debug(f"Built schema with {schema.rule_count()} rules "
                     f"over {len(schema.field_names)} fields")
        return schema

    def add_rule(self, rule: FieldRule) -> None:
        if rule.field_name not in self.rules:
            raise KeyError(f"Unknown field {rule.field_name!r}")
        self.rules[rule.field_name].append(rule)

    def rule_count(self) -> int:
        return sum(len(rules) for rules in self.rules.values())

    def rules_for(self, field_name: str) -> List[FieldRule]:
        if field_name not in self.rules:
            raise KeyError(f"Unknown field {field_name!r}")
        return list(self.rules[field_name])

    def errors_for(self, field_name: str, record: RegistrationData) -> List[ValidationError]:
        """Run every rule of one field in declaration order."""
        errors = []
        for rule in self.rules_for(field_name):
            error = rule(record)
            if error is not None:
                errors.append(error)
        return errors

    def validate(self, record: RegistrationData) -> Dict[str, List[ValidationError]]:
        """Errors for every field of the record (``[]`` when the field passes)."""
        return {name: self.errors_for(name, record) for name in self.field_names}

    def is_valid(self, record: RegistrationData) -> bool:
        return all(not errors for errors in self.validate(record).values())
