"""Record validation entry points."""

import logging
from typing import Any

from .checker import check_constraints
from .config import RecordCheckConfig
from .constraints import parse_rule
from .errors import NotARecordError, UnexportedFieldError, ValidationErrors, Violation
from .inspector import describe_fields, is_record

logger = logging.getLogger(__name__)


class RecordValidator:
    """Validates record fields against the rule strings attached to them."""

    def __init__(self, config: RecordCheckConfig | None = None):
        self.config = config or RecordCheckConfig()

    def collect(self, record: Any) -> list[Violation]:
        """Run every field check and return the violations found.

        Raises:
            NotARecordError: If the value is not a dataclass or pydantic model instance
            UnexportedFieldError: If a non-exported field carries a rule string
        """
        if not is_record(record):
            raise NotARecordError(record)

        record_type = type(record).__name__
        logger.debug(f"Validating {record_type}")

        violations: list[Violation] = []
        for descriptor in describe_fields(record, self.config.tag):
            if descriptor.rule and not descriptor.exported:
                # Violations of earlier fields are dropped with the fatal error
                raise UnexportedFieldError(descriptor.name)

            constraints = parse_rule(descriptor.rule, descriptor.name, violations)
            if not descriptor.checkable:
                continue
            check_constraints(
                descriptor.value,
                descriptor.kind,
                descriptor.name,
                constraints,
                violations,
                self.config.sequence_label,
            )

        logger.debug(f"Validated {record_type}: {len(violations)} violations")
        return violations

    def validate(self, record: Any) -> None:
        """Validate one record.

        Args:
            record: Dataclass or pydantic model instance

        Raises:
            NotARecordError: If the value is not a record
            UnexportedFieldError: If a non-exported field carries a rule string
            ValidationErrors: If any constraint or rule syntax check failed
        """
        violations = self.collect(record)
        if violations:
            raise ValidationErrors(violations)


_DEFAULT_VALIDATOR = RecordValidator()


def validate(record: Any) -> None:
    """Validate one record with the default configuration."""
    _DEFAULT_VALIDATOR.validate(record)
