"""Validation result types shared by the raw input validators"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional
from planegeom.validation.enums import ValidationErrorType
from planegeom.core import ParameterValidationError


@dataclass(frozen=True)
class ValidationError:
    """
    One problem found in raw input

    Validators collect these instead of raising, so every bad vertex of a
    polygon can be reported at once.
    """
    error_type: ValidationErrorType
    message: str
    parameter_name: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult:
    """Problems collected by a validator; valid when there are none"""
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]

    def add_error(self, error: ValidationError) -> None:
        self.errors.append(error)

    def raise_for_errors(self, parameter_name: str) -> None:
        """
        Turn collected problems into a single exception

        Raises:
            ParameterValidationError: If any error was collected, with every
                message joined into its details
        """
        if self.errors:
            raise ParameterValidationError(parameter_name, "; ".join(self.messages))


class BaseValidator(ABC):
    """Validator for one raw input parameter"""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        pass
