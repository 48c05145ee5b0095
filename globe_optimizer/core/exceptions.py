"""Unified pipeline exception taxonomy.

Every domain exception inherits from ``PipelineError`` and carries
structured context fields (stage, code) so that the CLI and log output
report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``: bad input values (e.g. non-finite coordinates).
- ``ContractError``: structural shape violations of the GeoJSON input.
- ``PermanentError``: unrecoverable failures outside the core (file I/O).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"simplify"``, ``"globe_file"``).
        code: Machine-readable error code (e.g. ``"COORDINATE_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Input value validation failure."""


class ContractError(PipelineError):
    """Input does not have the structural shape the pipeline expects."""


class PermanentError(PipelineError):
    """Unrecoverable failure outside the pure transformation."""
