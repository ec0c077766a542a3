"""Domain exceptions for CLI diagnostics.

The cleaning core never raises for its documented inputs; these errors cover
reading input text, loading configuration, parsing rule options, and writing
cleaned output.
"""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a CLI command fails at a named stage.

    Stages are `config`, `options`, `read`, and `write`. The CLI renders
    `detail` in red and `hint`, when present, as a follow-up suggestion.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
