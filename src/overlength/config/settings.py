"""Application settings."""

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
  """Highlighter configuration.

  ``enabled`` and ``margin`` are shared by every view; the remaining
  fields tune the status line, the editor highlight groups and width
  measurement.
  """

  enabled: bool = True
  margin: int = Field(default=10, ge=0)
  debug: bool = False
  status_format: str = "#{count} ${max_width}"
  warning_group: str = "OverLengthWarning"
  error_group: str = "OverLengthError"
  tabstop: int = Field(default=8, ge=1)

  @field_validator("status_format")
  @classmethod
  def _check_status_format(cls, value: str) -> str:
    # Only {count} and {max_width} are available when formatting
    try:
      value.format(count=0, max_width=0)
    except (KeyError, IndexError, AttributeError, ValueError) as e:
      raise ValueError(f"cannot format {value!r}: {e!r}") from e
    return value
