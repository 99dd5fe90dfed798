class TwilightError(Exception):
  """Base error."""


class InvalidQueryError(TwilightError, ValueError):
  """Raised when a query's time or coordinates fall outside their domain."""


class LocationUnavailableError(TwilightError):
  """Raised when the position source produced no fix."""


class ConfigError(TwilightError):
  """Raised for unreadable or invalid configuration files."""
