"""All GTFS Reader errors."""


class FeedReadError(Exception):
    """Raised when a GTFS feed could not be read into a Feed."""


class InvalidFieldFormat(ValueError):
    """Raised when the text of a GTFS field doesn't validate to its field type."""


class TimeFormatError(InvalidFieldFormat):
    """Raised when a time isn't in [H]H:MM:SS format or is out of range."""


class DateFormatError(InvalidFieldFormat):
    """Raised when a date isn't in YYYYMMDD format or isn't a valid Gregorian date."""


class CoordinateRangeError(InvalidFieldFormat):
    """Raised when a latitude or longitude isn't in valid WGS84 decimal degrees."""


class RequiredFieldAbsentError(Exception):
    """Raised when a required field is missing from a row.

    Attributes:
        field: name of the missing field.
    """

    def __init__(self, field: str, msg: str = ""):
        """Constructor for RequiredFieldAbsentError."""
        self.field = field
        super().__init__(msg or f"Required field absent: '{field}'")


class TableValidationError(Exception):
    """Raised when a table exported to a DataFrame doesn't validate to its schema."""


class DictionaryMergeError(Exception):
    """Raised when there is a conflict in merging two configuration dictionaries."""
