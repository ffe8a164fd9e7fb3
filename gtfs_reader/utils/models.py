"""Helper functions for data models."""

import copy
from enum import Enum
from pathlib import Path
from typing import Optional

import pandas as pd
from pandas import DataFrame
from pandera import DataFrameModel
from pandera.errors import SchemaError, SchemaErrors
from pydantic import BaseModel, validate_call

from ..errors import TableValidationError
from ..logger import GtfsLogger
from ..params import SMALL_RECS
from ..time import CalendarDate, TimeOfDay


def _flat_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, TimeOfDay):
        return value.raw_time
    if isinstance(value, CalendarDate):
        return value.raw_date
    return value


def records_to_df(records: list[BaseModel], record_type: Optional[type] = None) -> pd.DataFrame:
    """DataFrame with a row per record and a column per record field.

    Enumerated codes are written as integers, times and dates as their GTFS text.

    Args:
        records: list of pydantic records of one kind.
        record_type: record model used to name the columns of an empty table.
    """
    rows = [{k: _flat_value(getattr(r, k)) for k in type(r).model_fields} for r in records]
    if not rows and record_type is not None:
        return pd.DataFrame(columns=list(record_type.model_fields))
    return pd.DataFrame(rows)


@validate_call(config={"arbitrary_types_allowed": True})
def validate_df_to_model(
    df: DataFrame, model: type, output_file: Optional[Path] = None
) -> DataFrame:
    """Wrapper to validate a DataFrame against a Pandera DataFrameModel with better logging.

    Also copies the attrs from the input DataFrame to the validated DataFrame.

    Args:
        df: DataFrame to validate.
        model: Pandera DataFrameModel to validate against.
        output_file: Optional file to write validation failure cases to when there are many.
            Defaults to None, which logs them instead.
    """
    attrs = copy.deepcopy(df.attrs)
    err_msg = f"Validation to {model.__name__} failed."
    try:
        model_df = model.validate(df, lazy=True)
        model_df.attrs = attrs
        return model_df
    except (TypeError, ValueError) as e:
        GtfsLogger.error(f"Validation to {model.__name__} failed.\n{e}")
        raise TableValidationError(err_msg) from e
    except SchemaErrors as e:
        GtfsLogger.error(
            f"Validation to {model.__name__} failed with {len(e.failure_cases)} \
            errors: \n{e.failure_cases}"
        )

        if output_file is not None and len(e.failure_cases) > SMALL_RECS:
            e.failure_cases.to_csv(output_file)
            GtfsLogger.info(f"Detailed error cases written to {output_file}")
        else:
            GtfsLogger.error("Detailed failure cases:\n%s", e.failure_cases)
        raise TableValidationError(err_msg) from e
    except SchemaError as e:
        GtfsLogger.error(f"Validation to {model.__name__} failed with error: {e}")
        GtfsLogger.error(f"Failure Cases:\n{e.failure_cases}")
        raise TableValidationError(err_msg) from e


def order_fields_from_data_model(df: pd.DataFrame, model: DataFrameModel) -> pd.DataFrame:
    """Order the fields in a DataFrame to match the order in a Pandera DataFrameModel.

    Will add any fields that are not in the model to the end of the DataFrame.
    Will not add any fields that are in the model but not in the DataFrame.
    """
    model_fields = list(model.to_schema().columns.keys())
    df_model_fields = [f for f in model_fields if f in df.columns]
    df_additional_fields = [f for f in df.columns if f not in model_fields]
    return df[df_model_fields + df_additional_fields]
