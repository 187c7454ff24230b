"""National income metrics from state-level ACS rows."""

import logging

import pandas as pd

from inequality_dashboard.config import EXCLUDED_REGIONS
from inequality_dashboard.models import CensusYearResult


logger = logging.getLogger(__name__)

MEDIAN_INCOME = "B19013_001E"
AGGREGATE_INCOME = "B19025_001E"
GINI_INDEX = "B19083_001E"

METRIC_COLUMNS = [MEDIAN_INCOME, AGGREGATE_INCOME, GINI_INDEX]


def state_frame(header: list[str], rows: list[list[str]]) -> pd.DataFrame:
    """Build a frame of state rows, dropping regions that are not states."""
    df = pd.DataFrame(rows, columns=header)
    if df.empty:
        return df

    names = df["NAME"].astype(str)
    excluded = names.apply(lambda name: any(region in name for region in EXCLUDED_REGIONS))
    return df[~excluded]


def validate_metrics(states: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Coerce the metric columns to numbers.

    Returns:
        (values, valid) where values holds floats (NaN for unparseable cells)
        and valid is the matching boolean mask
    """
    values = states[METRIC_COLUMNS].apply(pd.to_numeric, errors="coerce")
    return values, values.notna()


def aggregate_states(year: str, header: list[str], rows: list[list[str]]) -> CensusYearResult:
    """
    Reduce one year of state rows to national figures.

    Median income is a simple average of state medians, not a
    household-weighted median. The Gini index is weighted by each state's
    aggregate income; a row counts toward it only when both cells parse.
    """
    states = state_frame(header, rows)
    if states.empty:
        logger.warning(f"No state rows for {year}")
        return CensusYearResult(year=year, median_income=None, aggregate_income=0, gini_index=None)

    values, valid = validate_metrics(states)
    skipped = int((~valid).to_numpy().sum())
    if skipped:
        logger.warning(f"{year}: skipped {skipped} non-numeric values")

    aggregate = values[AGGREGATE_INCOME]
    medians = values[MEDIAN_INCOME].dropna()

    weighted = valid[AGGREGATE_INCOME] & valid[GINI_INDEX]
    weight = aggregate[weighted].sum()
    if weight:
        gini_index = float((values.loc[weighted, GINI_INDEX] * aggregate[weighted]).sum() / weight)
    else:
        logger.warning(f"{year}: no aggregate income to weight the Gini index")
        gini_index = None

    return CensusYearResult(
        year=year,
        # Non-numeric medians are left out of the count, not averaged in as zero
        median_income=int(round(medians.mean())) if not medians.empty else None,
        aggregate_income=int(round(aggregate.sum())),
        gini_index=gini_index,
        skipped_values=skipped,
    )
