"""
Tabular reports of a run, as pandas DataFrames.
"""

from typing import List

import pandas as pd

from harvester.executor import Action
from harvester.models.media import ScannedEntry

INVENTORY_COLUMNS = [
    "path", "kind", "title", "year", "series_name", "season", "episode", "device", "inode",
]
ACTION_COLUMNS = ["action", "path", "source"]


def inventory_to_dataframe(entries: List[ScannedEntry]) -> pd.DataFrame:
    """
    Convert an inventory to a pandas DataFrame.

    Args:
        entries: List of ScannedEntry objects

    Returns:
        DataFrame with one row per scanned file
    """
    if not entries:
        return pd.DataFrame(columns=INVENTORY_COLUMNS)

    df = pd.DataFrame([entry.to_dict() for entry in entries], columns=INVENTORY_COLUMNS)
    # Keep numbers as integers despite missing values
    for column in ("year", "season", "episode"):
        df[column] = df[column].astype("Int64")
    return df


def actions_to_dataframe(actions: List[Action]) -> pd.DataFrame:
    """
    Convert an executor journal to a pandas DataFrame.

    Args:
        actions: The executor's actions, in execution order

    Returns:
        DataFrame with one row per action
    """
    if not actions:
        return pd.DataFrame(columns=ACTION_COLUMNS)

    return pd.DataFrame([action.to_dict() for action in actions], columns=ACTION_COLUMNS)
