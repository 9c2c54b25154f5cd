"""Export von SpendRecords als Excel (für Abgleich außerhalb des Dashboards)"""
from pathlib import Path
from typing import List

import pandas as pd

from modules.shared.models import SpendRecord
from .config import ORDNER_AUSGANG, ensure_directories
from .logger import spend_reader_logger


def records_to_dataframe(records: List[SpendRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Kampagne": r.campaign_name,
                "Datum": r.date.isoformat(),
                "Betrag": float(r.amount),
                "Währung": r.currency,
            }
            for r in records
        ],
        columns=["Kampagne", "Datum", "Betrag", "Währung"],
    )


def export_spend_records(records: List[SpendRecord], output_excel: Path = None) -> pd.DataFrame:
    """
    Schreibt SpendRecords in eine Excel-Datei.

    Returns:
        pd.DataFrame: Exportierte Daten
    """
    if output_excel is None:
        ensure_directories()
        output_excel = ORDNER_AUSGANG / "spend.xlsx"

    df = records_to_dataframe(records)
    with pd.ExcelWriter(output_excel, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name="Spend")
        workbook = writer.book
        worksheet = writer.sheets["Spend"]
        format_amount = workbook.add_format({"num_format": "#,##0.00"})
        worksheet.set_column("C:C", None, format_amount)

    spend_reader_logger.info(f"Daten erfolgreich exportiert: {Path(output_excel).name}")
    return df
