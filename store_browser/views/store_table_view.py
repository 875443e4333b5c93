from __future__ import annotations

from typing import Dict, List

import pandas as pd
from dash import dash_table

from store_browser.core.base_view import BaseView
from store_browser.core.dataset import ADDRESS_COL, OWNERSHIP_COL, STORE_ID_COL
from store_browser.core.filter_state import FilterState

TABLE_COLUMNS: List[Dict[str, str]] = [
    {"name": "Store #", "id": STORE_ID_COL},
    {"name": "Address", "id": ADDRESS_COL},
    {"name": "Ownership", "id": OWNERSHIP_COL},
]

DEFAULT_ROW_LIMIT = 100


class StoreTableView(BaseView):
    """
    First N filtered stores (dataset order): store number, address, ownership type.
    """

    id = "store_table"
    label = "Stores"

    @property
    def row_limit(self) -> int:
        return int(self.options.get("row_limit", DEFAULT_ROW_LIMIT))

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return self.project(self.filtered_view(state))

    def project(self, view: pd.DataFrame) -> pd.DataFrame:
        return view[[c["id"] for c in TABLE_COLUMNS]].head(self.row_limit).reset_index(drop=True)

    def render(self, data: pd.DataFrame, state: FilterState) -> dash_table.DataTable:
        return dash_table.DataTable(
            id="store-table-grid",
            data=data.to_dict("records"),
            columns=TABLE_COLUMNS,
            style_table={
                "height": "300px",
                "overflowY": "auto",
            },
            style_as_list_view=True,
            style_cell={
                "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
                "fontSize": "12px",
                "padding": "6px 8px",
                "border": "none",
                "textAlign": "left",
                "whiteSpace": "normal",
            },
            style_header={
                "fontWeight": "600",
                "backgroundColor": "#f3f4f6",
                "borderBottom": "1px solid #e5e7eb",
            },
            style_data={
                "borderBottom": "1px solid #e5e7eb",
            },
            fixed_rows={"headers": True},
            sort_action="none",
            filter_action="none",
        )
