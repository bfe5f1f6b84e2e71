# Reporting package
"""
Console report and tabular export of simulation results.

Modules:
- frontier_report: report lines, DataFrame conversion, CSV export
"""

from .frontier_report import (
    REPORT_HEADER,
    format_number,
    format_portfolio_line,
    format_front_report,
    print_front_report,
    population_to_dataframe,
    front_to_dataframe,
    save_front_csv,
)

__all__ = [
    'REPORT_HEADER',
    'format_number',
    'format_portfolio_line',
    'format_front_report',
    'print_front_report',
    'population_to_dataframe',
    'front_to_dataframe',
    'save_front_csv',
]
