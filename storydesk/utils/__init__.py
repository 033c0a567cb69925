"""
Utility functions module.

Shared date handling used by the fiscal calendar, the record matcher and
the reports.

Date Semantics:
- A calendar date is a plain datetime.date; there is no time component
- Sheet cells are accepted as YYYY-MM-DD or M/D/YYYY, nothing else
- Unparseable cells become None, never an exception
- "Today" always comes from an injectable Clock
"""
