"""
Storydesk - Editorial Operations Core

Pure computational core behind an editorial operations dashboard. Classifies
dates into the team's custom fiscal quarters, reconciles story records kept in
two independently edited spreadsheets, and derives the reports the dashboard
views render.
"""

__version__ = "0.1.0"
__author__ = "Storydesk Team"
