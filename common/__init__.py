"""Pieces shared by the App1 and App2 services."""
