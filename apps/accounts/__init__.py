"""Accounts app package: administrator login for the booking panel."""
