"""Bookings app package.

This app encapsulates the booking ledger: the unit booking model, the slot
catalog, the reservation coordinator that books one or more slots all or
nothing, the group mutation service, and the per-day availability grid.
Double booking is prevented by a unique constraint on (date, start time,
court); the pre-checks only produce friendlier errors.
"""
