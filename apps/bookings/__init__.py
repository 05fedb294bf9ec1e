"""Bookings app package.

Reservations of a spot for a date range. Proposals go through the
booking conflict resolver: the spot row is locked, the spot's existing
bookings are checked against the boundary-inclusive overlap rule, and
the booking is written, all inside one database transaction.
"""
