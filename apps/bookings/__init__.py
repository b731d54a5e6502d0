"""Bookings app package.

Shipment bookings: intake from the public booking form, tracking number
and delivery date derivation, and the back-office lifecycle (status
changes, edits, listing and statistics). Confirmation and status-update
emails are sent by the notifications app after the write commits.
"""
