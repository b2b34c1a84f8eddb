"""Court status app package.

Administrative closures of court slots (closed or under maintenance). A
closure blocks reservations for its slot but is stored independently of
bookings; reopening a slot never touches bookings.
"""
