"""Account management API: registration, login and OTP verification."""
