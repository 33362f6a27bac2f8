from .remote_booking_client import RemoteBookingClient as RemoteBookingClient
