from .reservation import Reservation as Reservation
from .reservation import ReservationId as ReservationId
