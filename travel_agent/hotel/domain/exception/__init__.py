from .exceptions import HotelNotFoundException as HotelNotFoundException
