from .hotel_id import HotelId as HotelId
from .hotel_location import HotelLocation as HotelLocation
from .hotel_name import HotelName as HotelName
