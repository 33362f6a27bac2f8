from .entity import Hotel as Hotel
from .exception import HotelNotFoundException as HotelNotFoundException
from .repository import HotelRepository as HotelRepository
from .value_object import HotelId as HotelId
from .value_object import HotelLocation as HotelLocation
from .value_object import HotelName as HotelName
