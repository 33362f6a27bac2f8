from .hotel_repository import HotelRepository as HotelRepository
