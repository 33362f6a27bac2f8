from .hotel import Hotel as Hotel
