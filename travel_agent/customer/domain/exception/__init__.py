from .exceptions import CustomerNotFoundException as CustomerNotFoundException
