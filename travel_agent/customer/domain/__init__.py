from .entity import Customer as Customer
from .exception import CustomerNotFoundException as CustomerNotFoundException
from .repository import CustomerRepository as CustomerRepository
from .value_object import CustomerId as CustomerId
from .value_object import EmailAddress as EmailAddress
